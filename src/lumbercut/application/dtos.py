"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from lumbercut.domain import (
    DEFAULT_ERROR_MARGIN,
    DEFAULT_KERF_WIDTH,
    DEFAULT_MAX_BOARD_LENGTH,
    DEFAULT_STOCK_LENGTH,
    CutGroup,
    PlanSummary,
)

from .units import board_units, unscale_length


@dataclass
class LengthInput:
    """Input DTO for one length/quantity row (desired cut or stock)."""

    length: float
    quantity: int

    def validate(self, path: str) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if self.length <= 0:
            errors.append(f"{path}.length: Length must be positive")
        if self.quantity < 0:
            errors.append(f"{path}.quantity: Quantity cannot be negative")
        return errors


@dataclass
class PlanInput:
    """Input DTO for a cutting plan.

    Lengths are in user units (e.g. millimeters). ``unit_scale`` converts
    them to whole planning units: with ``unit_scale=100`` a stock length of
    2400.25 becomes 240025 units.
    """

    desired_cuts: list[LengthInput]
    available_stock: list[LengthInput] | None = None
    kerf_width: float = DEFAULT_KERF_WIDTH
    error_margin: float = DEFAULT_ERROR_MARGIN
    default_stock_length: float = DEFAULT_STOCK_LENGTH
    unit_scale: int = 1
    chain_offcuts: bool = False
    max_board_length: int = DEFAULT_MAX_BOARD_LENGTH

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if not self.desired_cuts:
            errors.append("desired_cuts: At least one desired cut is required")
        for index, cut in enumerate(self.desired_cuts):
            errors.extend(cut.validate(f"desired_cuts[{index}]"))
        for index, stock in enumerate(self.available_stock or []):
            errors.extend(stock.validate(f"available_stock[{index}]"))
            if stock.length > 0 and board_units(stock.length, max(self.unit_scale, 1)) < 1:
                errors.append(
                    f"available_stock[{index}].length: Length is shorter than one planning unit"
                )
            if stock.length * self.unit_scale > self.max_board_length:
                errors.append(
                    f"available_stock[{index}].length: Length exceeds maximum "
                    f"({unscale_length(self.max_board_length, self.unit_scale)})"
                )
        if self.kerf_width < 0:
            errors.append("kerf_width: Kerf width cannot be negative")
        if not 0 <= self.error_margin < 1:
            errors.append("error_margin: Error margin must be at least 0 and below 1")
        if self.default_stock_length <= 0:
            errors.append("default_stock_length: Default stock length must be positive")
        elif self.default_stock_length * self.unit_scale > self.max_board_length:
            errors.append(
                f"default_stock_length: Length exceeds maximum "
                f"({unscale_length(self.max_board_length, self.unit_scale)})"
            )
        if self.unit_scale < 1:
            errors.append("unit_scale: Unit scale must be at least 1")
        if not 0 < self.max_board_length <= DEFAULT_MAX_BOARD_LENGTH:
            errors.append(
                f"max_board_length: Maximum board length must be between 1 "
                f"and {DEFAULT_MAX_BOARD_LENGTH}"
            )
        return errors


@dataclass
class PlanOutput:
    """Output DTO containing the cutting plan.

    Attributes:
        summary: Plan totals and records in input units, or None when the
            input was rejected.
        grouped: Whether consumers should present grouped cut patterns.
        errors: Validation messages if the input was rejected.
    """

    summary: PlanSummary | None
    grouped: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors and self.summary is not None

    @property
    def groups(self) -> tuple[CutGroup, ...]:
        if self.summary is None:
            return ()
        return self.summary.grouped()
