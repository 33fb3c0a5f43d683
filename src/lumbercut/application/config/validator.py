"""Validation structures and cutting advisory checks.

Pydantic already rejects malformed documents. The checks here look at the
combination of values: boards too long for the planner, cuts that no board
can hold, and stock that can never be used.
"""

from dataclasses import dataclass, field
from typing import Any

from lumbercut.application.config.schema import PlanConfiguration
from lumbercut.application.units import board_units, scale_length
from lumbercut.domain import CuttingConfig


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "available_stock[0].length")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self


def check_board_limits(config: PlanConfiguration) -> ValidationResult:
    """Reject boards whose knapsack table would exceed ``max_board_length``."""
    result = ValidationResult()
    settings = config.settings
    limit = settings.max_board_length

    if board_units(settings.default_stock_length, settings.unit_scale) > limit:
        result.add_error(
            "settings.default_stock_length",
            f"Default stock length exceeds the maximum of {limit} planning units",
            settings.default_stock_length,
        )
    for i, stock in enumerate(config.available_stock or []):
        if board_units(stock.length, settings.unit_scale) > limit:
            result.add_error(
                f"available_stock[{i}].length",
                f"Stock length exceeds the maximum of {limit} planning units",
                stock.length,
            )
    return result


def check_cutting_advisories(config: PlanConfiguration) -> ValidationResult:
    """Warn about cuts and stock that cannot take part in the plan.

    Advisories checked:
    - A cut longer than every board (with margin and kerf) stays unfulfilled
    - A stock row shorter than every cut is never used
    - A stock length with a fraction finer than the unit scale is truncated

    Args:
        config: A validated PlanConfiguration instance

    Returns:
        ValidationResult containing any warnings found
    """
    result = ValidationResult()
    settings = config.settings
    scale = settings.unit_scale
    cutting = CuttingConfig(
        kerf_width=scale_length(settings.kerf_width, scale),
        error_margin=settings.error_margin,
        default_stock_length=1,
    )

    boards = [board_units(settings.default_stock_length, scale)]
    boards.extend(board_units(stock.length, scale) for stock in config.available_stock or [])
    longest_board = max(boards)

    costs = [cutting.cut_cost(scale_length(cut.length, scale)) for cut in config.desired_cuts]
    for i, (cut, cost) in enumerate(zip(config.desired_cuts, costs)):
        if cost > longest_board:
            result.add_warning(
                path=f"desired_cuts[{i}].length",
                message=(
                    f"Cut of {cut.length:g} needs {cost / scale:g} with margin and kerf, "
                    f"longer than any available board; it will be unfulfilled"
                ),
                suggestion="Add longer stock or increase settings.default_stock_length",
            )

    cheapest = min(costs)
    for i, stock in enumerate(config.available_stock or []):
        units = board_units(stock.length, scale)
        if units < cheapest:
            result.add_warning(
                path=f"available_stock[{i}].length",
                message=f"Stock of {stock.length:g} is shorter than every cut and will not be used",
            )
        if units != round(stock.length * scale, 9):
            result.add_warning(
                path=f"available_stock[{i}].length",
                message=(
                    f"Stock of {stock.length:g} is not a whole number of planning units "
                    f"and will be shortened to {units / scale:g}"
                ),
                suggestion="Increase settings.unit_scale",
            )
    return result


def validate_config(config: PlanConfiguration) -> ValidationResult:
    """Perform full validation of a cutting plan configuration.

    Args:
        config: A PlanConfiguration instance (already validated by Pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    result = check_board_limits(config)
    if not result.is_valid:
        return result

    advisories = check_cutting_advisories(config)
    result.errors.extend(advisories.errors)
    result.warnings.extend(advisories.warnings)
    return result
