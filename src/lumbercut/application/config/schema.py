"""Pydantic models for cutting plan configuration files.

A configuration document describes the desired cuts, the stock on hand and
the cutting settings::

    {
      "schema_version": "1.0",
      "desired_cuts": [{"length": 100, "quantity": 2}],
      "available_stock": [{"length": 300, "quantity": 1}],
      "settings": {"kerf_width": 3, "error_margin": 0.01},
      "output": {"format": "text", "grouped": false}
    }
"""

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from lumbercut.domain import (
    DEFAULT_ERROR_MARGIN,
    DEFAULT_KERF_WIDTH,
    DEFAULT_MAX_BOARD_LENGTH,
    DEFAULT_STOCK_LENGTH,
)

# Supported schema versions for configuration files
# Version 1.0: Desired cuts, stock and cutting settings
# Version 1.1: Added offcut chaining and output grouping
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class LengthQuantityConfig(BaseModel):
    """One row of desired cuts or available stock.

    Attributes:
        length: Piece length in the configured unit (must be positive).
        quantity: Number of pieces (must be positive).
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, description="Piece length")
    quantity: int = Field(default=1, gt=0, description="Number of pieces")


class CuttingSettingsConfig(BaseModel):
    """Cutting settings shared by every board.

    Attributes:
        kerf_width: Material removed by each saw cut.
        error_margin: Fractional over-length allowance per cut.
        default_stock_length: Board length used once stock runs out.
        unit_scale: Multiplier turning lengths into whole planning units
            (100 plans in hundredths).
        chain_offcuts: Fold immediate reuse of a board's offcut into the
            same record.
        max_board_length: Largest board accepted, in planning units. It may
            lower the default limit but never raise it.
    """

    model_config = ConfigDict(extra="forbid")

    kerf_width: float = Field(
        default=DEFAULT_KERF_WIDTH, ge=0, description="Saw kerf width"
    )
    error_margin: float = Field(
        default=DEFAULT_ERROR_MARGIN,
        ge=0,
        lt=1,
        description="Measurement error allowance as a fraction (0.01 = 1%)",
    )
    default_stock_length: float = Field(
        default=DEFAULT_STOCK_LENGTH, gt=0, description="Default board length"
    )
    unit_scale: int = Field(
        default=1, ge=1, le=10_000, description="Planning units per length unit"
    )
    chain_offcuts: bool = Field(
        default=False, description="Chain offcut reuse into the same record"
    )
    max_board_length: int = Field(
        default=DEFAULT_MAX_BOARD_LENGTH,
        gt=0,
        le=DEFAULT_MAX_BOARD_LENGTH,
        description="Largest board in planning units",
    )


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        format: Output format for the CLI.
        grouped: Collapse identical cut patterns into one row.
    """

    model_config = ConfigDict(extra="forbid")

    format: Literal["text", "json"] = "text"
    grouped: bool = False


class PlanConfiguration(BaseModel):
    """Root configuration model for a cutting plan.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        desired_cuts: Pieces to cut (at least one row)
        available_stock: Stock on hand; omitted means default boards only
        settings: Cutting settings
        output: Output configuration

    Example:
        >>> config = PlanConfiguration(
        ...     schema_version="1.0",
        ...     desired_cuts=[LengthQuantityConfig(length=100, quantity=2)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    desired_cuts: list[LengthQuantityConfig] = Field(..., min_length=1)
    available_stock: list[LengthQuantityConfig] | None = Field(
        default=None, description="Stock on hand (optional)"
    )
    settings: CuttingSettingsConfig = Field(default_factory=CuttingSettingsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
