"""Merge CLI arguments with configuration values.

CLI arguments override the matching configuration values only when they are
given (not None). Cut and stock rows given on the command line replace the
rows from the file rather than extending them.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from lumbercut.application.config.loader import (
    ConfigError,
    _extract_validation_errors,
    _format_validation_error_message,
)
from lumbercut.application.config.schema import (
    CuttingSettingsConfig,
    LengthQuantityConfig,
    OutputConfig,
    PlanConfiguration,
)

# Schema version used when a configuration is built from CLI arguments alone
CLI_SCHEMA_VERSION = "1.1"


def merge_config_with_cli(
    config: PlanConfiguration | None,
    *,
    desired_cuts: list[LengthQuantityConfig] | None = None,
    available_stock: list[LengthQuantityConfig] | None = None,
    kerf_width: float | None = None,
    error_margin: float | None = None,
    default_stock_length: float | None = None,
    unit_scale: int | None = None,
    chain_offcuts: bool | None = None,
    output_format: str | None = None,
    grouped: bool | None = None,
) -> PlanConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base PlanConfiguration, or None when planning from CLI
            arguments alone (``desired_cuts`` is then required).
        desired_cuts: Replacement for config.desired_cuts (if not empty)
        available_stock: Replacement for config.available_stock (if not empty)
        kerf_width: Override for settings.kerf_width (if not None)
        error_margin: Override for settings.error_margin (if not None)
        default_stock_length: Override for settings.default_stock_length
        unit_scale: Override for settings.unit_scale (if not None)
        chain_offcuts: Override for settings.chain_offcuts (if not None)
        output_format: Override for output.format (if not None)
        grouped: Override for output.grouped (if not None)

    Returns:
        A new PlanConfiguration with merged values

    Raises:
        ConfigError: If the merged values are invalid, including a missing
            cut list.

    Example:
        >>> config = load_config(Path("shelving.json"))
        >>> merged = merge_config_with_cli(config, kerf_width=2.5)
        >>> merged.settings.kerf_width
        2.5
    """
    data: dict[str, Any] = (
        config.model_dump()
        if config is not None
        else {"schema_version": CLI_SCHEMA_VERSION, "desired_cuts": []}
    )

    if desired_cuts:
        data["desired_cuts"] = [row.model_dump() for row in desired_cuts]
    if available_stock:
        data["available_stock"] = [row.model_dump() for row in available_stock]

    settings_overrides = {
        "kerf_width": kerf_width,
        "error_margin": error_margin,
        "default_stock_length": default_stock_length,
        "unit_scale": unit_scale,
        "chain_offcuts": chain_offcuts,
    }
    settings = dict(data.get("settings") or CuttingSettingsConfig().model_dump())
    settings.update({k: v for k, v in settings_overrides.items() if v is not None})
    data["settings"] = settings

    output_overrides = {"format": output_format, "grouped": grouped}
    output = dict(data.get("output") or OutputConfig().model_dump())
    output.update({k: v for k, v in output_overrides.items() if v is not None})
    data["output"] = output

    try:
        return PlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )
