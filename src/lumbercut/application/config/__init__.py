"""Configuration schema and loading system for cutting plans.

Public API:
    - PlanConfiguration: Root configuration model
    - LengthQuantityConfig: One desired cut or stock row
    - CuttingSettingsConfig: Kerf, margin, default board and unit settings
    - OutputConfig: Output format configuration
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation
    - config_to_plan_input: Convert a configuration to the PlanInput DTO
    - merge_config_with_cli: Apply CLI overrides to a configuration

Example:
    >>> from pathlib import Path
    >>> from lumbercut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("shelving.json"))
    ...     print(f"{len(config.desired_cuts)} cut rows")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from lumbercut.application.config.adapter import config_to_plan_input
from lumbercut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from lumbercut.application.config.merger import merge_config_with_cli
from lumbercut.application.config.schema import (
    SUPPORTED_VERSIONS,
    CuttingSettingsConfig,
    LengthQuantityConfig,
    OutputConfig,
    PlanConfiguration,
)
from lumbercut.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "CuttingSettingsConfig",
    "LengthQuantityConfig",
    "OutputConfig",
    "PlanConfiguration",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_plan_input",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
