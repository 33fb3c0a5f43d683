"""Reading cutting plan configurations from JSON.

Every failure, from a missing file to a bad field, comes out as a
ConfigError whose ``error_type`` tells the CLI and the web layer how to
report it.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from lumbercut.application.config.schema import PlanConfiguration


class ConfigError(Exception):
    """A configuration could not be read or did not validate.

    Attributes:
        message: Human readable summary.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: File the configuration came from, None for in-memory data.
        details: Per-problem entries. JSON errors carry line and column,
            validation errors carry path, message, value and error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Join a pydantic ``loc`` into ``desired_cuts[0].length`` form."""
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        line = f"  - {detail['path']}: {detail['message']}"
        if detail.get("value") is not None:
            line += f" (got: {detail['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> PlanConfiguration:
    try:
        return PlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_config(path: Path) -> PlanConfiguration:
    """Read a JSON file and return the validated configuration.

    Raises:
        ConfigError: If the file is missing or unreadable, holds invalid
            JSON, or fails schema validation. JSON errors report the line
            and column in ``details``.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Cannot read config file {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"{path} is not valid JSON (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> PlanConfiguration:
    """Validate configuration data already in memory, e.g. an API request body.

    Raises:
        ConfigError: With ``error_type="validation"`` and no ``path``.
    """
    return _validate(data)
