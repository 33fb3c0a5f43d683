"""Configuration validation endpoints."""

from fastapi import APIRouter

from lumbercut.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from lumbercut.web.schemas.requests import ConfigValidateRequest
from lumbercut.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a cutting plan configuration without planning.

    Schema errors are reported in the result rather than as an error
    response, so clients can show every problem at once.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": d.get("message", ""), "path": d.get("path", "")}
                for d in e.details
            ],
        )

    result = validate_config(config)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
