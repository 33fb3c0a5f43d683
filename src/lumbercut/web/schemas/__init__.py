"""Pydantic schemas for the REST API."""

from lumbercut.web.schemas.requests import ConfigValidateRequest, PlanRequest
from lumbercut.web.schemas.responses import (
    CutCountSchema,
    CutRecordSchema,
    DemandSchema,
    ErrorResponseSchema,
    PlanOutputSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "PlanRequest",
    # Responses
    "CutCountSchema",
    "CutRecordSchema",
    "DemandSchema",
    "ErrorResponseSchema",
    "PlanOutputSchema",
    "ValidationResultSchema",
]
