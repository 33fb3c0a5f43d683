"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PlanRequest(BaseModel):
    """Request for computing a cutting plan from a full configuration."""

    config: dict[str, Any] = Field(
        ..., description="Cutting plan configuration JSON (same format as config files)"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Cutting plan configuration JSON")
