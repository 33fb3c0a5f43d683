"""Cutting plan endpoints."""

from fastapi import APIRouter

from lumbercut.application.config import config_to_plan_input, load_config_from_dict
from lumbercut.infrastructure import JsonExporter
from lumbercut.web.dependencies import PlanCommandDep
from lumbercut.web.exceptions import PlanGenerationError
from lumbercut.web.schemas.requests import PlanRequest
from lumbercut.web.schemas.responses import ErrorResponseSchema, PlanOutputSchema

router = APIRouter(prefix="/plan", tags=["plan"])


@router.post(
    "",
    response_model=PlanOutputSchema,
    response_model_exclude_none=True,
    responses={422: {"model": ErrorResponseSchema}},
)
async def plan_cuts(request: PlanRequest, command: PlanCommandDep) -> PlanOutputSchema:
    """Compute a cutting plan from a configuration.

    Unfulfilled demand is part of a successful response; only rejected
    input produces an error.

    Raises:
        ConfigError: If the configuration fails schema validation.
        PlanGenerationError: If the planner rejects the input.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(
        config_to_plan_input(config), grouped=config.output.grouped
    )
    if not output.is_valid:
        raise PlanGenerationError(output.errors)
    return PlanOutputSchema.model_validate(JsonExporter().to_dict(output))
