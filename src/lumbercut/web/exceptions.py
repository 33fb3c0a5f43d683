"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lumbercut.application.config import ConfigError


class PlanGenerationError(Exception):
    """Raised when the planner rejects the request input."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Planning failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid configuration",
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(PlanGenerationError)
    async def plan_generation_error_handler(
        request: Request, exc: PlanGenerationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Cutting plan failed",
                "error_type": "invalid_input",
                "details": [{"message": e} for e in exc.errors],
            },
        )
