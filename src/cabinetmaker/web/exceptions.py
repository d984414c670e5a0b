"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cabinetmaker.application.config import ConfigError


class CabinetPlanError(Exception):
    """Raised when deriving a cabinet plan fails."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Plan derivation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(CabinetPlanError)
    async def plan_error_handler(
        request: Request, exc: CabinetPlanError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Cabinet plan derivation failed",
                "error_type": "plan",
                "details": [{"message": e} for e in exc.errors],
            },
        )
