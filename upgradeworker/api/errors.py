"""Unified error handling — UpgradeError + RequestValidationError → JSON."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from upgradeworker.api.deps import get_stats
from upgradeworker.errors import ErrorType, UpgradeError

_STATUS_MAP: dict[ErrorType, int] = {
    ErrorType.VALIDATION: 400,
    ErrorType.COMPATIBILITY: 422,
    ErrorType.SECURITY: 422,
    ErrorType.PERFORMANCE: 422,
    ErrorType.NETWORK: 502,
    ErrorType.INTERNAL: 500,
}


async def _upgrade_error_handler(_request: Request, exc: UpgradeError) -> JSONResponse:
    status = _STATUS_MAP.get(exc.error_type, 500)
    return JSONResponse(status_code=status, content=exc.to_dict())


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Rejected before reaching the evaluator, but still a failed job.
    get_stats().record_failure()
    messages = []
    for err in exc.errors():
        loc = " → ".join(str(part) for part in err["loc"])
        messages.append(f"{loc}: {err['msg']}")
    return JSONResponse(
        status_code=422,
        content={"error": "; ".join(messages), "error_type": ErrorType.VALIDATION.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers on the app."""
    app.add_exception_handler(UpgradeError, _upgrade_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
