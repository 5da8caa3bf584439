"""Error Handlers — turn dashboard exceptions that escape a route into JSON envelopes.

Invariants:
    - DashboardError -> exc.http_status + exc.to_response(); logged at the level its
      severity names (a missing invoice is a WARNING, a dead database is CRITICAL)
    - InvoiceMutationError is not logged again: the mutation layer already logged
      its cause with exc_info at the raise site
    - RequestValidationError (in practice a malformed invoice id in the path) -> 400
      with per-field details
    - Any other Exception -> 500 that never leaks internal details
    - Form validation and persistence failures of create/update never get here:
      invoice actions return them as FormState values (api/dependencies.render_outcome)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from dashboard.core.errors import (
    DashboardError, ErrorCategory, ErrorSeverity, InvoiceMutationError,
)

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register dashboard, request-validation and catch-all handlers on the app."""
    app.add_exception_handler(DashboardError, dashboard_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def dashboard_error_handler(request: Request, exc: DashboardError) -> JSONResponse:
    if not isinstance(exc, InvoiceMutationError):
        logger.log(
            _LOG_LEVELS[exc.severity],
            f"{exc.code} on {request.url.path}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "invoice_id": exc.context.invoice_id,
                "action": exc.context.action,
            },
        )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.info(
        f"Rejected request to {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc, extra={"path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **extra,
) -> dict:
    """Same outer shape as DashboardError.to_response, for errors raised outside it."""
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }
