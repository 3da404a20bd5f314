"""Global exception handlers.

Handlers:
    validation_exception_handler: Malformed request bodies -> 400 "Invalid request"
    generic_exception_handler: Anything unhandled -> 500 without internals
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from authlink.presentation.errors.problem_details import (
    ERROR_TYPE_BASE,
    ErrorDetail,
    ProblemDetails,
)


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 Problem Details response."""
    # Type narrowing: registered only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
        field_name = ".".join(field_parts) if field_parts else "body"

        field_errors.append(
            ErrorDetail(
                field=field_name,
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{ERROR_TYPE_BASE}/invalid-request",
        title="Bad Request",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Invalid request",
        instance=str(request.url.path),
        errors=field_errors or None,
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking details."""
    container = getattr(request.app.state, "container", None)
    if container is not None:
        container.logger.error(
            "unhandled_exception",
            error=exc,
            path=str(request.url.path),
        )

    problem = ProblemDetails(
        type=f"{ERROR_TYPE_BASE}/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
        instance=str(request.url.path),
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers with the app."""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
