"""RFC 7807 error responses.

Exports:
    ProblemDetails: Error response schema
    ErrorResponseBuilder: DomainError -> JSONResponse
    register_exception_handlers: Wire global handlers into the app
"""

from authlink.presentation.errors.error_response_builder import ErrorResponseBuilder
from authlink.presentation.errors.exception_handlers import register_exception_handlers
from authlink.presentation.errors.problem_details import ErrorDetail, ProblemDetails

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
