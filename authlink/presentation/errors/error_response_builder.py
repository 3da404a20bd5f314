"""Build RFC 7807 responses from domain errors.

The only place that maps error codes to HTTP status codes.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from authlink.core.enums import ErrorCode
from authlink.core.errors import DomainError, ValidationError
from authlink.presentation.errors.problem_details import (
    ERROR_TYPE_BASE,
    ErrorDetail,
    ProblemDetails,
)

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.NAME_REQUIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.INVALID_EMAIL: status.HTTP_403_FORBIDDEN,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_403_FORBIDDEN,
    ErrorCode.PASSWORD_TOO_SHORT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.PASSWORD_TOO_LONG: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_USER_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMPTY_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.SESSION_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TOKEN_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_410_GONE,
}

_TITLE_BY_STATUS: dict[int, str] = {
    400: "Bad Request",
    401: "Authentication Required",
    403: "Access Denied",
    404: "Resource Not Found",
    410: "Resource Gone",
    500: "Internal Server Error",
}


class ErrorResponseBuilder:
    """Convert DomainError into RFC 7807 JSON responses.

    Example:
        >>> response = ErrorResponseBuilder.from_domain_error(error, request)
    """

    @staticmethod
    def from_domain_error(error: DomainError, request: Request) -> JSONResponse:
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{ERROR_TYPE_BASE}/{error.code.value}",
            title=_TITLE_BY_STATUS.get(status_code, "Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
        )

        if isinstance(error, ValidationError) and error.field:
            problem.errors = [
                ErrorDetail(
                    field=error.field,
                    code=error.code.value,
                    message=error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ErrorCode) -> int:
        """Map a domain error code to an HTTP status (500 if unmapped).

        Example:
            >>> ErrorResponseBuilder.get_status_code(ErrorCode.TOKEN_EXPIRED)
            410
        """
        return _STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
