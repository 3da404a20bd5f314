"""RFC 7807 Problem Details for HTTP APIs.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 7807 compliant error response schema
"""

from pydantic import BaseModel, Field

ERROR_TYPE_BASE = "https://authlink.dev/errors"


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> error = ErrorDetail(
        ...     field="email",
        ...     code="invalid_email",
        ...     message="Invalid email address",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 7807 Problem Details.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors

    Examples:
        >>> problem = ProblemDetails(
        ...     type="https://authlink.dev/errors/token_expired",
        ...     title="Token Expired",
        ...     status=410,
        ...     detail="Token has expired",
        ...     instance="/user/0190.../verify/ab12...",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=[f"{ERROR_TYPE_BASE}/invalid_email"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Validation Failed"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[403],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Invalid email address"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/user/register"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
