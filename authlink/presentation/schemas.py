"""Request/response schemas for the /user endpoints.

Pydantic models for request parsing and response serialization. Business
validation (names, email, password length) happens in the auth service so
every rule has one owner; these models only check shape. JSON field names
are camelCase.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from authlink.application.dtos import UserView


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Registration
# =============================================================================


class RegisterRequest(_CamelModel):
    """POST /user/register"""

    first_name: str = Field(default="", alias="firstName", examples=["Ada"])
    last_name: str = Field(default="", alias="lastName", examples=["Lovelace"])
    email: str = Field(default="", examples=["ada@example.com"])
    password: str = Field(default="", examples=["secret1"])


class UserResponse(_CamelModel):
    """Public user representation (no password hash)."""

    id: UUID
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    verified: bool
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_view(cls, view: UserView) -> "UserResponse":
        return cls(
            id=view.id,
            first_name=view.first_name,
            last_name=view.last_name,
            email=view.email,
            verified=view.is_verified,
            created_at=view.created_at,
        )


class RegisterResponse(_CamelModel):
    """201 Created"""

    message: str = "Verification email has been sent"
    success: bool = True
    status_code: int = Field(default=201, alias="statusCode")
    user: UserResponse


# =============================================================================
# Login
# =============================================================================


class LoginRequest(_CamelModel):
    """POST /user/login"""

    email: str = Field(default="", examples=["ada@example.com"])
    password: str = Field(default="", examples=["secret1"])


class LoginResponse(_CamelModel):
    """200 OK with an opaque session token."""

    success: bool = True
    status_code: int = Field(default=200, alias="statusCode")
    token: str


# =============================================================================
# Resend verification
# =============================================================================


class ResendVerificationRequest(_CamelModel):
    """POST /user/resendVerification"""

    email: str = Field(default="", examples=["ada@example.com"])
    user_id: str = Field(default="", alias="userId")


class MessageResponse(_CamelModel):
    message: str
