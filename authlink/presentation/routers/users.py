"""User registration and verification router.

Endpoints:
    POST /user/register                 - Register and send verification link
    POST /user/login                    - Exchange credentials for a session token
    GET  /user/{user_id}/verify/{token} - Consume a verification link
    POST /user/resendVerification       - Rotate the token and resend the link
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from authlink.application.auth_service import AuthService
from authlink.core.container import get_auth_service
from authlink.core.result import Failure, Success
from authlink.presentation.errors import ErrorResponseBuilder, ProblemDetails
from authlink.presentation.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    ResendVerificationRequest,
    UserResponse,
)

router = APIRouter(prefix="/user", tags=["Users"])

VERIFIED_PAGE = """<!DOCTYPE html>
<html>
  <head><title>Email verified</title></head>
  <body>
    <h1>Email verified</h1>
    <p>Your email address has been verified. You can now log in.</p>
  </body>
</html>
"""


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegisterResponse,
    response_model_by_alias=True,
    responses={
        400: {"description": "Malformed body or bad password", "model": ProblemDetails},
        403: {"description": "Missing names, bad or duplicate email", "model": ProblemDetails},
    },
    summary="Register user",
)
async def register(
    request: Request,
    data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> RegisterResponse | JSONResponse:
    """Create an unverified user and email a verification link.

    POST /user/register → 201 Created
    """
    result = await auth_service.register(
        data.first_name, data.last_name, data.email, data.password
    )

    match result:
        case Success(value=user_view):
            return RegisterResponse(user=UserResponse.from_view(user_view))
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    response_model_by_alias=True,
    responses={401: {"description": "Invalid credentials", "model": ProblemDetails}},
    summary="Log in",
)
async def login(
    request: Request,
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse | JSONResponse:
    """POST /user/login → 200 OK with a session token."""
    result = await auth_service.login(data.email, data.password)

    match result:
        case Success(value=token):
            return LoginResponse(token=token)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.get(
    "/{user_id}/verify/{token}",
    response_class=HTMLResponse,
    response_model=None,
    responses={
        400: {"description": "Malformed user ID", "model": ProblemDetails},
        404: {"description": "Unknown user or token", "model": ProblemDetails},
        410: {"description": "Token expired", "model": ProblemDetails},
    },
    summary="Verify email",
)
async def verify_email(
    request: Request,
    user_id: str,
    token: str,
    auth_service: AuthService = Depends(get_auth_service),
) -> HTMLResponse | JSONResponse:
    """Consume the verification link from the email.

    GET /user/{user_id}/verify/{token} → 200 HTML confirmation page
    """
    result = await auth_service.verify_email(user_id, token)

    match result:
        case Success():
            return HTMLResponse(content=VERIFIED_PAGE, status_code=status.HTTP_200_OK)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)


@router.post(
    "/resendVerification",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"description": "Empty input or malformed user ID", "model": ProblemDetails},
        404: {"description": "Unknown user or nothing to resend", "model": ProblemDetails},
    },
    summary="Resend verification email",
)
async def resend_verification(
    request: Request,
    data: ResendVerificationRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> MessageResponse | JSONResponse:
    """POST /user/resendVerification → 200 OK"""
    result = await auth_service.resend_verification(data.user_id, data.email)

    match result:
        case Success():
            return MessageResponse(message="Verification email has been resent")
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error, request)
