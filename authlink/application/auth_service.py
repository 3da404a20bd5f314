"""Auth service: registration, login, email verification and resend.

Flow (register):
1. Validate names, email, password
2. Check email uniqueness
3. Hash password (worker thread)
4. Insert user (store enforces uniqueness for concurrent registrations)
5. Issue verification token
6. Send verification link (failure is logged, not returned)
7. Return Success(UserView)

Flow (verify_email):
1. Parse user id
2. Check user exists
3. Check and consume the token (row deleted when matched)
4. Set verified flag
5. Return Success(user_id)

Architecture:
- Application layer ONLY imports from core and domain
- Store, hasher, token generator and sink are injected via protocols
- Every persistence write completes before the sink is called
- Store exceptions become InfrastructureError results, never escape
- Randomness failures become TOKEN_GENERATION_FAILED, other failures
  STORE_OPERATION_FAILED
"""

import asyncio
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta
from uuid import UUID

from authlink.application.dtos import UserView
from authlink.application.verification_email import (
    build_verification_email,
    build_verification_url,
)
from authlink.application.verification_lifecycle import (
    VerificationLifecycle,
    VerificationOutcome,
    utc_now,
)
from authlink.core.constants import TOKEN_PREVIEW_LENGTH, VERIFICATION_EMAIL_SUBJECT
from authlink.core.enums import ErrorCode
from authlink.core.errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    TokenExpiredError,
    ValidationError,
)
from authlink.core.result import Failure, Result, Success
from authlink.domain.entities import SessionToken, User
from authlink.domain.protocols import (
    CredentialStore,
    DuplicateEmailError,
    LoggerProtocol,
    NotificationSink,
    PasswordHashingProtocol,
    TokenGenerationError,
    TokenGenerationProtocol,
)
from authlink.domain.validators import (
    parse_user_id,
    validate_email_address,
    validate_name,
    validate_password_length,
    validate_password_size,
)


class AuthMessages:
    """User-facing messages."""

    NAME_REQUIRED = "Firstname and Lastname are required"
    INVALID_EMAIL = "Invalid email address"
    PASSWORD_TOO_SHORT = "Password must be at least 6 characters long"
    PASSWORD_TOO_LONG = "Password must be at most 72 bytes long"
    EMAIL_ALREADY_EXISTS = "User with this email already exists"
    INVALID_CREDENTIALS = "Invalid email or password"
    INVALID_REQUEST = "Invalid request"
    INVALID_USER_ID = "Invalid user ID"
    INVALID_USER_LINK = "Invalid user link"
    INVALID_TOKEN_LINK = "Invalid token link"
    TOKEN_EXPIRED = "Token has expired"
    USER_NOT_FOUND = "User not found"
    SESSION_INVALID = "Invalid session token"
    SESSION_EXPIRED = "Session token has expired"
    INTERNAL_ERROR = "Internal server error"


def _preview(token: str) -> str:
    return token[:TOKEN_PREVIEW_LENGTH]


class AuthService:
    """Orchestrates users, passwords and tokens.

    All operations return Result[..., DomainError].

    Example:
        >>> service = AuthService(
        ...     store=store,
        ...     password_service=BcryptPasswordService(),
        ...     lifecycle=VerificationLifecycle(store, token_generator),
        ...     token_generator=token_generator,
        ...     notification_sink=StubNotificationSink(logger),
        ...     logger=logger,
        ... )
        >>> result = await service.register("Ada", "Lovelace", "ada@example.com", "secret1")
    """

    def __init__(
        self,
        *,
        store: CredentialStore,
        password_service: PasswordHashingProtocol,
        lifecycle: VerificationLifecycle,
        token_generator: TokenGenerationProtocol,
        notification_sink: NotificationSink,
        logger: LoggerProtocol,
        verification_url_base: str = "http://localhost:2402",
        session_ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._password_service = password_service
        self._lifecycle = lifecycle
        self._token_generator = token_generator
        self._notification_sink = notification_sink
        self._logger = logger
        self._verification_url_base = verification_url_base.rstrip("/")
        self._session_ttl = session_ttl
        self._clock = clock
        # Compared against on unknown-email logins
        self._dummy_hash = password_service.hash_password(secrets.token_hex(16))

    # ------------------------------------------------------------------
    # Register
    # ------------------------------------------------------------------

    async def register(
        self, first_name: str, last_name: str, email: str, password: str
    ) -> Result[UserView, DomainError]:
        """Create an unverified user and send a verification link.

        Returns:
            Success(UserView) on success.
            Failure(ValidationError) for blank names, bad email or password.
            Failure(ConflictError) if the email is already registered.
            Failure(InfrastructureError) on store or hashing failure.
        """
        try:
            first_name = validate_name(first_name, "first_name")
            last_name = validate_name(last_name, "last_name")
        except ValueError:
            return self._validation_failure(
                ErrorCode.NAME_REQUIRED, AuthMessages.NAME_REQUIRED, "name"
            )

        try:
            validate_email_address(email)
        except ValueError:
            return self._validation_failure(
                ErrorCode.INVALID_EMAIL, AuthMessages.INVALID_EMAIL, "email"
            )

        try:
            validate_password_length(password)
        except ValueError:
            return self._validation_failure(
                ErrorCode.PASSWORD_TOO_SHORT, AuthMessages.PASSWORD_TOO_SHORT, "password"
            )

        try:
            validate_password_size(password)
        except ValueError:
            return self._validation_failure(
                ErrorCode.PASSWORD_TOO_LONG, AuthMessages.PASSWORD_TOO_LONG, "password"
            )

        user_id: UUID | None = None
        try:
            existing_user = await self._store.find_user_by_email(email)
            if existing_user is not None:
                return self._email_conflict(email)

            try:
                password_hash = await asyncio.to_thread(
                    self._password_service.hash_password, password
                )
            except Exception as e:
                return self._infrastructure_failure(
                    "register", ErrorCode.PASSWORD_HASHING_FAILED, e
                )

            user = User(
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=password_hash,
            )
            try:
                user_id = await self._store.insert_user(user)
            except DuplicateEmailError:
                # Lost a concurrent registration race
                return self._email_conflict(email)

            token = await self._lifecycle.issue(user_id)

        except TokenGenerationError as e:
            return self._infrastructure_failure(
                "register", ErrorCode.TOKEN_GENERATION_FAILED, e, user_id=user_id
            )
        except Exception as e:
            return self._infrastructure_failure(
                "register", ErrorCode.STORE_OPERATION_FAILED, e, user_id=user_id
            )

        self._logger.info(
            "user_registered",
            user_id=str(user_id),
            token_preview=_preview(token),
        )
        await self._send_verification_link(user_id, email, token)
        return Success(value=UserView.from_user(user))

    # ------------------------------------------------------------------
    # Login
    # ------------------------------------------------------------------

    async def login(self, email: str, password: str) -> Result[str, DomainError]:
        """Check credentials and issue a session token.

        Unknown email and wrong password produce the same failure. A dummy
        comparison runs for unknown emails so both paths cost one bcrypt check.

        Returns:
            Success(session_token) on success.
            Failure(AuthenticationError) on bad credentials.
            Failure(InfrastructureError) on store failure.
        """
        try:
            user = await self._store.find_user_by_email(email)
            if user is None or user.id is None:
                await asyncio.to_thread(
                    self._password_service.verify_password,
                    password,
                    self._dummy_hash,
                )
                return self._invalid_credentials()

            password_ok = await asyncio.to_thread(
                self._password_service.verify_password, password, user.password_hash
            )
            if not password_ok:
                return self._invalid_credentials(user_id=user.id)

            secret = self._token_generator.new_token()
            now = self._clock()
            await self._store.insert_session_token(
                SessionToken(
                    user_id=user.id,
                    token=secret,
                    created_at=now,
                    expires_at=now + self._session_ttl,
                )
            )
        except TokenGenerationError as e:
            return self._infrastructure_failure(
                "login", ErrorCode.TOKEN_GENERATION_FAILED, e
            )
        except Exception as e:
            return self._infrastructure_failure(
                "login", ErrorCode.STORE_OPERATION_FAILED, e
            )

        self._logger.info(
            "user_logged_in",
            user_id=str(user.id),
            token_preview=_preview(secret),
        )
        return Success(value=secret)

    # ------------------------------------------------------------------
    # Verify email
    # ------------------------------------------------------------------

    async def verify_email(
        self, user_id: str | UUID, secret: str, now: datetime | None = None
    ) -> Result[UUID, DomainError]:
        """Consume a verification link.

        Args:
            user_id: User id from the link.
            secret: Token from the link.
            now: Evaluation time (defaults to the lifecycle clock that stamped
                the token).

        Returns:
            Success(user_id) once the user is marked verified.
            Failure(ValidationError) for a malformed user id.
            Failure(NotFoundError) for an unknown user or token.
            Failure(TokenExpiredError) if the token outlived its lifetime
                (the token is deleted).
            Failure(InfrastructureError) on store failure.
        """
        parsed = self._parse_user_id(user_id)
        if isinstance(parsed, Failure):
            return parsed
        uid = parsed.value

        try:
            user = await self._store.find_user_by_id(uid)
            if user is None:
                self._logger.info("email_verification_failed", reason="user_not_found")
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message=AuthMessages.INVALID_USER_LINK,
                        resource_type="User",
                        resource_id=str(uid),
                    )
                )

            outcome = await self._lifecycle.check_and_consume(uid, secret, now)

            match outcome:
                case VerificationOutcome.NOT_FOUND:
                    self._logger.info(
                        "email_verification_failed",
                        user_id=str(uid),
                        token_preview=_preview(secret),
                        reason="token_not_found",
                    )
                    return Failure(
                        error=NotFoundError(
                            code=ErrorCode.TOKEN_NOT_FOUND,
                            message=AuthMessages.INVALID_TOKEN_LINK,
                            resource_type="VerificationToken",
                            resource_id=_preview(secret),
                        )
                    )
                case VerificationOutcome.EXPIRED:
                    self._logger.info(
                        "email_verification_failed",
                        user_id=str(uid),
                        token_preview=_preview(secret),
                        reason="token_expired",
                    )
                    return Failure(
                        error=TokenExpiredError(
                            code=ErrorCode.TOKEN_EXPIRED,
                            message=AuthMessages.TOKEN_EXPIRED,
                        )
                    )
                case VerificationOutcome.CONSUMED:
                    await self._store.set_user_verified(uid)

        except Exception as e:
            return self._infrastructure_failure(
                "verify_email", ErrorCode.STORE_OPERATION_FAILED, e
            )

        self._logger.info("email_verified", user_id=str(uid))
        return Success(value=uid)

    # ------------------------------------------------------------------
    # Resend verification
    # ------------------------------------------------------------------

    async def resend_verification(
        self, user_id: str | UUID, email: str
    ) -> Result[None, DomainError]:
        """Rotate the user's verification token and send a new link.

        The email must match the stored address. Any earlier link stops
        working as soon as the new secret is stored.

        Returns:
            Success(None) once the new link has been handed to the sink.
            Failure(ValidationError) for empty input or a malformed user id.
            Failure(NotFoundError) for an unknown user, an email mismatch or
                a user without a pending token.
            Failure(InfrastructureError) on store failure.
        """
        if not str(user_id).strip() or not email or not email.strip():
            return self._validation_failure(
                ErrorCode.EMPTY_INPUT, AuthMessages.INVALID_REQUEST, None
            )

        parsed = self._parse_user_id(user_id)
        if isinstance(parsed, Failure):
            return parsed
        uid = parsed.value

        try:
            user = await self._store.find_user_by_id(uid)
            if user is None or user.email != email:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message=AuthMessages.USER_NOT_FOUND,
                        resource_type="User",
                        resource_id=str(uid),
                    )
                )

            reissued = await self._lifecycle.reissue(uid)
        except TokenGenerationError as e:
            return self._infrastructure_failure(
                "resend_verification", ErrorCode.TOKEN_GENERATION_FAILED, e
            )
        except Exception as e:
            return self._infrastructure_failure(
                "resend_verification", ErrorCode.STORE_OPERATION_FAILED, e
            )

        if isinstance(reissued, Failure):
            self._logger.info(
                "verification_resend_failed",
                user_id=str(uid),
                reason="token_not_found",
            )
            return Failure(error=reissued.error)

        token = reissued.value
        self._logger.info(
            "verification_token_reissued",
            user_id=str(uid),
            token_preview=_preview(token),
        )
        await self._send_verification_link(uid, user.email, token)
        return Success(value=None)

    # ------------------------------------------------------------------
    # Session resolution
    # ------------------------------------------------------------------

    async def resolve_session(
        self, secret: str, now: datetime | None = None
    ) -> Result[UUID, DomainError]:
        """Map a session token back to its owner.

        Returns:
            Success(user_id) for a known, unexpired token.
            Failure(AuthenticationError) for a missing or expired token.
            Failure(InfrastructureError) on store failure.
        """
        if not secret:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message=AuthMessages.SESSION_INVALID,
                )
            )

        try:
            session_token = await self._store.find_session_token(secret)
        except Exception as e:
            return self._infrastructure_failure(
                "resolve_session", ErrorCode.STORE_OPERATION_FAILED, e
            )

        if session_token is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message=AuthMessages.SESSION_INVALID,
                )
            )

        if session_token.is_expired(now if now is not None else self._clock()):
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.SESSION_EXPIRED,
                    message=AuthMessages.SESSION_EXPIRED,
                )
            )

        return Success(value=session_token.user_id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _send_verification_link(
        self, user_id: UUID, email: str, token: str
    ) -> None:
        """Hand the link to the sink. Delivery failure is logged only."""
        url = build_verification_url(self._verification_url_base, user_id, token)
        ttl_minutes = int(self._lifecycle.ttl.total_seconds() // 60)
        body = build_verification_email(url, ttl_minutes)
        try:
            await self._notification_sink.send(
                VERIFICATION_EMAIL_SUBJECT, body, [email]
            )
        except Exception as e:
            self._logger.warning(
                "verification_email_failed",
                user_id=str(user_id),
                error_type=type(e).__name__,
                error_message=str(e),
            )

    def _parse_user_id(
        self, user_id: str | UUID
    ) -> Result[UUID, DomainError]:
        if isinstance(user_id, UUID):
            return Success(value=user_id)
        try:
            return Success(value=parse_user_id(user_id))
        except ValueError:
            return self._validation_failure(
                ErrorCode.INVALID_USER_ID, AuthMessages.INVALID_USER_ID, "user_id"
            )

    def _validation_failure(
        self, code: ErrorCode, message: str, field: str | None
    ) -> Failure[DomainError]:
        self._logger.info("validation_failed", code=code.value, field=field)
        return Failure(error=ValidationError(code=code, message=message, field=field))

    def _email_conflict(self, email: str) -> Failure[DomainError]:
        self._logger.info("registration_failed", reason="email_already_exists")
        return Failure(
            error=ConflictError(
                code=ErrorCode.EMAIL_ALREADY_EXISTS,
                message=AuthMessages.EMAIL_ALREADY_EXISTS,
                resource_type="User",
                conflicting_field="email",
            )
        )

    def _invalid_credentials(self, user_id: UUID | None = None) -> Failure[DomainError]:
        self._logger.info(
            "login_failed",
            user_id=str(user_id) if user_id else None,
            reason="invalid_credentials",
        )
        return Failure(
            error=AuthenticationError(
                code=ErrorCode.INVALID_CREDENTIALS,
                message=AuthMessages.INVALID_CREDENTIALS,
            )
        )

    def _infrastructure_failure(
        self,
        operation: str,
        code: ErrorCode,
        error: Exception,
        user_id: UUID | None = None,
    ) -> Failure[DomainError]:
        context: dict[str, object] = {"code": code.value}
        if user_id is not None:
            # User row exists without a verification token
            context["user_id"] = str(user_id)
        self._logger.error(f"{operation}_failed", error=error, **context)
        return Failure(
            error=InfrastructureError(
                code=code,
                message=AuthMessages.INTERNAL_ERROR,
                operation=operation,
            )
        )
