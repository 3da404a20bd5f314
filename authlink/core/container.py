"""Composition root.

Builds every collaborator once from Settings and hands them out through a
Container. The FastAPI app keeps its Container on `app.state`; there is no
module-level store or service.

Usage:
    settings = get_settings()
    container = build_container(settings)
    result = await container.auth_service.register(...)

    # Presentation Layer (FastAPI Depends)
    auth_service: AuthService = Depends(get_auth_service)
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import Request

from authlink.core.config import Settings

if TYPE_CHECKING:
    from authlink.application.auth_service import AuthService
    from authlink.application.verification_lifecycle import VerificationLifecycle
    from authlink.domain.protocols import (
        CredentialStore,
        LoggerProtocol,
        NotificationSink,
        PasswordHashingProtocol,
        TokenGenerationProtocol,
    )
    from authlink.infrastructure.persistence.database import Database


@dataclass
class Container:
    """Application-scoped collaborators.

    Attributes:
        settings: Configuration the container was built from.
        logger: Structured logger.
        store: Credential store (in-memory or SQL).
        password_service: Password hasher.
        token_generator: Opaque token generator.
        lifecycle: Verification token lifecycle.
        notification_sink: Email delivery backend.
        auth_service: Auth service wired to all of the above.
        database: SQL database handle when the SQL store is selected.
    """

    settings: Settings
    logger: "LoggerProtocol"
    store: "CredentialStore"
    password_service: "PasswordHashingProtocol"
    token_generator: "TokenGenerationProtocol"
    lifecycle: "VerificationLifecycle"
    notification_sink: "NotificationSink"
    auth_service: "AuthService"
    database: "Database | None" = None

    async def close(self) -> None:
        """Release pooled connections."""
        if self.database is not None:
            await self.database.close()


def build_logger(settings: Settings) -> "LoggerProtocol":
    """Console logger; JSON when log_json is set."""
    from authlink.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(use_json=settings.log_json, level=settings.log_level)


def build_notification_sink(
    settings: Settings, logger: "LoggerProtocol"
) -> "NotificationSink":
    """Select the email backend.

    - stub: log only (default)
    - smtp: SMTP with STARTTLS
    - ses: AWS SES
    """
    from authlink.infrastructure.notifications import (
        SESNotificationSink,
        SmtpNotificationSink,
        StubNotificationSink,
    )

    match settings.email_backend:
        case "smtp":
            return SmtpNotificationSink(
                host=settings.smtp_host,
                port=settings.smtp_port,
                sender=settings.email_from,
                username=settings.smtp_username,
                password=settings.smtp_password,
            )
        case "ses":
            return SESNotificationSink(
                sender=settings.email_from,
                region=settings.aws_region,
            )
        case _:
            return StubNotificationSink(logger, log_body=not settings.is_production)


def build_container(
    settings: Settings,
    *,
    store: "CredentialStore | None" = None,
    notification_sink: "NotificationSink | None" = None,
    logger: "LoggerProtocol | None" = None,
) -> Container:
    """Assemble the application from settings.

    Args:
        settings: Application configuration.
        store: Explicit store (tests). Defaults to SQL when database_url is
            set, in-memory otherwise.
        notification_sink: Explicit sink (tests). Defaults per email_backend.
        logger: Explicit logger (tests).

    Returns:
        Container with a ready AuthService.
    """
    from authlink.application.auth_service import AuthService
    from authlink.application.verification_lifecycle import VerificationLifecycle
    from authlink.infrastructure.persistence import (
        Database,
        InMemoryCredentialStore,
        SqlCredentialStore,
    )
    from authlink.infrastructure.security import (
        BcryptPasswordService,
        SecureTokenGenerator,
    )

    logger = logger or build_logger(settings)

    database: Database | None = None
    if store is None:
        if settings.database_url:
            database = Database(settings.database_url, echo=settings.db_echo)
            store = SqlCredentialStore(database)
        else:
            store = InMemoryCredentialStore()

    notification_sink = notification_sink or build_notification_sink(settings, logger)
    password_service = BcryptPasswordService(cost_factor=settings.bcrypt_rounds)
    token_generator = SecureTokenGenerator()
    lifecycle = VerificationLifecycle(
        store,
        token_generator,
        ttl=timedelta(minutes=settings.verification_token_ttl_minutes),
    )
    auth_service = AuthService(
        store=store,
        password_service=password_service,
        lifecycle=lifecycle,
        token_generator=token_generator,
        notification_sink=notification_sink,
        logger=logger,
        verification_url_base=settings.verification_url_base,
        session_ttl=timedelta(hours=settings.session_token_expire_hours),
    )

    logger.info(
        "container_built",
        store=type(store).__name__,
        notification_sink=type(notification_sink).__name__,
    )

    return Container(
        settings=settings,
        logger=logger,
        store=store,
        password_service=password_service,
        token_generator=token_generator,
        lifecycle=lifecycle,
        notification_sink=notification_sink,
        auth_service=auth_service,
        database=database,
    )


def get_container(request: Request) -> Container:
    """FastAPI dependency: the app's container."""
    return request.app.state.container


def get_auth_service(request: Request) -> "AuthService":
    """FastAPI dependency: the app's AuthService."""
    return get_container(request).auth_service
