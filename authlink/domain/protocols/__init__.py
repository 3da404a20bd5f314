"""Domain protocols (ports).

Infrastructure provides the adapters; nothing here depends on a framework.
"""

from authlink.domain.protocols.credential_store import (
    CredentialStore,
    DuplicateEmailError,
)
from authlink.domain.protocols.logger_protocol import LoggerProtocol
from authlink.domain.protocols.notification_protocol import NotificationSink
from authlink.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from authlink.domain.protocols.token_generation_protocol import (
    TokenGenerationError,
    TokenGenerationProtocol,
)

__all__ = [
    "CredentialStore",
    "DuplicateEmailError",
    "LoggerProtocol",
    "NotificationSink",
    "PasswordHashingProtocol",
    "TokenGenerationError",
    "TokenGenerationProtocol",
]
