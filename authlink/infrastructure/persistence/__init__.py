"""Persistence infrastructure.

- Base model and database session management (SQLAlchemy async)
- Credential store implementations (SQL and in-memory)
"""

from authlink.infrastructure.persistence.base import BaseModel
from authlink.infrastructure.persistence.database import Database
from authlink.infrastructure.persistence.memory_credential_store import (
    InMemoryCredentialStore,
)
from authlink.infrastructure.persistence.sql_credential_store import (
    SqlCredentialStore,
)

__all__ = [
    "BaseModel",
    "Database",
    "InMemoryCredentialStore",
    "SqlCredentialStore",
]
