"""SqlCredentialStore - SQLAlchemy implementation of the CredentialStore protocol.

Adapter for hexagonal architecture. Maps between domain entities and
database models. Each call opens its own session, so every operation is an
independent single-record transaction.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError

from authlink.domain.entities import SessionToken, User, VerificationToken
from authlink.domain.protocols.credential_store import DuplicateEmailError
from authlink.infrastructure.persistence.database import Database
from authlink.infrastructure.persistence.models import (
    SessionTokenModel,
    UserModel,
    VerificationTokenModel,
)


def _user_to_domain(model: UserModel) -> User:
    return User(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        email=model.email,
        password_hash=model.password_hash,
        is_verified=model.is_verified,
        created_at=model.created_at,
    )


def _token_to_domain(model: VerificationTokenModel) -> VerificationToken:
    return VerificationToken(
        id=model.id,
        user_id=model.user_id,
        token=model.token,
        created_at=model.created_at,
    )


def _session_to_domain(model: SessionTokenModel) -> SessionToken:
    return SessionToken(
        id=model.id,
        user_id=model.user_id,
        token=model.token,
        created_at=model.created_at,
        expires_at=model.expires_at,
    )


class SqlCredentialStore:
    """SQLAlchemy implementation of CredentialStore.

    This class does NOT inherit from the protocol (structural typing).

    Attributes:
        database: Database manager providing sessions.

    Example:
        >>> store = SqlCredentialStore(Database(settings.database_url))
        >>> user = await store.find_user_by_email("a@b.com")
    """

    def __init__(self, database: Database) -> None:
        self.database = database

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    async def find_user_by_email(self, email: str) -> User | None:
        async with self.database.get_session() as session:
            stmt = select(UserModel).where(UserModel.email == email)
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            return _user_to_domain(model) if model else None

    async def insert_user(self, user: User) -> UUID:
        """Create new user.

        Raises:
            DuplicateEmailError: If the unique email index rejects the row.
        """
        model = UserModel(
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            password_hash=user.password_hash,
            is_verified=user.is_verified,
            created_at=user.created_at,
        )
        try:
            async with self.database.get_session() as session:
                session.add(model)
                await session.flush()
                user_id = model.id
        except IntegrityError as e:
            raise DuplicateEmailError(user.email) from e

        user.id = user_id
        return user_id

    async def find_user_by_id(self, user_id: UUID) -> User | None:
        async with self.database.get_session() as session:
            model = await session.get(UserModel, user_id)
            return _user_to_domain(model) if model else None

    async def set_user_verified(self, user_id: UUID) -> None:
        async with self.database.get_session() as session:
            stmt = (
                update(UserModel)
                .where(UserModel.id == user_id)
                .values(is_verified=True)
            )
            await session.execute(stmt)

    # ------------------------------------------------------------------
    # Verification tokens
    # ------------------------------------------------------------------

    async def find_token_by_user(self, user_id: UUID) -> VerificationToken | None:
        async with self.database.get_session() as session:
            stmt = select(VerificationTokenModel).where(
                VerificationTokenModel.user_id == user_id
            )
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            return _token_to_domain(model) if model else None

    async def find_token_by_user_and_secret(
        self, user_id: UUID, secret: str
    ) -> VerificationToken | None:
        async with self.database.get_session() as session:
            stmt = (
                select(VerificationTokenModel)
                .where(VerificationTokenModel.user_id == user_id)
                .where(VerificationTokenModel.token == secret)
            )
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            return _token_to_domain(model) if model else None

    async def insert_token(self, token: VerificationToken) -> UUID:
        model = VerificationTokenModel(
            user_id=token.user_id,
            token=token.token,
            created_at=token.created_at,
        )
        async with self.database.get_session() as session:
            session.add(model)
            await session.flush()
            token_id = model.id

        token.id = token_id
        return token_id

    async def replace_token_secret(
        self, token_id: UUID, new_secret: str, new_created_at: datetime
    ) -> None:
        async with self.database.get_session() as session:
            stmt = (
                update(VerificationTokenModel)
                .where(VerificationTokenModel.id == token_id)
                .values(token=new_secret, created_at=new_created_at)
            )
            await session.execute(stmt)

    async def delete_token(self, token_id: UUID) -> None:
        async with self.database.get_session() as session:
            stmt = delete(VerificationTokenModel).where(
                VerificationTokenModel.id == token_id
            )
            await session.execute(stmt)

    # ------------------------------------------------------------------
    # Session tokens
    # ------------------------------------------------------------------

    async def insert_session_token(self, session_token: SessionToken) -> UUID:
        model = SessionTokenModel(
            user_id=session_token.user_id,
            token=session_token.token,
            created_at=session_token.created_at,
            expires_at=session_token.expires_at,
        )
        async with self.database.get_session() as session:
            session.add(model)
            await session.flush()
            token_id = model.id

        session_token.id = token_id
        return token_id

    async def find_session_token(self, secret: str) -> SessionToken | None:
        async with self.database.get_session() as session:
            stmt = select(SessionTokenModel).where(SessionTokenModel.token == secret)
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            return _session_to_domain(model) if model else None
