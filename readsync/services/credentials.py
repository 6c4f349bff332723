"""Credential store: account lookup and creation."""
import logging

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from readsync.core.errors import StorageFailure, UserExists
from readsync.core.security import DEFAULT_SALT_LENGTH, generate_salt, password_digest
from readsync.models.user import User

logger = logging.getLogger(__name__)


class CredentialStore:
    def __init__(self, db: AsyncSession, salt_length: int = DEFAULT_SALT_LENGTH):
        self.db = db
        self.salt_length = salt_length

    async def lookup_user(self, name: str) -> User | None:
        try:
            result = await self.db.execute(select(User).where(User.name == name))
        except SQLAlchemyError as exc:
            logger.exception("user lookup failed")
            raise StorageFailure() from exc
        return result.scalar_one_or_none()

    async def create_user(self, name: str, password: str) -> None:
        """Insert a new account, or raise UserExists if the name is taken.

        Existence check and insert are one statement: the unique constraint on
        users.name decides, so concurrent creations of the same name cannot
        both succeed.
        """
        salt = generate_salt(self.salt_length)
        stmt = (
            sqlite_insert(User.__table__)
            .values(name=name, password=password_digest(password, salt), salt=salt)
            .on_conflict_do_nothing(index_elements=["name"])
        )
        try:
            result = await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.exception("user creation failed")
            raise StorageFailure() from exc

        if result.rowcount == 0:
            raise UserExists()
        logger.info("created user %r", name)
