"""
User Repository.

Credential store: username to password-hash records.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from quirknotes.core.exceptions import ConflictError
from quirknotes.models.user import User
from quirknotes.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User records. No update or delete is exposed."""

    model = User

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def get_by_username(self, username: str) -> User | None:
        """Find a user by exact username."""
        return await self.find_one(User.username == username)

    async def register(self, username: str, password_hash: str) -> User:
        """
        Store a new user.

        The existence check and the insert are separate statements; the
        unique index on username rejects a concurrent duplicate at flush.

        Raises:
            ConflictError: If the username is already taken
        """
        if await self.get_by_username(username) is not None:
            raise ConflictError("Username already exists.")

        return await self.insert(username=username, password_hash=password_hash)
