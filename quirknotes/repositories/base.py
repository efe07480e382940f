"""
Base Repository.

Collection-style data access shared by all repositories: insert,
find by predicate, update by predicate, delete by predicate. Callers pass
the full predicate, so ownership scoping is part of the query itself.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from quirknotes.core.logging import get_logger
from quirknotes.models.base import Base

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository with predicate-based CRUD operations.

    Subclasses set the model class:

        class UserRepository(BaseRepository[User]):
            model = User
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def insert(self, **values: Any) -> ModelType:
        """Insert a new record and return it with generated columns loaded."""
        instance = self.model(**values)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def find_one(self, *criteria: ColumnElement[bool]) -> ModelType | None:
        """Return the record matching all criteria, or None."""
        result = await self.session.execute(select(self.model).where(*criteria))
        return result.scalar_one_or_none()

    async def find_all(self, *criteria: ColumnElement[bool]) -> list[ModelType]:
        """Return every record matching all criteria."""
        result = await self.session.execute(select(self.model).where(*criteria))
        return list(result.scalars().all())

    async def update_where(
        self,
        criteria: list[ColumnElement[bool]],
        values: dict[str, Any],
    ) -> int:
        """
        Update records matching all criteria.

        Returns:
            Number of matched rows
        """
        result = await self.session.execute(
            update(self.model)
            .where(*criteria)
            .values(**values)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount

    async def delete_where(self, *criteria: ColumnElement[bool]) -> int:
        """
        Delete records matching all criteria.

        Returns:
            Number of deleted rows
        """
        result = await self.session.execute(
            delete(self.model)
            .where(*criteria)
            .execution_options(synchronize_session="evaluate")
        )
        return result.rowcount
