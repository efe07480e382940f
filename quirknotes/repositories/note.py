"""
Note Repository.

Data access layer for notes. Every lookup, update, and delete takes the
owner alongside the id and matches on both, so another user's note and a
missing note look the same to the caller.
"""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from quirknotes.models.note import Note
from quirknotes.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """Repository for Note model."""

    model = Note

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def create(self, title: str, content: str, owner: str) -> Note:
        """Insert a note owned by the given username."""
        return await self.insert(title=title, content=content, owner=owner)

    async def get_owned(self, note_id: str, owner: str) -> Note | None:
        """Get a note by id if it belongs to owner."""
        return await self.find_one(Note.id == note_id, Note.owner == owner)

    async def list_by_owner(self, owner: str) -> list[Note]:
        """Get all notes belonging to owner, in no particular order."""
        return await self.find_all(Note.owner == owner)

    async def update_owned(self, note_id: str, owner: str, **fields: Any) -> bool:
        """
        Set the given fields on a note owned by owner.

        Returns:
            True if a note matched
        """
        matched = await self.update_where(
            [Note.id == note_id, Note.owner == owner],
            fields,
        )
        return matched > 0

    async def delete_owned(self, note_id: str, owner: str) -> bool:
        """
        Delete a note owned by owner.

        Returns:
            True if a note was deleted
        """
        deleted = await self.delete_where(Note.id == note_id, Note.owner == owner)
        return deleted > 0
