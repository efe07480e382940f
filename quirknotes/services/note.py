"""
Note Service.

Business logic layer for notes. Every operation authenticates the caller
through the Auth Gateway before the repository is touched, and every
repository call is scoped to the caller's username.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from quirknotes.core.auth import AuthGateway
from quirknotes.core.exceptions import NotFoundError, ValidationError
from quirknotes.core.utils import normalize_id
from quirknotes.models.note import Note
from quirknotes.repositories.note import NoteRepository
from quirknotes.schemas.note import NoteCreate, NoteUpdate
from quirknotes.services.base import BaseService

INVALID_NOTE_ID = "Invalid note ID."


class NoteService(BaseService):
    """
    Service for note CRUD with ownership enforcement.

    Input checks that need no identity (id format, required fields on
    create) run before authentication.
    """

    def __init__(self, session: AsyncSession, gateway: AuthGateway) -> None:
        super().__init__(session)
        self.repo = NoteRepository(session)
        self.gateway = gateway

    async def create_note(self, authorization: str | None, data: NoteCreate) -> Note:
        """
        Create a note owned by the caller.

        Raises:
            ValidationError: If title or content is missing or empty
            AuthenticationError: If the caller is not authenticated
        """
        self._validate_required(
            {"title": data.title, "content": data.content},
            ["title", "content"],
            message="Title and content are both required.",
        )
        username = self.gateway.authenticate(authorization)

        note = await self._execute_db_operation(
            "create_note",
            self.repo.create(title=data.title, content=data.content, owner=username),
        )

        self._log_operation("Note created", note_id=note.id, username=username)
        return note

    async def get_note(self, authorization: str | None, note_id: str) -> Note:
        """
        Get one of the caller's notes.

        Raises:
            ValidationError: If note_id is malformed
            AuthenticationError: If the caller is not authenticated
            NotFoundError: If the note does not exist or belongs to someone else
        """
        note_id = normalize_id(note_id, INVALID_NOTE_ID)
        username = self.gateway.authenticate(authorization)

        note = await self._execute_db_operation(
            "get_note",
            self.repo.get_owned(note_id, username),
        )
        if note is None:
            raise NotFoundError("Unable to find note with given ID.")
        return note

    async def list_notes(self, authorization: str | None) -> list[Note]:
        """
        List all of the caller's notes.

        Raises:
            AuthenticationError: If the caller is not authenticated
            NotFoundError: If the caller has no notes
        """
        username = self.gateway.authenticate(authorization)

        notes = await self._execute_db_operation(
            "list_notes",
            self.repo.list_by_owner(username),
        )
        if not notes:
            raise NotFoundError("No notes found for the user.")

        self._log_debug("Notes listed", username=username, count=len(notes))
        return notes

    async def update_note(
        self,
        authorization: str | None,
        note_id: str,
        data: NoteUpdate,
    ) -> Note:
        """
        Change the title and/or content of one of the caller's notes.

        Fields left out (or null) keep their current value.

        Raises:
            ValidationError: Malformed id, no fields supplied, or an empty field
            AuthenticationError: If the caller is not authenticated
            NotFoundError: If the note does not exist or belongs to someone else
        """
        note_id = normalize_id(note_id, INVALID_NOTE_ID)
        username = self.gateway.authenticate(authorization)

        update_data = data.model_dump(exclude_none=True)
        if not update_data:
            raise ValidationError("Either title or content must be provided for update.")
        self._validate_required(
            update_data,
            list(update_data),
            message="Title and content must not be empty.",
        )

        self._log_operation(
            "Updating note",
            note_id=note_id,
            username=username,
            fields=list(update_data),
        )
        matched = await self._execute_db_operation(
            "update_note",
            self.repo.update_owned(note_id, username, **update_data),
        )
        if not matched:
            raise NotFoundError(f"Note with ID {note_id} not found for the user.")

        note = await self._execute_db_operation(
            "get_note",
            self.repo.get_owned(note_id, username),
        )
        # Deleted between the update and the re-read
        if note is None:
            raise NotFoundError(f"Note with ID {note_id} not found for the user.")
        return note

    async def delete_note(self, authorization: str | None, note_id: str) -> str:
        """
        Delete one of the caller's notes.

        Returns:
            The normalized id of the deleted note

        Raises:
            ValidationError: If note_id is malformed
            AuthenticationError: If the caller is not authenticated
            NotFoundError: If the note does not exist or belongs to someone else
        """
        note_id = normalize_id(note_id, INVALID_NOTE_ID)
        username = self.gateway.authenticate(authorization)

        deleted = await self._execute_db_operation(
            "delete_note",
            self.repo.delete_owned(note_id, username),
        )
        if not deleted:
            raise NotFoundError(f"Note with ID {note_id} not found for the user.")

        self._log_operation("Note deleted", note_id=note_id, username=username)
        return note_id
