"""
Notes API Endpoints.

REST API endpoints for the caller's own notes. All routes require an
``Authorization: Bearer <token>`` header; the note service checks it.
"""

from fastapi import APIRouter

from quirknotes.core.dependencies import AuthorizationHeader, NoteServiceDep
from quirknotes.schemas.base import DataResponse, MessageResponse
from quirknotes.schemas.note import (
    NoteCreate,
    NoteCreatedResponse,
    NoteResponse,
    NoteUpdate,
)

router = APIRouter()


@router.post(
    "/postNote",
    response_model=NoteCreatedResponse,
    summary="Create a note",
    description="Create a note with a title and content, owned by the caller.",
)
async def post_note(
    service: NoteServiceDep,
    data: NoteCreate | None = None,
    authorization: AuthorizationHeader = None,
) -> NoteCreatedResponse:
    """Create a new note."""
    note = await service.create_note(authorization, data or NoteCreate())
    return NoteCreatedResponse(response="Note added successfully.", inserted_id=note.id)


@router.get(
    "/getNote/{note_id}",
    response_model=DataResponse[NoteResponse],
    summary="Get a note",
    description="Get one of the caller's notes by ID.",
)
async def get_note(
    note_id: str,
    service: NoteServiceDep,
    authorization: AuthorizationHeader = None,
) -> DataResponse[NoteResponse]:
    """Get a note by ID."""
    note = await service.get_note(authorization, note_id)
    return DataResponse[NoteResponse](response=NoteResponse.model_validate(note))


@router.get(
    "/getAllNotes",
    response_model=DataResponse[list[NoteResponse]],
    summary="List notes",
    description="Get all of the caller's notes. Responds 404 when there are none.",
)
async def get_all_notes(
    service: NoteServiceDep,
    authorization: AuthorizationHeader = None,
) -> DataResponse[list[NoteResponse]]:
    """List the caller's notes."""
    notes = await service.list_notes(authorization)
    return DataResponse[list[NoteResponse]](
        response=[NoteResponse.model_validate(note) for note in notes]
    )


@router.delete(
    "/deleteNote/{note_id}",
    response_model=MessageResponse,
    summary="Delete a note",
    description="Permanently delete one of the caller's notes.",
)
async def delete_note(
    note_id: str,
    service: NoteServiceDep,
    authorization: AuthorizationHeader = None,
) -> MessageResponse:
    """Delete a note."""
    deleted_id = await service.delete_note(authorization, note_id)
    return MessageResponse(response=f"Document with ID {deleted_id} properly deleted.")


@router.patch(
    "/editNote/{note_id}",
    response_model=MessageResponse,
    summary="Edit a note",
    description="Update the title and/or content of one of the caller's notes.",
)
async def edit_note(
    note_id: str,
    service: NoteServiceDep,
    data: NoteUpdate | None = None,
    authorization: AuthorizationHeader = None,
) -> MessageResponse:
    """Update a note."""
    note = await service.update_note(authorization, note_id, data or NoteUpdate())
    return MessageResponse(response=f"Document with ID {note.id} properly updated.")
