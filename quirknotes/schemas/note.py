"""
Note Schemas.

Pydantic schemas for note API request/response validation.
Request fields are optional here; the note service decides which are
required for each operation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str | None = Field(
        default=None,
        max_length=255,
        description="Note title",
        examples=["My First Note"],
    )
    content: str | None = Field(
        default=None,
        description="Note content",
        examples=["This is the content of my note."],
    )


class NoteUpdate(BaseModel):
    """Schema for editing a note. Only supplied fields change."""

    title: str | None = Field(
        default=None,
        max_length=255,
        description="Note title",
    )
    content: str | None = Field(
        default=None,
        description="Note content",
    )


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    owner: str = Field(description="Username of the note's creator")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class NoteCreatedResponse(BaseModel):
    """Confirmation returned by /postNote."""

    response: str
    inserted_id: str = Field(serialization_alias="insertedId")
