"""
Note Model.

A personal text note owned by exactly one user.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from quirknotes.models.base import Base, TimestampMixin, UUIDMixin


class Note(UUIDMixin, TimestampMixin, Base):
    """
    Note database model.

    owner holds the username of the creator. It is set once at creation
    and is part of every lookup predicate.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    owner: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, owner={self.owner!r}, title={self.title!r})>"
