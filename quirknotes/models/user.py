"""
User Model.

Credential record: a unique username and its bcrypt hash.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from quirknotes.models.base import Base, TimestampMixin, UUIDMixin


class User(UUIDMixin, TimestampMixin, Base):
    """
    Registered user.

    Rows are created on registration and never updated or deleted.
    The unique index on username backs the service-level duplicate check,
    so two concurrent registrations cannot both succeed.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username={self.username!r})>"
