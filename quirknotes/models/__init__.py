# Database models package
from quirknotes.models.base import Base
from quirknotes.models.note import Note
from quirknotes.models.user import User

__all__ = ["Base", "Note", "User"]
