"""
Core Utilities.

Shared utility functions used across the backend.
"""

from datetime import datetime, timezone
from uuid import UUID

from quirknotes.core.exceptions import ValidationError


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application are timezone-naive
    and assumed to be UTC.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def normalize_id(value: str, message: str = "Invalid ID.") -> str:
    """
    Validate an identifier against the storage id encoding (UUID).

    Returns the canonical lowercase hyphenated form so lookups match
    the stored value regardless of how the client wrote it.

    Raises:
        ValidationError: If the value is not a well-formed UUID
    """
    try:
        return str(UUID(value))
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(message, details={"id": value})
