"""QuirkNotes: authenticated personal notes service."""

__version__ = "0.1.0"
