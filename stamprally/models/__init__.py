"""SQLAlchemy models."""

from stamprally.models.completion import Completion

__all__ = [
    "Completion",
]
