"""SQLAlchemy ORM models for Idea Ledger."""

from .base import Base, TimestampMixin
from .models import BlobEntry

__all__ = [
    "Base",
    "TimestampMixin",
    "BlobEntry",
]
