"""SQLAlchemy ORM models for the blob-backed key-value store.

Each record collection is stored as a single row holding the serialized
array of records. The table knows nothing about record contents.
"""

from sqlalchemy import LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class BlobEntry(Base, TimestampMixin):
    """One named collection, stored as an opaque byte blob."""

    __tablename__ = "blob_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    def __repr__(self) -> str:
        return f"<BlobEntry key={self.key!r} bytes={len(self.value or b'')}>"
