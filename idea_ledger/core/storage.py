"""
Key-value blob store: safe read/write of named record collections.

Every collection is serialized as one JSON array of flat records and stored
under its key. The backing medium may be missing, unreachable or full; none
of that reaches the caller:

- read() on an unavailable medium, an absent key or unparsable bytes
  returns an empty list
- write() that fails is logged and dropped; in-memory state stays the only
  copy of the change for the rest of the process

load() and save() expose the underlying StorageResult for callers that want
to know whether a read or write degraded.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, Sequence, TypeVar

from pydantic import TypeAdapter
from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from ..models import BlobEntry
from .database import create_session_factory

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# RESULT TYPE
# =============================================================================


class StorageStatus(str, Enum):
    OK = "ok"
    MISSING = "missing"  # Key never written
    UNAVAILABLE = "unavailable"  # No backing medium
    CORRUPT = "corrupt"  # Stored bytes failed to parse
    FAILED = "failed"  # Medium raised during access


@dataclass(frozen=True)
class StorageResult(Generic[T]):
    """Outcome of a single load or save."""

    status: StorageStatus
    records: list[T] = field(default_factory=list)
    detail: str | None = None

    @property
    def degraded(self) -> bool:
        """True when the medium did not behave as a working store."""
        return self.status not in (StorageStatus.OK, StorageStatus.MISSING)


# =============================================================================
# BACKENDS
# =============================================================================


class BlobBackend(Protocol):
    """Byte-oriented key-value medium."""

    def get(self, key: str) -> bytes | None: ...

    def put(self, key: str, value: bytes) -> None: ...


class MemoryBlobBackend:
    """Dict-backed medium; lives as long as the process."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._blobs: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._blobs.get(key)

    def put(self, key: str, value: bytes) -> None:
        self._blobs[key] = value


class SqlAlchemyBlobBackend:
    """Medium backed by the ``blob_entries`` table on any SQLAlchemy engine."""

    def __init__(self, engine: Engine):
        self._engine = engine
        self._session_factory: sessionmaker[Session] = create_session_factory(engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def get(self, key: str) -> bytes | None:
        with self._session_factory() as session:
            entry = session.get(BlobEntry, key)
            return entry.value if entry else None

    def put(self, key: str, value: bytes) -> None:
        with self._session_factory() as session:
            entry = session.get(BlobEntry, key)
            if entry is None:
                session.add(BlobEntry(key=key, value=value))
            else:
                entry.value = value
            session.commit()


# =============================================================================
# STORE
# =============================================================================


class KeyValueBlobStore:
    """
    Safe read/write of record collections over an optional backend.

    Passing ``backend=None`` models an unavailable medium: every read is
    empty and every write is a no-op.
    """

    def __init__(self, backend: BlobBackend | None):
        self._backend = backend
        self._adapters: dict[Any, TypeAdapter] = {}

    @property
    def available(self) -> bool:
        return self._backend is not None

    # =========================================================================
    # RESULT-BEARING API
    # =========================================================================

    def load(self, key: str, record_type: type[T]) -> StorageResult[T]:
        """Read a collection and report how the read went."""
        if self._backend is None:
            return StorageResult(StorageStatus.UNAVAILABLE)

        try:
            raw = self._backend.get(key)
        except Exception as e:
            logger.warning(f"Storage read failed for {key!r}: {e}")
            return StorageResult(StorageStatus.FAILED, detail=str(e))

        if not raw:
            return StorageResult(StorageStatus.MISSING)

        try:
            records = self._adapter(record_type).validate_json(raw)
        except ValueError as e:
            # pydantic.ValidationError covers both bad JSON and bad records
            logger.warning(f"Discarding unreadable collection {key!r}: {e}")
            return StorageResult(StorageStatus.CORRUPT, detail=str(e))

        return StorageResult(StorageStatus.OK, records=records)

    def save(
        self,
        key: str,
        records: Sequence[T],
        record_type: type[T],
    ) -> StorageResult[T]:
        """Write a collection and report how the write went."""
        if self._backend is None:
            return StorageResult(StorageStatus.UNAVAILABLE, records=list(records))

        try:
            payload = self._adapter(record_type).dump_json(list(records), by_alias=True)
            self._backend.put(key, payload)
        except Exception as e:
            logger.warning(f"Storage write failed for {key!r}, keeping in-memory state only: {e}")
            return StorageResult(StorageStatus.FAILED, records=list(records), detail=str(e))

        return StorageResult(StorageStatus.OK, records=list(records))

    # =========================================================================
    # ALWAYS-SUCCEEDS API
    # =========================================================================

    def read(self, key: str, record_type: type[T]) -> list[T]:
        """Read a collection; any failure reads as an empty collection."""
        return self.load(key, record_type).records

    def write(self, key: str, records: Sequence[T], record_type: type[T]) -> None:
        """Persist a collection; failures are absorbed."""
        self.save(key, records, record_type)

    def _adapter(self, record_type: type[T]) -> TypeAdapter:
        adapter = self._adapters.get(record_type)
        if adapter is None:
            adapter = TypeAdapter(list[record_type])  # type: ignore[valid-type]
            self._adapters[record_type] = adapter
        return adapter
