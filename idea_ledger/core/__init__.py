"""Core application utilities."""

from .config import Settings, get_settings
from .database import (
    close_storage,
    create_session_factory,
    create_storage_engine,
    init_storage,
)
from .storage import (
    BlobBackend,
    KeyValueBlobStore,
    MemoryBlobBackend,
    SqlAlchemyBlobBackend,
    StorageResult,
    StorageStatus,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Database
    "create_storage_engine",
    "create_session_factory",
    "init_storage",
    "close_storage",
    # Storage
    "BlobBackend",
    "KeyValueBlobStore",
    "MemoryBlobBackend",
    "SqlAlchemyBlobBackend",
    "StorageResult",
    "StorageStatus",
]
