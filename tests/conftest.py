"""Shared fixtures: stores over working, failing and absent media."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from idea_ledger.core import (
    KeyValueBlobStore,
    MemoryBlobBackend,
    SqlAlchemyBlobBackend,
    init_storage,
)
from idea_ledger.schemas import UserRef
from idea_ledger.services import IdeaLedger, InMemoryUserDirectory


class FailingBlobBackend:
    """Medium that raises on every access, like a blocked or full store."""

    def get(self, key: str) -> bytes | None:
        raise OSError("storage access denied")

    def put(self, key: str, value: bytes) -> None:
        raise OSError("quota exceeded")


@pytest.fixture
def memory_backend() -> MemoryBlobBackend:
    return MemoryBlobBackend()


@pytest.fixture
def store(memory_backend: MemoryBlobBackend) -> KeyValueBlobStore:
    return KeyValueBlobStore(memory_backend)


@pytest.fixture
def failing_store() -> KeyValueBlobStore:
    return KeyValueBlobStore(FailingBlobBackend())


@pytest.fixture
def unavailable_store() -> KeyValueBlobStore:
    return KeyValueBlobStore(None)


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_storage(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_store(sqlite_engine) -> KeyValueBlobStore:
    return KeyValueBlobStore(SqlAlchemyBlobBackend(sqlite_engine))


@pytest.fixture
def directory() -> InMemoryUserDirectory:
    return InMemoryUserDirectory([
        UserRef(user_id=2, name="John Manager", email="john.manager@company.com"),
        UserRef(user_id=4, name="Alice Developer", email="alice.dev@company.com"),
        UserRef(user_id=5, name="Bob Designer", email="bob.design@company.com"),
    ])


@pytest.fixture
def ledger(store: KeyValueBlobStore, directory: InMemoryUserDirectory) -> IdeaLedger:
    return IdeaLedger(store, directory)
