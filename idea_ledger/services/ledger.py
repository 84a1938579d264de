"""
IdeaLedger: one explicitly constructed store object wiring the collections.

Lifecycle:
1. open() (or the constructor) loads all four collections from the store
2. tallies are reconciled against the vote ledger
3. callers use .ideas / .votes / .reviews / .comments
4. close() releases the storage engine, if any
"""

import logging

from sqlalchemy import Engine

from ..core.config import Settings, get_settings
from ..core.database import close_storage, create_storage_engine, init_storage
from ..core.storage import KeyValueBlobStore, SqlAlchemyBlobBackend
from .comments import CommentLedger
from .directory import UserDirectory
from .ideas import IdeaRepository
from .reviews import ReviewWorkflow
from .votes import VoteLedger

logger = logging.getLogger(__name__)


class IdeaLedger:
    """Facade over the idea, vote, review and comment collections."""

    def __init__(
        self,
        store: KeyValueBlobStore,
        directory: UserDirectory | None = None,
        engine: Engine | None = None,
    ):
        self.store = store
        self.directory = directory
        self._engine = engine

        self.ideas = IdeaRepository(store)
        self.votes = VoteLedger(store, self.ideas)
        self.reviews = ReviewWorkflow(store, self.ideas, directory)
        self.comments = CommentLedger(store, directory)

        fixed = self.votes.reconcile()
        if fixed:
            logger.info(f"Reconciled tallies on {fixed} ideas")

    @classmethod
    def open(
        cls,
        settings: Settings | None = None,
        directory: UserDirectory | None = None,
    ) -> "IdeaLedger":
        """Build a ledger on the configured storage medium.

        If storage is disabled or cannot be initialized the ledger still
        opens, running purely in memory.
        """
        settings = settings or get_settings()
        if not settings.storage_enabled:
            logger.info("Storage disabled; running in memory only")
            return cls(KeyValueBlobStore(None), directory)

        engine = None
        try:
            # Unknown dialects and missing drivers raise here, before any connection
            engine = create_storage_engine(settings)
            init_storage(engine)
        except Exception as e:
            logger.warning(f"Could not initialize storage, running in memory only: {e}")
            if engine is not None:
                close_storage(engine)
            return cls(KeyValueBlobStore(None), directory)

        return cls(KeyValueBlobStore(SqlAlchemyBlobBackend(engine)), directory, engine)

    def close(self) -> None:
        if self._engine is not None:
            close_storage(self._engine)
            self._engine = None
