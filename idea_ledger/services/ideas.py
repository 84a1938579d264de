"""Idea repository: the single source of truth observers see."""

import logging
from datetime import datetime, timezone
from typing import Any

from ..core.storage import KeyValueBlobStore
from ..schemas import Idea, IdeaCreate, IdeaStatus
from .reactive import Observer, ReactiveCollection, Subscription, next_identifier

logger = logging.getLogger(__name__)

IDEAS_KEY = "ideas"


class IdeaRepository:
    """
    Reactive collection of ideas plus the idea-specific mutators.

    Status and tallies are only ever changed through ``_update``, which
    copies the one affected record and swaps the whole snapshot.
    """

    def __init__(self, store: KeyValueBlobStore):
        self._collection: ReactiveCollection[Idea] = ReactiveCollection(
            store, IDEAS_KEY, Idea
        )

    def current(self) -> tuple[Idea, ...]:
        return self._collection.current()

    def subscribe(self, observer: Observer) -> Subscription:
        return self._collection.subscribe(observer)

    def create(self, data: IdeaCreate | None = None) -> Idea:
        """Create an idea with defaults for anything unset; newest first."""
        data = data or IdeaCreate()
        ideas = self._collection.current()

        idea = Idea(
            idea_id=next_identifier(ideas, "idea_id"),
            title=data.title or "Untitled",
            description=data.description or "",
            category_id=data.category_id or 0,
            category=data.category or "",
            submitted_by_user_id=data.submitted_by_user_id or 0,
            submitted_date=data.submitted_date or datetime.now(timezone.utc),
            status=data.status or IdeaStatus.UNDER_REVIEW,
            upvotes=0,
            downvotes=0,
        )

        self._collection.replace((idea, *ideas))
        logger.info(f"Created idea {idea.idea_id}: {idea.title!r}")
        return idea

    def get_by_id(self, idea_id: int) -> Idea | None:
        for idea in self._collection.current():
            if idea.idea_id == idea_id:
                return idea
        return None

    def list_ideas(self, status: IdeaStatus | None = None) -> list[Idea]:
        """Snapshot as a list, optionally filtered by status."""
        ideas = self._collection.current()
        if status is None:
            return list(ideas)
        return [i for i in ideas if i.status == status]

    def set_status(self, idea_id: int, status: IdeaStatus) -> Idea | None:
        return self._update(idea_id, status=IdeaStatus(status))

    def set_tallies(self, idea_id: int, upvotes: int, downvotes: int) -> Idea | None:
        return self._update(idea_id, upvotes=upvotes, downvotes=downvotes)

    def _update(self, idea_id: int, **changes: Any) -> Idea | None:
        ideas = list(self._collection.current())
        for index, idea in enumerate(ideas):
            if idea.idea_id == idea_id:
                ideas[index] = idea.model_copy(update=changes)
                self._collection.replace(ideas)
                return ideas[index]

        logger.debug(f"Idea {idea_id} not found, ignoring update {changes}")
        return None
