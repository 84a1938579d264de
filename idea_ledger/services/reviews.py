"""Review workflow: append reviews and project each decision onto idea status."""

import logging
from datetime import datetime, timezone

from ..core.storage import KeyValueBlobStore
from ..schemas import Review, ReviewCreate, ReviewDecision
from .directory import UserDirectory, resolve_display_name
from .ideas import IdeaRepository
from .reactive import ReactiveCollection, next_identifier

logger = logging.getLogger(__name__)

REVIEWS_KEY = "reviews"


class ReviewWorkflow:
    """
    Persisted reviews. Every review overwrites the idea's status with its
    decision; the latest review wins and no status is terminal.
    """

    def __init__(
        self,
        store: KeyValueBlobStore,
        ideas: IdeaRepository,
        directory: UserDirectory | None = None,
    ):
        self._collection: ReactiveCollection[Review] = ReactiveCollection(
            store, REVIEWS_KEY, Review
        )
        self._ideas = ideas
        self._directory = directory

    @property
    def collection(self) -> ReactiveCollection[Review]:
        return self._collection

    def add_review(self, data: ReviewCreate | None = None) -> Review:
        data = data or ReviewCreate()
        reviews = self._collection.current()
        reviewer_id = data.reviewer_id or 0

        review = Review(
            review_id=next_identifier(reviews, "review_id"),
            idea_id=data.idea_id or 0,
            reviewer_id=reviewer_id,
            reviewer_name=resolve_display_name(
                self._directory, reviewer_id, data.reviewer_name
            ),
            feedback=data.feedback or "",
            decision=data.decision or ReviewDecision.REJECT,
            review_date=data.review_date or datetime.now(timezone.utc),
        )
        self._collection.replace((*reviews, review))

        status = ReviewDecision(review.decision).resulting_status
        self._ideas.set_status(review.idea_id, status)
        logger.info(
            f"Review {review.review_id} on idea {review.idea_id}: "
            f"{review.decision.value} -> {status.value}"
        )
        return review

    def get_reviews_for_idea(self, idea_id: int) -> list[Review]:
        return sorted(
            (r for r in self._collection.current() if r.idea_id == idea_id),
            key=lambda r: r.review_id,
        )

    def latest_review(self, idea_id: int) -> Review | None:
        """The review whose decision the idea's status currently reflects."""
        reviews = self.get_reviews_for_idea(idea_id)
        return reviews[-1] if reviews else None
