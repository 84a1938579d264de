"""Comment ledger: append-only comments, no derived state."""

import logging
from datetime import datetime, timezone

from ..core.storage import KeyValueBlobStore
from ..schemas import Comment, CommentCreate
from .directory import UserDirectory, resolve_display_name
from .reactive import ReactiveCollection, next_identifier

logger = logging.getLogger(__name__)

COMMENTS_KEY = "comments"


class CommentLedger:
    def __init__(self, store: KeyValueBlobStore, directory: UserDirectory | None = None):
        self._collection: ReactiveCollection[Comment] = ReactiveCollection(
            store, COMMENTS_KEY, Comment
        )
        self._directory = directory

    @property
    def collection(self) -> ReactiveCollection[Comment]:
        return self._collection

    def add_comment(self, data: CommentCreate | None = None) -> Comment:
        data = data or CommentCreate()
        comments = self._collection.current()
        user_id = data.user_id or 0

        comment = Comment(
            comment_id=next_identifier(comments, "comment_id"),
            idea_id=data.idea_id or 0,
            user_id=user_id,
            text=data.text or "",
            created_date=data.created_date or datetime.now(timezone.utc),
            user_name=resolve_display_name(self._directory, user_id, data.user_name),
        )
        self._collection.replace((*comments, comment))
        logger.debug(f"Comment {comment.comment_id} added to idea {comment.idea_id}")
        return comment

    def get_comments_for_idea(self, idea_id: int) -> list[Comment]:
        return sorted(
            (c for c in self._collection.current() if c.idea_id == idea_id),
            key=lambda c: c.comment_id,
        )
