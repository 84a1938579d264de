"""Pydantic schemas for Idea Ledger."""

from .base import (
    ErrorResponse,
    IdeaStatus,
    LedgerBaseModel,
    RecordModel,
    ReviewDecision,
    VoteType,
)
from .records import (
    Comment,
    CommentCreate,
    Idea,
    IdeaCreate,
    Review,
    ReviewCreate,
    UserRef,
    Vote,
    VoteCast,
)

__all__ = [
    # Base
    "LedgerBaseModel",
    "RecordModel",
    "ErrorResponse",
    # Enums
    "IdeaStatus",
    "VoteType",
    "ReviewDecision",
    # Records
    "Idea",
    "Comment",
    "Vote",
    "Review",
    "UserRef",
    # Inputs
    "IdeaCreate",
    "CommentCreate",
    "ReviewCreate",
    "VoteCast",
]
