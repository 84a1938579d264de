"""Pydantic schemas for ideas, comments, votes and reviews.

Field aliases (``ideaID``, ``submittedDate`` ...) are the storage contract:
another process reading the same store sees exactly these names.
"""

from datetime import datetime

from pydantic import Field

from .base import (
    IdeaStatus,
    LedgerBaseModel,
    RecordModel,
    ReviewDecision,
    VoteType,
)


# =============================================================================
# STORED RECORDS
# =============================================================================


class Idea(RecordModel):
    """A submitted idea with its cached vote tallies."""

    idea_id: int = Field(..., alias="ideaID")
    title: str
    description: str = ""
    category_id: int = Field(default=0, alias="categoryID")
    category: str = ""
    submitted_by_user_id: int = Field(default=0, alias="submittedByUserID")
    submitted_date: datetime = Field(..., alias="submittedDate")
    status: IdeaStatus = IdeaStatus.UNDER_REVIEW
    upvotes: int = Field(default=0, ge=0)
    downvotes: int = Field(default=0, ge=0)


class Comment(RecordModel):
    """Append-only comment on an idea."""

    comment_id: int = Field(..., alias="commentID")
    idea_id: int = Field(..., alias="ideaID")
    user_id: int = Field(..., alias="userID")
    text: str = ""
    created_date: datetime = Field(..., alias="createdDate")
    user_name: str | None = Field(default=None, alias="userName")


class Vote(RecordModel):
    """One user's current vote on one idea."""

    vote_id: int = Field(..., alias="voteID")
    idea_id: int = Field(..., alias="ideaID")
    user_id: int = Field(..., alias="userID")
    vote_type: VoteType = Field(..., alias="voteType")


class Review(RecordModel):
    """Append-only reviewer feedback and decision."""

    review_id: int = Field(..., alias="reviewID")
    idea_id: int = Field(..., alias="ideaID")
    reviewer_id: int = Field(..., alias="reviewerID")
    reviewer_name: str | None = Field(default=None, alias="reviewerName")
    feedback: str = ""
    decision: ReviewDecision
    review_date: datetime = Field(..., alias="reviewDate")


class UserRef(LedgerBaseModel):
    """Minimal user reference returned by the user directory."""

    user_id: int = Field(..., alias="userID")
    name: str
    email: str | None = None
    department: str | None = None


# =============================================================================
# PARTIAL INPUTS
# =============================================================================


class IdeaCreate(LedgerBaseModel):
    """Partial idea; unset fields are defaulted. Tallies are not accepted."""

    title: str | None = None
    description: str | None = None
    category_id: int | None = Field(default=None, alias="categoryID")
    category: str | None = None
    submitted_by_user_id: int | None = Field(default=None, alias="submittedByUserID")
    submitted_date: datetime | None = Field(default=None, alias="submittedDate")
    status: IdeaStatus | None = None


class CommentCreate(LedgerBaseModel):
    """Partial comment; unset fields are defaulted."""

    idea_id: int | None = Field(default=None, alias="ideaID")
    user_id: int | None = Field(default=None, alias="userID")
    text: str | None = None
    created_date: datetime | None = Field(default=None, alias="createdDate")
    user_name: str | None = Field(default=None, alias="userName")


class ReviewCreate(LedgerBaseModel):
    """Partial review; a missing decision counts as a rejection."""

    idea_id: int | None = Field(default=None, alias="ideaID")
    reviewer_id: int | None = Field(default=None, alias="reviewerID")
    reviewer_name: str | None = Field(default=None, alias="reviewerName")
    feedback: str | None = None
    decision: ReviewDecision | None = None
    review_date: datetime | None = Field(default=None, alias="reviewDate")


class VoteCast(LedgerBaseModel):
    """Body of a vote request."""

    user_id: int = Field(..., alias="userID")
    vote_type: VoteType = Field(..., alias="voteType")
