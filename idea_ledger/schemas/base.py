"""Base schemas and common types for Idea Ledger."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


# =============================================================================
# ENUMS
# =============================================================================


class IdeaStatus(str, Enum):
    """Status of an idea in its review lifecycle."""

    UNDER_REVIEW = "UnderReview"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class VoteType(str, Enum):
    """Direction of a peer vote."""

    UPVOTE = "Upvote"
    DOWNVOTE = "Downvote"


class ReviewDecision(str, Enum):
    """Outcome recorded by a reviewer."""

    APPROVE = "Approve"
    REJECT = "Reject"

    @property
    def resulting_status(self) -> IdeaStatus:
        """Status an idea moves to when a review with this decision lands."""
        if self is ReviewDecision.APPROVE:
            return IdeaStatus.APPROVED
        return IdeaStatus.REJECTED


# =============================================================================
# BASE SCHEMAS
# =============================================================================


class LedgerBaseModel(BaseModel):
    """Base model with common configuration.

    Python attributes are snake_case; aliases are the persisted field names.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )


class RecordModel(LedgerBaseModel):
    """Stored record. Frozen so every change is an object-level replace."""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        frozen=True,
    )


# =============================================================================
# ERROR RESPONSES
# =============================================================================


class ErrorResponse(LedgerBaseModel):
    """Standard error response format."""

    error: str
    message: str
