"""API routes for ideas, votes, comments and reviews."""

from fastapi import APIRouter, HTTPException, Query, status

from ..core.dependencies import LedgerDep
from ..schemas import (
    Comment,
    CommentCreate,
    Idea,
    IdeaCreate,
    IdeaStatus,
    Review,
    ReviewCreate,
    Vote,
    VoteCast,
)
from ..services import IdeaLedger

router = APIRouter(prefix="/ideas", tags=["ideas"])


# =============================================================================
# HELPERS
# =============================================================================


def get_idea_or_404(ledger: IdeaLedger, idea_id: int) -> Idea:
    idea = ledger.ideas.get_by_id(idea_id)
    if idea is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Idea {idea_id} not found",
        )
    return idea


# =============================================================================
# IDEAS
# =============================================================================


@router.get("", response_model=list[Idea])
def list_ideas(
    ledger: LedgerDep,
    status_filter: IdeaStatus | None = Query(default=None, alias="status"),
):
    """List ideas, newest first."""
    return ledger.ideas.list_ideas(status_filter)


@router.post("", response_model=Idea, status_code=status.HTTP_201_CREATED)
def create_idea(data: IdeaCreate, ledger: LedgerDep):
    """Submit a new idea. It starts under review with no votes."""
    return ledger.ideas.create(data)


@router.get("/{idea_id}", response_model=Idea)
def get_idea(idea_id: int, ledger: LedgerDep):
    return get_idea_or_404(ledger, idea_id)


# =============================================================================
# VOTES
# =============================================================================


@router.post("/{idea_id}/votes", response_model=Idea)
def cast_vote(idea_id: int, data: VoteCast, ledger: LedgerDep):
    """
    Cast, switch or withdraw a vote.

    Repeating the same vote withdraws it. Returns the idea with its
    recomputed tallies.
    """
    get_idea_or_404(ledger, idea_id)
    ledger.votes.vote(idea_id, data.user_id, data.vote_type)
    return get_idea_or_404(ledger, idea_id)


@router.get("/{idea_id}/votes", response_model=list[Vote])
def list_votes(idea_id: int, ledger: LedgerDep):
    get_idea_or_404(ledger, idea_id)
    return ledger.votes.get_votes_for_idea(idea_id)


# =============================================================================
# COMMENTS
# =============================================================================


@router.get("/{idea_id}/comments", response_model=list[Comment])
def list_comments(idea_id: int, ledger: LedgerDep):
    get_idea_or_404(ledger, idea_id)
    return ledger.comments.get_comments_for_idea(idea_id)


@router.post(
    "/{idea_id}/comments",
    response_model=Comment,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(idea_id: int, data: CommentCreate, ledger: LedgerDep):
    get_idea_or_404(ledger, idea_id)
    return ledger.comments.add_comment(data.model_copy(update={"idea_id": idea_id}))


# =============================================================================
# REVIEWS
# =============================================================================


@router.get("/{idea_id}/reviews", response_model=list[Review])
def list_reviews(idea_id: int, ledger: LedgerDep):
    get_idea_or_404(ledger, idea_id)
    return ledger.reviews.get_reviews_for_idea(idea_id)


@router.post(
    "/{idea_id}/reviews",
    response_model=Review,
    status_code=status.HTTP_201_CREATED,
)
def add_review(idea_id: int, data: ReviewCreate, ledger: LedgerDep):
    """Record a review. The idea's status follows the latest decision."""
    get_idea_or_404(ledger, idea_id)
    return ledger.reviews.add_review(data.model_copy(update={"idea_id": idea_id}))
