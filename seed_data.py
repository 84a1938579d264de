#!/usr/bin/env python3
"""
Seed Data Script for Idea Ledger

Creates a small "office improvements" scenario when the store is empty:
- 5 users in an in-memory directory (Admin, two Managers, two Employees)
- 4 ideas across Process, HR and Facilities
- Votes, comments and reviews so every status appears at least once:
  - Idea A: still under review, mixed votes
  - Idea B: approved after one review
  - Idea C: rejected, then approved on a second review (last review wins)
  - Idea D: rejected

Run with: python seed_data.py
"""

from idea_ledger.core import get_settings
from idea_ledger.schemas import (
    CommentCreate,
    IdeaCreate,
    ReviewCreate,
    ReviewDecision,
    UserRef,
    VoteType,
)
from idea_ledger.services import IdeaLedger, InMemoryUserDirectory

USERS = [
    UserRef(user_id=1, name="Admin User", email="admin@company.com", department="Executive"),
    UserRef(user_id=2, name="John Manager", email="john.manager@company.com", department="Engineering"),
    UserRef(user_id=3, name="Sarah HR", email="sarah.hr@company.com", department="HR"),
    UserRef(user_id=4, name="Alice Developer", email="alice.dev@company.com", department="Engineering"),
    UserRef(user_id=5, name="Bob Designer", email="bob.design@company.com", department="Product"),
]


def seed(ledger: IdeaLedger) -> bool:
    """Populate an empty ledger. Returns False if ideas already exist."""
    if ledger.ideas.current():
        print("Ideas already present, skipping seed.")
        return False

    meetings = ledger.ideas.create(IdeaCreate(
        title="Make meetings shorter",
        description="Try a standing 15 minute meeting to encourage concise updates.",
        category_id=1,
        category="Process",
        submitted_by_user_id=4,
    ))
    flexible = ledger.ideas.create(IdeaCreate(
        title="Introduce flexible hours",
        description="Allow employees to choose flexible start/end times to improve work-life balance.",
        category_id=2,
        category="HR",
        submitted_by_user_id=5,
    ))
    plants = ledger.ideas.create(IdeaCreate(
        title="More plants in the office",
        description="Add plants to open areas to improve air and mood.",
        category_id=3,
        category="Facilities",
        submitted_by_user_id=4,
    ))
    nap_pods = ledger.ideas.create(IdeaCreate(
        title="Nap pods",
        description="Install two nap pods on the second floor.",
        category_id=3,
        category="Facilities",
        submitted_by_user_id=5,
    ))

    # Votes
    ledger.votes.vote(meetings.idea_id, 2, VoteType.UPVOTE)
    ledger.votes.vote(meetings.idea_id, 5, VoteType.DOWNVOTE)
    for user in (1, 2, 3, 4):
        ledger.votes.vote(flexible.idea_id, user, VoteType.UPVOTE)
    ledger.votes.vote(plants.idea_id, 1, VoteType.UPVOTE)
    ledger.votes.vote(nap_pods.idea_id, 2, VoteType.DOWNVOTE)

    # Comments
    ledger.comments.add_comment(CommentCreate(
        idea_id=meetings.idea_id, user_id=2, text="Worth a two week trial.",
    ))
    ledger.comments.add_comment(CommentCreate(
        idea_id=flexible.idea_id, user_id=3, text="HR can draft a policy.",
    ))

    # Reviews
    ledger.reviews.add_review(ReviewCreate(
        idea_id=flexible.idea_id, reviewer_id=3,
        feedback="Approved for a pilot in Q3.", decision=ReviewDecision.APPROVE,
    ))
    ledger.reviews.add_review(ReviewCreate(
        idea_id=plants.idea_id, reviewer_id=2,
        feedback="No budget this quarter.", decision=ReviewDecision.REJECT,
    ))
    ledger.reviews.add_review(ReviewCreate(
        idea_id=plants.idea_id, reviewer_id=1,
        feedback="Budget found, go ahead.", decision=ReviewDecision.APPROVE,
    ))
    ledger.reviews.add_review(ReviewCreate(
        idea_id=nap_pods.idea_id, reviewer_id=1,
        feedback="Not a fit for our space.", decision=ReviewDecision.REJECT,
    ))
    return True


def main() -> None:
    ledger = IdeaLedger.open(get_settings(), InMemoryUserDirectory(USERS))
    try:
        if seed(ledger):
            print("\n" + "=" * 60)
            print("SEED DATA CREATED SUCCESSFULLY")
            print("=" * 60)
            for idea in ledger.ideas.current():
                print(
                    f"  #{idea.idea_id} {idea.title:<30} {idea.status.value:<12} "
                    f"+{idea.upvotes} -{idea.downvotes}"
                )
    finally:
        ledger.close()


if __name__ == "__main__":
    main()
