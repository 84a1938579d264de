"""
Tests for the Vote Ledger - Verifying Toggle and Tally Guarantees.

These tests verify:
1. TOGGLE: Repeating a vote withdraws it; the opposite vote flips it in place
2. UNIQUENESS: At most one vote per (idea, user) at any time
3. TALLIES: Idea tallies always equal the live vote counts
4. RECONCILE: Stale tallies loaded from storage are corrected
"""

import random
from collections import Counter
from datetime import datetime, timezone

import pytest

from idea_ledger.core import KeyValueBlobStore
from idea_ledger.schemas import Idea, IdeaCreate, VoteType
from idea_ledger.services import IdeaLedger


def assert_ledger_consistent(ledger: IdeaLedger) -> None:
    """Uniqueness per (idea, user) and tallies equal to live counts."""
    votes = ledger.votes.collection.current()
    pairs = Counter((v.idea_id, v.user_id) for v in votes)
    assert all(count == 1 for count in pairs.values())

    for idea in ledger.ideas.current():
        up = sum(1 for v in votes if v.idea_id == idea.idea_id and v.vote_type == VoteType.UPVOTE)
        down = sum(1 for v in votes if v.idea_id == idea.idea_id and v.vote_type == VoteType.DOWNVOTE)
        assert (idea.upvotes, idea.downvotes) == (up, down)


# =============================================================================
# TEST: TOGGLE
# =============================================================================


class TestToggleVote:

    @pytest.mark.parametrize("clicks", [1, 2, 3, 4, 5])
    def test_same_vote_toggles(self, ledger: IdeaLedger, clicks: int):
        """Odd number of identical votes leaves a vote, even leaves none."""
        idea = ledger.ideas.create()

        for _ in range(clicks):
            ledger.votes.vote(idea.idea_id, 5, VoteType.UPVOTE)

        vote = ledger.votes.get_user_vote(idea.idea_id, 5)
        if clicks % 2:
            assert vote is not None
            assert ledger.ideas.get_by_id(idea.idea_id).upvotes == 1
        else:
            assert vote is None
            assert ledger.ideas.get_by_id(idea.idea_id).upvotes == 0

    def test_first_vote_creates_record(self, ledger: IdeaLedger):
        idea = ledger.ideas.create()

        vote = ledger.votes.vote(idea.idea_id, 5, VoteType.DOWNVOTE)

        assert vote.vote_id == 1
        assert vote.vote_type == VoteType.DOWNVOTE
        assert ledger.votes.get_votes_for_idea(idea.idea_id) == [vote]

    def test_withdraw_returns_none(self, ledger: IdeaLedger):
        idea = ledger.ideas.create()
        ledger.votes.vote(idea.idea_id, 5, VoteType.UPVOTE)

        assert ledger.votes.vote(idea.idea_id, 5, VoteType.UPVOTE) is None

    def test_opposite_vote_flips_in_place(self, ledger: IdeaLedger):
        """Switching sides keeps the vote id and swaps the tallies."""
        idea = ledger.ideas.create()
        ledger.votes.vote(idea.idea_id, 4, VoteType.UPVOTE)
        original = ledger.votes.vote(idea.idea_id, 5, VoteType.UPVOTE)

        flipped = ledger.votes.vote(idea.idea_id, 5, VoteType.DOWNVOTE)

        assert flipped.vote_id == original.vote_id
        assert flipped.vote_type == VoteType.DOWNVOTE
        assert len(ledger.votes.get_votes_for_idea(idea.idea_id)) == 2
        updated = ledger.ideas.get_by_id(idea.idea_id)
        assert (updated.upvotes, updated.downvotes) == (1, 1)

    def test_accepts_wire_value(self, ledger: IdeaLedger):
        idea = ledger.ideas.create()

        vote = ledger.votes.vote(idea.idea_id, 5, "Downvote")

        assert vote.vote_type is VoteType.DOWNVOTE

    def test_users_vote_independently(self, ledger: IdeaLedger):
        idea = ledger.ideas.create()

        ledger.votes.vote(idea.idea_id, 4, VoteType.UPVOTE)
        ledger.votes.vote(idea.idea_id, 5, VoteType.UPVOTE)
        ledger.votes.vote(idea.idea_id, 5, VoteType.UPVOTE)

        assert ledger.votes.get_user_vote(idea.idea_id, 4) is not None
        assert ledger.votes.get_user_vote(idea.idea_id, 5) is None
        assert ledger.votes.tally(idea.idea_id) == (1, 0)


# =============================================================================
# TEST: INVARIANTS UNDER ARBITRARY SEQUENCES
# =============================================================================


class TestVoteInvariants:

    def test_random_sequence_keeps_invariants(self, ledger: IdeaLedger):
        """After every call: one vote per pair, tallies equal live counts."""
        for n in range(3):
            ledger.ideas.create(IdeaCreate(title=f"Idea {n}"))
        rng = random.Random(7)

        for _ in range(200):
            ledger.votes.vote(
                rng.randint(1, 3),
                rng.randint(1, 4),
                rng.choice([VoteType.UPVOTE, VoteType.DOWNVOTE]),
            )
            assert_ledger_consistent(ledger)

    def test_vote_ids_are_distinct(self, ledger: IdeaLedger):
        idea = ledger.ideas.create()

        votes = [ledger.votes.vote(idea.idea_id, user, VoteType.UPVOTE) for user in range(1, 6)]

        assert [v.vote_id for v in votes] == [1, 2, 3, 4, 5]

    def test_vote_on_unknown_idea_is_harmless(self, ledger: IdeaLedger):
        """The vote is recorded; there is no idea whose tallies could change."""
        vote = ledger.votes.vote(99, 5, VoteType.UPVOTE)

        assert vote is not None
        assert ledger.ideas.get_by_id(99) is None

    def test_votes_persist(self, store: KeyValueBlobStore, ledger: IdeaLedger):
        idea = ledger.ideas.create()
        ledger.votes.vote(idea.idea_id, 5, VoteType.UPVOTE)

        reopened = IdeaLedger(store)

        assert reopened.votes.get_user_vote(idea.idea_id, 5).vote_type == VoteType.UPVOTE
        assert reopened.ideas.get_by_id(idea.idea_id).upvotes == 1


# =============================================================================
# TEST: RECONCILE
# =============================================================================


class TestReconcile:

    def test_stale_tallies_corrected_on_open(self, store: KeyValueBlobStore):
        """Tallies written without their votes are recomputed from the ledger."""
        store.write(
            "ideas",
            [Idea(
                idea_id=1,
                title="Lost votes",
                submitted_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
                upvotes=3,
                downvotes=1,
            )],
            Idea,
        )

        ledger = IdeaLedger(store)

        idea = ledger.ideas.get_by_id(1)
        assert (idea.upvotes, idea.downvotes) == (0, 0)

    def test_reconcile_reports_nothing_when_consistent(self, ledger: IdeaLedger):
        idea = ledger.ideas.create()
        ledger.votes.vote(idea.idea_id, 5, VoteType.UPVOTE)

        assert ledger.votes.reconcile() == 0
