"""
Vote ledger: toggleable one-vote-per-user-per-idea semantics.

A user holds at most one vote per idea:
- voting with no existing vote adds one
- repeating the same vote withdraws it
- voting the other way flips the existing record in place

Tallies on the idea are recomputed from the ledger after every vote, never
incremented, so a previously lost write cannot leave them drifting.
"""

import logging

from ..core.storage import KeyValueBlobStore
from ..schemas import Vote, VoteType
from .ideas import IdeaRepository
from .reactive import ReactiveCollection, next_identifier

logger = logging.getLogger(__name__)

VOTES_KEY = "votes"


class VoteLedger:
    """Persisted votes plus tally recomputation into the idea repository."""

    def __init__(self, store: KeyValueBlobStore, ideas: IdeaRepository):
        self._collection: ReactiveCollection[Vote] = ReactiveCollection(
            store, VOTES_KEY, Vote
        )
        self._ideas = ideas

    @property
    def collection(self) -> ReactiveCollection[Vote]:
        return self._collection

    def vote(self, idea_id: int, user_id: int, vote_type: VoteType) -> Vote | None:
        """
        Cast, flip or withdraw a user's vote on an idea.

        Returns the user's vote after the call, or None if it was withdrawn.
        """
        vote_type = VoteType(vote_type)
        votes = list(self._collection.current())
        existing = next(
            (
                index
                for index, v in enumerate(votes)
                if v.idea_id == idea_id and v.user_id == user_id
            ),
            None,
        )

        result: Vote | None
        if existing is None:
            result = Vote(
                vote_id=next_identifier(votes, "vote_id"),
                idea_id=idea_id,
                user_id=user_id,
                vote_type=vote_type,
            )
            votes.append(result)
            logger.info(f"User {user_id} cast {vote_type.value} on idea {idea_id}")
        elif votes[existing].vote_type == vote_type:
            votes.pop(existing)
            result = None
            logger.info(f"User {user_id} withdrew {vote_type.value} on idea {idea_id}")
        else:
            result = votes[existing].model_copy(update={"vote_type": vote_type})
            votes[existing] = result
            logger.info(f"User {user_id} switched to {vote_type.value} on idea {idea_id}")

        self._collection.replace(votes)
        self._recompute(idea_id)
        return result

    def get_votes_for_idea(self, idea_id: int) -> list[Vote]:
        return [v for v in self._collection.current() if v.idea_id == idea_id]

    def get_user_vote(self, idea_id: int, user_id: int) -> Vote | None:
        for v in self._collection.current():
            if v.idea_id == idea_id and v.user_id == user_id:
                return v
        return None

    def tally(self, idea_id: int) -> tuple[int, int]:
        """(upvotes, downvotes) counted from the live ledger."""
        votes = self.get_votes_for_idea(idea_id)
        up = sum(1 for v in votes if v.vote_type == VoteType.UPVOTE)
        down = sum(1 for v in votes if v.vote_type == VoteType.DOWNVOTE)
        return up, down

    def reconcile(self) -> int:
        """Recompute every idea's tallies from the ledger. Returns ideas fixed."""
        fixed = 0
        for idea in self._ideas.current():
            up, down = self.tally(idea.idea_id)
            if (idea.upvotes, idea.downvotes) != (up, down):
                logger.warning(
                    f"Idea {idea.idea_id} tallies {idea.upvotes}/{idea.downvotes} "
                    f"disagree with ledger {up}/{down}; correcting"
                )
                self._ideas.set_tallies(idea.idea_id, up, down)
                fixed += 1
        return fixed

    def _recompute(self, idea_id: int) -> None:
        up, down = self.tally(idea_id)
        self._ideas.set_tallies(idea_id, up, down)
