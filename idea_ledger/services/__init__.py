"""Business logic services for Idea Ledger."""

from .comments import COMMENTS_KEY, CommentLedger
from .directory import InMemoryUserDirectory, UserDirectory, resolve_display_name
from .ideas import IDEAS_KEY, IdeaRepository
from .ledger import IdeaLedger
from .reactive import ReactiveCollection, Subscription, next_identifier
from .reviews import REVIEWS_KEY, ReviewWorkflow
from .votes import VOTES_KEY, VoteLedger

__all__ = [
    # Substrate
    "ReactiveCollection",
    "Subscription",
    "next_identifier",
    # Collections
    "IdeaRepository",
    "VoteLedger",
    "ReviewWorkflow",
    "CommentLedger",
    "IDEAS_KEY",
    "VOTES_KEY",
    "REVIEWS_KEY",
    "COMMENTS_KEY",
    # Directory
    "UserDirectory",
    "InMemoryUserDirectory",
    "resolve_display_name",
    # Facade
    "IdeaLedger",
]
