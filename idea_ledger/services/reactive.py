"""Reactive collection: in-memory authoritative snapshot of one record collection."""

import logging
from typing import Callable, Generic, Iterable, Sequence, TypeVar

from ..core.storage import KeyValueBlobStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

Snapshot = tuple
Observer = Callable[[tuple], None]


def next_identifier(records: Iterable[object], attribute: str) -> int:
    """Next id for a collection: max existing id + 1, or 1 when empty."""
    return max((getattr(r, attribute) or 0 for r in records), default=0) + 1


class Subscription:
    """Handle returned by ``subscribe``; call ``unsubscribe`` to stop updates."""

    def __init__(self, collection: "ReactiveCollection", observer: Observer):
        self._collection = collection
        self.observer = observer
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self._collection._remove(self)
            self.active = False


class ReactiveCollection(Generic[T]):
    """
    Last-known-good snapshot of one store key, with push-based observers.

    Snapshots are tuples and are swapped whole on every ``replace``; observers
    always receive the entire new snapshot, synchronously, before ``replace``
    returns.
    """

    def __init__(self, store: KeyValueBlobStore, key: str, record_type: type[T]):
        self._store = store
        self.key = key
        self.record_type = record_type
        self._snapshot: tuple[T, ...] = tuple(store.read(key, record_type))
        self._subscriptions: list[Subscription] = []
        logger.debug(f"Loaded {len(self._snapshot)} records for {key!r}")

    def current(self) -> tuple[T, ...]:
        return self._snapshot

    def subscribe(self, observer: Observer) -> Subscription:
        """Call an observer once with the current snapshot, then register it.

        If that first call raises, the exception propagates and nothing is
        registered.
        """
        observer(self._snapshot)
        subscription = Subscription(self, observer)
        self._subscriptions.append(subscription)
        return subscription

    def replace(self, new_snapshot: Sequence[T]) -> None:
        """Swap in a new snapshot, notify every observer, then persist."""
        self._snapshot = tuple(new_snapshot)
        for subscription in list(self._subscriptions):
            try:
                subscription.observer(self._snapshot)
            except Exception:
                logger.exception(f"Observer of {self.key!r} raised; continuing")
        self._store.write(self.key, self._snapshot, self.record_type)

    def _remove(self, subscription: Subscription) -> None:
        # Match by handle identity; the same callable may be registered twice
        self._subscriptions = [s for s in self._subscriptions if s is not subscription]
