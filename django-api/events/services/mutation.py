"""Optimistic read-modify-write over the EventStore."""

import logging
from collections.abc import Callable

from events.domain import Event
from events.domain.errors import EventNotFoundError, StoreCorruptedError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 1000


def apply_change(
    store: EventStore,
    event_id: str,
    change: Callable[[Event], Event],
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> Event:
    """Apply ``change`` to the latest snapshot of an event and publish the result.

    ``change`` receives the current snapshot and returns the replacement, or
    raises a DomainError to reject the operation. It runs again on a fresh
    snapshot whenever another writer published first, so it must be pure.

    Raises:
        EventNotFoundError: If the event does not exist.
        StoreCorruptedError: If no attempt succeeds within ``max_retries``.
    """
    for attempt in range(1, max_retries + 1):
        current = store.get_event(event_id)
        if current is None:
            raise EventNotFoundError(event_id)
        stored = store.compare_and_replace(current, change(current))
        if stored is not None:
            return stored
        logger.debug("Version conflict on %s (attempt %d), retrying", event_id, attempt)
    logger.critical("Gave up on %s after %d conflicting attempts", event_id, max_retries)
    raise StoreCorruptedError(event_id, [f"no stable snapshot after {max_retries} attempts"])
