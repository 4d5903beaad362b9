"""In-memory implementations of the store interfaces.

Each event lives in its own slot with its own lock. The lock is held only for
the version check and the reference swap, so writers on different events never
wait on each other and readers never see a half-built snapshot.
"""

import dataclasses
import logging
import threading
from collections.abc import Iterable

from events.domain import Branch, Event, EventDraft, Feedback, SequentialId, Venue
from events.domain.errors import EventNotFoundError, StoreCorruptedError
from events.stores.interfaces import BranchStore, EventStore, VenueStore

logger = logging.getLogger(__name__)

EVENT_ID_PREFIX = "event"


class _Slot:
    __slots__ = ("lock", "event")

    def __init__(self, event: Event) -> None:
        self.lock = threading.Lock()
        self.event = event


def _checked(event: Event) -> Event:
    problems = event.violations()
    if problems:
        logger.critical("Refusing to publish corrupted event %s: %s", event.id, problems)
        raise StoreCorruptedError(event.id, problems)
    return event


class InMemoryEventStore(EventStore):
    """Process-local event store keyed by event id."""

    def __init__(self, events: Iterable[Event] = ()) -> None:
        self._lock = threading.Lock()
        self._slots: dict[str, _Slot] = {}
        self._order: list[str] = []
        for event in events:
            self._insert(event)

    def _insert(self, event: Event) -> Event:
        if event.id in self._slots:
            raise StoreCorruptedError(event.id, ["duplicate event id"])
        self._slots[event.id] = _Slot(_checked(event))
        self._order.append(event.id)
        return event

    def _slot(self, event_id: str) -> _Slot:
        slot = self._slots.get(event_id)
        if slot is None:
            raise EventNotFoundError(event_id)
        return slot

    def list_events(self) -> list[Event]:
        with self._lock:
            order = tuple(self._order)
        return [self._slots[event_id].event for event_id in order]

    def get_event(self, event_id: str) -> Event | None:
        slot = self._slots.get(event_id)
        return slot.event if slot is not None else None

    def event_exists(self, event_id: str) -> bool:
        return event_id in self._slots

    def count(self) -> int:
        return len(self._order)

    def add_event(self, draft: EventDraft, feedback: Iterable[Feedback] = ()) -> Event:
        with self._lock:
            count = len(self._order)
            event_id = str(SequentialId.next_after(EVENT_ID_PREFIX, count))
            # Seed data may already hold ids past the current count.
            while event_id in self._slots:
                count += 1
                event_id = str(SequentialId.next_after(EVENT_ID_PREFIX, count))
            event = Event(
                id=event_id,
                name=draft.name,
                description=draft.description,
                date=draft.date,
                time=draft.time,
                location=draft.location,
                branch_id=draft.branch_id,
                organizer=draft.organizer,
                capacity=draft.capacity,
                venue_id=draft.venue_id,
                status=draft.status,
                registered_students=tuple(draft.registered_students),
                feedback=tuple(
                    dataclasses.replace(item, event_id=event_id) for item in feedback
                ),
                image_url=draft.image_url,
            )
            return self._insert(event)

    def replace_event(self, event: Event) -> Event:
        slot = self._slot(event.id)
        with slot.lock:
            stored = _checked(dataclasses.replace(event, version=slot.event.version + 1))
            slot.event = stored
        return stored

    def compare_and_replace(self, expected: Event, updated: Event) -> Event | None:
        if updated.id != expected.id:
            raise ValueError("Event id is immutable")
        slot = self._slot(expected.id)
        with slot.lock:
            if slot.event.version != expected.version:
                return None
            stored = _checked(dataclasses.replace(updated, version=expected.version + 1))
            slot.event = stored
        return stored


class InMemoryVenueStore(VenueStore):
    """Venues loaded once at startup."""

    def __init__(self, venues: Iterable[Venue] = ()) -> None:
        self._venues = {venue.id: venue for venue in venues}

    def list_venues(self) -> list[Venue]:
        return list(self._venues.values())

    def get_venue(self, venue_id: str) -> Venue | None:
        return self._venues.get(venue_id)


class InMemoryBranchStore(BranchStore):
    """Branches loaded once at startup."""

    def __init__(self, branches: Iterable[Branch] = ()) -> None:
        self._branches = {branch.id: branch for branch in branches}

    def list_branches(self) -> list[Branch]:
        return list(self._branches.values())

    def get_branch(self, branch_id: str) -> Branch | None:
        return self._branches.get(branch_id)
