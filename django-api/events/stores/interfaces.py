"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from events.domain import Branch, Event, EventDraft, Feedback, Venue


class EventStore(ABC):
    """Interface for the live event set."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in creation order."""
        ...

    @abstractmethod
    def get_event(self, event_id: str) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: str) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored events."""
        ...

    @abstractmethod
    def add_event(self, draft: EventDraft, feedback: Iterable[Feedback] = ()) -> Event:
        """Store a new event under the next sequential id and return it."""
        ...

    @abstractmethod
    def replace_event(self, event: Event) -> Event:
        """Swap the stored snapshot for ``event.id`` unconditionally.

        Raises:
            EventNotFoundError: If no event has that id.
        """
        ...

    @abstractmethod
    def compare_and_replace(self, expected: Event, updated: Event) -> Event | None:
        """Swap in ``updated`` only if the stored version equals ``expected.version``.

        Returns the stored snapshot, or None when another writer got there first.

        Raises:
            EventNotFoundError: If no event has that id.
        """
        ...


class VenueStore(ABC):
    """Interface for read-only venue reference data."""

    @abstractmethod
    def list_venues(self) -> list[Venue]:
        """Return all venues in load order."""
        ...

    @abstractmethod
    def get_venue(self, venue_id: str) -> Venue | None:
        """Return a venue by ID, or None if not found."""
        ...


class BranchStore(ABC):
    """Interface for read-only branch reference data."""

    @abstractmethod
    def list_branches(self) -> list[Branch]:
        """Return all branches in load order."""
        ...

    @abstractmethod
    def get_branch(self, branch_id: str) -> Branch | None:
        """Return a branch by ID, or None if not found."""
        ...
