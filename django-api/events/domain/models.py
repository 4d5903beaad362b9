"""Domain models representing in-memory state.

These are pure domain objects with no API input rules. Every value is frozen:
a mutation produces a new snapshot that the EventStore swaps in wholesale.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from events.domain.value_objects import MAX_RATING, MIN_RATING


class EventStatus(str, Enum):
    """Lifecycle of an event. Transitions only move forward."""

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"

    def next(self) -> "EventStatus | None":
        order = list(EventStatus)
        position = order.index(self)
        if position + 1 < len(order):
            return order[position + 1]
        return None


class Role(str, Enum):
    """Caller roles supplied by the identity provider."""

    ADMIN = "admin"
    STUDENT = "student"
    HOST = "host"


@dataclass(frozen=True)
class Caller:
    """Identity of whoever invokes a core operation. Trusted as given."""

    id: str
    role: Role


@dataclass(frozen=True)
class Branch:
    """Academic department used to tag and filter events."""

    id: str
    name: str


@dataclass(frozen=True)
class Venue:
    """Physical location referenced by events.

    ``events`` is the back-reference loaded with the seed data. It is not kept
    in sync when events are created; use ReferenceDataService.events_at_venue
    for the live view.
    """

    id: str
    name: str
    location: str
    capacity: int
    resources: tuple[str, ...] = ()
    events: tuple[str, ...] = ()


@dataclass(frozen=True)
class Feedback:
    """Rating and comment left by one student on one event."""

    id: str
    event_id: str
    student_id: str
    rating: int
    comment: str
    date: datetime


@dataclass(frozen=True)
class EventDraft:
    """Fields supplied when creating an event."""

    name: str
    description: str
    date: str
    time: str
    location: str
    branch_id: str
    organizer: str
    capacity: int
    venue_id: str
    registered_students: tuple[str, ...] = ()
    status: EventStatus = EventStatus.UPCOMING
    image_url: str | None = None


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event snapshot."""

    id: str
    name: str
    description: str
    date: str
    time: str
    location: str
    branch_id: str
    organizer: str
    capacity: int
    venue_id: str
    status: EventStatus
    registered_students: tuple[str, ...] = ()
    feedback: tuple[Feedback, ...] = ()
    image_url: str | None = None
    version: int = field(default=1, compare=False)

    @property
    def registered_count(self) -> int:
        return len(self.registered_students)

    @property
    def remaining_capacity(self) -> int:
        return self.capacity - self.registered_count

    @property
    def is_full(self) -> bool:
        return self.registered_count >= self.capacity

    def is_registered(self, student_id: str) -> bool:
        return student_id in self.registered_students

    def violations(self) -> list[str]:
        """Return the invariants this snapshot breaks, empty when consistent."""
        problems = []
        if self.capacity <= 0:
            problems.append(f"non-positive capacity {self.capacity}")
        if self.registered_count > self.capacity:
            problems.append(
                f"{self.registered_count} registrations exceed capacity {self.capacity}"
            )
        if len(set(self.registered_students)) != self.registered_count:
            problems.append("duplicate registrations")
        if any(item.event_id != self.id for item in self.feedback):
            problems.append("feedback owned by another event")
        if len({item.id for item in self.feedback}) != len(self.feedback):
            problems.append("duplicate feedback ids")
        if any(not MIN_RATING <= item.rating <= MAX_RATING for item in self.feedback):
            problems.append("feedback rating out of range")
        return problems


@dataclass(frozen=True)
class BranchActivity:
    """Per-branch totals shown on the dashboard."""

    branch: Branch
    event_count: int
    registration_count: int


@dataclass(frozen=True)
class DashboardSummary:
    """Aggregate counts across the whole event set."""

    total_events: int
    upcoming_events: int
    total_registrations: int
    total_venues: int
    most_popular_event: Event | None
    branches: tuple[BranchActivity, ...] = ()
