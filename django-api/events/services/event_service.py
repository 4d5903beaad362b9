"""Event service - creation, lookup and status lifecycle.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import dataclasses
import logging

from events.domain import Caller, Capacity, Event, EventDraft
from events.domain.authorization import Operation, authorize
from events.domain.errors import EventNotFoundError, InvalidEventStateError, ValidationError
from events.services.mutation import DEFAULT_MAX_RETRIES, apply_change
from events.signals import ChangeAction, announce
from events.stores.interfaces import BranchStore, EventStore, VenueStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "description", "date", "time", "location", "branch_id", "venue_id")


def validate_draft(draft: EventDraft, venues: VenueStore, branches: BranchStore) -> None:
    """Check a draft before it is stored.

    Raises:
        ValidationError: On an empty required field, a non-positive capacity,
            an inconsistent registration list or a dangling reference.
    """
    for name in REQUIRED_FIELDS:
        value = getattr(draft, name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(name, "This field is required")
    try:
        Capacity(draft.capacity)
    except ValueError as exc:
        raise ValidationError("capacity", str(exc)) from exc
    students = tuple(draft.registered_students)
    if len(set(students)) != len(students):
        raise ValidationError("registered_students", "Duplicate student ids")
    if len(students) > draft.capacity:
        raise ValidationError("registered_students", "More students than capacity")
    if branches.get_branch(draft.branch_id) is None:
        raise ValidationError("branch_id", f"Unknown branch '{draft.branch_id}'")
    if venues.get_venue(draft.venue_id) is None:
        raise ValidationError("venue_id", f"Unknown venue '{draft.venue_id}'")


class EventService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: EventStore,
        venues: VenueStore,
        branches: BranchStore,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> None:
        self._store = store
        self._venues = venues
        self._branches = branches
        self._max_retries = max_retries

    def list_events(self) -> list[Event]:
        """Return all events in creation order."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(self, caller: Caller, draft: EventDraft) -> Event:
        """Validate and store a new event. The caller organizes it unless the
        draft names an organizer.

        Raises:
            PermissionDeniedError: If the caller may not create events.
            ValidationError: If the draft is malformed.
        """
        authorize(caller.role, Operation.CREATE_EVENT)
        if not draft.organizer:
            draft = dataclasses.replace(draft, organizer=caller.id)
        validate_draft(draft, self._venues, self._branches)
        event = self._store.add_event(draft)
        logger.info("Created %s '%s' for %s", event.id, event.name, event.organizer)
        announce(self.__class__, event, ChangeAction.CREATED)
        return event

    def advance_status(self, caller: Caller, event_id: str) -> Event:
        """Move an event one step along upcoming -> ongoing -> completed.

        Raises:
            PermissionDeniedError: If the caller may not change status.
            EventNotFoundError: If the event does not exist.
            InvalidEventStateError: If the event is already completed.
        """
        authorize(caller.role, Operation.ADVANCE_STATUS)

        def step(current: Event) -> Event:
            following = current.status.next()
            if following is None:
                raise InvalidEventStateError(current.id, current.status.value)
            return dataclasses.replace(current, status=following)

        event = apply_change(self._store, event_id, step, self._max_retries)
        logger.info("Advanced %s to %s", event.id, event.status.value)
        announce(self.__class__, event, ChangeAction.STATUS_ADVANCED)
        return event
