"""Registration service - capacity-bounded student sign-up.

Register and cancel touch only ``registered_students``. Both go through the
optimistic compare-and-replace loop, so the capacity check and the append are
published as one unit per event even under parallel callers.
"""

import dataclasses
import logging

from events.domain import Caller, Event, EventStatus
from events.domain.authorization import Operation, authorize_for_student
from events.domain.errors import (
    AlreadyRegisteredError,
    CapacityExceededError,
    DomainError,
    EventNotFoundError,
    InvalidEventStateError,
    NotRegisteredError,
)
from events.services.mutation import DEFAULT_MAX_RETRIES, apply_change
from events.signals import ChangeAction, announce
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for registering students to events."""

    def __init__(self, store: EventStore, max_retries: int = DEFAULT_MAX_RETRIES) -> None:
        self._store = store
        self._max_retries = max_retries

    def register(self, caller: Caller, event_id: str, student_id: str) -> Event:
        """Add ``student_id`` to an event's registrations.

        Raises:
            PermissionDeniedError: If the caller may not register this student.
            EventNotFoundError: If the event does not exist.
            InvalidEventStateError: If the event is not upcoming.
            AlreadyRegisteredError: If the student is already registered.
            CapacityExceededError: If the event is full.
        """
        authorize_for_student(caller, Operation.REGISTER, student_id)

        def add(current: Event) -> Event:
            if current.status != EventStatus.UPCOMING:
                raise InvalidEventStateError(current.id, current.status.value)
            if current.is_registered(student_id):
                raise AlreadyRegisteredError(current.id, student_id)
            if current.is_full:
                raise CapacityExceededError(current.id, current.capacity)
            return dataclasses.replace(
                current, registered_students=current.registered_students + (student_id,)
            )

        try:
            event = apply_change(self._store, event_id, add, self._max_retries)
        except DomainError as exc:
            logger.info("Registration of %s to %s rejected: %s", student_id, event_id, exc)
            raise
        logger.info(
            "Registered %s to %s (%d/%d)",
            student_id,
            event.id,
            event.registered_count,
            event.capacity,
        )
        announce(self.__class__, event, ChangeAction.REGISTERED)
        return event

    def cancel(self, caller: Caller, event_id: str, student_id: str) -> Event:
        """Remove ``student_id`` from an event's registrations.

        Raises:
            PermissionDeniedError: If the caller may not cancel for this student.
            EventNotFoundError: If the event does not exist.
            NotRegisteredError: If the student is not registered.
        """
        authorize_for_student(caller, Operation.CANCEL_REGISTRATION, student_id)

        def remove(current: Event) -> Event:
            if not current.is_registered(student_id):
                raise NotRegisteredError(current.id, student_id)
            return dataclasses.replace(
                current,
                registered_students=tuple(
                    sid for sid in current.registered_students if sid != student_id
                ),
            )

        try:
            event = apply_change(self._store, event_id, remove, self._max_retries)
        except DomainError as exc:
            logger.info("Cancellation of %s on %s rejected: %s", student_id, event_id, exc)
            raise
        logger.info("Cancelled %s on %s", student_id, event.id)
        announce(self.__class__, event, ChangeAction.CANCELLED)
        return event

    def is_registered(self, event_id: str, student_id: str) -> bool:
        """Raises EventNotFoundError if the event does not exist."""
        return self._get(event_id).is_registered(student_id)

    def remaining_capacity(self, event_id: str) -> int:
        """Raises EventNotFoundError if the event does not exist."""
        return self._get(event_id).remaining_capacity

    def registrations_for(self, student_id: str) -> list[Event]:
        """Return the events ``student_id`` is registered for, in creation order."""
        return [
            event for event in self._store.list_events() if event.is_registered(student_id)
        ]

    def registrations_by_status(self, student_id: str) -> dict[EventStatus, list[Event]]:
        """Group a student's registrations by event status."""
        grouped: dict[EventStatus, list[Event]] = {status: [] for status in EventStatus}
        for event in self.registrations_for(student_id):
            grouped[event.status].append(event)
        return grouped

    def _get(self, event_id: str) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event
