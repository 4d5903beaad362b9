"""Feedback service - append-only ratings per event."""

import dataclasses
import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from events.domain import Caller, Event, Feedback, Rating, SequentialId
from events.domain.authorization import Operation, authorize_for_student
from events.domain.errors import EventNotFoundError, InvalidRatingError
from events.services.mutation import DEFAULT_MAX_RETRIES, apply_change
from events.signals import ChangeAction, announce
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

FEEDBACK_ID_PREFIX = "feedback"


def next_feedback_id(event: Event) -> str:
    """``feedback{count+1}``, moving past ids the event already holds."""
    taken = {item.id for item in event.feedback}
    count = len(event.feedback)
    feedback_id = str(SequentialId.next_after(FEEDBACK_ID_PREFIX, count))
    while feedback_id in taken:
        count += 1
        feedback_id = str(SequentialId.next_after(FEEDBACK_ID_PREFIX, count))
    return feedback_id


class FeedbackService:
    """Service for collecting post-event feedback.

    Any number of entries per student is accepted.
    """

    def __init__(
        self,
        store: EventStore,
        max_retries: int = DEFAULT_MAX_RETRIES,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._max_retries = max_retries
        self._clock = clock

    def add_feedback(
        self,
        caller: Caller,
        event_id: str,
        student_id: str,
        rating: int,
        comment: str | None = None,
    ) -> Feedback:
        """Append a feedback entry to an event and return it.

        Raises:
            PermissionDeniedError: If the caller may not leave feedback for this student.
            InvalidRatingError: If ``rating`` is not an integer from 1 to 5.
            EventNotFoundError: If the event does not exist.
        """
        authorize_for_student(caller, Operation.ADD_FEEDBACK, student_id)
        self._get(event_id)
        try:
            score = Rating(rating)
        except ValueError as exc:
            raise InvalidRatingError(str(exc)) from exc
        created_at = self._clock()

        def append(current: Event) -> Event:
            entry = Feedback(
                id=next_feedback_id(current),
                event_id=current.id,
                student_id=student_id,
                rating=score.value,
                comment=comment or "",
                date=created_at,
            )
            return dataclasses.replace(current, feedback=current.feedback + (entry,))

        event = apply_change(self._store, event_id, append, self._max_retries)
        entry = event.feedback[-1]
        logger.info("Feedback %s (%d/5) added to %s", entry.id, entry.rating, event.id)
        announce(self.__class__, event, ChangeAction.FEEDBACK_ADDED)
        return entry

    def list_feedback(self, event_id: str) -> list[Feedback]:
        """Raises EventNotFoundError if the event does not exist."""
        return list(self._get(event_id).feedback)

    def average_rating(self, event_id: str) -> float | None:
        """Mean rating of an event, or None when it has no feedback."""
        feedback = self._get(event_id).feedback
        if not feedback:
            return None
        return sum(item.rating for item in feedback) / len(feedback)

    def _get(self, event_id: str) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event
