"""Django signals announcing event changes.

Services call ``announce`` after a mutation has been published to the store.
Receivers get the new snapshot and the action that produced it:

    @receiver(event_changed)
    def refresh_listing(sender, event, action, **kwargs):
        ...

The change is already stored when receivers run, so a failing receiver is
logged and never turns a successful operation into an error.
"""

import logging
from enum import Enum

from django.dispatch import Signal

logger = logging.getLogger(__name__)

event_changed = Signal()


class ChangeAction(str, Enum):
    CREATED = "created"
    REGISTERED = "registered"
    CANCELLED = "cancelled"
    FEEDBACK_ADDED = "feedback_added"
    STATUS_ADVANCED = "status_advanced"


def announce(sender, event, action: ChangeAction) -> None:
    """Send ``event_changed`` to every receiver, logging the ones that fail."""
    for receiver, response in event_changed.send_robust(
        sender=sender, event=event, action=action
    ):
        if isinstance(response, Exception):
            logger.error(
                "event_changed receiver %r failed on %s (%s): %r",
                receiver,
                event.id,
                action.value,
                response,
            )
