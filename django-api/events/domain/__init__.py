from events.domain.models import (
    Branch,
    BranchActivity,
    Caller,
    DashboardSummary,
    Event,
    EventDraft,
    EventStatus,
    Feedback,
    Role,
    Venue,
)
from events.domain.value_objects import Capacity, Rating, SequentialId

__all__ = [
    "Branch",
    "BranchActivity",
    "Caller",
    "DashboardSummary",
    "Event",
    "EventDraft",
    "EventStatus",
    "Feedback",
    "Role",
    "Venue",
    "Capacity",
    "Rating",
    "SequentialId",
]
