"""Read-only queries over EventStore snapshots.

Nothing here mutates state. Each query walks the list of snapshots taken when
it starts, so it is safe alongside any number of concurrent writers.
"""

from collections.abc import Iterator

from events.domain import BranchActivity, DashboardSummary, Event, EventStatus
from events.stores.interfaces import BranchStore, EventStore, VenueStore


def matches(
    event: Event,
    search_text: str = "",
    branch_id: str | None = None,
    status: EventStatus | str | None = None,
) -> bool:
    """Whether ``event`` passes the search, branch and status filters.

    Empty or missing filters match everything. Text matching is a
    case-insensitive substring test against name and description.
    """
    if search_text:
        needle = search_text.lower()
        if needle not in event.name.lower() and needle not in event.description.lower():
            return False
    if branch_id and event.branch_id != branch_id:
        return False
    if status:
        wanted = status.value if isinstance(status, EventStatus) else status.lower()
        if event.status.value != wanted:
            return False
    return True


def filter_events(
    store: EventStore,
    search_text: str = "",
    branch_id: str | None = None,
    status: EventStatus | str | None = None,
) -> Iterator[Event]:
    """Lazily yield matching events in store order."""
    for event in store.list_events():
        if matches(event, search_text, branch_id, status):
            yield event


def summarize(
    events: EventStore, venues: VenueStore, branches: BranchStore
) -> DashboardSummary:
    """Aggregate counts for the admin dashboard."""
    snapshot = events.list_events()
    most_popular = None
    for event in snapshot:
        # Ties go to the later event.
        if most_popular is None or event.registered_count >= most_popular.registered_count:
            most_popular = event
    activity = []
    for branch in branches.list_branches():
        in_branch = [event for event in snapshot if event.branch_id == branch.id]
        activity.append(
            BranchActivity(
                branch=branch,
                event_count=len(in_branch),
                registration_count=sum(event.registered_count for event in in_branch),
            )
        )
    return DashboardSummary(
        total_events=len(snapshot),
        upcoming_events=sum(1 for event in snapshot if event.status == EventStatus.UPCOMING),
        total_registrations=sum(event.registered_count for event in snapshot),
        total_venues=len(venues.list_venues()),
        most_popular_event=most_popular,
        branches=tuple(activity),
    )
