"""Engine - the stores and services for one application lifetime.

The engine is built once (by EventsConfig.ready in the Django app) and handed
to whoever needs it. Nothing in the core reaches for a module-level store.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from django.conf import settings

from events.domain import DashboardSummary, Event, EventStatus
from events.services.event_service import EventService
from events.services.feedback_service import FeedbackService
from events.services.mutation import DEFAULT_MAX_RETRIES
from events.services.query import filter_events, summarize
from events.services.reference_service import ReferenceDataService
from events.services.registration_service import RegistrationService
from events.stores.interfaces import BranchStore, EventStore, VenueStore
from events.stores.memory_store import InMemoryBranchStore, InMemoryEventStore, InMemoryVenueStore
from events.stores.seed import SeedData, load_seed


@dataclass(frozen=True)
class Engine:
    """Stores and services sharing one set of event data for an app lifetime."""

    event_store: EventStore
    venue_store: VenueStore
    branch_store: BranchStore
    events: EventService
    registrations: RegistrationService
    feedback: FeedbackService
    reference: ReferenceDataService

    def filter(
        self,
        search_text: str = "",
        branch_id: str | None = None,
        status: EventStatus | str | None = None,
    ) -> Iterator[Event]:
        return filter_events(self.event_store, search_text, branch_id, status)

    def summary(self) -> DashboardSummary:
        return summarize(self.event_store, self.venue_store, self.branch_store)


def build_engine(seed: SeedData = SeedData(), max_retries: int = DEFAULT_MAX_RETRIES) -> Engine:
    """Wire in-memory stores loaded from ``seed`` to a fresh set of services."""
    event_store = InMemoryEventStore(seed.events)
    venue_store = InMemoryVenueStore(seed.venues)
    branch_store = InMemoryBranchStore(seed.branches)
    return Engine(
        event_store=event_store,
        venue_store=venue_store,
        branch_store=branch_store,
        events=EventService(event_store, venue_store, branch_store, max_retries),
        registrations=RegistrationService(event_store, max_retries),
        feedback=FeedbackService(event_store, max_retries),
        reference=ReferenceDataService(venue_store, branch_store, event_store),
    )


def build_engine_from_settings() -> Engine:
    """Build an engine from the EVENTS_* Django settings."""
    seed_path = getattr(settings, "EVENTS_SEED_PATH", None)
    seed = load_seed(Path(seed_path)) if seed_path else SeedData()
    max_retries = getattr(settings, "EVENTS_MAX_REPLACE_RETRIES", DEFAULT_MAX_RETRIES)
    return build_engine(seed, max_retries=int(max_retries))
