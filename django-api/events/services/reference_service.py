"""Venue and branch lookups."""

from events.domain import Branch, Event, Venue
from events.domain.errors import BranchNotFoundError, VenueNotFoundError
from events.stores.interfaces import BranchStore, EventStore, VenueStore


class ReferenceDataService:
    """Read-only access to venues and branches."""

    def __init__(self, venues: VenueStore, branches: BranchStore, events: EventStore) -> None:
        self._venues = venues
        self._branches = branches
        self._events = events

    def list_venues(self) -> list[Venue]:
        return self._venues.list_venues()

    def get_venue(self, venue_id: str) -> Venue:
        """Raises VenueNotFoundError if the venue does not exist."""
        venue = self._venues.get_venue(venue_id)
        if venue is None:
            raise VenueNotFoundError(venue_id)
        return venue

    def list_branches(self) -> list[Branch]:
        return self._branches.list_branches()

    def get_branch(self, branch_id: str) -> Branch:
        """Raises BranchNotFoundError if the branch does not exist."""
        branch = self._branches.get_branch(branch_id)
        if branch is None:
            raise BranchNotFoundError(branch_id)
        return branch

    def events_at_venue(self, venue_id: str) -> list[Event]:
        """Events currently booked at a venue, derived from the live event set.

        Venue.events holds only what the seed data listed.
        """
        self.get_venue(venue_id)
        return [event for event in self._events.list_events() if event.venue_id == venue_id]
