"""Unit tests for the in-memory stores.

Run with: pytest tests/test_stores.py -v
"""

import dataclasses
from datetime import datetime, timezone

import pytest

from events.domain import Branch, Feedback, Venue
from events.domain.errors import EventNotFoundError, StoreCorruptedError
from events.stores.memory_store import InMemoryBranchStore, InMemoryEventStore, InMemoryVenueStore


@pytest.fixture
def store(engine) -> InMemoryEventStore:
    return engine.event_store


class TestInMemoryEventStore:
    """Tests for InMemoryEventStore."""

    def test_list_events_in_creation_order(self, store, draft):
        created = store.add_event(draft)
        assert [event.id for event in store.list_events()] == [
            "event1",
            "event2",
            "event3",
            created.id,
        ]

    def test_add_event_assigns_next_sequential_id(self, store, draft):
        event = store.add_event(draft)
        assert event.id == "event4"
        assert event.version == 1
        assert event.feedback == ()
        assert store.get_event("event4") == event

    def test_add_event_skips_ids_taken_by_seed(self, draft):
        seeded = InMemoryEventStore().add_event(draft)
        store = InMemoryEventStore([dataclasses.replace(seeded, id="event2")])
        assert store.add_event(draft).id == "event3"

    def test_add_event_rebinds_supplied_feedback(self, draft):
        note = Feedback(
            id="feedback1",
            event_id="",
            student_id="student1",
            rating=5,
            comment="",
            date=datetime(2025, 1, 1, tzinfo=timezone.utc),
        )
        event = InMemoryEventStore().add_event(draft, feedback=[note])
        assert event.feedback[0].event_id == event.id

    def test_get_missing_event_returns_none(self, store):
        assert store.get_event("event99") is None
        assert not store.event_exists("event99")

    def test_replace_event_bumps_version(self, store):
        current = store.get_event("event1")
        stored = store.replace_event(dataclasses.replace(current, name="Renamed"))
        assert stored.version == current.version + 1
        assert store.get_event("event1").name == "Renamed"

    def test_replace_missing_event_raises(self, store):
        ghost = dataclasses.replace(store.get_event("event1"), id="event99")
        with pytest.raises(EventNotFoundError):
            store.replace_event(ghost)

    def test_compare_and_replace_rejects_stale_snapshot(self, store):
        stale = store.get_event("event2")
        store.replace_event(dataclasses.replace(stale, time="03:00 PM"))
        assert store.compare_and_replace(stale, dataclasses.replace(stale, time="04:00 PM")) is None
        assert store.get_event("event2").time == "03:00 PM"

    def test_compare_and_replace_publishes_fresh_snapshot(self, store):
        current = store.get_event("event2")
        stored = store.compare_and_replace(current, dataclasses.replace(current, time="04:00 PM"))
        assert stored is not None
        assert store.get_event("event2") is stored

    def test_compare_and_replace_keeps_id_immutable(self, store):
        current = store.get_event("event2")
        with pytest.raises(ValueError):
            store.compare_and_replace(current, dataclasses.replace(current, id="event7"))

    def test_corrupted_snapshot_is_refused(self, store):
        current = store.get_event("event1")
        broken = dataclasses.replace(current, capacity=1)
        with pytest.raises(StoreCorruptedError):
            store.replace_event(broken)
        assert store.get_event("event1") is current

    def test_duplicate_seed_ids_are_refused(self, store):
        event = store.get_event("event1")
        with pytest.raises(StoreCorruptedError):
            InMemoryEventStore([event, event])

    def test_seed_event_with_zero_capacity_is_refused(self, store):
        event = dataclasses.replace(store.get_event("event2"), capacity=0)
        with pytest.raises(StoreCorruptedError):
            InMemoryEventStore([event])

    def test_seed_feedback_with_bad_rating_is_refused(self, store):
        event = store.get_event("event1")
        [entry] = event.feedback
        broken = dataclasses.replace(event, feedback=(dataclasses.replace(entry, rating=9),))
        with pytest.raises(StoreCorruptedError):
            InMemoryEventStore([broken])


class TestReferenceStores:
    def test_venue_lookup(self):
        venue = Venue(id="venue1", name="Main Auditorium", location="Main Campus", capacity=500)
        store = InMemoryVenueStore([venue])
        assert store.get_venue("venue1") == venue
        assert store.get_venue("venue9") is None
        assert store.list_venues() == [venue]

    def test_branch_lookup(self):
        branch = Branch(id="cse", name="Computer Science Engineering")
        store = InMemoryBranchStore([branch])
        assert store.get_branch("cse") == branch
        assert store.get_branch("eee") is None
        assert store.list_branches() == [branch]
