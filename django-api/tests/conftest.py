"""Pytest configuration and shared fixtures."""

import pytest
from django.apps import apps
from django.conf import settings
from rest_framework.test import APIClient

from events.domain import Caller, EventDraft, Role
from events.services import Engine, build_engine, build_engine_from_settings
from events.signals import event_changed
from events.stores.seed import load_seed


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def fresh_app_engine():
    """Give every test its own copy of the seeded engine the views use."""
    config = apps.get_app_config("events")
    original = config.engine
    config.engine = build_engine_from_settings()
    yield config.engine
    config.engine = original


@pytest.fixture
def engine() -> Engine:
    return build_engine(load_seed(settings.EVENTS_SEED_PATH))


@pytest.fixture
def admin() -> Caller:
    return Caller(id="admin1", role=Role.ADMIN)


@pytest.fixture
def host() -> Caller:
    return Caller(id="host1", role=Role.HOST)


@pytest.fixture
def student_caller():
    def make(student_id: str = "student1") -> Caller:
        return Caller(id=student_id, role=Role.STUDENT)

    return make


@pytest.fixture
def draft() -> EventDraft:
    return EventDraft(
        name="Robotics Workshop",
        description="Hands-on session building line-following robots.",
        date="2025-05-10",
        time="11:00 AM",
        location="Seminar Hall",
        branch_id="mech",
        organizer="host1",
        capacity=2,
        venue_id="venue2",
    )


@pytest.fixture
def changes():
    """Record every event_changed signal sent during the test."""
    received = []

    def receiver(sender, event, action, **kwargs):
        received.append((sender, event, action))

    event_changed.connect(receiver, weak=False)
    yield received
    event_changed.disconnect(receiver)
