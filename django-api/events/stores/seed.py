"""Seed data loader.

Reads the startup dataset (branches, venues, events) from a JSON document
whose keys follow the camelCase shapes used by the presentation layer.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from events.domain import Branch, Event, EventStatus, Feedback, Venue

logger = logging.getLogger(__name__)


class SeedFormatError(ValueError):
    """Raised when the seed document is missing fields or malformed."""


@dataclass(frozen=True)
class SeedData:
    branches: tuple[Branch, ...] = ()
    venues: tuple[Venue, ...] = ()
    events: tuple[Event, ...] = ()


def _parse_date(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _feedback(raw: dict[str, Any]) -> Feedback:
    return Feedback(
        id=raw["id"],
        event_id=raw["eventId"],
        student_id=raw["studentId"],
        rating=int(raw["rating"]),
        comment=raw.get("comment") or "",
        date=_parse_date(raw["date"]),
    )


def _event(raw: dict[str, Any]) -> Event:
    return Event(
        id=raw["id"],
        name=raw["name"],
        description=raw["description"],
        date=raw["date"],
        time=raw["time"],
        location=raw["location"],
        branch_id=raw["branchId"],
        organizer=raw["organizer"],
        capacity=int(raw["capacity"]),
        venue_id=raw["venueId"],
        status=EventStatus(raw.get("status", EventStatus.UPCOMING.value)),
        registered_students=tuple(raw.get("registeredStudents", ())),
        feedback=tuple(_feedback(item) for item in raw.get("feedback", ())),
        image_url=raw.get("imageUrl"),
    )


def _venue(raw: dict[str, Any]) -> Venue:
    return Venue(
        id=raw["id"],
        name=raw["name"],
        location=raw["location"],
        capacity=int(raw["capacity"]),
        resources=tuple(raw.get("resources", ())),
        events=tuple(raw.get("events", ())),
    )


def _check_references(seed: SeedData) -> None:
    branch_ids = {branch.id for branch in seed.branches}
    venue_ids = {venue.id for venue in seed.venues}
    for event in seed.events:
        if event.branch_id not in branch_ids:
            raise SeedFormatError(f"Event {event.id} references unknown branch {event.branch_id}")
        if event.venue_id not in venue_ids:
            raise SeedFormatError(f"Event {event.id} references unknown venue {event.venue_id}")


def parse_seed(document: dict[str, Any]) -> SeedData:
    """Build domain objects from an already-decoded seed document.

    Every event must name a branch and a venue defined in the same document.
    """
    try:
        seed = SeedData(
            branches=tuple(
                Branch(id=raw["id"], name=raw["name"])
                for raw in document.get("branches", ())
            ),
            venues=tuple(_venue(raw) for raw in document.get("venues", ())),
            events=tuple(_event(raw) for raw in document.get("events", ())),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise SeedFormatError(f"Invalid seed document: {exc!r}") from exc
    _check_references(seed)
    return seed


def load_seed(path: str | Path) -> SeedData:
    """Read and parse the seed file at ``path``."""
    path = Path(path)
    with path.open(encoding="utf-8") as handle:
        document = json.load(handle)
    seed = parse_seed(document)
    logger.info(
        "Loaded seed %s: %d branches, %d venues, %d events",
        path.name,
        len(seed.branches),
        len(seed.venues),
        len(seed.events),
    )
    return seed
