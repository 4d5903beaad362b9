"""Integration tests for the events HTTP API.

Run with: pytest tests/test_event_catalog.py -v
"""

import pytest
from rest_framework.test import APIClient


def as_caller(client: APIClient, caller_id: str, role: str) -> APIClient:
    client.credentials(HTTP_X_CALLER_ID=caller_id, HTTP_X_CALLER_ROLE=role)
    return client


@pytest.fixture
def new_event_body() -> dict:
    return {
        "name": "Robotics Workshop",
        "description": "Hands-on session building line-following robots.",
        "date": "2025-05-10",
        "time": "11:00 AM",
        "location": "Seminar Hall",
        "branch_id": "mech",
        "venue_id": "venue2",
        "capacity": 40,
    }


class TestEventList:
    """Tests for GET/POST /api/events"""

    def test_list_events_returns_all_in_order(self, api_client: APIClient):
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert [event["id"] for event in response.json()] == ["event1", "event2", "event3"]

    def test_list_events_filters(self, api_client: APIClient):
        response = api_client.get("/api/events", {"search": "tech", "status": "upcoming"})
        [event] = response.json()
        assert event["id"] == "event1"
        assert event["status"] == "upcoming"
        assert event["registered_count"] == 2

    def test_list_events_by_branch(self, api_client: APIClient):
        response = api_client.get("/api/events", {"branch": "ece"})
        assert [event["id"] for event in response.json()] == ["event2"]

    def test_create_event_as_host(self, api_client: APIClient, new_event_body):
        response = as_caller(api_client, "host1", "host").post("/api/events", new_event_body)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == "event4"
        assert body["organizer"] == "host1"
        assert body["feedback"] == []

    def test_create_event_as_student_is_forbidden(self, api_client: APIClient, new_event_body):
        response = as_caller(api_client, "student1", "student").post("/api/events", new_event_body)
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "PERMISSION_DENIED"

    def test_create_event_without_identity(self, api_client: APIClient, new_event_body):
        response = api_client.post("/api/events", new_event_body)
        assert response.status_code == 401

    def test_create_event_with_unknown_role(self, api_client: APIClient, new_event_body):
        response = as_caller(api_client, "x", "janitor").post("/api/events", new_event_body)
        assert response.status_code == 401

    def test_create_event_validation_error(self, api_client: APIClient, new_event_body):
        new_event_body["capacity"] = 0
        response = as_caller(api_client, "admin1", "admin").post("/api/events", new_event_body)
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_create_event_malformed_body(self, api_client: APIClient):
        response = as_caller(api_client, "admin1", "admin").post("/api/events", {"name": "x"})
        assert response.status_code == 400
        assert "field_errors" in response.json()["error"]


class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient):
        response = api_client.get("/api/events/event1")
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Annual Tech Symposium"
        assert body["remaining_capacity"] == 498
        assert body["feedback"][0]["id"] == "feedback1"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/event99")
        assert response.status_code == 404
        assert response.json() == {
            "error": {"code": "EVENT_NOT_FOUND", "message": "Event not found"}
        }


class TestRegistration:
    """Tests for /api/events/{id}/registration"""

    def test_register_and_cancel(self, api_client: APIClient):
        client = as_caller(api_client, "student2", "student")
        response = client.post("/api/events/event1/registration")
        assert response.status_code == 201
        assert "student2" in response.json()["registered_students"]

        response = client.delete("/api/events/event1/registration")
        assert response.status_code == 200
        assert "student2" not in response.json()["registered_students"]

    def test_duplicate_registration_conflicts(self, api_client: APIClient):
        response = as_caller(api_client, "student1", "student").post(
            "/api/events/event1/registration"
        )
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "ALREADY_REGISTERED"

    def test_cancel_without_registration_conflicts(self, api_client: APIClient):
        response = as_caller(api_client, "student4", "student").delete(
            "/api/events/event1/registration"
        )
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "NOT_REGISTERED"

    def test_admin_registers_named_student(self, api_client: APIClient):
        response = as_caller(api_client, "admin1", "admin").post(
            "/api/events/event2/registration", {"student_id": "student1"}
        )
        assert response.status_code == 201
        assert "student1" in response.json()["registered_students"]

    def test_my_registrations(self, api_client: APIClient):
        response = as_caller(api_client, "student1", "student").get("/api/me/registrations")
        body = response.json()
        assert [event["id"] for event in body["upcoming"]] == ["event1", "event3"]
        assert body["completed"] == []


class TestFeedback:
    """Tests for /api/events/{id}/feedback"""

    def test_add_and_list_feedback(self, api_client: APIClient):
        client = as_caller(api_client, "student3", "student")
        response = client.post("/api/events/event1/feedback", {"rating": 2, "comment": "Too long"})
        assert response.status_code == 201
        assert response.json()["id"] == "feedback2"

        response = client.get("/api/events/event1/feedback")
        assert response.json()["average_rating"] == 3.0
        assert len(response.json()["feedback"]) == 2

    def test_invalid_rating(self, api_client: APIClient):
        response = as_caller(api_client, "student3", "student").post(
            "/api/events/event1/feedback", {"rating": 6}
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_RATING"


class TestStatus:
    """Tests for POST /api/events/{id}/advance"""

    def test_advance_then_registration_is_rejected(self, api_client: APIClient):
        response = as_caller(api_client, "host1", "host").post("/api/events/event2/advance")
        assert response.json()["status"] == "ongoing"

        response = as_caller(api_client, "student1", "student").post(
            "/api/events/event2/registration"
        )
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "INVALID_STATE"


class TestReferenceData:
    """Tests for venues, branches and the dashboard."""

    def test_list_venues(self, api_client: APIClient):
        response = api_client.get("/api/venues")
        assert [venue["id"] for venue in response.json()] == ["venue1", "venue2", "venue3"]

    def test_venue_detail_lists_scheduled_events(self, api_client: APIClient):
        response = api_client.get("/api/venues/venue1")
        assert response.json()["scheduled_events"] == ["event1", "event3"]

    def test_venue_not_found(self, api_client: APIClient):
        assert api_client.get("/api/venues/venue9").status_code == 404

    def test_list_branches(self, api_client: APIClient):
        response = api_client.get("/api/branches")
        assert response.json()[0] == {"id": "cse", "name": "Computer Science Engineering"}

    def test_dashboard(self, api_client: APIClient):
        body = api_client.get("/api/dashboard").json()
        assert body["total_events"] == 3
        assert body["total_registrations"] == 7
        assert body["most_popular_event"]["id"] == "event3"
        assert len(body["branches"]) == 4
