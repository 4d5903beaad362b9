"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors reach the exception handler, which maps them to responses
- Never contain business logic
- Never expose internal error details
"""

from django.apps import apps
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import Caller
from events.handlers.serializers import (
    BranchSerializer,
    DashboardSerializer,
    EventCreateSerializer,
    EventSerializer,
    FeedbackCreateSerializer,
    FeedbackSerializer,
    StudentSerializer,
    VenueSerializer,
)
from events.services import Engine


class EngineView(APIView):
    """Base view with access to the running engine and the caller."""

    @property
    def engine(self) -> Engine:
        return apps.get_app_config("events").engine

    def caller(self, request: Request) -> Caller:
        if not isinstance(request.user, Caller):
            raise NotAuthenticated("Caller identity headers are required")
        return request.user

    def student_id(self, request: Request, caller: Caller) -> str:
        serializer = StudentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return (
            serializer.validated_data.get("student_id")
            or request.query_params.get("student_id")
            or caller.id
        )


class EventListView(EngineView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        params = request.query_params
        events = self.engine.filter(
            params.get("search", ""),
            params.get("branch") or None,
            params.get("status") or None,
        )
        return Response(EventSerializer(list(events), many=True).data)

    def post(self, request: Request) -> Response:
        caller = self.caller(request)
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.engine.events.create_event(caller, serializer.to_draft())
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(EngineView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = self.engine.events.get_event(event_id)
        return Response(EventSerializer(event).data)


class EventAdvanceView(EngineView):
    """Handler for POST /api/events/{event_id}/advance"""

    def post(self, request: Request, event_id: str) -> Response:
        event = self.engine.events.advance_status(self.caller(request), event_id)
        return Response(EventSerializer(event).data)


class RegistrationView(EngineView):
    """Handler for POST/DELETE /api/events/{event_id}/registration"""

    def post(self, request: Request, event_id: str) -> Response:
        caller = self.caller(request)
        student_id = self.student_id(request, caller)
        event = self.engine.registrations.register(caller, event_id, student_id)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)

    def delete(self, request: Request, event_id: str) -> Response:
        caller = self.caller(request)
        student_id = self.student_id(request, caller)
        event = self.engine.registrations.cancel(caller, event_id, student_id)
        return Response(EventSerializer(event).data)


class FeedbackView(EngineView):
    """Handler for GET/POST /api/events/{event_id}/feedback"""

    def get(self, request: Request, event_id: str) -> Response:
        ledger = self.engine.feedback
        return Response(
            {
                "average_rating": ledger.average_rating(event_id),
                "feedback": FeedbackSerializer(ledger.list_feedback(event_id), many=True).data,
            }
        )

    def post(self, request: Request, event_id: str) -> Response:
        caller = self.caller(request)
        serializer = FeedbackCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        entry = self.engine.feedback.add_feedback(
            caller,
            event_id,
            data.get("student_id") or caller.id,
            data["rating"],
            data.get("comment"),
        )
        return Response(FeedbackSerializer(entry).data, status=status.HTTP_201_CREATED)


class MyRegistrationsView(EngineView):
    """Handler for GET /api/me/registrations"""

    def get(self, request: Request) -> Response:
        caller = self.caller(request)
        grouped = self.engine.registrations.registrations_by_status(caller.id)
        return Response(
            {
                status_.value: EventSerializer(events, many=True).data
                for status_, events in grouped.items()
            }
        )


class VenueListView(EngineView):
    """Handler for GET /api/venues"""

    def get(self, request: Request) -> Response:
        venues = self.engine.reference.list_venues()
        return Response(VenueSerializer(venues, many=True).data)


class VenueDetailView(EngineView):
    """Handler for GET /api/venues/{venue_id}"""

    def get(self, request: Request, venue_id: str) -> Response:
        reference = self.engine.reference
        data = VenueSerializer(reference.get_venue(venue_id)).data
        data["scheduled_events"] = [event.id for event in reference.events_at_venue(venue_id)]
        return Response(data)


class BranchListView(EngineView):
    """Handler for GET /api/branches"""

    def get(self, request: Request) -> Response:
        branches = self.engine.reference.list_branches()
        return Response(BranchSerializer(branches, many=True).data)


class DashboardView(EngineView):
    """Handler for GET /api/dashboard"""

    def get(self, request: Request) -> Response:
        return Response(DashboardSerializer(self.engine.summary()).data)
