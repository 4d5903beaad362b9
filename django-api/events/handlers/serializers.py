"""Serializers for transforming domain models to API responses and back.

Input serializers check shape and types only. Business rules (required
fields, capacity, references, rating range) are enforced by the services so
every caller gets the same domain errors.
"""

from rest_framework import serializers

from events.domain import EventDraft, EventStatus


class FeedbackSerializer(serializers.Serializer):
    """Serializer for Feedback domain model."""

    id = serializers.CharField()
    event_id = serializers.CharField()
    student_id = serializers.CharField()
    rating = serializers.IntegerField()
    comment = serializers.CharField()
    date = serializers.DateTimeField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    location = serializers.CharField()
    branch_id = serializers.CharField()
    organizer = serializers.CharField()
    capacity = serializers.IntegerField()
    registered_students = serializers.ListField(child=serializers.CharField())
    registered_count = serializers.IntegerField()
    remaining_capacity = serializers.IntegerField()
    venue_id = serializers.CharField()
    status = serializers.CharField(source="status.value")
    image_url = serializers.CharField(allow_null=True)
    feedback = FeedbackSerializer(many=True)


class VenueSerializer(serializers.Serializer):
    """Serializer for Venue domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    location = serializers.CharField()
    capacity = serializers.IntegerField()
    resources = serializers.ListField(child=serializers.CharField())
    events = serializers.ListField(child=serializers.CharField())


class BranchSerializer(serializers.Serializer):
    """Serializer for Branch domain model."""

    id = serializers.CharField()
    name = serializers.CharField()


class BranchActivitySerializer(serializers.Serializer):
    """Serializer for BranchActivity domain model."""

    branch = BranchSerializer()
    event_count = serializers.IntegerField()
    registration_count = serializers.IntegerField()


class DashboardSerializer(serializers.Serializer):
    """Serializer for DashboardSummary domain model."""

    total_events = serializers.IntegerField()
    upcoming_events = serializers.IntegerField()
    total_registrations = serializers.IntegerField()
    total_venues = serializers.IntegerField()
    most_popular_event = EventSerializer(allow_null=True)
    branches = BranchActivitySerializer(many=True)


class EventCreateSerializer(serializers.Serializer):
    """Request body for POST /api/events."""

    name = serializers.CharField(allow_blank=True)
    description = serializers.CharField(allow_blank=True)
    date = serializers.CharField(allow_blank=True)
    time = serializers.CharField(allow_blank=True)
    location = serializers.CharField(allow_blank=True)
    branch_id = serializers.CharField(allow_blank=True)
    venue_id = serializers.CharField(allow_blank=True)
    capacity = serializers.IntegerField()
    organizer = serializers.CharField(required=False, allow_blank=True, default="")
    image_url = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    def to_draft(self) -> EventDraft:
        data = self.validated_data
        return EventDraft(
            name=data["name"],
            description=data["description"],
            date=data["date"],
            time=data["time"],
            location=data["location"],
            branch_id=data["branch_id"],
            organizer=data["organizer"],
            capacity=data["capacity"],
            venue_id=data["venue_id"],
            status=EventStatus.UPCOMING,
            image_url=data.get("image_url") or None,
        )


class StudentSerializer(serializers.Serializer):
    """Optional student id; defaults to the caller."""

    student_id = serializers.CharField(required=False)


class FeedbackCreateSerializer(StudentSerializer):
    """Request body for POST /api/events/{event_id}/feedback."""

    rating = serializers.IntegerField()
    comment = serializers.CharField(required=False, allow_blank=True, allow_null=True)
