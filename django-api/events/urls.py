from django.urls import path

from events.handlers import (
    BranchListView,
    DashboardView,
    EventAdvanceView,
    EventDetailView,
    EventListView,
    FeedbackView,
    MyRegistrationsView,
    RegistrationView,
    VenueDetailView,
    VenueListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/registration",
        RegistrationView.as_view(),
        name="event-registration",
    ),
    path("events/<str:event_id>/feedback", FeedbackView.as_view(), name="event-feedback"),
    path("events/<str:event_id>/advance", EventAdvanceView.as_view(), name="event-advance"),
    path("venues", VenueListView.as_view(), name="venue-list"),
    path("venues/<str:venue_id>", VenueDetailView.as_view(), name="venue-detail"),
    path("branches", BranchListView.as_view(), name="branch-list"),
    path("dashboard", DashboardView.as_view(), name="dashboard"),
    path("me/registrations", MyRegistrationsView.as_view(), name="my-registrations"),
]
