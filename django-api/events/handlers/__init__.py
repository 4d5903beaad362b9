from events.handlers.views import (
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

__all__ = [
    "BranchListView",
    "DashboardView",
    "EventAdvanceView",
    "EventDetailView",
    "EventListView",
    "FeedbackView",
    "MyRegistrationsView",
    "RegistrationView",
    "VenueDetailView",
    "VenueListView",
]
