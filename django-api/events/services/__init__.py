from events.services.engine import Engine, build_engine, build_engine_from_settings
from events.services.event_service import EventService
from events.services.feedback_service import FeedbackService
from events.services.reference_service import ReferenceDataService
from events.services.registration_service import RegistrationService

__all__ = [
    "Engine",
    "build_engine",
    "build_engine_from_settings",
    "EventService",
    "FeedbackService",
    "ReferenceDataService",
    "RegistrationService",
]
