import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class EventsConfig(AppConfig):
    name = "events"
    verbose_name = "Campus Events"

    def ready(self):
        """Load the seed data and build the engine once per process."""
        from events.services import build_engine_from_settings

        self.engine = build_engine_from_settings()
        logger.info("Events engine ready with %d events", self.engine.event_store.count())
