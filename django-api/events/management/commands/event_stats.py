import json
import logging

from django.apps import apps
from django.core.management.base import BaseCommand

from events.handlers.serializers import DashboardSerializer

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Print dashboard statistics for the loaded event set.
    """

    help = "Show event, registration and branch statistics"

    def add_arguments(self, parser):
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the summary as JSON",
        )
        parser.add_argument(
            "--branches",
            action="store_true",
            help="Include per-branch totals",
        )

    def handle(self, *args, **options):
        """Main command handler."""
        summary = apps.get_app_config("events").engine.summary()

        if options["json"]:
            self.stdout.write(json.dumps(DashboardSerializer(summary).data, indent=2))
            return

        self.stdout.write(self.style.SUCCESS("Event statistics"))
        self.stdout.write(f"  Total events:        {summary.total_events}")
        self.stdout.write(f"  Upcoming events:     {summary.upcoming_events}")
        self.stdout.write(f"  Total registrations: {summary.total_registrations}")
        self.stdout.write(f"  Venues:              {summary.total_venues}")

        popular = summary.most_popular_event
        if popular is not None:
            self.stdout.write(
                f"  Most popular:        {popular.name} "
                f"({popular.registered_count} / {popular.capacity} registered)"
            )

        if options["branches"]:
            self.stdout.write(self.style.SUCCESS("Branches"))
            for activity in summary.branches:
                self.stdout.write(
                    f"  {activity.branch.name}: {activity.event_count} events, "
                    f"{activity.registration_count} registrations"
                )
        logger.debug("Printed statistics for %d events", summary.total_events)
