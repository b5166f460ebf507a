"""Django management command for rebuilding the instances of recurring events."""

from typing import Any

from django.core.management.base import BaseCommand, CommandParser

from calendar_events.models import CalendarEvent
from organizations.models import Organization


class Command(BaseCommand):
    """Management command for regenerating recurrence instances."""

    help = "Tear down and regenerate the instances of recurring calendar events"  # noqa: A003

    def add_arguments(self, parser: CommandParser) -> None:
        """Add command arguments."""
        parser.add_argument(
            "--event-id",
            type=int,
            help="Recurring event ID to regenerate (optional, regenerates all if not specified)",
        )
        parser.add_argument(
            "--organization-id",
            type=int,
            help="Organization ID to regenerate events for (optional)",
        )
        parser.add_argument(
            "--max-instances",
            type=int,
            help="Cap on instances per event (default: RECURRENCE_MAX_GENERATED_INSTANCES)",
        )
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Show what would be regenerated without changing anything",
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the regenerate command."""
        event_id = options.get("event_id")
        organization_id = options.get("organization_id")
        max_instances = options.get("max_instances")
        dry_run = options["dry_run"]

        events_qs = CalendarEvent.objects.filter_master_recurring_objects()

        if organization_id:
            try:
                organization = Organization.objects.get(id=organization_id)
            except Organization.DoesNotExist:
                self.stdout.write(self.style.ERROR(f"Organization {organization_id} not found"))
                return
            events_qs = events_qs.filter_by_organization(organization.id)

        if event_id:
            events_qs = events_qs.filter(id=event_id)

        events = list(events_qs.select_related("organization"))

        if not events:
            self.stdout.write(self.style.SUCCESS("No recurring events to regenerate"))
            return

        self.stdout.write(f"Found {len(events)} recurring events")

        if dry_run:
            self.stdout.write(self.style.WARNING("DRY RUN MODE - No changes will be made"))

        from di_core.containers import container

        if not container:
            raise RuntimeError("DI container is not initialized")

        calendar_event_service = container.calendar_event_service()
        recurrence_service = calendar_event_service.recurrence_service
        if max_instances is None:
            max_instances = calendar_event_service.max_generated_instances

        regenerated_count = 0
        failed_count = 0

        for event in events:
            self.stdout.write(
                f"Processing event {event.id} ({event.recurrence_rule}) for "
                f"{event.organization.name} - {event.title}"
            )

            if dry_run:
                expected = len(recurrence_service.generate_instances(event, max_instances))
                self.stdout.write(f"  → Would regenerate {expected} instances")
                regenerated_count += 1
                continue

            try:
                created = recurrence_service.regenerate_instances(event, max_instances)
            except Exception as e:  # noqa: BLE001
                self.stdout.write(self.style.ERROR(f"  ✗ Failed to regenerate: {e!s}"))
                failed_count += 1
                continue

            self.stdout.write(self.style.SUCCESS(f"  ✓ Regenerated {created} instances"))
            regenerated_count += 1

        if dry_run:
            self.stdout.write(
                self.style.WARNING(f"DRY RUN: Would regenerate {regenerated_count} events")
            )
            return

        self.stdout.write(
            self.style.SUCCESS(f"Successfully regenerated {regenerated_count} recurring events")
        )
        if failed_count:
            self.stdout.write(
                self.style.ERROR(f"Failed to regenerate {failed_count} recurring events")
            )
