import logging
from typing import Annotated, Any

from django.core.exceptions import FieldDoesNotExist
from django.db import transaction

from dependency_injector.wiring import Provide, inject

from calendar_events.constants import RECURRENCE_FIELDS, SERIES_SHAREABLE_FIELDS
from calendar_events.models import CalendarEvent
from calendar_events.services.dataclasses import CalendarEventInputData
from calendar_events.services.recurrence_service import RecurrenceService
from common.exceptions import OrganizationChangeNotAllowedError
from organizations.models import Organization
from users.models import User


logger = logging.getLogger(__name__)

DEFAULT_MAX_GENERATED_INSTANCES = 1000

READ_ONLY_FIELDS = ("id", "organization", "recurrence_parent", "created", "modified", "deleted_at")


class CalendarEventService:
    """
    Creates, edits and removes calendar events, keeping the instances of recurring
    events in step with their parent.
    """

    @inject
    def __init__(
        self,
        recurrence_service: Annotated[
            "RecurrenceService | None", Provide["recurrence_service"]
        ] = None,
        max_generated_instances: Annotated[
            int | None, Provide["config.RECURRENCE_MAX_GENERATED_INSTANCES"]
        ] = None,
    ) -> None:
        self.recurrence_service = recurrence_service or RecurrenceService()
        if max_generated_instances is None:
            max_generated_instances = DEFAULT_MAX_GENERATED_INSTANCES
        self.max_generated_instances = int(max_generated_instances)

    @transaction.atomic()
    def create_event(
        self,
        organization: Organization,
        data: CalendarEventInputData,
        creator: User | None = None,
    ) -> CalendarEvent:
        """
        Create an event. A recurring event gets its instances generated right away.
        """
        event = CalendarEvent.objects.create(
            organization=organization, creator=creator, **data.to_model_fields()
        )

        if event.is_recurring and not event.is_recurring_instance:
            instances = self.recurrence_service.generate_instances(
                event, max_instances=self.max_generated_instances
            )
            self.recurrence_service.persist_instances(instances)
            logger.info(
                "Created recurring event %s with %s instances (%s)",
                event.pk,
                len(instances),
                event.recurrence_rule,
            )
        return event

    def _validate_changes(self, changes: dict[str, Any]) -> None:
        for field_name in changes:
            try:
                field = CalendarEvent._meta.get_field(field_name)
            except FieldDoesNotExist as e:
                raise ValueError(f"Unknown calendar event field: {field_name}") from e
            # get_field also resolves column names such as `recurrence_parent_id`
            if field.name == "organization":
                raise OrganizationChangeNotAllowedError()
            if field.name in READ_ONLY_FIELDS:
                raise ValueError(f"Field `{field_name}` cannot be changed through an update")

    @transaction.atomic()
    def update_event(
        self,
        event: CalendarEvent,
        changes: dict[str, Any],
        apply_to_series: bool = False,
    ) -> CalendarEvent:
        """
        Apply `changes` to `event`.

        When the recurrence rule or its end date changed, the series is torn down and
        rebuilt (or just torn down when the rule was cleared). Otherwise, with
        `apply_to_series`, the shareable fields are pushed to all live instances in one
        UPDATE. Editing an instance only touches that instance.
        """
        self._validate_changes(changes)
        was_instance = event.is_recurring_instance

        changed_fields = [name for name, value in changes.items() if getattr(event, name) != value]
        for name, value in changes.items():
            setattr(event, name, value)

        recurrence_changed = any(event.tracker.has_changed(name) for name in RECURRENCE_FIELDS)
        event.save()

        if was_instance:
            return event

        if recurrence_changed:
            if event.is_recurring:
                created = self.recurrence_service.regenerate_instances(
                    event, max_instances=self.max_generated_instances
                )
                logger.info("Regenerated %s instances for event %s", created, event.pk)
            else:
                self.recurrence_service.delete_instances(event)
                logger.info("Recurrence cleared for event %s", event.pk)
            return event

        if apply_to_series and event.is_recurring:
            series_changes = {
                name: changes[name] for name in changed_fields if name in SERIES_SHAREABLE_FIELDS
            }
            if series_changes:
                self.recurrence_service.update_instances(event, series_changes)

        return event

    @transaction.atomic()
    def delete_event(self, event: CalendarEvent) -> CalendarEvent:
        """
        Soft-delete `event`. A recurring parent takes its live instances with it.
        """
        if event.is_trashed:
            return event

        event.soft_delete()
        if not event.is_recurring_instance:
            self.recurrence_service.delete_instances(event, deleted_at=event.deleted_at)
        return event

    @transaction.atomic()
    def restore_event(self, event: CalendarEvent) -> CalendarEvent:
        """
        Restore a soft-deleted event and the instances that were trashed along with it.
        """
        deleted_since = event.deleted_at
        if deleted_since is None:
            return event

        event.restore()
        if not event.is_recurring_instance:
            self.recurrence_service.restore_instances(event, deleted_since)
        return event

    @transaction.atomic()
    def force_delete_event(self, event: CalendarEvent) -> None:
        """
        Permanently delete `event` and every one of its instances, trashed ones included.
        """
        event_id = event.pk
        if not event.is_recurring_instance:
            self.recurrence_service.force_delete_instances(event)
        event.force_delete()
        logger.info("Permanently deleted event %s", event_id)
