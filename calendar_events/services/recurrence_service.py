import datetime
import logging
from collections.abc import Iterable
from typing import Annotated, Any

from django.db import transaction
from django.utils import timezone

from dependency_injector.wiring import Provide, inject

from calendar_events.constants import DEFAULT_MAX_RECURRENCE_INSTANCES, SERIES_SHAREABLE_FIELDS
from calendar_events.exceptions import InvalidSeriesFieldError, NotARecurringEventError
from calendar_events.models import CalendarEvent
from calendar_events.recurrence_utils import RecurrenceExpander


logger = logging.getLogger(__name__)


class RecurrenceService:
    """
    Persists and maintains the instances generated from recurring parent events.

    Every write is a single bulk statement run inside a transaction, so a failure
    never leaves part of a series behind.
    """

    @inject
    def __init__(
        self,
        default_max_instances: Annotated[
            int | None, Provide["config.RECURRENCE_DEFAULT_MAX_INSTANCES"]
        ] = None,
        strict_rules: Annotated[bool | None, Provide["config.RECURRENCE_STRICT_RULES"]] = None,
    ) -> None:
        if default_max_instances is None:
            default_max_instances = DEFAULT_MAX_RECURRENCE_INSTANCES
        self.default_max_instances = int(default_max_instances)
        self.strict_rules = bool(strict_rules)

    def generate_instances(
        self, parent: CalendarEvent, max_instances: int | None = None
    ) -> list[CalendarEvent]:
        """
        Build the unsaved instances of a recurring parent.
        :param parent: the recurring parent event.
        :param max_instances: cap on the number of instances, defaults to the configured cap.
        :return: instances ordered by start_at.
        """
        if max_instances is None:
            max_instances = self.default_max_instances
        return RecurrenceExpander.generate(parent, max_instances, strict=self.strict_rules)

    @transaction.atomic()
    def persist_instances(self, instances: Iterable[CalendarEvent]) -> int:
        """
        Insert the given instances with one bulk INSERT. Every row gets the same
        created/modified timestamp.

        One statement holds the whole series on PostgreSQL. SQLite caps the number of
        query parameters, so there Django splits large series into several INSERTs.
        """
        instances = list(instances)
        if not instances:
            return 0

        now = timezone.now()
        for instance in instances:
            instance.created = now
            instance.modified = now

        CalendarEvent.objects.bulk_create(instances)
        logger.info(
            "Persisted %s recurrence instances for event %s",
            len(instances),
            instances[0].recurrence_parent_id,
        )
        return len(instances)

    @transaction.atomic()
    def update_instances(self, parent: CalendarEvent, changes: dict[str, Any]) -> int:
        """
        Apply `changes` to every live instance of `parent` with a single UPDATE.
        Only fields shared by the whole series are accepted.
        """
        invalid_fields = [name for name in changes if name not in SERIES_SHAREABLE_FIELDS]
        if invalid_fields:
            raise InvalidSeriesFieldError(invalid_fields)
        if not changes:
            return 0

        updated = CalendarEvent.objects.filter_instances_of(parent).update(
            **changes, modified=timezone.now()
        )
        logger.info("Updated %s recurrence instances for event %s", updated, parent.pk)
        return updated

    @transaction.atomic()
    def delete_instances(
        self, parent: CalendarEvent, deleted_at: datetime.datetime | None = None
    ) -> int:
        """
        Soft-delete every live instance of `parent` with a single UPDATE. The parent
        itself is left untouched. Calling it again affects no rows.
        """
        deleted = CalendarEvent.objects.filter_instances_of(parent).soft_delete(deleted_at)
        logger.info("Soft-deleted %s recurrence instances for event %s", deleted, parent.pk)
        return deleted

    @transaction.atomic()
    def restore_instances(self, parent: CalendarEvent, deleted_since: datetime.datetime) -> int:
        """
        Restore the instances of `parent` trashed at or after `deleted_since`, the
        ones removed together with the parent.
        """
        restored = (
            CalendarEvent.all_objects.filter_instances_of(parent)
            .filter(deleted_at__gte=deleted_since)
            .restore()
        )
        logger.info("Restored %s recurrence instances for event %s", restored, parent.pk)
        return restored

    @transaction.atomic()
    def force_delete_instances(self, parent: CalendarEvent) -> int:
        """
        Permanently delete every instance of `parent`, trashed ones included.
        """
        deleted, _ = CalendarEvent.all_objects.filter_instances_of(parent).delete()
        logger.info("Permanently deleted %s recurrence instances for event %s", deleted, parent.pk)
        return deleted

    @transaction.atomic()
    def regenerate_instances(self, parent: CalendarEvent, max_instances: int | None = None) -> int:
        """
        Tear down and rebuild the instances of `parent`.

        The parent row is locked for the duration of the transaction so concurrent
        regenerations of the same series run one after the other.
        :return: number of instances created.
        """
        if parent.is_recurring_instance:
            raise NotARecurringEventError()

        CalendarEvent.all_objects.select_for_update().filter(pk=parent.pk).first()
        self.delete_instances(parent)

        if not parent.is_recurring or parent.is_trashed:
            return 0

        return self.persist_instances(self.generate_instances(parent, max_instances))
