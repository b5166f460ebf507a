import datetime
from collections.abc import Iterable
from typing import TYPE_CHECKING

from django.db.models import Q

from common.querysets import SoftDeleteQuerySet
from organizations.querysets import BaseOrganizationModelQuerySet


if TYPE_CHECKING:
    from calendar_events.models import CalendarEvent


class RecurringQuerySetMixin:
    """
    Mixin for querysets that provides recurring functionality.
    Should be used with querysets that inherit from BaseOrganizationModelQuerySet.
    """

    def filter_master_recurring_objects(self):
        """Filter to get only master recurring objects (not instances)."""
        return self.filter(recurrence_parent__isnull=True, recurrence_rule__isnull=False).exclude(
            recurrence_rule=""
        )

    def filter_recurring_instances(self):
        """Filter to get only recurring instances (not masters)."""
        return self.filter(recurrence_parent__isnull=False)

    def filter_recurring_objects(self):
        """Filter to get objects that have recurrence rules."""
        return self.filter(recurrence_rule__isnull=False).exclude(recurrence_rule="")

    def filter_non_recurring_objects(self):
        """Filter to get objects that don't have recurrence rules."""
        return self.filter(Q(recurrence_rule__isnull=True) | Q(recurrence_rule=""))

    def filter_instances_of(self, parent: "CalendarEvent"):
        """Filter to get the generated instances of a single recurring parent."""
        return self.filter(recurrence_parent_id=parent.pk)

    def with_recurrence_parent(self):
        """Join each instance with its parent so reading it costs no extra query."""
        return self.select_related("recurrence_parent")


class CalendarEventQuerySet(
    RecurringQuerySetMixin, SoftDeleteQuerySet, BaseOrganizationModelQuerySet
):
    """
    Custom QuerySet for CalendarEvent model to handle specific queries.
    """

    def with_common_relations(self):
        """
        Loads the relations the calendar listing always displays.
        """
        return self.select_related("creator", "organization")

    def in_date_range(self, start: datetime.datetime, end: datetime.datetime):
        """
        Returns events starting inside the inclusive [start, end] window.
        """
        return self.filter(start_at__gte=start, start_at__lte=end)

    def of_types(self, types: Iterable[str]):
        types = list(types)
        if not types:
            return self
        return self.filter(type__in=types)

    def with_statuses(self, statuses: Iterable[str]):
        statuses = list(statuses)
        if not statuses:
            return self
        return self.filter(status__in=statuses)

    def search(self, term: str | None):
        """
        Case-insensitive match on title, location or notes. Blank terms match everything.
        """
        term = (term or "").strip()
        if not term:
            return self
        return self.filter(
            Q(title__icontains=term) | Q(location__icontains=term) | Q(notes__icontains=term)
        )

    def upcoming(self, now: datetime.datetime):
        return self.filter(start_at__gte=now).order_by("start_at")
