from calendar_events.querysets import CalendarEventQuerySet, RecurringQuerySetMixin
from common.managers import SoftDeleteManager
from organizations.managers import BaseOrganizationModelManager


class RecurringManagerMixin:
    """
    Mixin for managers that provides recurring functionality.
    Should be used with managers that inherit from BaseOrganizationModelManager.
    The QuerySet should also inherit from RecurringQuerySetMixin.
    """

    def get_queryset(self) -> RecurringQuerySetMixin:
        raise NotImplementedError("Concrete managers must implement get_queryset")

    def filter_master_recurring_objects(self):
        """Filter to get only master recurring objects (not instances)."""
        return self.get_queryset().filter_master_recurring_objects()

    def filter_recurring_instances(self):
        """Filter to get only recurring instances (not masters)."""
        return self.get_queryset().filter_recurring_instances()

    def filter_recurring_objects(self):
        """Filter to get objects that have recurrence rules."""
        return self.get_queryset().filter_recurring_objects()

    def filter_non_recurring_objects(self):
        """Filter to get objects that don't have recurrence rules."""
        return self.get_queryset().filter_non_recurring_objects()

    def filter_instances_of(self, parent):
        """Filter to get the generated instances of a single recurring parent."""
        return self.get_queryset().filter_instances_of(parent)

    def with_recurrence_parent(self):
        return self.get_queryset().with_recurrence_parent()


class CalendarEventManager(SoftDeleteManager, BaseOrganizationModelManager, RecurringManagerMixin):
    """Custom manager for CalendarEvent model to handle specific queries."""

    queryset_class = CalendarEventQuerySet

    def get_queryset(self) -> CalendarEventQuerySet:
        return super().get_queryset()

    def with_common_relations(self):
        return self.get_queryset().with_common_relations()

    def in_date_range(self, start, end):
        return self.get_queryset().in_date_range(start, end)

    def upcoming(self, now):
        return self.get_queryset().upcoming(now)
