import datetime

from .constants import RecurrenceFrequency
from .models import CalendarEvent


class CalendarEventFactory:
    @staticmethod
    def create_event(
        organization,
        start_at: datetime.datetime,
        end_at: datetime.datetime | None = None,
        title: str = "Event",
        **kwargs,
    ) -> CalendarEvent:
        """
        Create a one-off calendar event row.
        """
        return CalendarEvent.objects.create(
            organization=organization,
            title=title,
            start_at=start_at,
            end_at=end_at,
            **kwargs,
        )

    @staticmethod
    def create_recurring_event(
        organization,
        start_at: datetime.datetime,
        end_at: datetime.datetime | None = None,
        frequency: str = RecurrenceFrequency.DAILY,
        recurrence_end_date: datetime.datetime | None = None,
        title: str = "Recurring event",
        **kwargs,
    ) -> CalendarEvent:
        """
        Create a recurring parent row without generating its instances.

        Args:
            organization: Organization the event belongs to
            start_at: Event start time
            end_at: Event end time (optional)
            frequency: Recurrence rule token (DAILY, WEEKLY, MONTHLY, YEARLY)
            recurrence_end_date: Last moment an instance may start (optional)
            title: Event title
            **kwargs: Additional CalendarEvent fields

        Returns:
            CalendarEvent instance carrying the recurrence rule
        """
        return CalendarEvent.objects.create(
            organization=organization,
            title=title,
            start_at=start_at,
            end_at=end_at,
            recurrence_rule=frequency,
            recurrence_end_date=recurrence_end_date,
            **kwargs,
        )
