class CalendarEventsError(Exception):
    """Base exception for calendar event errors"""

    default_message = ""

    def __init__(self, message: str | None = None):
        if message is None:
            message = self.default_message
        super().__init__(message)


# Recurrence Errors
class RecurrenceError(CalendarEventsError):
    """Errors related to recurrence processing"""

    pass


class InvalidRecurrenceRuleError(RecurrenceError):
    def __init__(self, rule: str):
        super().__init__(f"Invalid recurrence rule: {rule}")


class RecurringInstanceAsParentError(RecurrenceError):
    default_message = "A recurring instance cannot have a recurrence rule of its own"


# Service Errors
class EventManagementError(CalendarEventsError):
    """Base class for event management errors"""

    pass


class InvalidSeriesFieldError(EventManagementError):
    def __init__(self, field_names: list[str]):
        super().__init__(
            f"Fields cannot be applied to a recurring series: {', '.join(sorted(field_names))}"
        )


class NotARecurringEventError(EventManagementError):
    default_message = "Event is not a recurring parent event"
