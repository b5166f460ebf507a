from django.db.models import TextChoices


class RecurrenceFrequency(TextChoices):
    DAILY = "DAILY", "Daily"
    WEEKLY = "WEEKLY", "Weekly"
    MONTHLY = "MONTHLY", "Monthly"
    YEARLY = "YEARLY", "Yearly"


class CalendarEventType(TextChoices):
    MEETING = "meeting", "Meeting"
    CALL = "call", "Call"
    LUNCH = "lunch", "Lunch"
    DEMO = "demo", "Demo"
    FOLLOW_UP = "follow_up", "Follow-up"
    OTHER = "other", "Other"


class CalendarEventStatus(TextChoices):
    SCHEDULED = "scheduled", "Scheduled"
    CONFIRMED = "confirmed", "Confirmed"
    CANCELLED = "cancelled", "Cancelled"
    COMPLETED = "completed", "Completed"


class CreationSource(TextChoices):
    WEB = "web", "Web"
    WEB_FORM = "web_form", "Web Form"
    SYSTEM = "system", "System"
    IMPORT = "import", "Import"
    EMAIL = "email", "Email"


DEFAULT_MAX_RECURRENCE_INSTANCES = 100

# Fields whose change means the series has to be rebuilt.
RECURRENCE_FIELDS = ("recurrence_rule", "recurrence_end_date")

# Fields copied from a recurring parent into each generated instance.
INHERITED_FIELDS = (
    "organization_id",
    "creator_id",
    "title",
    "type",
    "status",
    "is_all_day",
    "location",
    "room_booking",
    "meeting_url",
    "reminder_minutes_before",
    "attendees",
    "notes",
    "agenda",
    "creation_source",
)

# Fields a series edit may push to every live instance. Minutes are per occurrence.
SERIES_SHAREABLE_FIELDS = (
    "title",
    "type",
    "status",
    "is_all_day",
    "location",
    "room_booking",
    "meeting_url",
    "reminder_minutes_before",
    "attendees",
    "notes",
    "agenda",
)
