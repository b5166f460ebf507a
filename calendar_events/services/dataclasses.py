import datetime
from dataclasses import asdict, dataclass
from dataclasses import field as dataclass_field
from typing import Any

from calendar_events.constants import CalendarEventStatus, CalendarEventType, CreationSource


@dataclass
class EventAttendeeData:
    name: str
    email: str


@dataclass
class CalendarEventInputData:
    title: str
    start_at: datetime.datetime
    end_at: datetime.datetime | None = None
    is_all_day: bool = False
    type: str = CalendarEventType.MEETING  # noqa: A003
    status: str = CalendarEventStatus.SCHEDULED
    location: str = ""
    room_booking: str = ""
    meeting_url: str = ""
    reminder_minutes_before: int | None = None
    attendees: list[EventAttendeeData] = dataclass_field(default_factory=list)
    notes: str = ""
    agenda: str = ""
    minutes: str | None = None
    creation_source: str = CreationSource.WEB
    recurrence_rule: str | None = None
    recurrence_end_date: datetime.datetime | None = None

    def to_model_fields(self) -> dict[str, Any]:
        """Return the keyword arguments used to build a CalendarEvent row."""
        return asdict(self)
