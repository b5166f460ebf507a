import datetime

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from model_utils import FieldTracker

from calendar_events.constants import (
    RECURRENCE_FIELDS,
    CalendarEventStatus,
    CalendarEventType,
    CreationSource,
)
from calendar_events.exceptions import RecurringInstanceAsParentError
from calendar_events.managers import CalendarEventManager
from common.models import SoftDeleteModel
from organizations.models import OrganizationModel


class CalendarEvent(OrganizationModel, SoftDeleteModel):
    """
    A calendar entry owned by an organization (team).

    An event with a `recurrence_rule` is a recurring parent. The rows generated from it
    point back through `recurrence_parent` and never carry a rule of their own.
    """

    creator = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="created_calendar_events",
    )

    title = models.CharField(max_length=255)
    start_at = models.DateTimeField(db_index=True)
    end_at = models.DateTimeField(null=True, blank=True)
    is_all_day = models.BooleanField(default=False)

    type = models.CharField(
        max_length=32, choices=CalendarEventType.choices, default=CalendarEventType.MEETING
    )
    status = models.CharField(
        max_length=32, choices=CalendarEventStatus.choices, default=CalendarEventStatus.SCHEDULED
    )

    location = models.CharField(max_length=255, blank=True)
    room_booking = models.CharField(max_length=255, blank=True)
    meeting_url = models.URLField(max_length=500, blank=True)
    reminder_minutes_before = models.PositiveIntegerField(null=True, blank=True)
    attendees = models.JSONField(
        default=list, blank=True, help_text=_("List of {name, email} objects.")
    )
    notes = models.TextField(blank=True)
    agenda = models.TextField(blank=True)
    minutes = models.TextField(null=True, blank=True)

    creation_source = models.CharField(
        max_length=32, choices=CreationSource.choices, default=CreationSource.WEB
    )

    recurrence_rule = models.CharField(
        max_length=32,
        null=True,
        blank=True,
        help_text=_("One of DAILY, WEEKLY, MONTHLY or YEARLY. Empty for one-off events."),
    )
    recurrence_end_date = models.DateTimeField(null=True, blank=True)
    recurrence_parent = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="recurrence_instances",
    )

    objects: CalendarEventManager = CalendarEventManager()
    all_objects: CalendarEventManager = CalendarEventManager(include_trashed=True)

    tracker = FieldTracker(fields=list(RECURRENCE_FIELDS))

    class Meta:
        ordering = ("start_at",)
        indexes = (
            models.Index(fields=["organization", "start_at"], name="cal_event_org_start_idx"),
            models.Index(
                fields=["recurrence_parent", "deleted_at"], name="cal_event_parent_deleted_idx"
            ),
        )

    def __str__(self):
        return f"{self.title} ({self.start_at:%Y-%m-%d %H:%M})"

    @property
    def is_recurring(self) -> bool:
        return bool(self.recurrence_rule)

    @property
    def is_recurring_instance(self) -> bool:
        return self.recurrence_parent_id is not None

    @property
    def duration(self) -> datetime.timedelta | None:
        if self.end_at is None:
            return None
        return self.end_at - self.start_at

    @property
    def duration_minutes(self) -> int | None:
        duration = self.duration
        if duration is None:
            return None
        return int(duration.total_seconds() // 60)

    def save(self, *args, **kwargs):
        if self.is_recurring_instance and self.is_recurring:
            raise RecurringInstanceAsParentError()
        return super().save(*args, **kwargs)
