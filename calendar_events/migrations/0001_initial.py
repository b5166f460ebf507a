import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models

import model_utils.fields


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("organizations", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CalendarEvent",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "deleted_at",
                    models.DateTimeField(
                        blank=True, db_index=True, null=True, verbose_name="deleted at"
                    ),
                ),
                (
                    "created",
                    model_utils.fields.AutoCreatedField(
                        db_index=True,
                        default=django.utils.timezone.now,
                        editable=False,
                        verbose_name="created",
                    ),
                ),
                (
                    "modified",
                    model_utils.fields.AutoLastModifiedField(
                        db_index=True,
                        default=django.utils.timezone.now,
                        editable=False,
                        verbose_name="modified",
                    ),
                ),
                ("meta", models.JSONField(blank=True, default=dict, verbose_name="meta")),
                ("title", models.CharField(max_length=255)),
                ("start_at", models.DateTimeField(db_index=True)),
                ("end_at", models.DateTimeField(blank=True, null=True)),
                ("is_all_day", models.BooleanField(default=False)),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("meeting", "Meeting"),
                            ("call", "Call"),
                            ("lunch", "Lunch"),
                            ("demo", "Demo"),
                            ("follow_up", "Follow-up"),
                            ("other", "Other"),
                        ],
                        default="meeting",
                        max_length=32,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("scheduled", "Scheduled"),
                            ("confirmed", "Confirmed"),
                            ("cancelled", "Cancelled"),
                            ("completed", "Completed"),
                        ],
                        default="scheduled",
                        max_length=32,
                    ),
                ),
                ("location", models.CharField(blank=True, max_length=255)),
                ("room_booking", models.CharField(blank=True, max_length=255)),
                ("meeting_url", models.URLField(blank=True, max_length=500)),
                ("reminder_minutes_before", models.PositiveIntegerField(blank=True, null=True)),
                (
                    "attendees",
                    models.JSONField(
                        blank=True, default=list, help_text="List of {name, email} objects."
                    ),
                ),
                ("notes", models.TextField(blank=True)),
                ("agenda", models.TextField(blank=True)),
                ("minutes", models.TextField(blank=True, null=True)),
                (
                    "creation_source",
                    models.CharField(
                        choices=[
                            ("web", "Web"),
                            ("web_form", "Web Form"),
                            ("system", "System"),
                            ("import", "Import"),
                            ("email", "Email"),
                        ],
                        default="web",
                        max_length=32,
                    ),
                ),
                (
                    "recurrence_rule",
                    models.CharField(
                        blank=True,
                        help_text="One of DAILY, WEEKLY, MONTHLY or YEARLY. Empty for one-off events.",
                        max_length=32,
                        null=True,
                    ),
                ),
                ("recurrence_end_date", models.DateTimeField(blank=True, null=True)),
                (
                    "creator",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="created_calendar_events",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "organization",
                    models.ForeignKey(
                        help_text="The organization this model is associated with. Queries should use the `organization` field.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="+",
                        to="organizations.organization",
                    ),
                ),
                (
                    "recurrence_parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="recurrence_instances",
                        to="calendar_events.calendarevent",
                    ),
                ),
            ],
            options={
                "ordering": ("start_at",),
                "indexes": [
                    models.Index(
                        fields=["organization", "start_at"], name="cal_event_org_start_idx"
                    ),
                    models.Index(
                        fields=["recurrence_parent", "deleted_at"],
                        name="cal_event_parent_deleted_idx",
                    ),
                ],
            },
        ),
    ]
