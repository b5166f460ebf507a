import datetime

import pytest
from dateutil.relativedelta import relativedelta

from calendar_events.constants import CalendarEventType, CreationSource, RecurrenceFrequency
from calendar_events.exceptions import InvalidRecurrenceRuleError
from calendar_events.models import CalendarEvent
from calendar_events.recurrence_utils import RecurrenceExpander


# Helpers
def _dt(year, month, day, hour=9, minute=0):
    return datetime.datetime(year, month, day, hour, minute, tzinfo=datetime.UTC)


def _parent(
    start_at=None,
    end_at=None,
    recurrence_rule=RecurrenceFrequency.DAILY,
    recurrence_end_date=None,
    **kwargs,
):
    start_at = start_at or _dt(2025, 1, 1)
    defaults = {
        "id": 10,
        "organization_id": 1,
        "creator_id": 2,
        "title": "Weekly sync",
        "type": CalendarEventType.MEETING,
        "location": "Room 4",
        "room_booking": "R4-morning",
        "meeting_url": "https://meet.example.com/sync",
        "attendees": [{"name": "Ana", "email": "ana@example.com"}],
        "agenda": "Status updates",
        "minutes": "Parent minutes",
        "creation_source": CreationSource.WEB_FORM,
        "end_at": end_at if end_at is not None else start_at + datetime.timedelta(hours=1),
    }
    defaults.update(kwargs)
    return CalendarEvent(
        start_at=start_at,
        recurrence_rule=recurrence_rule,
        recurrence_end_date=recurrence_end_date,
        **defaults,
    )


def _starts(instances):
    return [instance.start_at for instance in instances]


def test_generate_returns_empty_list_without_rule():
    parent = _parent(recurrence_rule=None, recurrence_end_date=_dt(2025, 2, 1))

    assert RecurrenceExpander.generate(parent) == []


def test_daily_rule_with_five_day_window_generates_five_instances():
    start = _dt(2025, 1, 1)
    parent = _parent(start_at=start, recurrence_end_date=start + datetime.timedelta(days=5))

    instances = RecurrenceExpander.generate(parent)

    assert _starts(instances) == [start + datetime.timedelta(days=n) for n in range(1, 6)]
    assert len(set(_starts(instances))) == 5


@pytest.mark.parametrize(
    ("frequency", "end_delta", "expected_count"),
    [
        (RecurrenceFrequency.DAILY, relativedelta(days=5), 5),
        (RecurrenceFrequency.WEEKLY, relativedelta(weeks=4), 4),
        (RecurrenceFrequency.MONTHLY, relativedelta(months=3), 3),
        (RecurrenceFrequency.YEARLY, relativedelta(years=2), 2),
    ],
)
def test_instance_landing_on_end_bound_is_included(frequency, end_delta, expected_count):
    start = _dt(2025, 3, 10)
    parent = _parent(start_at=start, recurrence_rule=frequency, recurrence_end_date=start + end_delta)

    instances = RecurrenceExpander.generate(parent)

    assert len(instances) == expected_count
    assert instances[-1].start_at == start + end_delta


def test_monthly_rule_clamps_to_month_end_without_drifting():
    start = _dt(2025, 1, 31)
    parent = _parent(
        start_at=start,
        recurrence_rule=RecurrenceFrequency.MONTHLY,
        recurrence_end_date=start + relativedelta(months=3),
    )

    instances = RecurrenceExpander.generate(parent)

    assert _starts(instances) == [_dt(2025, 2, 28), _dt(2025, 3, 31), _dt(2025, 4, 30)]


def test_yearly_rule_from_leap_day():
    start = _dt(2024, 2, 29)
    parent = _parent(
        start_at=start,
        recurrence_rule=RecurrenceFrequency.YEARLY,
        recurrence_end_date=start + relativedelta(years=2),
    )

    instances = RecurrenceExpander.generate(parent)

    assert _starts(instances) == [_dt(2025, 2, 28), _dt(2026, 2, 28)]


def test_end_date_before_start_generates_nothing():
    start = _dt(2025, 1, 15)
    parent = _parent(
        start_at=start,
        recurrence_rule=RecurrenceFrequency.WEEKLY,
        recurrence_end_date=start - datetime.timedelta(weeks=1),
    )

    assert RecurrenceExpander.generate(parent) == []


def test_end_date_equal_to_start_generates_nothing():
    start = _dt(2025, 1, 15)
    parent = _parent(start_at=start, recurrence_end_date=start)

    assert RecurrenceExpander.generate(parent) == []


def test_unknown_rule_behaves_like_daily():
    start = _dt(2025, 1, 1)
    end = start + datetime.timedelta(days=7)
    invalid = _parent(start_at=start, recurrence_rule="INVALID_RULE", recurrence_end_date=end)
    daily = _parent(start_at=start, recurrence_rule=RecurrenceFrequency.DAILY, recurrence_end_date=end)

    assert _starts(RecurrenceExpander.generate(invalid)) == _starts(
        RecurrenceExpander.generate(daily)
    )


def test_unknown_rule_is_logged(caplog):
    parent = _parent(recurrence_rule="FORTNIGHTLY", recurrence_end_date=_dt(2025, 1, 3))

    with caplog.at_level("WARNING", logger="calendar_events.recurrence_utils"):
        RecurrenceExpander.generate(parent)

    assert "FORTNIGHTLY" in caplog.text


def test_unknown_rule_raises_in_strict_mode():
    parent = _parent(recurrence_rule="INVALID_RULE", recurrence_end_date=_dt(2025, 1, 3))

    with pytest.raises(InvalidRecurrenceRuleError, match="INVALID_RULE"):
        RecurrenceExpander.generate(parent, strict=True)


def test_rule_tokens_are_case_insensitive():
    assert RecurrenceExpander.resolve_frequency(" weekly ") == RecurrenceFrequency.WEEKLY
    assert RecurrenceExpander.resolve_frequency("") is None
    assert RecurrenceExpander.resolve_frequency(None) is None


def test_missing_end_date_is_bounded_to_one_year():
    start = _dt(2025, 1, 1)
    parent = _parent(start_at=start, recurrence_end_date=None)

    instances = RecurrenceExpander.generate(parent, max_instances=1000)

    assert RecurrenceExpander.resolve_end_bound(parent) == _dt(2026, 1, 1)
    assert len(instances) == 365
    assert all(instance.start_at <= _dt(2026, 1, 1) for instance in instances)


def test_missing_end_date_weekly_rule():
    start = _dt(2025, 1, 1)
    parent = _parent(start_at=start, recurrence_rule=RecurrenceFrequency.WEEKLY)

    instances = RecurrenceExpander.generate(parent)

    assert len(instances) == 52
    assert instances[-1].start_at == start + datetime.timedelta(weeks=52)


@pytest.mark.parametrize("max_instances", [0, 1, 10, 100])
def test_cap_is_respected(max_instances):
    parent = _parent(recurrence_end_date=_dt(2027, 1, 1))

    instances = RecurrenceExpander.generate(parent, max_instances=max_instances)

    assert len(instances) == max_instances


def test_default_cap_is_one_hundred():
    parent = _parent(recurrence_end_date=_dt(2027, 1, 1))

    assert len(RecurrenceExpander.generate(parent)) == 100


@pytest.mark.parametrize(
    "frequency",
    [
        RecurrenceFrequency.DAILY,
        RecurrenceFrequency.WEEKLY,
        RecurrenceFrequency.MONTHLY,
        RecurrenceFrequency.YEARLY,
    ],
)
def test_instances_are_one_period_apart(frequency):
    start = _dt(2024, 1, 31)
    parent = _parent(
        start_at=start, recurrence_rule=frequency, recurrence_end_date=start + relativedelta(years=5)
    )

    instances = RecurrenceExpander.generate(parent, max_instances=20)

    for n, instance in enumerate(instances, start=1):
        assert instance.start_at == start + RecurrenceExpander.period_delta(frequency, n)
    starts = _starts(instances)
    assert starts == sorted(set(starts))


def test_instances_inherit_parent_fields():
    parent = _parent(recurrence_end_date=_dt(2025, 1, 4))

    instances = RecurrenceExpander.generate(parent)

    assert len(instances) == 3
    for instance in instances:
        assert instance.organization_id == parent.organization_id
        assert instance.creator_id == parent.creator_id
        assert instance.title == parent.title
        assert instance.location == parent.location
        assert instance.room_booking == parent.room_booking
        assert instance.meeting_url == parent.meeting_url
        assert instance.agenda == parent.agenda
        assert instance.attendees == parent.attendees
        assert instance.attendees is not parent.attendees
        assert instance.creation_source == CreationSource.WEB_FORM
        assert instance.minutes is None
        assert instance.recurrence_rule is None
        assert instance.recurrence_end_date is None
        assert instance.recurrence_parent_id == parent.id
        assert instance.duration == datetime.timedelta(hours=1)
        assert instance.pk is None


def test_parent_without_end_time_produces_instances_without_end_time():
    parent = _parent(recurrence_end_date=_dt(2025, 1, 3))
    parent.end_at = None

    instances = RecurrenceExpander.generate(parent)

    assert len(instances) == 2
    assert all(instance.end_at is None for instance in instances)


def test_generate_is_repeatable():
    parent = _parent(
        recurrence_rule=RecurrenceFrequency.WEEKLY, recurrence_end_date=_dt(2025, 3, 1)
    )

    def snapshot(instances):
        return [
            (i.start_at, i.end_at, i.title, i.location, i.attendees, i.recurrence_parent_id)
            for i in instances
        ]

    assert snapshot(RecurrenceExpander.generate(parent)) == snapshot(
        RecurrenceExpander.generate(parent)
    )


def test_period_delta_rejects_unknown_frequency():
    with pytest.raises(ValueError, match="Unsupported recurrence frequency"):
        RecurrenceExpander.period_delta("HOURLY")
