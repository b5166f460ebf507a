"""Recurrence utilities: expanding a recurring parent into its instances.

Notes:
- ``RecurrenceExpander.generate`` returns new, unsaved ``CalendarEvent`` model
  instances. Persisting them is the job of ``RecurrenceService``.
- Occurrence ``n`` is always computed as ``parent.start_at + n periods`` with
  ``relativedelta``, so month-end and leap-day clamping never accumulates
  (Jan 31 -> Feb 28 -> Mar 31 -> Apr 30).
- Nothing here reads the clock or touches the database.
"""

import copy
import datetime
import logging
from collections.abc import Iterator

from dateutil.relativedelta import relativedelta

from calendar_events.constants import (
    DEFAULT_MAX_RECURRENCE_INSTANCES,
    INHERITED_FIELDS,
    RecurrenceFrequency,
)
from calendar_events.exceptions import InvalidRecurrenceRuleError
from calendar_events.models import CalendarEvent


logger = logging.getLogger(__name__)

DEFAULT_RECURRENCE_WINDOW = relativedelta(years=1)

PERIOD_UNITS = {
    RecurrenceFrequency.DAILY: "days",
    RecurrenceFrequency.WEEKLY: "weeks",
    RecurrenceFrequency.MONTHLY: "months",
    RecurrenceFrequency.YEARLY: "years",
}


class RecurrenceExpander:
    """Helpers to turn a recurring parent event into its generated instances."""

    @staticmethod
    def resolve_frequency(rule: str | None, strict: bool = False) -> RecurrenceFrequency | None:
        """Map a stored rule token to a frequency.

        Returns ``None`` for an empty rule. Unknown tokens fall back to DAILY unless
        ``strict`` is set, in which case ``InvalidRecurrenceRuleError`` is raised.
        """
        if not rule:
            return None

        normalized = rule.strip().upper()
        if normalized in RecurrenceFrequency.values:
            return RecurrenceFrequency(normalized)

        if strict:
            raise InvalidRecurrenceRuleError(rule)

        logger.warning("Unknown recurrence rule %r, falling back to %s", rule, "DAILY")
        return RecurrenceFrequency.DAILY

    @staticmethod
    def resolve_end_bound(parent: CalendarEvent) -> datetime.datetime:
        """Return the explicit recurrence end date, or one year past the parent start."""
        if parent.recurrence_end_date is not None:
            return parent.recurrence_end_date
        return parent.start_at + DEFAULT_RECURRENCE_WINDOW

    @staticmethod
    def period_delta(frequency: RecurrenceFrequency, n: int = 1) -> relativedelta:
        try:
            unit = PERIOD_UNITS[RecurrenceFrequency(frequency)]
        except (KeyError, ValueError) as e:
            raise ValueError(f"Unsupported recurrence frequency: {frequency}") from e
        return relativedelta(**{unit: n})

    @classmethod
    def occurrence_starts(
        cls,
        parent: CalendarEvent,
        max_instances: int = DEFAULT_MAX_RECURRENCE_INSTANCES,
        strict: bool = False,
    ) -> Iterator[datetime.datetime]:
        """Yield instance start timestamps, beginning one period after the parent start."""
        frequency = cls.resolve_frequency(parent.recurrence_rule, strict=strict)
        if frequency is None or max_instances <= 0:
            return

        start = parent.start_at
        end_bound = cls.resolve_end_bound(parent)
        if end_bound <= start:
            return

        emitted = 0
        n = 1
        while emitted < max_instances:
            candidate = start + cls.period_delta(frequency, n)
            if candidate > end_bound:
                return
            yield candidate
            emitted += 1
            n += 1

    @staticmethod
    def build_instance(parent: CalendarEvent, start_at: datetime.datetime) -> CalendarEvent:
        """Build one unsaved instance of ``parent`` starting at ``start_at``."""
        duration = parent.duration
        fields = {name: copy.deepcopy(getattr(parent, name)) for name in INHERITED_FIELDS}
        return CalendarEvent(
            **fields,
            start_at=start_at,
            end_at=start_at + duration if duration is not None else None,
            minutes=None,
            recurrence_rule=None,
            recurrence_end_date=None,
            recurrence_parent=parent,
        )

    @classmethod
    def generate(
        cls,
        parent: CalendarEvent,
        max_instances: int = DEFAULT_MAX_RECURRENCE_INSTANCES,
        strict: bool = False,
    ) -> list[CalendarEvent]:
        """Return the unsaved instances of ``parent`` in chronological order.

        The result is empty when the parent has no rule or its end bound is not after
        its start, and never longer than ``max_instances``.
        """
        return [
            cls.build_instance(parent, start_at)
            for start_at in cls.occurrence_starts(parent, max_instances, strict=strict)
        ]
