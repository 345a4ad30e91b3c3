"""Inspection deadline calculation.

A triggering storm event must be followed by an inspection within
`INSPECTION_WINDOW_HOURS`. The raw deadline is then moved into the site's
working-hours window and finally off the weekend, in that order:

1. raw = event + 24h
2. before the window opens -> same day at start:00;
   at/after the window closes -> next day at start:00
3. Saturday -> Monday, Sunday -> Monday, keeping the time of day from step 2

The 24-hour window is elapsed time (a zone-aware event is advanced through UTC,
so DST transitions are honored); the clamp and the weekend skip then work on
the wall clock of the timestamp's own (site-local) zone.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Union

from .constants import INSPECTION_WINDOW_HOURS
from .errors import ConfigurationError, InvalidInputError
from .models import DEFAULT_WORKING_HOURS, InspectionDeadline, WorkingHours

logger = logging.getLogger(__name__)

_SATURDAY = 5
_SUNDAY = 6


def compute_deadline(
    event_at: datetime,
    working_hours: WorkingHours = DEFAULT_WORKING_HOURS,
) -> datetime:
    if not isinstance(working_hours, WorkingHours):
        raise ConfigurationError(f"working_hours must be a WorkingHours, got {type(working_hours).__name__}.")
    if not isinstance(event_at, datetime):
        raise InvalidInputError(f"event_at must be a datetime, got {type(event_at).__name__}.")

    deadline = _add_elapsed_hours(event_at, INSPECTION_WINDOW_HOURS)

    if deadline.hour < working_hours.start_hour:
        deadline = _at_start_of_day(deadline, working_hours)
        logger.debug("Deadline before working hours; moved to %s", deadline.isoformat())
    elif deadline.hour >= working_hours.end_hour:
        deadline = _at_start_of_day(deadline + timedelta(days=1), working_hours)
        logger.debug("Deadline after working hours; moved to %s", deadline.isoformat())

    weekday = deadline.weekday()
    if weekday == _SATURDAY:
        deadline = deadline + timedelta(days=2)
    elif weekday == _SUNDAY:
        deadline = deadline + timedelta(days=1)

    return deadline


def build_inspection_deadline(
    event_at: datetime,
    working_hours: WorkingHours = DEFAULT_WORKING_HOURS,
) -> InspectionDeadline:
    return InspectionDeadline(
        triggering_event_at=event_at,
        deadline_at=compute_deadline(event_at, working_hours),
        working_hours=working_hours,
    )


def is_inspection_timely(
    deadline: Union[InspectionDeadline, datetime],
    inspected_at: datetime,
) -> bool:
    """An inspection is timely when completed at or before the deadline."""
    deadline_at = deadline.deadline_at if isinstance(deadline, InspectionDeadline) else deadline
    try:
        return inspected_at <= deadline_at
    except TypeError as exc:
        raise InvalidInputError("Cannot compare naive and timezone-aware timestamps.") from exc


def is_within_working_hours(
    at: datetime,
    working_hours: WorkingHours = DEFAULT_WORKING_HOURS,
) -> bool:
    return at.weekday() < _SATURDAY and working_hours.contains_hour(at.hour)


def _at_start_of_day(value: datetime, working_hours: WorkingHours) -> datetime:
    return value.replace(hour=working_hours.start_hour, minute=0, second=0, microsecond=0)


def _add_elapsed_hours(value: datetime, hours: int) -> datetime:
    if value.tzinfo is None or value.utcoffset() is None:
        return value + timedelta(hours=hours)
    return (value.astimezone(timezone.utc) + timedelta(hours=hours)).astimezone(value.tzinfo)
