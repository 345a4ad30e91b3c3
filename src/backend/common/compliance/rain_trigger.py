"""Rain-trigger detection for EPA CGP Part 4.2 storm-event inspections."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta
from typing import Iterable

from .constants import INSPECTION_WINDOW_HOURS, RAIN_THRESHOLD_INCHES
from .deadline import build_inspection_deadline
from .errors import InvalidInputError
from .models import DEFAULT_WORKING_HOURS, PrecipitationReading, WeatherEvent, WorkingHours

logger = logging.getLogger(__name__)


def requires_inspection(amount_inches: float) -> bool:
    """Return True iff the precipitation amount meets the 0.25" trigger.

    The comparison is an exact `>=` against the threshold literal; there is no
    tolerance band. Negative, NaN or infinite amounts raise `InvalidInputError`.
    """
    if isinstance(amount_inches, bool) or not isinstance(amount_inches, (int, float)):
        raise InvalidInputError(f"Precipitation must be a number, got {amount_inches!r}.")
    if not math.isfinite(amount_inches):
        raise InvalidInputError(f"Precipitation must be finite, got {amount_inches!r}.")
    if amount_inches < 0:
        raise InvalidInputError(f"Precipitation cannot be negative, got {amount_inches!r}.")
    return amount_inches >= RAIN_THRESHOLD_INCHES


def aggregate_precipitation(
    readings: Iterable[PrecipitationReading],
    window_end: datetime,
    *,
    window_hours: int = INSPECTION_WINDOW_HOURS,
) -> float:
    """Total rainfall observed in the window `(window_end - window_hours, window_end]`.

    Several small events inside one window count together toward the trigger.
    """
    if window_hours <= 0:
        raise InvalidInputError(f"window_hours must be > 0, got {window_hours}.")
    window_start = window_end - timedelta(hours=window_hours)
    amounts = []
    for reading in readings:
        try:
            in_window = window_start < reading.observed_at <= window_end
        except TypeError as exc:
            raise InvalidInputError(
                "Cannot compare naive and timezone-aware timestamps when aggregating readings."
            ) from exc
        if in_window:
            amounts.append(reading.amount_inches)
    total = math.fsum(amounts)
    logger.debug("Aggregated %d readings ending %s: %s in", len(amounts), window_end.isoformat(), total)
    return total


def record_weather_event(
    reading: PrecipitationReading,
    working_hours: WorkingHours = DEFAULT_WORKING_HOURS,
) -> WeatherEvent:
    """Evaluate one reading and, when it triggers, attach the inspection deadline."""
    triggered = requires_inspection(reading.amount_inches)
    if not triggered:
        return WeatherEvent(reading=reading, requires_inspection=False)

    deadline = build_inspection_deadline(reading.observed_at, working_hours)
    logger.info(
        "Rain trigger: %s in at %s (%s); inspection due %s",
        reading.amount_inches,
        reading.observed_at.isoformat(),
        reading.source.value,
        deadline.deadline_at.isoformat(),
    )
    return WeatherEvent(reading=reading, requires_inspection=True, deadline=deadline)
