"""Instants anchored to a calendar system, and the calendar arithmetic on them.

Years and months are calendar-aware and computed with python-dateutil's
relativedelta. Days and finer units have fixed lengths and measure elapsed
time, so a DST transition counts as the hour it really is.
"""

import calendar as pycalendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from dateutil.relativedelta import relativedelta

from deltafmt.units import BASE_UNITS, FIXED_SECONDS, TimeUnit

GREGORIAN = "gregorian"


@dataclass(frozen=True, kw_only=True)
class Moment:
    """A timezone-aware instant and the calendar system it is expressed in."""

    at: datetime
    calendar: str = GREGORIAN

    def __post_init__(self) -> None:
        if self.at.tzinfo is None:
            raise TypeError(
                f"Moment requires a timezone-aware datetime.\n"
                f"Got naive datetime: {self.at!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc."
            )

    def is_after(self, other: "Moment") -> bool:
        """Compare as instants, so DST folds and offsets are honored."""
        return self.at.timestamp() > other.at.timestamp()

    def __str__(self) -> str:
        return f"Moment({self.at.isoformat()}, {self.calendar})"


def coerce_moment(value: Any) -> Moment:
    """Convert a Moment, aware datetime, or Unix timestamp into a Moment.

    Raises:
        TypeError: If value is a naive datetime or an unsupported type
    """
    if isinstance(value, Moment):
        return value
    if isinstance(value, datetime):
        return Moment(at=value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Moment(at=datetime.fromtimestamp(value, tz=timezone.utc))
    raise TypeError(
        f"Instant must be a Moment, datetime, or Unix timestamp.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  format_delta(1704067200, 1704070800)  # int (Unix seconds)\n"
        f"  format_delta(datetime(2025,1,1,tzinfo=timezone.utc), ...)  "
        f"# timezone-aware datetime"
    )


def decompose(
    allowed_units: Iterable[TimeUnit], start: Moment, end: Moment
) -> dict[TimeUnit, int]:
    """Split the span between two moments into per-unit signed differences.

    Only the allowed units are used: the span a disallowed unit would cover
    is carried by the next allowed finer unit, and whatever is finer than
    the finest allowed unit is dropped. Values are negative when start is
    after end.

    Returns:
        Every allowed base unit mapped to its value, coarsest first
    """
    allowed = set(allowed_units)
    units = [unit for unit in BASE_UNITS if unit in allowed]

    # Years and months use wall-clock arithmetic in the start's timezone,
    # finer units measure elapsed time
    lower = start.at
    upper = end.at.astimezone(lower.tzinfo)
    sign = 1
    if start.is_after(end):
        lower, upper = upper, lower
        sign = -1

    values: dict[TimeUnit, int] = {}
    cursor = lower
    if TimeUnit.YEAR in allowed:
        years = relativedelta(upper, cursor).years
        cursor += relativedelta(years=years)
        values[TimeUnit.YEAR] = years
    if TimeUnit.MONTH in allowed:
        delta = relativedelta(upper, cursor)
        months = delta.years * 12 + delta.months
        cursor += relativedelta(months=months)
        values[TimeUnit.MONTH] = months

    elapsed = upper.astimezone(timezone.utc) - cursor.astimezone(timezone.utc)
    remaining = int(elapsed.total_seconds())
    for unit in units:
        size = FIXED_SECONDS.get(unit)
        if size is None:
            continue
        values[unit], remaining = divmod(remaining, size)

    return {unit: sign * values[unit] for unit in units}


def days_in_week(
    moment: Moment,
    first_weekday: int = pycalendar.MONDAY,
    clip_to_month: bool = False,
) -> int:
    """Number of days in the week containing the moment.

    Args:
        moment: The instant whose week is measured (in its own timezone)
        first_weekday: First day of the week (0 = Monday ... 6 = Sunday)
        clip_to_month: Only count the days of that week inside the moment's
            month, so the first and last week of a month can be shorter
    """
    day = moment.at.date()
    cal = pycalendar.Calendar(first_weekday)
    week = next(
        week
        for week in cal.monthdatescalendar(day.year, day.month)
        if day in week
    )
    if clip_to_month:
        return sum(1 for d in week if d.month == day.month)
    return len(week)
