"""Colloquial rendering: "2 hours ago", "in 3 weeks", "just now".

A single dominant unit is picked from the per-unit differences, checked from
coarsest to finest, and mapped to a tense-specific phrase template.
"""

import logging
from collections.abc import Mapping

from deltafmt.components import format_components
from deltafmt.config import FormatterConfig
from deltafmt.localization import Localizer
from deltafmt.moments import Moment, days_in_week, decompose
from deltafmt.units import TimeUnit

logger = logging.getLogger(__name__)

NOW_KEY = "colloquial_now"

# Minute differences below this print as "now" when allowed
NOW_MINUTES = 5


def select_dominant(
    values: Mapping[TimeUnit, int], days_per_week: int
) -> tuple[TimeUnit, int] | None:
    """Pick the coarsest non-zero unit and its magnitude.

    Weeks are carved out of the day count once it reaches a full week.
    The day count is compared signed, so negative day differences never
    become weeks.

    Returns:
        (unit, value) for the first match, or None when every value is zero
    """
    if days_per_week <= 0:
        raise ValueError(f"days_per_week must be positive, got {days_per_week}")

    years = values.get(TimeUnit.YEAR, 0)
    if years != 0:
        return TimeUnit.YEAR, abs(years)

    months = values.get(TimeUnit.MONTH, 0)
    if months != 0:
        return TimeUnit.MONTH, abs(months)

    days = values.get(TimeUnit.DAY, 0)
    if days >= days_per_week:
        return TimeUnit.WEEK, abs(days // days_per_week)

    for unit in (TimeUnit.DAY, TimeUnit.HOUR, TimeUnit.MINUTE, TimeUnit.SECOND):
        value = values.get(unit, 0)
        if value != 0:
            return unit, abs(value)
    return None


def relevant_time(
    unit: TimeUnit, value: int, moment: Moment, localizer: Localizer
) -> str | None:
    """Format the moment with the unit's localized strftime pattern.

    Returns None when no pattern exists for the unit.
    """
    pattern = localizer.lookup(f"relevanttime_{unit.code(value)}")
    if not pattern:
        return None
    return moment.at.strftime(pattern)


def colloquial_phrase(
    unit: TimeUnit,
    value: int,
    is_future: bool,
    localizer: Localizer,
    relevant: str | None = None,
) -> str:
    tense = "f" if is_future else "p"
    phrase = localizer.lookup(f"colloquial_{tense}_{unit.code(value)}", value)
    if relevant:
        return f"{phrase} {relevant}"
    return phrase


def render_colloquial(
    start: Moment, end: Moment, config: FormatterConfig, localizer: Localizer
) -> str:
    """Describe the difference between two moments with a relative phrase.

    The tense is future when start is after end. Differences where every
    allowed unit is zero fall back to itemized output.
    """
    values = decompose(config.allowed_units, start, end)
    week_length = days_in_week(
        start,
        first_weekday=config.first_weekday,
        clip_to_month=config.clip_week_to_month,
    )
    match = select_dominant(values, week_length)
    if match is None:
        return format_components(values, config, localizer)

    unit, value = match
    logger.debug("Dominant unit %s (%d) for %s -> %s", unit.label, value, start, end)

    if config.allows_now_on_colloquial:
        # Signed comparison: any negative minute difference also reads as now
        if unit is TimeUnit.MINUTE and values[TimeUnit.MINUTE] < NOW_MINUTES:
            return localizer.lookup(NOW_KEY)
        if unit is TimeUnit.SECOND:
            return localizer.lookup(NOW_KEY)

    relevant = None
    if config.include_relevant_time:
        relevant = relevant_time(unit, value, start, localizer)

    return colloquial_phrase(unit, value, start.is_after(end), localizer, relevant)
