import logging
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any

from deltafmt.colloquial import render_colloquial
from deltafmt.components import format_components
from deltafmt.config import FormatterConfig
from deltafmt.localization import BundleLocalizer, Localizer
from deltafmt.moments import Moment, coerce_moment, decompose
from deltafmt.styles import PresentationStyle

logger = logging.getLogger(__name__)


class DeltaFormatter:
    """Formats the difference between two instants as localized text.

    A formatter holds an immutable config and a localizer; calls share no
    other state, so one instance can be reused freely.

    Example:
        >>> fmt = DeltaFormatter(FormatterConfig(style=PresentationStyle.ABBREVIATED))
        >>> fmt.format(
        ...     datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc),
        ...     datetime(2025, 1, 1, 11, 15, tzinfo=timezone.utc),
        ... )
        '2h 15m'
    """

    def __init__(
        self,
        config: FormatterConfig | None = None,
        localizer: Localizer | None = None,
    ):
        self.config: FormatterConfig = config or FormatterConfig()
        self.localizer: Localizer = localizer or BundleLocalizer()

    def format(self, start: Any, end: Any) -> str | None:
        """Describe the difference between start and end.

        Args:
            start: Source instant (Moment, aware datetime, or Unix timestamp)
            end: Target instant

        Returns:
            The formatted difference, or None when the instants belong to
            different calendar systems and cannot be compared
        """
        from_moment = coerce_moment(start)
        to_moment = coerce_moment(end)
        if from_moment.calendar != to_moment.calendar:
            logger.debug(
                "Cannot compare %s calendar with %s calendar",
                from_moment.calendar,
                to_moment.calendar,
            )
            return None

        if self.config.style is PresentationStyle.COLLOQUIAL:
            return render_colloquial(from_moment, to_moment, self.config, self.localizer)
        values = decompose(self.config.allowed_units, from_moment, to_moment)
        return format_components(values, self.config, self.localizer)

    def format_interval(
        self, seconds: float, now: datetime | None = None
    ) -> str | None:
        """Describe an interval ending now; positive values lie in the past.

        Args:
            seconds: Interval length in seconds (negative for the future)
            now: Reference instant, defaults to the current UTC time
        """
        if now is None:
            now = datetime.now(timezone.utc)
        to_moment = Moment(at=now)
        to_moment = replace(to_moment, at=to_moment.at.astimezone(timezone.utc))
        from_moment = Moment(at=to_moment.at - timedelta(seconds=seconds))
        return self.format(from_moment, to_moment)


def format_delta(
    start: Any, end: Any, localizer: Localizer | None = None, **options: Any
) -> str | None:
    """
    Format the difference between two instants with a one-off formatter.

    Args:
        start: Source instant (Moment, aware datetime, or Unix timestamp)
        end: Target instant
        localizer: String provider (default: the bundled English table)
        **options: FormatterConfig fields; enum fields accept plain names

    Example:
        >>> from deltafmt import format_delta
        >>>
        >>> format_delta(0, 3 * 3600 + 60, style="short")
        '3 hrs, 1 min'
        >>> format_delta(0, 90000, style="colloquial")
        'yesterday'
    """
    config = FormatterConfig.from_options(**options)
    return DeltaFormatter(config, localizer).format(start, end)


def format_interval(
    seconds: float,
    now: datetime | None = None,
    localizer: Localizer | None = None,
    **options: Any,
) -> str | None:
    """
    Format an interval ending now with a one-off formatter.

    Example:
        >>> from deltafmt import format_interval
        >>>
        >>> format_interval(7200, style="colloquial")
        '2 hours ago'
        >>> format_interval(-7200, style="colloquial")
        'in 2 hours'
    """
    config = FormatterConfig.from_options(**options)
    return DeltaFormatter(config, localizer).format_interval(seconds, now)
