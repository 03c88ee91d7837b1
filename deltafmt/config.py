"""Formatter configuration."""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from deltafmt.styles import PresentationStyle
from deltafmt.units import BASE_UNITS, TimeUnit
from deltafmt.zero import ZeroBehavior

_WEEKDAYS = {
    "monday": calendar.MONDAY,
    "tuesday": calendar.TUESDAY,
    "wednesday": calendar.WEDNESDAY,
    "thursday": calendar.THURSDAY,
    "friday": calendar.FRIDAY,
    "saturday": calendar.SATURDAY,
    "sunday": calendar.SUNDAY,
}


def _parse_weekday(name: str) -> int:
    key = name.strip().lower()
    if key not in _WEEKDAYS:
        valid = ", ".join(_WEEKDAYS)
        raise ValueError(f"Invalid day '{name}'. Valid days: {valid}")
    return _WEEKDAYS[key]


@dataclass(frozen=True, kw_only=True)
class FormatterConfig:
    """Options for one formatter; immutable and safe to share between calls.

    Attributes:
        style: Presentation style; COLLOQUIAL switches to relative phrases
        allowed_units: Units the difference may be expressed in (WEEK excluded)
        max_unit_count: Maximum number of non-zero units to print, or None
        zero_behavior: How zero-valued units are trimmed
        include_relevant_time: Append a unit-scaled timestamp to colloquial
            phrases (the month for years, the time of day for days)
        allows_now_on_colloquial: Print "just now" for very small differences
        first_weekday: First day of the week for the colloquial week threshold
            (0 = Monday ... 6 = Sunday)
        clip_week_to_month: Measure the week containing the from-date only
            within its month, so weeks at a month edge are shorter
    """

    style: PresentationStyle = PresentationStyle.FULL
    allowed_units: tuple[TimeUnit, ...] = BASE_UNITS
    max_unit_count: int | None = None
    zero_behavior: ZeroBehavior = ZeroBehavior.DROP_ALL
    include_relevant_time: bool = False
    allows_now_on_colloquial: bool = False
    first_weekday: int = calendar.MONDAY
    clip_week_to_month: bool = False

    def __post_init__(self) -> None:
        units = set(self.allowed_units)
        invalid = [u for u in units if u not in BASE_UNITS]
        if invalid:
            valid = ", ".join(unit.label for unit in BASE_UNITS)
            raise ValueError(
                f"allowed_units may only contain base units.\n"
                f"Got: {invalid!r}\n"
                f"Valid units: {valid}"
            )
        if self.max_unit_count is not None and self.max_unit_count <= 0:
            raise ValueError(
                f"max_unit_count must be positive or None, got {self.max_unit_count}"
            )
        if not 0 <= self.first_weekday <= 6:
            raise ValueError(
                f"first_weekday must be 0-6 (Monday-Sunday), got {self.first_weekday}"
            )
        # Frozen: normalize through object.__setattr__
        ordered = tuple(unit for unit in BASE_UNITS if unit in units)
        object.__setattr__(self, "allowed_units", ordered)

    @classmethod
    def from_options(cls, **options: Any) -> "FormatterConfig":
        """Build a config accepting plain names for enum-valued options.

        Example:
            >>> FormatterConfig.from_options(
            ...     style="abbreviated",
            ...     allowed_units=["hours", "minutes"],
            ...     zero_behavior="drop_leading|drop_trailing",
            ... )
        """
        if "style" in options:
            options["style"] = PresentationStyle.parse(options["style"])
        if "allowed_units" in options:
            units: Iterable[Any] = options["allowed_units"]
            options["allowed_units"] = tuple(TimeUnit.parse(u) for u in units)
        if "zero_behavior" in options:
            options["zero_behavior"] = ZeroBehavior.parse(options["zero_behavior"])
        if isinstance(options.get("first_weekday"), str):
            options["first_weekday"] = _parse_weekday(options["first_weekday"])
        return cls(**options)
