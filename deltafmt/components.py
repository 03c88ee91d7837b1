"""Itemized rendering: "2 hours, 15 minutes", "2h 15m", "2:15"."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from deltafmt.config import FormatterConfig
from deltafmt.localization import Localizer
from deltafmt.styles import (
    PresentationStyle,
    unit_name_key,
    unit_separator_key,
    value_separator_key,
)
from deltafmt.units import BASE_UNITS, TimeUnit, UnitDelta
from deltafmt.zero import trim


@dataclass(frozen=True)
class RenderEntry:
    value: int
    name: str
    separator: str

    def __str__(self) -> str:
        return f"{self.value}{self.separator}{self.name}"


def render_entries(
    deltas: Iterable[UnitDelta], style: PresentationStyle, localizer: Localizer
) -> list[RenderEntry]:
    separator = localizer.lookup(value_separator_key(style))
    return [
        RenderEntry(
            value=delta.value,
            name=localizer.lookup(unit_name_key(style, delta.unit, delta.value)),
            separator=separator,
        )
        for delta in deltas
    ]


def render(
    deltas: Iterable[UnitDelta], style: PresentationStyle, localizer: Localizer
) -> str:
    """Join the rendered deltas with the style's unit separator.

    Returns an empty string when there is nothing to render.
    """
    entries = render_entries(deltas, style, localizer)
    if not entries:
        return ""
    joiner = localizer.lookup(unit_separator_key(style))
    return joiner.join(str(entry) for entry in entries)


def format_components(
    values: Mapping[TimeUnit, int], config: FormatterConfig, localizer: Localizer
) -> str:
    """Trim and render signed per-unit differences as itemized output."""
    deltas = [
        UnitDelta(unit, abs(values.get(unit, 0)))
        for unit in BASE_UNITS
        if unit in config.allowed_units
    ]
    kept = trim(deltas, config.zero_behavior, config.max_unit_count)
    return render(kept, config.style, localizer)
