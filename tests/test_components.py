"""Tests for itemized rendering."""

from deltafmt import (
    FormatterConfig,
    PresentationStyle,
    RenderEntry,
    TableLocalizer,
    TimeUnit,
    UnitDelta,
    ZeroBehavior,
    format_components,
    render,
)

FULL = PresentationStyle.FULL


def test_render_entry_str():
    assert str(RenderEntry(value=2, name="hours", separator=" ")) == "2 hours"


def test_render_uses_singular_for_one(en: TableLocalizer):
    deltas = [UnitDelta(TimeUnit.HOUR, 1), UnitDelta(TimeUnit.MINUTE, 2)]
    assert render(deltas, FULL, en) == "1 hour, 2 minutes"


def test_render_uses_plural_for_zero(en: TableLocalizer):
    assert render([UnitDelta(TimeUnit.HOUR, 0)], FULL, en) == "0 hours"


def test_render_empty_is_empty_string(en: TableLocalizer):
    assert render([], FULL, en) == ""


def test_render_resolves_keys_through_localizer(tagged: TableLocalizer):
    deltas = [UnitDelta(TimeUnit.DAY, 1), UnitDelta(TimeUnit.SECOND, 9)]
    assert render(deltas, FULL, tagged) == "1_<d>|9_<ss>"


def test_render_per_style(en: TableLocalizer):
    deltas = [UnitDelta(TimeUnit.HOUR, 2), UnitDelta(TimeUnit.MINUTE, 15)]
    assert render(deltas, PresentationStyle.POSITIONAL, en) == "2:15"
    assert render(deltas, PresentationStyle.ABBREVIATED, en) == "2h 15m"
    assert render(deltas, PresentationStyle.SHORT, en) == "2 hrs, 15 mins"
    assert render(deltas, FULL, en) == "2 hours, 15 minutes"


def test_format_components_uses_magnitudes(en: TableLocalizer):
    values = {
        TimeUnit.YEAR: 0,
        TimeUnit.MONTH: 0,
        TimeUnit.DAY: -3,
        TimeUnit.HOUR: -4,
        TimeUnit.MINUTE: 0,
        TimeUnit.SECOND: -6,
    }
    assert format_components(values, FormatterConfig(), en) == (
        "3 days, 4 hours, 6 seconds"
    )


def test_format_components_honors_max_unit_count(en: TableLocalizer):
    values = {TimeUnit.DAY: 3, TimeUnit.HOUR: 4, TimeUnit.SECOND: 6}
    config = FormatterConfig(max_unit_count=2)
    assert format_components(values, config, en) == "3 days, 4 hours"


def test_format_components_keeps_zeros_when_asked(en: TableLocalizer):
    values = {TimeUnit.HOUR: 1, TimeUnit.MINUTE: 0, TimeUnit.SECOND: 5}
    config = FormatterConfig(
        allowed_units=(TimeUnit.HOUR, TimeUnit.MINUTE, TimeUnit.SECOND),
        zero_behavior=ZeroBehavior.NONE,
        style=PresentationStyle.POSITIONAL,
    )
    assert format_components(values, config, en) == "1:0:5"


def test_format_components_ignores_disallowed_units(en: TableLocalizer):
    values = {TimeUnit.DAY: 2, TimeUnit.HOUR: 1}
    config = FormatterConfig(allowed_units=(TimeUnit.HOUR,))
    assert format_components(values, config, en) == "1 hour"
