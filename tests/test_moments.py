"""Tests for moments and calendar decomposition."""

import calendar
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from deltafmt import BASE_UNITS, Moment, TimeUnit, days_in_week, decompose
from deltafmt.moments import coerce_moment

Y, MO, D, H, MI, S = BASE_UNITS


def at(*args: int) -> Moment:
    return Moment(at=datetime(*args, tzinfo=timezone.utc))


def test_moment_rejects_naive_datetime():
    with pytest.raises(TypeError, match="timezone-aware"):
        Moment(at=datetime(2025, 1, 1))


def test_coerce_timestamp_is_utc():
    moment = coerce_moment(0)
    assert moment.at == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert moment.calendar == "gregorian"


def test_coerce_passes_moments_through():
    moment = at(2025, 1, 1)
    assert coerce_moment(moment) is moment
    assert coerce_moment(moment.at) == moment


@pytest.mark.parametrize("value", ["2025-01-01", True, None])
def test_coerce_rejects_unsupported_types(value: object):
    with pytest.raises(TypeError, match="Moment, datetime, or Unix timestamp"):
        coerce_moment(value)


def test_decompose_all_units():
    values = decompose(BASE_UNITS, at(2024, 1, 15, 10), at(2025, 3, 17, 12, 30, 45))
    assert values == {Y: 1, MO: 2, D: 2, H: 2, MI: 30, S: 45}


def test_decompose_keeps_coarsest_first_order():
    values = decompose(BASE_UNITS, at(2024, 1, 1), at(2024, 1, 1, 0, 0, 5))
    assert list(values) == list(BASE_UNITS)


def test_decompose_reversed_is_negative():
    values = decompose(BASE_UNITS, at(2025, 3, 17, 12, 30, 45), at(2024, 1, 15, 10))
    assert values == {Y: -1, MO: -2, D: -2, H: -2, MI: -30, S: -45}


def test_decompose_equal_moments_is_all_zero():
    values = decompose(BASE_UNITS, at(2025, 1, 1), at(2025, 1, 1))
    assert set(values.values()) == {0}
    assert len(values) == 6


def test_decompose_folds_disallowed_units_into_finer_ones():
    """Test that without years and months the span is carried by days."""
    values = decompose((D, H), at(2025, 1, 1), at(2025, 2, 10, 6))
    assert values == {D: 40, H: 6}


def test_decompose_drops_remainder_below_finest_unit():
    values = decompose((H,), at(2025, 1, 1), at(2025, 1, 2, 2, 30))
    assert values == {H: 26}


def test_decompose_months_without_years():
    values = decompose((MO, D), at(2023, 11, 5), at(2025, 1, 7))
    assert values == {MO: 14, D: 2}


def test_decompose_clips_month_end():
    """Test that Jan 31 + 1 month lands on Feb 28 before counting days."""
    values = decompose(BASE_UNITS, at(2025, 1, 31), at(2025, 3, 1))
    assert values[Y] == 0
    assert values[MO] == 1
    assert values[D] == 1


def test_decompose_across_timezones():
    start = at(2025, 1, 1, 10)
    end = Moment(at=datetime(2025, 1, 1, 12, tzinfo=ZoneInfo("Europe/Rome")))
    values = decompose(BASE_UNITS, start, end)
    assert values[H] == 1
    assert values[MI] == 0


def test_decompose_with_no_units_is_empty():
    assert decompose((), at(2020, 1, 1), at(2025, 1, 1)) == {}


def test_days_in_week_is_a_full_week():
    assert days_in_week(at(2025, 3, 1)) == 7
    assert days_in_week(at(2025, 3, 12)) == 7


def test_days_in_week_clipped_to_month():
    """Test that the first week of a month only counts its own days."""
    # March 1, 2025 is a Saturday
    assert days_in_week(at(2025, 3, 1), clip_to_month=True) == 2
    assert (
        days_in_week(at(2025, 3, 1), first_weekday=calendar.SUNDAY, clip_to_month=True)
        == 1
    )
    assert days_in_week(at(2025, 3, 12), clip_to_month=True) == 7
    # March 31, 2025 is a Monday
    assert days_in_week(at(2025, 3, 31), clip_to_month=True) == 1


NEW_YORK = ZoneInfo("America/New_York")


def test_is_after_compares_instants():
    """Test that the earlier wall-clock time can be the later instant."""
    edt = Moment(at=datetime(2025, 11, 2, 1, 30, tzinfo=NEW_YORK))
    est = Moment(at=datetime(2025, 11, 2, 1, 10, tzinfo=NEW_YORK, fold=1))
    assert est.is_after(edt)
    assert not edt.is_after(est)


def test_decompose_across_spring_forward():
    """Test that 01:30 EST to 03:30 EDT is a single elapsed hour."""
    start = Moment(at=datetime(2025, 3, 9, 1, 30, tzinfo=NEW_YORK))
    end = Moment(at=datetime(2025, 3, 9, 3, 30, tzinfo=NEW_YORK))
    values = decompose(BASE_UNITS, start, end)
    assert values == {Y: 0, MO: 0, D: 0, H: 1, MI: 0, S: 0}


def test_decompose_across_fall_back():
    """Test that 01:30 EDT to 01:10 EST (after the repeat) is 40 minutes."""
    start = Moment(at=datetime(2025, 11, 2, 1, 30, tzinfo=NEW_YORK))
    end = Moment(at=datetime(2025, 11, 2, 1, 10, tzinfo=NEW_YORK, fold=1))
    assert decompose(BASE_UNITS, start, end) == {Y: 0, MO: 0, D: 0, H: 0, MI: 40, S: 0}
    assert decompose(BASE_UNITS, end, start) == {
        Y: 0,
        MO: 0,
        D: 0,
        H: 0,
        MI: -40,
        S: 0,
    }
