"""Time units understood by deltafmt.

Fixed-size constants represent durations in seconds. Years and months have
no fixed size and are only ever computed by the calendar engine.
"""

from dataclasses import dataclass
from enum import Enum

# Fixed-size unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400


class TimeUnit(Enum):
    """Calendar units ordered from coarsest to finest.

    WEEK is virtual: it is derived from the day count and only used by the
    colloquial selector.
    """

    YEAR = ("year", "y")
    MONTH = ("month", "m")
    WEEK = ("week", "w")
    DAY = ("day", "d")
    HOUR = ("hour", "h")
    MINUTE = ("minute", "M")
    SECOND = ("second", "s")

    def __init__(self, label: str, symbol: str):
        self.label: str = label
        self.symbol: str = symbol

    def code(self, value: int) -> str:
        """Localization code: singular when value is 1, doubled otherwise."""
        return self.symbol if value == 1 else self.symbol * 2

    @classmethod
    def parse(cls, name: "str | TimeUnit") -> "TimeUnit":
        if isinstance(name, TimeUnit):
            return name
        key = name.strip().lower().rstrip("s")
        for unit in cls:
            if unit.label == key:
                return unit
        valid = ", ".join(unit.label for unit in cls)
        raise ValueError(f"Invalid time unit: '{name}'\nValid units: {valid}")


# Units that can appear in itemized output, coarsest first
BASE_UNITS: tuple[TimeUnit, ...] = (
    TimeUnit.YEAR,
    TimeUnit.MONTH,
    TimeUnit.DAY,
    TimeUnit.HOUR,
    TimeUnit.MINUTE,
    TimeUnit.SECOND,
)

# Fixed lengths of the base units finer than a month
FIXED_SECONDS: dict[TimeUnit, int] = {
    TimeUnit.DAY: DAY,
    TimeUnit.HOUR: HOUR,
    TimeUnit.MINUTE: MINUTE,
    TimeUnit.SECOND: SECOND,
}


@dataclass(frozen=True)
class UnitDelta:
    """Magnitude of the difference between two instants for one unit."""

    unit: TimeUnit
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(
                f"UnitDelta value must be non-negative, got {self.value} "
                f"for {self.unit.label}"
            )

    def __str__(self) -> str:
        return f"{self.value} {self.unit.label}"
