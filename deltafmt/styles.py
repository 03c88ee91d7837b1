"""Presentation styles and the localization keys they resolve to."""

from enum import Enum

from deltafmt.units import TimeUnit


class PresentationStyle(Enum):
    """How unit names are spelled out.

    - POSITIONAL: components separated by colons ("1:10:0")
    - ABBREVIATED: shortest spelling ("1h 10m")
    - SHORT: short spelling ("1 hr, 10 mins")
    - FULL: spelled out ("1 hour, 10 minutes")
    - COLLOQUIAL: a single relative phrase ("1 hour ago")
    """

    POSITIONAL = "positional"
    ABBREVIATED = "abbreviated"
    SHORT = "short"
    FULL = "full"
    COLLOQUIAL = "colloquial"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: "str | PresentationStyle") -> "PresentationStyle":
        if isinstance(name, PresentationStyle):
            return name
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(style.value for style in cls)
            raise ValueError(
                f"Invalid presentation style: '{name}'\nValid styles: {valid}"
            ) from None


def value_separator_key(style: PresentationStyle) -> str:
    """Key of the string between a value and its unit name."""
    return f"valuesep_{style.code}"


def unit_separator_key(style: PresentationStyle) -> str:
    """Key of the string between two rendered units (the ', ' in '2h, 4m')."""
    return f"unitsep_{style.code}"


def unit_name_key(style: PresentationStyle, unit: TimeUnit, value: int) -> str:
    return f"unitname_{style.code}_{unit.code(value)}"
