"""Zero-value trimming policies for itemized output."""

from collections.abc import Iterable
from enum import Flag, auto

from deltafmt.units import UnitDelta


class ZeroBehavior(Flag):
    """How units whose value is 0 are removed from the output.

    Flags are independent and may be combined freely.
    """

    NONE = 0
    # Zeros before the first non-zero unit
    DROP_LEADING = auto()
    # Every zero unit, wherever it sits in the sequence
    DROP_MIDDLE = auto()
    # Zero runs before the first and after the last non-zero unit
    DROP_TRAILING = auto()
    DROP_ALL = DROP_LEADING | DROP_MIDDLE | DROP_TRAILING

    @classmethod
    def parse(cls, value: "str | ZeroBehavior | None") -> "ZeroBehavior":
        """Parse names like ``"drop_leading|drop_trailing"`` or ``"none"``."""
        if value is None:
            return cls.NONE
        if isinstance(value, ZeroBehavior):
            return value
        behavior = cls.NONE
        for part in value.split("|"):
            name = part.strip().upper().replace("-", "_")
            if name not in cls.__members__:
                valid = ", ".join(m.lower() for m in cls.__members__)
                raise ValueError(
                    f"Invalid zero behavior: '{part.strip()}'\nValid values: {valid}"
                )
            behavior |= cls[name]
        return behavior


def _should_drop(value: int, behavior: ZeroBehavior, non_zero_seen: int) -> bool:
    if value != 0:
        return False
    if ZeroBehavior.DROP_ALL in behavior:
        return True
    if ZeroBehavior.DROP_LEADING in behavior and non_zero_seen == 0:
        return True
    return ZeroBehavior.DROP_MIDDLE in behavior


def _strip_edges(deltas: list[UnitDelta]) -> list[UnitDelta]:
    """Remove the zero run before the first and after the last non-zero unit."""
    start = next((i for i, d in enumerate(deltas) if d.value != 0), None)
    if start is None:
        return deltas
    end = len(deltas)
    while end > start and deltas[end - 1].value == 0:
        end -= 1
    return deltas[start:end]


def trim(
    deltas: Iterable[UnitDelta],
    behavior: ZeroBehavior = ZeroBehavior.DROP_ALL,
    max_count: int | None = None,
) -> list[UnitDelta]:
    """Select the unit deltas to render.

    Args:
        deltas: Unit deltas ordered coarsest to finest
        behavior: Zero trimming flags
        max_count: Stop once this many non-zero units have been seen;
            the remaining units are discarded (zeros included)

    Returns:
        The surviving deltas in their original order

    Raises:
        ValueError: If max_count is not a positive integer
    """
    if max_count is not None and max_count <= 0:
        raise ValueError(f"max_count must be positive, got {max_count}")

    output: list[UnitDelta] = []
    non_zero_seen = 0
    for delta in deltas:
        if not _should_drop(delta.value, behavior, non_zero_seen):
            output.append(delta)
        if delta.value != 0:
            non_zero_seen += 1
        if max_count is not None and non_zero_seen == max_count:
            break

    if ZeroBehavior.DROP_TRAILING in behavior:
        output = _strip_edges(output)
    return output
