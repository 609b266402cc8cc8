"""Travel modes used on path segments."""

from __future__ import annotations

from enum import Enum

__all__ = ["Mode", "mode_to_str"]


class Mode(Enum):
    """The means of travel on a segment of a path."""

    FOOT = 0
    WHEELCHAIR = 1
    CAR = 2
    BIKE = 3

    def __str__(self) -> str:
        return mode_to_str(self)


_NAMES = {
    Mode.FOOT: "foot",
    Mode.WHEELCHAIR: "wheelchair",
    Mode.CAR: "car",
    Mode.BIKE: "bike",
}


def mode_to_str(m: Mode) -> str:
    """Return the lower-case name of a travel mode."""
    try:
        return _NAMES[m]
    except (KeyError, TypeError):
        raise ValueError(f"{m!r} is not a valid mode") from None