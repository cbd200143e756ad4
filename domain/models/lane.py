"""
Lane domain model.

The lane order is shared by desired-role flags and candidate slots:
slot ``i`` of a ten-player candidate plays lane ``i % 5``.
"""

from enum import IntEnum


class Lane(IntEnum):
    TOP = 0
    JUNGLE = 1
    MID = 2
    ADC = 3
    SUPPORT = 4

    @property
    def label(self) -> str:
        """Short label used in team listings (e.g. 'JG')."""
        return LANE_LABELS[self]

    @classmethod
    def for_slot(cls, slot: int) -> "Lane":
        """Lane played by a candidate slot (0-9)."""
        return cls(slot % len(cls))


LANE_ORDER: tuple[Lane, ...] = tuple(Lane)

LANE_LABELS = {
    Lane.TOP: "TOP",
    Lane.JUNGLE: "JG",
    Lane.MID: "MID",
    Lane.ADC: "ADC",
    Lane.SUPPORT: "SUP",
}
