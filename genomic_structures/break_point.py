"""Break point of a read against a mobile element boundary."""

from __future__ import annotations

import math
from dataclasses import dataclass

_CLEAVE = 10.0


def _format_number(value: float) -> str:
    if value.is_integer():
        text = str(int(value))
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return text
    return repr(value)


@dataclass
class BreakPoint:
    """Sequence around a break point and its coordinate within the read."""

    sequence: str = ""
    coordinate: float = 0.0

    @classmethod
    def load(cls, sequence: str, offset: float) -> BreakPoint:
        """Build a break point from a read ``sequence`` and element ``offset``."""
        breakpoint = cls()
        breakpoint.update(sequence, offset)
        return breakpoint

    def update(self, sequence: str, offset: float) -> None:
        """Recompute this break point from ``sequence`` and ``offset``.

        A non-positive offset marks a break point upstream of the mobile
        element, a positive one downstream. Raises ``ValueError`` when the
        sequence is too short for the requested cut.
        """
        self.coordinate = -offset + 1.0
        if offset <= 0:
            end = max(0, int(self.coordinate + _CLEAVE))
            if end > len(sequence):
                raise ValueError(
                    f"break point end {end} beyond sequence of length {len(sequence)}"
                )
            self.sequence = sequence[:end]
        else:
            start = max(0, int(len(sequence) - offset - _CLEAVE))
            self.sequence = sequence[start:]

    def __str__(self) -> str:
        return f"{self.sequence}\t{_format_number(self.coordinate)}\n"