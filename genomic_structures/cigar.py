"""CIGAR string interpretation."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from .errors import ParsingError

_OPERATIONS = frozenset("HSMDI")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_length(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ParsingError()
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ParsingError()
    return value


@dataclass
class Cigar:
    """A read's CIGAR operations and the alignment boundaries they imply."""

    align: list[int] = field(default_factory=list)
    deletion: list[int] = field(default_factory=list)
    insertion: list[int] = field(default_factory=list)
    left_boundary: int = 0
    left_clip: int = 0
    right_boundary: int = 0
    right_clip: int = 0
    signature: str = ""

    @classmethod
    def load(cls, to_interpret: str, position: int) -> Cigar:
        """Parse ``to_interpret`` at the 1-based ``position`` into a new instance."""
        cigar = cls()
        cigar.update(to_interpret, position)
        return cigar

    def update(self, to_interpret: str, position: int) -> None:
        """Parse ``to_interpret`` at the 1-based ``position`` into this instance.

        Raises ``ParsingError`` when an operation length is not an integer.
        """
        self.signature = to_interpret
        if to_interpret == "*":
            self.align.append(0)
            return

        start = 0
        for index, operation in enumerate(to_interpret):
            if operation not in _OPERATIONS:
                continue
            length = _parse_length(to_interpret[start:index])
            if operation in "HS":
                if sum(self.align) == 0:
                    self.left_clip = length
                else:
                    self.right_clip = length
            elif operation == "M":
                self.align.append(length)
            elif operation == "I":
                self.insertion.append(length)
            else:
                self.deletion.append(length)
            start = index + 1

        self._calculate_boundaries(position)

    @property
    def total_alignment(self) -> int:
        """Total span of aligned, inserted and deleted bases."""
        return sum(self.align) + sum(self.insertion) + sum(self.deletion)

    def _calculate_boundaries(self, position: int) -> None:
        self.left_boundary = position - self.left_clip
        # 1-based coordinates: the last covered base is one short of the span
        self.right_boundary = (
            self.left_boundary
            + self.left_clip
            + self.total_alignment
            + self.right_clip
            - 1
        )

    def __str__(self) -> str:
        return f"{self.signature}\t{self.left_boundary}\t{self.right_boundary}\t\n"