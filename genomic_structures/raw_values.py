"""Structured view of a SAM record line."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field

from .cigar import Cigar
from .enums import Orientation
from .errors import ParsingError
from .me_anchor import TagME

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_REQUIRED_FIELDS = 10


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ParsingError()
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ParsingError()
    return value


@dataclass
class ReadControl:
    """Current read identifier and the one seen before it."""

    current: str = ""
    previous: str = ""

    def read_memory(self) -> None:
        """Remember the current identifier as the previous one."""
        self.previous = self.current


@dataclass
class RawValues(TagME):
    """Fields of a SAM record, with mobile element annotations.

    ``extra`` holds the mobile element size when it is known.
    """

    read_id: ReadControl = field(default_factory=ReadControl)
    flag: int = 0
    scaffold: str = ""
    position: int = 0
    quality: int = 0
    cigar: Cigar = field(default_factory=Cigar)
    tlen: int = 0
    sequence: str = ""
    orientation: Orientation = Orientation.NONE
    extra: float | None = None

    @classmethod
    def load(cls, fields: Sequence[str]) -> RawValues:
        """Build an instance from the tab-split fields of a SAM record."""
        values = cls()
        values.update(fields)
        return values

    def update(self, fields: Sequence[str]) -> None:
        """Replace the record values with those in ``fields``.

        Raises ``ParsingError`` when a numeric field or the CIGAR string
        cannot be parsed, or when there are too few fields.
        """
        if len(fields) < _REQUIRED_FIELDS:
            raise ParsingError(
                f"expected at least {_REQUIRED_FIELDS} fields, got {len(fields)}"
            )
        self.read_id.current = fields[0]
        self.flag = _parse_int(fields[1])
        self.scaffold = fields[2]
        self.position = _parse_int(fields[3])
        self.quality = _parse_int(fields[4])
        self.cigar = Cigar.load(fields[5], self.position)
        self.tlen = _parse_int(fields[8])
        self.sequence = fields[9]

    @property
    def size(self) -> float:
        """Mobile element size, ``0`` when it is not registered."""
        return 0.0 if self.extra is None else self.extra