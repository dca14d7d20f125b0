"""Read of a chimeric pair aligned to a mobile element and a chromosome."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from .chr_anchor import ChrAnchor
from .enums import Orientation
from .me_anchor import MEAnchor
from .sequences import Sequence

_PRIMARY_FLAG_LIMIT = 255


@dataclass
class MEChimericRead(Sequence):
    """Primary (first) and secondary alignments of one read."""

    chr_read: list[ChrAnchor] = field(default_factory=list)
    me_read: list[MEAnchor] = field(default_factory=list)
    orientation: Orientation = Orientation.NONE
    quality: int = 0
    sequence: str = ""

    @classmethod
    def load(cls, me_anchor: MEAnchor) -> MEChimericRead:
        """Build a read holding a single mobile element anchor."""
        return cls(me_read=[me_anchor])

    def anchor_count(self, orientation: Orientation) -> int:
        """Return how many mobile element anchors have ``orientation``."""
        return sum(1 for anchor in self.me_read if anchor.orientation is orientation)

    def tag(self) -> None:
        """Set the read's orientation from the majority of its anchors."""
        upstream = self.anchor_count(Orientation.UPSTREAM)
        downstream = self.anchor_count(Orientation.DOWNSTREAM)
        if upstream > downstream:
            self.orientation = Orientation.UPSTREAM
        elif upstream < downstream:
            self.orientation = Orientation.DOWNSTREAM
        elif upstream != 0:
            self.orientation = Orientation.PALINDROMIC
        else:
            self.orientation = Orientation.NONE

    def edge(self) -> int:
        """Return the outermost boundary among anchors sharing the read's orientation.

        Upstream reads give the smallest left boundary, downstream reads the
        largest right boundary; anything else gives ``0``.
        """
        matching = [a for a in self.me_read if a.orientation is self.orientation]
        if self.orientation is Orientation.UPSTREAM:
            return min((a.cigar.left_boundary for a in matching), default=0)
        if self.orientation is Orientation.DOWNSTREAM:
            return max((a.cigar.right_boundary for a in matching), default=0)
        return 0

    def load_mobile_element(self, values: Any) -> None:
        """Add a mobile element anchor from a parsed record and compute its break point.

        ``values`` provides ``flag``, ``sequence``, ``cigar``, ``scaffold``,
        ``orientation``, ``position`` and ``size``. The read sequence is taken
        from primary alignments only.
        """
        if values.flag <= _PRIMARY_FLAG_LIMIT:
            self.sequence = values.sequence
        anchor = MEAnchor.load(
            copy.deepcopy(values.cigar),
            values.flag,
            values.scaffold,
            values.orientation,
            values.position,
            values.size,
        )
        self.me_read.append(anchor)
        anchor.calculate_break_point(self.sequence)

    def load_chromosomal(self, values: Any) -> None:
        """Add a chromosomal anchor when the record's sequence matches this read.

        The sequence matches when it equals the read's sequence or its
        reverse complement. ``values`` provides ``sequence``, ``quality``,
        ``cigar``, ``scaffold``, ``flag``, ``position`` and ``tlen``.
        """
        if values.sequence not in (self.sequence, self.reverse_sequence()):
            return
        self.quality = values.quality
        self.chr_read.append(
            ChrAnchor.load(
                copy.deepcopy(values.cigar),
                values.scaffold,
                values.flag,
                values.quality,
                values.position,
                values.tlen,
            )
        )

    def __str__(self) -> str:
        return (
            f"{self.chr_read[0]}\t{self.me_read[0]}\t"
            f"{self.quality}\t{self.sequence}\t\n"
        )