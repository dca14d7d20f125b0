"""Pair of chimeric reads aligned to a mobile element."""

from __future__ import annotations

from dataclasses import dataclass, field

from .enums import ChrAnchorRead, Orientation
from .me_anchor import MEAnchor
from .me_chimeric_read import MEChimericRead


def _closest(first: int, second: int, smaller: ChrAnchorRead, larger: ChrAnchorRead) -> ChrAnchorRead:
    if first < second:
        return smaller
    if first > second:
        return larger
    return ChrAnchorRead.NONE


@dataclass
class MEChimericPair:
    """Both reads of a pair and which of them anchors to the chromosome."""

    read1: MEChimericRead = field(default_factory=MEChimericRead)
    read2: MEChimericRead = field(default_factory=MEChimericRead)
    chranch: ChrAnchorRead = ChrAnchorRead.NONE

    @classmethod
    def load(cls, me_anchor: MEAnchor) -> MEChimericPair:
        """Build a pair whose first read holds ``me_anchor``."""
        return cls(read1=MEChimericRead.load(me_anchor))

    def get_chr_anchor(self) -> MEChimericRead:
        """Return the read carrying the chromosomal anchor.

        When no read has been chosen the first read is returned.
        """
        if self.chranch is ChrAnchorRead.READ2:
            return self.read2
        return self.read1

    def tag(self) -> None:
        """Tag both reads and choose the read that anchors to the chromosome.

        Reads overlapping at the same edge, or palindromic reads, are
        ambiguous and leave the anchor unset.
        """
        self.read1.tag()
        self.read2.tag()
        edge1, edge2 = self.read1.edge(), self.read2.edge()

        match (self.read1.orientation, self.read2.orientation):
            case (Orientation.UPSTREAM, Orientation.UPSTREAM):
                self.chranch = _closest(
                    edge1, edge2, ChrAnchorRead.READ1, ChrAnchorRead.READ2
                )
            case (Orientation.DOWNSTREAM, Orientation.DOWNSTREAM):
                self.chranch = _closest(
                    edge1, edge2, ChrAnchorRead.READ2, ChrAnchorRead.READ1
                )
            case (Orientation.UPSTREAM | Orientation.DOWNSTREAM, Orientation.NONE):
                self.chranch = ChrAnchorRead.READ2
            case (Orientation.NONE, Orientation.UPSTREAM | Orientation.DOWNSTREAM):
                self.chranch = ChrAnchorRead.READ1
            case _:
                self.chranch = ChrAnchorRead.NONE

    def __str__(self) -> str:
        return f"{self.read1}\n{self.read2}\n\n"