"""Chromosomal anchor of a chimeric read."""

from __future__ import annotations

from dataclasses import dataclass, field

from .binning import Anchor
from .cigar import Cigar
from .enums import AnchorLabel
from .flags import SAMFlag


@dataclass
class ChrAnchor(Anchor, SAMFlag):
    """Alignment of a read to a chromosome or scaffold."""

    anchor: AnchorLabel = AnchorLabel.NONE
    cigar: Cigar = field(default_factory=Cigar)
    chr: str = ""
    flag: int = 0
    mapq: int = 0
    position: int = 0
    tlen: int = 0

    @classmethod
    def load(
        cls,
        cigar: Cigar,
        chr: str,
        flag: int,
        mapq: int,
        position: int,
        tlen: int,
    ) -> ChrAnchor:
        """Build an anchor from SAM alignment values."""
        anchor = cls()
        anchor.update(cigar, chr, flag, mapq, position, tlen)
        return anchor

    def update(
        self,
        cigar: Cigar,
        chr: str,
        flag: int,
        mapq: int,
        position: int,
        tlen: int,
    ) -> None:
        """Replace the SAM alignment values; the anchor label is left as is."""
        self.cigar = cigar
        self.chr = chr
        self.flag = flag
        self.mapq = mapq
        self.position = position
        self.tlen = tlen

    def __str__(self) -> str:
        return f"{self.chr}\t{self.position}\t{self.cigar}\t{self.tlen}\t\n"