"""Mobile element anchor of a chimeric read and orientation tagging."""

from __future__ import annotations

from dataclasses import dataclass, field

from .break_point import BreakPoint
from .cigar import Cigar
from .constants import ANCHOR_LIMIT, ME_LIMIT
from .enums import Orientation
from .flags import SAMFlag


class TagME(SAMFlag):
    """Mixin that tags a record's orientation against a mobile element.

    Classes using it provide ``flag``, ``cigar``, ``orientation`` and
    ``size`` (the mobile element size, ``0`` when unknown).
    """

    def read_orientation(self) -> bool:
        """Return ``True`` when the read aligns to the reverse strand."""
        return self.interpret(5)

    def tag(self) -> None:
        """Set ``orientation`` from the alignment boundaries and strand."""
        left = self.cigar.left_boundary
        right = self.cigar.right_boundary
        size = self.size
        reverse = self.read_orientation()

        if left <= ME_LIMIT and reverse:
            # read anchored reverse, mate unmapped
            self.orientation = Orientation.UPSTREAM
        elif right != 0 and right <= ANCHOR_LIMIT and not reverse:
            # read anchored, mate mapped reverse
            self.orientation = Orientation.UPSTREAM
        elif size - right <= ME_LIMIT and size != 0 and not reverse:
            # read anchored, mate unmapped
            self.orientation = Orientation.DOWNSTREAM
        elif size - left <= ANCHOR_LIMIT and size != 0 and reverse:
            # read anchored reverse, mate mapped
            self.orientation = Orientation.DOWNSTREAM
        else:
            self.orientation = Orientation.NONE


@dataclass
class MEAnchor(TagME):
    """Alignment of a read to a mobile element."""

    breakpoint: BreakPoint = field(default_factory=BreakPoint)
    cigar: Cigar = field(default_factory=Cigar)
    flag: int = 0
    mobel: str = ""
    orientation: Orientation = Orientation.NONE
    position: int = 0
    size: float = 0.0

    @classmethod
    def load(
        cls,
        cigar: Cigar,
        flag: int,
        mobel: str,
        orientation: Orientation,
        position: int,
        size: float,
    ) -> MEAnchor:
        """Build an anchor from SAM alignment values and the element size."""
        anchor = cls()
        anchor.update(cigar, flag, mobel, orientation, position, size)
        return anchor

    def update(
        self,
        cigar: Cigar,
        flag: int,
        mobel: str,
        orientation: Orientation,
        position: int,
        size: float,
    ) -> None:
        """Replace the alignment values; the break point is left as is."""
        self.cigar = cigar
        self.flag = flag
        self.mobel = mobel
        self.orientation = orientation
        self.position = position
        self.size = size

    def calculate_break_point(self, sequence: str) -> None:
        """Tag the anchor and, where it overhangs the element, set its break point."""
        self.tag()
        if (
            self.cigar.left_boundary <= 0
            and self.orientation is Orientation.UPSTREAM
        ):
            self.breakpoint.update(sequence, float(self.cigar.left_boundary))
        elif (
            self.cigar.right_boundary > int(self.size)
            and self.orientation is Orientation.DOWNSTREAM
        ):
            self.breakpoint.update(sequence, self.cigar.right_boundary - self.size)

    def __str__(self) -> str:
        return f"{self.mobel}\t{self.position}\t{self.cigar}\t{self.breakpoint}\t\n"