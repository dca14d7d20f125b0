"""Binning of alignment positions."""

from dataclasses import dataclass, field

from .constants import BIN_SIZE


def bin_position(position: int) -> int:
    """Return ``position`` rounded towards zero to a multiple of the bin size."""
    remainder = abs(position) % BIN_SIZE
    if position < 0:
        remainder = -remainder
    return position - remainder


class Anchor:
    """Mixin for records that carry a ``position`` attribute."""

    def bin(self) -> int:
        """Return the binned alignment position."""
        return bin_position(self.position)


@dataclass
class BinPosition:
    """Count of reads and read identifiers grouped by binned position."""

    count: int = 0
    position: dict[int, list[str]] = field(default_factory=dict)


@dataclass
class StrandDirection:
    """Binned positions split by strand and end."""

    fs5: BinPosition = field(default_factory=BinPosition)
    fs3: BinPosition = field(default_factory=BinPosition)
    rs5: BinPosition = field(default_factory=BinPosition)
    rs3: BinPosition = field(default_factory=BinPosition)