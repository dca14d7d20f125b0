"""Enumerations describing anchors, orientations and variant types."""

from enum import Enum, auto


class AnchorLabel(Enum):
    """Label of an anchor by strand and orientation; ``NONE`` is the default."""

    FORWARD5 = auto()
    FORWARD3 = auto()
    REVERSE5 = auto()
    REVERSE3 = auto()
    NONE = auto()


class ChrAnchorRead(Enum):
    """Which read of a pair carries the chromosomal anchor; ``NONE`` is the default."""

    READ1 = auto()
    READ2 = auto()
    NONE = auto()


class Orientation(Enum):
    """Orientation of an alignment relative to a mobile element; ``NONE`` is the default."""

    DOWNSTREAM = auto()
    UPSTREAM = auto()
    PALINDROMIC = auto()
    NONE = auto()


class SVType(Enum):
    """Type of structural variant."""

    DELETION = auto()
    DUPLICATION = auto()
    INVERSION = auto()
    INSERTION = auto()
    TRANSLOCATION = auto()
    NONE = auto()