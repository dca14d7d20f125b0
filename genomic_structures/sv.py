"""Structural variant pairs and their identification."""

from __future__ import annotations

from dataclasses import dataclass, field

from .break_point import BreakPoint
from .chr_anchor import ChrAnchor
from .constants import TRANSLOCATION_DISTANCE
from .enums import SVType
from .flags import interpret

_READ_UNMAPPED = 3
_READ_REVERSE = 5


@dataclass
class SVChimericRead:
    """Primary (first) and secondary chromosomal alignments of one read."""

    sequence: str = ""
    chr_read: list[ChrAnchor] = field(default_factory=list)
    breakpoint: BreakPoint = field(default_factory=BreakPoint)


@dataclass
class SVChimericPair:
    """Both reads of a pair and the structural variant they indicate."""

    svtag: SVType
    read1: SVChimericRead = field(default_factory=SVChimericRead)
    read2: SVChimericRead = field(default_factory=SVChimericRead)

    def identify(self, expected_tlen: int) -> bool:
        """Identify the type of structural variant; see :func:`identify`."""
        return identify(self, expected_tlen)


def _primary(read: SVChimericRead) -> ChrAnchor:
    if not read.chr_read:
        raise ValueError("read has no chromosomal alignment")
    return read.chr_read[0]


def identify(pair: SVChimericPair, expected_tlen: int) -> bool:
    """Tag ``pair`` with a structural variant type and report whether one was found.

    Every variant test is evaluated in turn (deletion, duplication,
    inversion, insertion, translocation); each that holds overwrites the
    tag, so the last one found is kept.
    """
    first = _primary(pair.read1)
    second = _primary(pair.read2)
    distance = abs(first.position - second.position)
    first_reverse = interpret(first.flag, _READ_REVERSE)
    second_reverse = interpret(second.flag, _READ_REVERSE)

    checks = [
        (SVType.DELETION, distance >= expected_tlen),
        (
            SVType.DUPLICATION,
            first.tlen > 0 and not first_reverse and not second_reverse,
        ),
        (
            SVType.INVERSION,
            first_reverse == second_reverse and first.chr == second.chr,
        ),
        (
            SVType.INSERTION,
            interpret(first.flag, _READ_UNMAPPED)
            or interpret(second.flag, _READ_UNMAPPED),
        ),
        (
            SVType.TRANSLOCATION,
            distance > TRANSLOCATION_DISTANCE or first.chr != second.chr,
        ),
    ]

    found = False
    for variant, holds in checks:
        if holds:
            pair.svtag = variant
            found = True
    return found