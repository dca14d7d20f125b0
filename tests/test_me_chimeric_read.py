from dataclasses import dataclass, field

import pytest

from genomic_structures.break_point import BreakPoint
from genomic_structures.cigar import Cigar
from genomic_structures.enums import Orientation
from genomic_structures.me_anchor import MEAnchor
from genomic_structures.me_chimeric_read import MEChimericRead

UP = Orientation.UPSTREAM
DOWN = Orientation.DOWNSTREAM
NONE = Orientation.NONE
PAL = Orientation.PALINDROMIC


def _push(read, orientation, position=None):
    anchor = MEAnchor(orientation=orientation)
    if position is not None:
        if orientation is UP:
            anchor.cigar.left_boundary = position
        elif orientation is DOWN:
            anchor.cigar.right_boundary = position
    read.me_read.append(anchor)


@dataclass
class _Record:
    flag: int
    sequence: str
    cigar: Cigar
    position: int
    scaffold: str = "mobel77"
    quality: int = 60
    tlen: int = 100
    orientation: Orientation = Orientation.NONE
    size: float = 11000.0
    extra: dict = field(default_factory=dict)


@pytest.mark.parametrize(
    "target, loaded, expected",
    [
        (NONE, [DOWN], 0),
        (NONE, [UP, NONE, DOWN], 1),
        (UP, [DOWN], 0),
        (UP, [UP, NONE, DOWN], 1),
        (UP, [UP, NONE, DOWN, UP, NONE], 2),
        (DOWN, [UP], 0),
        (DOWN, [UP, NONE, DOWN, UP], 1),
        (DOWN, [DOWN, DOWN, NONE, UP], 2),
    ],
)
def test_anchor_count(target, loaded, expected):
    read = MEChimericRead()
    for orientation in loaded:
        _push(read, orientation)
    assert read.anchor_count(target) == expected


@pytest.mark.parametrize(
    "loaded, expected",
    [
        ([NONE], NONE),
        ([UP], UP),
        ([DOWN], DOWN),
        ([UP, DOWN], PAL),
        ([UP, DOWN, UP], UP),
        ([UP, DOWN, DOWN], DOWN),
        ([UP, DOWN, DOWN, UP], PAL),
    ],
)
def test_tag(loaded, expected):
    read = MEChimericRead()
    for orientation in loaded:
        _push(read, orientation)
    read.tag()
    assert read.orientation is expected


@pytest.mark.parametrize(
    "loaded, expected",
    [
        ([(0, NONE), (0, NONE)], 0),
        ([(100, UP)], 100),
        ([(50, UP), (75, UP)], 50),
        ([(10000, DOWN)], 10000),
        ([(10050, DOWN), (10075, DOWN)], 10075),
        ([(50, DOWN), (75, UP)], 0),
    ],
)
def test_edge(loaded, expected):
    read = MEChimericRead()
    for position, orientation in loaded:
        _push(read, orientation, position)
    read.tag()
    assert read.edge() == expected


@pytest.mark.parametrize(
    "sequence, expected",
    [
        ("AAAAAAA", "TTTTTTT"),
        ("MACTHAA", "TTHAGTM"),
        ("CAAGAAC", "GTTCTTG"),
        ("GATTACA", "TGTAATC"),
    ],
)
def test_reverse_sequence(sequence, expected):
    read = MEChimericRead(sequence=sequence)
    assert read.reverse_sequence() == expected


def test_load_holds_single_anchor():
    anchor = MEAnchor(mobel="mobel77", position=12)
    read = MEChimericRead.load(anchor)
    assert read.me_read == [anchor]
    assert read.chr_read == []
    assert read.orientation is NONE


def test_load_mobile_element_primary():
    record = _Record(
        flag=83,
        sequence="MMMM0987654321B1234567890OOOOO",
        cigar=Cigar.load("15S15M", 1),
        position=1,
    )
    read = MEChimericRead()
    read.load_mobile_element(record)
    assert read.sequence == "MMMM0987654321B1234567890OOOOO"
    assert len(read.me_read) == 1
    anchor = read.me_read[0]
    assert anchor.orientation is UP
    assert anchor.mobel == "mobel77"
    assert anchor.size == 11000.0
    assert anchor.breakpoint == BreakPoint("MMMM0987654321B1234567890", 15.0)
    assert anchor.cigar == record.cigar
    assert anchor.cigar is not record.cigar


def test_load_mobile_element_secondary_keeps_sequence():
    original = "MMMM0987654321B1234567890OOOOO"
    read = MEChimericRead(sequence=original)
    record = _Record(
        flag=339,
        sequence="ACGT",
        cigar=Cigar.load("15S15M", 1),
        position=1,
    )
    read.load_mobile_element(record)
    assert read.sequence == original
    assert read.me_read[0].breakpoint == BreakPoint("MMMM0987654321B1234567890", 15.0)


def test_load_chromosomal_matching_sequence():
    read = MEChimericRead(sequence="GATTACA")
    record = _Record(
        flag=56,
        sequence="GATTACA",
        cigar=Cigar.load("100M", 2099),
        position=2099,
        scaffold="chr7",
        quality=42,
        tlen=100,
    )
    read.load_chromosomal(record)
    assert read.quality == 42
    assert len(read.chr_read) == 1
    anchor = read.chr_read[0]
    assert anchor.chr == "chr7"
    assert anchor.flag == 56
    assert anchor.mapq == 42
    assert anchor.position == 2099
    assert anchor.tlen == 100
    assert anchor.cigar.right_boundary == 2198


def test_load_chromosomal_reverse_complement():
    read = MEChimericRead(sequence="GATTACA")
    record = _Record(
        flag=16, sequence="TGTAATC", cigar=Cigar.load("7M", 10), position=10
    )
    read.load_chromosomal(record)
    assert len(read.chr_read) == 1
    assert read.quality == 60


def test_load_chromosomal_mismatch_ignored():
    read = MEChimericRead(sequence="GATTACA")
    record = _Record(
        flag=16, sequence="CCCCCCC", cigar=Cigar.load("7M", 10), position=10
    )
    read.load_chromosomal(record)
    assert read.chr_read == []
    assert read.quality == 0


def test_str_without_anchors_raises():
    with pytest.raises(IndexError):
        str(MEChimericRead(sequence="GATTACA"))