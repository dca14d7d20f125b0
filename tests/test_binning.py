from dataclasses import dataclass

import pytest

from genomic_structures.binning import (
    Anchor,
    BinPosition,
    StrandDirection,
    bin_position,
)
from genomic_structures.constants import BIN_SIZE


def test_bin_documented_example():
    assert bin_position(2099) == 2000


@pytest.mark.parametrize("position", [0, 1, 99, 100, 101, 2099, 123456])
def test_bin_is_multiple_and_within_one_bin(position):
    binned = bin_position(position)
    assert binned % BIN_SIZE == 0
    assert 0 <= position - binned < BIN_SIZE


@pytest.mark.parametrize("position", [0, 100, 2000, 50000])
def test_bin_of_multiple_is_identity(position):
    assert bin_position(position) == position


@pytest.mark.parametrize("position", [-1, -99, -150, -2099])
def test_negative_positions_round_towards_zero(position):
    binned = bin_position(position)
    assert binned == -bin_position(-position)
    assert 0 <= binned - position < BIN_SIZE


@pytest.mark.parametrize("position", [5, 2099, 777])
def test_bin_is_idempotent(position):
    assert bin_position(bin_position(position)) == bin_position(position)


@dataclass
class _Aligned(Anchor):
    position: int


def test_anchor_mixin_bins_own_position():
    assert _Aligned(2099).bin() == 2000
    assert _Aligned(2099).bin() == bin_position(2099)


def test_bin_position_defaults_are_empty_and_independent():
    first = BinPosition()
    second = BinPosition()
    first.position.setdefault(100, []).append("read.1")
    assert second.position == {}
    assert first.count == 0
    assert first.position == {100: ["read.1"]}


def test_strand_direction_fields_are_distinct():
    strands = StrandDirection()
    strands.fs5.count += 1
    assert strands.fs5.count == 1
    assert strands.fs3 == BinPosition()
    assert strands.rs5 == BinPosition()
    assert strands.rs3 == BinPosition()