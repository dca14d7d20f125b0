"""Helpers for deriving read-count thresholds from binned positions."""

from collections.abc import Iterable, Mapping, Sequence
from itertools import accumulate

from .constants import BIN_OVERLAP, BIN_SIZE


def calculate_effective_len(
    genome_length: float,
    bin_size: float = float(BIN_SIZE),
    bin_overlap: float = float(BIN_OVERLAP),
) -> float:
    """Return the effective genome, chromosome or scaffold length."""
    return genome_length * bin_size / bin_overlap


def calculate_lambda(
    pop_reads: float,
    eff_genome_length: float,
    bin_size: float = float(BIN_SIZE),
) -> float:
    """Return the Poisson lambda for ``pop_reads`` over the effective length."""
    return pop_reads * bin_size / eff_genome_length


def table(binned: Mapping[int, Sequence[str]], psize: int) -> list[float]:
    """Count bins by how many reads they hold.

    Entry ``i`` of the result is the number of bins holding ``i + 1`` reads;
    bins holding ``psize`` reads or more are not counted. Raises
    ``ValueError`` for a bin that holds no reads.
    """
    counts = [0.0] * psize
    for key, reads in binned.items():
        length = len(reads)
        if length == 0:
            raise ValueError(f"bin {key} holds no reads")
        if length < psize:
            counts[length - 1] += 1.0
    return counts


def cumsum(values: Iterable[float]) -> list[float]:
    """Return the running totals of ``values``."""
    return [float(total) for total in accumulate(values)]