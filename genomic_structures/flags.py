"""Interpretation of SAM alignment flags."""

_FLAG_BITS = 12


def interpret(n: int, p: int) -> bool:
    """Return whether bit ``p`` (1-based) of the SAM flag ``n`` is set.

    Bits are, in order: read paired, proper pair, read unmapped, mate
    unmapped, read reverse strand, mate reverse strand, first in pair,
    second in pair, not primary, fails quality checks, duplicate,
    supplementary alignment.
    """
    if not 1 <= p <= _FLAG_BITS:
        raise ValueError(f"flag bit must be between 1 and {_FLAG_BITS}, got {p}")
    if not 0 <= n < 1 << _FLAG_BITS:
        raise ValueError(f"SAM flag out of range: {n}")
    return bool((n >> (p - 1)) & 1)


class SAMFlag:
    """Mixin for records that carry a SAM ``flag`` attribute."""

    def interpret(self, p: int) -> bool:
        """Return whether bit ``p`` of this record's flag is set."""
        return interpret(self.flag, p)