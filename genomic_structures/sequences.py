"""Nucleotide sequence helpers."""

_COMPLEMENT = str.maketrans({"!": "?", "A": "T", "T": "A", "C": "G", "G": "C"})


def reverse_sequence(sequence: str) -> str:
    """Return the reverse complement of ``sequence``; unknown symbols are kept."""
    return sequence.translate(_COMPLEMENT)[::-1]


class Sequence:
    """Mixin for records that carry a ``sequence`` attribute."""

    def reverse_sequence(self) -> str:
        """Return the reverse complement of this record's sequence."""
        return reverse_sequence(self.sequence)