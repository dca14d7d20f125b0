# genomic_structures

A library of data structures and helper functions for finding mobile
elements and structural variants in genomic alignment data (SAM records).
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What it provides

- `genomic_structures.flags`: `interpret(flag, bit)` reads a single bit
  (1-based, 1 to 12) of a SAM flag and raises `ValueError` for a bit or
  flag out of range. The `SAMFlag` mixin offers `interpret(bit)` on
  objects that carry a `flag` attribute.
- `genomic_structures.sequences`: `reverse_sequence(seq)` returns the
  reverse complement of a nucleotide string; symbols other than `A`, `C`,
  `G`, `T` and `!` are kept as they are. The `Sequence` mixin does the
  same for objects that hold a `sequence`.
- `genomic_structures.cigar`: `Cigar.load(signature, position)` parses a
  CIGAR string (`H`, `S`, `M`, `I`, `D` operations) into its aligned,
  inserted and deleted lengths, its clips and its left and right
  boundaries. A length that is not an integer raises `ParsingError` from
  `genomic_structures.errors`.
- `genomic_structures.binning`: `bin_position(position)` rounds a
  position towards zero to a multiple of the bin size (100). The `Anchor`
  mixin offers `bin()`. `BinPosition` and `StrandDirection` hold binned
  positions.
- `genomic_structures.thresholder`: helpers for read-pileup thresholds:
  `calculate_effective_len`, `calculate_lambda`, `table` and `cumsum`.
- `genomic_structures.break_point`: `BreakPoint.load(sequence, offset)`
  finds the break-point sequence and coordinate next to a mobile element.
- `genomic_structures.chr_anchor` and `genomic_structures.me_anchor`:
  chromosomal (`ChrAnchor`) and mobile-element (`MEAnchor`) anchors. An
  `MEAnchor` can `tag()` itself upstream or downstream of the element and
  `calculate_break_point(sequence)`. The `TagME` mixin holds the tagging
  rules.
- `genomic_structures.me_chimeric_read` and
  `genomic_structures.me_chimeric_pair`: `MEChimericRead` gathers the
  anchors of a read (`anchor_count`, `tag`, `edge`, `load_mobile_element`,
  `load_chromosomal`); `MEChimericPair.tag()` decides which read anchors
  to the chromosome and `get_chr_anchor()` returns it.
- `genomic_structures.raw_values`: `RawValues.load(fields)` builds a
  record from the tab-separated fields of a SAM line. `ReadControl`
  remembers the current and the previous read id.
- `genomic_structures.sv`: `SVChimericRead`, `SVChimericPair` and
  `identify(pair, expected_tlen)`, which tags a pair as a deletion,
  duplication, inversion, insertion or translocation. Every test is run
  and the last one that holds sets the tag.
- `genomic_structures.library`: `MELibrary` and `ERVAnnotations` describe
  the entries of a mobile-element library.
- `genomic_structures.enums`: `AnchorLabel`, `ChrAnchorRead`,
  `Orientation` and `SVType`.
- `genomic_structures.constants`: `BIN_SIZE`, `BIN_OVERLAP`,
  `TRANSLOCATION_DISTANCE`, `ME_LIMIT` and `ANCHOR_LIMIT`.

## Example

```python
from genomic_structures.cigar import Cigar
from genomic_structures.flags import interpret
from genomic_structures.sequences import reverse_sequence

cigar = Cigar.load("10H1I2M2D80M5H", 101)
assert cigar.align == [2, 80]
assert cigar.left_boundary == 91
assert cigar.right_boundary == 190

assert interpret(177, 1) is True
assert reverse_sequence("GATTACA") == "TGTAATC"
```

Reading one SAM record:

```python
from genomic_structures.raw_values import RawValues

fields = "ID\t16\tscaffold\t1\t60\t100M\t\t\t100\tGATTACA\t".split("\t")
record = RawValues.load(fields)
assert record.read_id.current == "ID"
assert record.cigar.right_boundary == 100
```

## What it does not do

This is a library of building blocks only. It has no command-line tool,
does not open or read SAM/BAM files itself (callers split record lines
into fields), and does not compute a pileup threshold end to end: the
`thresholder` module provides the arithmetic helpers but no Poisson
distribution or final threshold function.