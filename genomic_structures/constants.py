"""Shared numeric limits used across the package."""

BIN_OVERLAP = 50
"""Overlap between neighbouring bins, in base pairs."""

BIN_SIZE = 100
"""Width of a position bin, in base pairs."""

TRANSLOCATION_DISTANCE = 1000
"""Minimum mate distance that signals a translocation."""

ME_LIMIT = 200
"""Distance from a mobile element edge within which a read counts as anchored."""

ANCHOR_LIMIT = 50
"""Distance from a mobile element edge for mate-mapped anchors."""