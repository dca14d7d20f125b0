"""Structures and functions for identifying mobile elements and structural variants from SAM alignment data."""

__version__ = "0.1.0"