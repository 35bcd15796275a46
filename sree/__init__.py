"""Building blocks for a terminal AI coding assistant."""

__version__ = "0.1.0"