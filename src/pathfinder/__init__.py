"""PathFinder - fuzzy path picker for the terminal."""

__version__ = "0.1.0"
