"""Data-structure, string-algorithm, operating-system and console-game drills."""

__version__ = "0.1.0"