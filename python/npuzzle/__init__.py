"""Optimal sliding-tile puzzle solver."""

__version__ = "1.0.0"
