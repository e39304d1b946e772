"""Sliding-tile puzzle search engine."""

__version__ = "0.1.0"
