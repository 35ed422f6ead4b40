"""Hint labels, key handling, configuration and copy actions for selecting matched terminal text."""

__version__ = "0.1.0"