"""Advent calendar challenge solutions."""

__version__ = "0.1.0"
