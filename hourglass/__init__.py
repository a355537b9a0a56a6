"""Hourglass: a countable-time engine with count-up and countdown modes."""

__version__ = "0.1.0"
