"""Shared error base for the pattern examples."""


class PatternError(Exception):
    """Base class for errors raised by the pattern examples."""
