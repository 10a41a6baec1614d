"""
Engine errors.

Configuration mistakes (unknown or wrong-kind patterns) are raised at
construction time so no half-built Scale or Chord ever escapes. A missing
chord match is not an error: find_chord returns None for that.
"""


class FretboardError(Exception):
    """Base class for all engine errors."""


class UnknownPatternError(FretboardError, ValueError):
    """An interval pattern name did not resolve against the pattern table."""


class InvalidPatternError(FretboardError, ValueError):
    """A pattern of the wrong kind was used (e.g. a chord pattern as a scale)."""


class InternalError(FretboardError, RuntimeError):
    """A ring invariant was violated. Never expected with the fixed note set."""
