"""
Constants and enums for the fretboard tool.

No magic strings - use enums for constrained values.
"""

from __future__ import annotations

from enum import Enum


class ViewMode(str, Enum):
    """
    How a command renders its result.

    Each view has a single-letter alias on the command line.
    """

    HORIZONTAL = "horizontal"  # Strings as rows, frets as columns
    VERTICAL = "vertical"  # Strings as columns, frets as rows
    CHORD = "chord"  # Identify a chord from --notes, show the arpeggio
    FIND = "find"  # Show where an ad-hoc list of --notes lies

    @classmethod
    def parse(cls, value: str) -> ViewMode:
        """Parse a view name or its single-letter alias, case-insensitively."""
        value = value.strip().lower()
        for member in cls:
            if value in (member.value, member.value[0]):
                return member
        raise ValueError(f"Unknown view: {value}")


DEFAULT_FRETS = 12
DEFAULT_INSTRUMENT = "guitar"
DEFAULT_ROOT = "C"
DEFAULT_PATTERN = "SCALE_MAJOR"

# Upper bound for --frets
MAX_FRETS = 24


class ErrorMessages:
    """Standardized error messages."""

    INSTRUMENT_NOT_FOUND = "Instrument '{name}' not found. Use --list to see what is available."
    NOTES_REQUIRED = "The {view} view needs notes, e.g. --notes C,E,G"
    NO_CHORD_MATCH = "Could not find matching chord"
    OCTAVES_UNSUPPORTED = (
        "Sorry - octave colouring is not available for the {name} "
        "(its strings carry no octave information)"
    )
    INVALID_FRETS = "Invalid fret count: {frets}. Must be between 1 and {max_frets}."
