"""
Core music-theory engine.

These are the invariants everything else is built on:
- Note: The 12 chromatic pitch classes (0-11)
- Interval: Distance from a root in semitones, with display labels
- IntervalPattern: Named offset templates for scales, modes and chords
- Ring / ChromaticRing: Cyclic note structures walked by modular indexing
- Scale: A pattern applied to a root, with chord derivation
- Chord: Chord tones from a scale position, a pattern, or a note set
"""

from chuk_fretboard.core.chord import Chord, ChordProvenance, find_chord
from chuk_fretboard.core.errors import (
    FretboardError,
    InternalError,
    InvalidPatternError,
    UnknownPatternError,
)
from chuk_fretboard.core.patterns import IntervalPattern, PatternKind
from chuk_fretboard.core.pitch import Interval, Note
from chuk_fretboard.core.ring import CHROMATIC_RING, ChromaticRing, NodePosition, Ring, RingNode
from chuk_fretboard.core.scale import Scale

__all__ = [
    # Pitch
    "Note",
    "Interval",
    # Patterns
    "IntervalPattern",
    "PatternKind",
    # Rings
    "CHROMATIC_RING",
    "ChromaticRing",
    "NodePosition",
    "Ring",
    "RingNode",
    # Scale and chord
    "Scale",
    "Chord",
    "ChordProvenance",
    "find_chord",
    # Errors
    "FretboardError",
    "InternalError",
    "InvalidPatternError",
    "UnknownPatternError",
]
