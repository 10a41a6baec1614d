"""
Interval patterns - the named templates scales, modes and chords are built from.

An interval pattern is a sequence of semitone offsets from a root. SCALE
patterns produce scales and modes; CHORD patterns produce chord shapes and
are the vocabulary for reverse chord lookup. A mode may name a parent
pattern whose harmony it borrows when chords are derived from it.

The pattern table is built once at import and never mutated. Its order is
significant: reverse chord lookup tries chord patterns in table order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .errors import UnknownPatternError
from .pitch import Interval


class PatternKind(str, Enum):
    """Whether a pattern describes a scale/mode or a chord shape."""

    SCALE = "scale"
    CHORD = "chord"


@dataclass(frozen=True)
class IntervalPattern:
    """
    A named pattern of semitone offsets from a root.

    Offsets are cumulative from the root (major scale = 0 2 4 5 7 9 11),
    start at 0, are strictly increasing and stay within the octave.

    Immutable and hashable.
    """

    name: str
    label: str
    offsets: tuple[int, ...]
    kind: PatternKind = PatternKind.SCALE
    parent: IntervalPattern | None = None
    chord_generation: bool = True

    SCALE_CHROMATIC: ClassVar[IntervalPattern]
    SCALE_MAJOR: ClassVar[IntervalPattern]
    SCALE_MINOR: ClassVar[IntervalPattern]
    SCALE_HARMONIC_MINOR: ClassVar[IntervalPattern]
    SCALE_MELODIC_MINOR: ClassVar[IntervalPattern]
    SCALE_MAJOR_PENTATONIC: ClassVar[IntervalPattern]
    SCALE_MINOR_PENTATONIC: ClassVar[IntervalPattern]
    SCALE_BLUES: ClassVar[IntervalPattern]
    SCALE_WHOLE_TONE: ClassVar[IntervalPattern]
    MODE_IONIAN: ClassVar[IntervalPattern]
    MODE_DORIAN: ClassVar[IntervalPattern]
    MODE_PHRYGIAN: ClassVar[IntervalPattern]
    MODE_LYDIAN: ClassVar[IntervalPattern]
    MODE_MIXOLYDIAN: ClassVar[IntervalPattern]
    MODE_AEOLIAN: ClassVar[IntervalPattern]
    MODE_LOCRIAN: ClassVar[IntervalPattern]
    CHORD_MAJ: ClassVar[IntervalPattern]
    CHORD_MIN: ClassVar[IntervalPattern]
    CHORD_DIM: ClassVar[IntervalPattern]
    CHORD_AUG: ClassVar[IntervalPattern]
    CHORD_SUS2: ClassVar[IntervalPattern]
    CHORD_SUS4: ClassVar[IntervalPattern]
    CHORD_MAJ6: ClassVar[IntervalPattern]
    CHORD_MIN6: ClassVar[IntervalPattern]
    CHORD_MAJ7: ClassVar[IntervalPattern]
    CHORD_DOM7: ClassVar[IntervalPattern]
    CHORD_MIN7: ClassVar[IntervalPattern]
    CHORD_MIN7B5: ClassVar[IntervalPattern]
    CHORD_DIM7: ClassVar[IntervalPattern]
    CHORD_MINMAJ7: ClassVar[IntervalPattern]
    CHORD_AUG7: ClassVar[IntervalPattern]

    def __post_init__(self) -> None:
        if not self.offsets:
            raise ValueError(f"Pattern {self.name} has no offsets")
        if self.offsets[0] != 0:
            raise ValueError(f"Pattern {self.name} must start at 0, got {self.offsets[0]}")
        for prev, current in zip(self.offsets, self.offsets[1:]):
            if current <= prev:
                raise ValueError(f"Pattern {self.name} offsets must be strictly increasing")
        if self.offsets[-1] > 11:
            raise ValueError(f"Pattern {self.name} offsets must lie within 0-11")
        if self.parent is not None:
            if self.kind is PatternKind.CHORD:
                raise ValueError(f"Chord pattern {self.name} cannot have a parent")
            if self.parent.kind is not PatternKind.SCALE:
                raise ValueError(f"Parent of {self.name} must be a scale pattern")

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """The offsets as Interval objects."""
        return tuple(Interval(offset) for offset in self.offsets)

    @property
    def is_chord(self) -> bool:
        return self.kind is PatternKind.CHORD

    def __len__(self) -> int:
        return len(self.offsets)

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"IntervalPattern.{self.name}"

    @classmethod
    def get(cls, name: str) -> IntervalPattern:
        """
        Resolve a pattern by its canonical name.

        Matching is exact and case-sensitive ('SCALE_MAJOR', 'CHORD_MIN7').

        Raises:
            UnknownPatternError: if no pattern has that name
        """
        try:
            return _TABLE[name]
        except KeyError:
            raise UnknownPatternError(f"Unknown interval pattern: {name}") from None

    @classmethod
    def all(cls) -> list[IntervalPattern]:
        """Every pattern, in table order."""
        return list(_TABLE.values())

    @classmethod
    def scales(cls) -> list[IntervalPattern]:
        """Scale and mode patterns, in table order."""
        return [p for p in _TABLE.values() if p.kind is PatternKind.SCALE]

    @classmethod
    def chords(cls) -> list[IntervalPattern]:
        """Chord patterns, in table order."""
        return [p for p in _TABLE.values() if p.kind is PatternKind.CHORD]

    @classmethod
    def match_chord(cls, offsets: tuple[int, ...]) -> IntervalPattern | None:
        """The first chord pattern with exactly these offsets, if any."""
        for pattern in cls.chords():
            if pattern.offsets == offsets:
                return pattern
        return None


_TABLE: dict[str, IntervalPattern] = {}


def _register(pattern: IntervalPattern) -> IntervalPattern:
    _TABLE[pattern.name] = pattern
    setattr(IntervalPattern, pattern.name, pattern)
    return pattern


_CHORD = PatternKind.CHORD

# Scales
_register(
    IntervalPattern("SCALE_CHROMATIC", "Chromatic", tuple(range(12)), chord_generation=False)
)
_register(IntervalPattern("SCALE_MAJOR", "Major", (0, 2, 4, 5, 7, 9, 11)))
_register(IntervalPattern("SCALE_MINOR", "Minor", (0, 2, 3, 5, 7, 8, 10)))
_register(IntervalPattern("SCALE_HARMONIC_MINOR", "Harmonic Minor", (0, 2, 3, 5, 7, 8, 11)))
_register(IntervalPattern("SCALE_MELODIC_MINOR", "Melodic Minor", (0, 2, 3, 5, 7, 9, 11)))
_register(
    IntervalPattern(
        "SCALE_MAJOR_PENTATONIC",
        "Major Pentatonic",
        (0, 2, 4, 7, 9),
        parent=IntervalPattern.SCALE_MAJOR,
    )
)
_register(
    IntervalPattern(
        "SCALE_MINOR_PENTATONIC",
        "Minor Pentatonic",
        (0, 3, 5, 7, 10),
        parent=IntervalPattern.SCALE_MINOR,
    )
)
_register(IntervalPattern("SCALE_BLUES", "Blues", (0, 3, 5, 6, 7, 10), chord_generation=False))
_register(
    IntervalPattern("SCALE_WHOLE_TONE", "Whole Tone", (0, 2, 4, 6, 8, 10), chord_generation=False)
)

# Modes
_register(IntervalPattern("MODE_IONIAN", "Ionian", (0, 2, 4, 5, 7, 9, 11)))
_register(IntervalPattern("MODE_DORIAN", "Dorian", (0, 2, 3, 5, 7, 9, 10)))
_register(IntervalPattern("MODE_PHRYGIAN", "Phrygian", (0, 1, 3, 5, 7, 8, 10)))
_register(IntervalPattern("MODE_LYDIAN", "Lydian", (0, 2, 4, 6, 7, 9, 11)))
_register(IntervalPattern("MODE_MIXOLYDIAN", "Mixolydian", (0, 2, 4, 5, 7, 9, 10)))
_register(IntervalPattern("MODE_AEOLIAN", "Aeolian", (0, 2, 3, 5, 7, 8, 10)))
_register(IntervalPattern("MODE_LOCRIAN", "Locrian", (0, 1, 3, 5, 6, 8, 10)))

# Chords - triads first so the simplest shape wins a lookup
_register(IntervalPattern("CHORD_MAJ", "Major", (0, 4, 7), _CHORD))
_register(IntervalPattern("CHORD_MIN", "Minor", (0, 3, 7), _CHORD))
_register(IntervalPattern("CHORD_DIM", "Diminished", (0, 3, 6), _CHORD))
_register(IntervalPattern("CHORD_AUG", "Augmented", (0, 4, 8), _CHORD))
_register(IntervalPattern("CHORD_SUS2", "Suspended 2nd", (0, 2, 7), _CHORD))
_register(IntervalPattern("CHORD_SUS4", "Suspended 4th", (0, 5, 7), _CHORD))
_register(IntervalPattern("CHORD_MAJ6", "Major 6th", (0, 4, 7, 9), _CHORD))
_register(IntervalPattern("CHORD_MIN6", "Minor 6th", (0, 3, 7, 9), _CHORD))
_register(IntervalPattern("CHORD_MAJ7", "Major 7th", (0, 4, 7, 11), _CHORD))
_register(IntervalPattern("CHORD_DOM7", "Dominant 7th", (0, 4, 7, 10), _CHORD))
_register(IntervalPattern("CHORD_MIN7", "Minor 7th", (0, 3, 7, 10), _CHORD))
_register(IntervalPattern("CHORD_MIN7B5", "Half Diminished 7th", (0, 3, 6, 10), _CHORD))
_register(IntervalPattern("CHORD_DIM7", "Diminished 7th", (0, 3, 6, 9), _CHORD))
_register(IntervalPattern("CHORD_MINMAJ7", "Minor Major 7th", (0, 3, 7, 11), _CHORD))
_register(IntervalPattern("CHORD_AUG7", "Augmented 7th", (0, 4, 8, 10), _CHORD))
