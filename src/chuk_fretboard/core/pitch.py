"""
Pitch primitives - Note and Interval.

Note is one of the 12 chromatic pitch classes, its value being its fixed
position on the chromatic ring. Interval is a semitone distance from a root,
used both as the building block of interval patterns and as the display label
attached to every ring node.
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import ClassVar

# Display labels (module level to avoid IntEnum member issues)
_SHARP_LABELS: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_LABELS: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

_INTERVAL_LABELS: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
    12: "P8",
}

_INTERVAL_ROLES: dict[int, str] = {
    0: "root",
    1: "2nd",
    2: "2nd",
    3: "3rd",
    4: "3rd",
    5: "4th",
    6: "5th",
    7: "5th",
    8: "5th",
    9: "6th",
    10: "7th",
    11: "7th",
}


class Note(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    The value is the note's position on the chromatic ring, counted from C.
    Octave-independent: two notes are tonally equal when their values match.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    @property
    def label(self) -> str:
        """Display label using sharps (C, C#, D, ...)."""
        return _SHARP_LABELS[self.value]

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_LABELS if prefer_flats else _SHARP_LABELS
        return names[self.value]

    def transpose(self, semitones: int) -> Note:
        """Transpose by a number of semitones (positive or negative)."""
        return Note((self.value + semitones) % 12)

    def interval_to(self, other: Note) -> Interval:
        """Get the ascending interval from this note to another."""
        return Interval((other.value - self.value) % 12)

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, name: str) -> Note:
        """Parse a note from a string like 'C', 'C#', 'Db' or 'Cs'."""
        name = name.strip()

        if name in _SHARP_LABELS:
            return cls(_SHARP_LABELS.index(name))

        if name in _FLAT_LABELS:
            return cls(_FLAT_LABELS.index(name))

        # Enum names (C, Cs, D, Ds, etc.) and lower-case labels
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper or member.label.upper() == name_upper:
                return member

        raise ValueError(f"Unknown note: {name}")


@total_ordering
class Interval:
    """
    Distance from a root in semitones.

    Interval patterns are sequences of intervals; every node on a ring
    carries the interval that placed it there.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    P5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def label(self) -> str:
        """Short interval label (P1, m3, P5, ...)."""
        return str(self)

    @property
    def role(self) -> str:
        """Chord role of this interval (root, 3rd, 5th, 7th, ...)."""
        return _INTERVAL_ROLES[self._semitones % 12]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        if self._semitones in _INTERVAL_LABELS:
            return _INTERVAL_LABELS[self._semitones]
        octaves, mod = divmod(self._semitones, 12)
        return f"{_INTERVAL_LABELS[mod]}+{octaves}oct"


Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)

Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.P5 = Interval.PERFECT_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE
