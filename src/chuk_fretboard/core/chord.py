"""
Chord - a root note and the chord tones stacked above it.

Chords come from three places:
- a scale position (STANDARD): alternate notes of the scale's own ring,
  so every tone is diatonic to that scale
- a root plus an explicit chord pattern (PATTERN)
- an unordered set of notes identified against the chord patterns (LOOKUP)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING

from .errors import InvalidPatternError
from .patterns import IntervalPattern
from .pitch import Interval, Note
from .ring import CHROMATIC_RING, NoteFormatter, RingNode, chromatic_layout

if TYPE_CHECKING:
    from .scale import Scale

# Scale steps from the chord root: root, third, fifth, seventh
_TRIAD_STEPS: tuple[int, ...] = (0, 2, 4)
_SEVENTH_STEPS: tuple[int, ...] = (0, 2, 4, 6)


class ChordProvenance(str, Enum):
    """How a chord was constructed."""

    STANDARD = "standard"
    PATTERN = "pattern"
    LOOKUP = "lookup"


def _chord_nodes(root: Note, notes: Iterable[Note]) -> tuple[RingNode, ...]:
    """Label each note with its interval above the root."""
    return tuple(RingNode(note, root.interval_to(note), i) for i, note in enumerate(notes))


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: root, ordered chord tones and the pattern they match.

    Each node carries its interval above the chord root. The pattern is
    None when a scale produces a shape no chord pattern describes.
    """

    root: Note
    nodes: tuple[RingNode, ...]
    pattern: IntervalPattern | None = None
    provenance: ChordProvenance = ChordProvenance.STANDARD
    source: Scale | None = field(default=None, repr=False, compare=False)
    source_index: int | None = None
    bass: Note | None = None  # For slash chords

    @classmethod
    def from_scale(cls, scale: Scale, node: RingNode, sevenths: bool = False) -> Chord:
        """
        Build a chord on a scale position by stacking alternate scale notes.

        Walks the scale's own ring, so the chord wraps around the scale's
        cycle and stays diatonic to it.

        Args:
            scale: The scale supplying the chord tones
            node: Chord root, a node of that scale's ring
            sevenths: Add the seventh (needs a scale of at least 7 notes)

        Returns:
            A STANDARD chord
        """
        steps = _SEVENTH_STEPS if sevenths and len(scale.ring) >= 7 else _TRIAD_STEPS
        notes = [scale.walk(node, step).note for step in steps]
        offsets = tuple(sorted({node.note.interval_to(n).semitones for n in notes}))
        return cls(
            root=node.note,
            nodes=_chord_nodes(node.note, notes),
            pattern=IntervalPattern.match_chord(offsets),
            provenance=ChordProvenance.STANDARD,
            source=scale,
            source_index=node.index,
        )

    @classmethod
    def from_pattern(cls, root: Note, pattern: IntervalPattern) -> Chord:
        """
        Build a chord from a root and a chord pattern.

        Raises:
            InvalidPatternError: if the pattern is not a chord pattern
        """
        if not pattern.is_chord:
            raise InvalidPatternError(f"Interval pattern '{pattern.label}' is not a chord pattern")
        notes = [CHROMATIC_RING.note_at(root, offset) for offset in pattern.offsets]
        return cls(
            root=root,
            nodes=_chord_nodes(root, notes),
            pattern=pattern,
            provenance=ChordProvenance.PATTERN,
        )

    @property
    def notes(self) -> list[Note]:
        """Chord tones in chord order (root first)."""
        return [node.note for node in self.nodes]

    @property
    def note_set(self) -> frozenset[Note]:
        return frozenset(self.notes)

    @property
    def intervals(self) -> list[Interval]:
        return [node.interval for node in self.nodes if node.interval is not None]

    @property
    def title(self) -> str:
        if self.pattern is not None:
            title = f"{self.root.label} {self.pattern.label}"
        else:
            title = f"{self.root.label} ({' '.join(str(i) for i in self.intervals)})"
        if self.bass is not None and self.bass != self.root:
            title += f"/{self.bass.label}"
        return title

    def describe(self, formatter: NoteFormatter | None = None) -> str:
        """
        Lay the chord out against the chromatic ring from its root.

        Rows: chord tones, their intervals above the root, and their roles.
        """
        return chromatic_layout(
            self.root,
            self.nodes,
            rows=[
                lambda node: node.note.label,
                lambda node: str(node.interval),
                lambda node: node.interval.role if node.interval is not None else "",
            ],
            formatter=formatter,
        )

    def __str__(self) -> str:
        return self.title


def find_chord(notes: Sequence[Note]) -> Chord | None:
    """
    Identify the chord an unordered set of notes spells.

    Every input note is tried as the root against every chord pattern, in
    pattern-table order; the first whose notes equal the input set (order
    and duplicates ignored) wins. The first input note is taken as the bass,
    so an inversion comes back as a slash chord.

    Args:
        notes: Notes to identify

    Returns:
        The matching chord, or None if no chord pattern fits
    """
    unique = list(dict.fromkeys(notes))
    if not unique:
        return None
    target = set(unique)

    for root in unique:
        for pattern in IntervalPattern.chords():
            candidate = {CHROMATIC_RING.note_at(root, offset) for offset in pattern.offsets}
            if candidate == target:
                chord = Chord.from_pattern(root, pattern)
                return replace(
                    chord,
                    provenance=ChordProvenance.LOOKUP,
                    bass=unique[0] if unique[0] != root else None,
                )
    return None
