"""
Scale - an interval pattern applied to a root note.

A scale walks the chromatic ring from its root by each of the pattern's
offsets and keeps the notes it lands on in a ring of its own. Chords are
derived from a scale by stacking alternate notes of that ring.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from .chord import Chord
from .errors import InvalidPatternError
from .patterns import IntervalPattern, PatternKind
from .pitch import Interval, Note
from .ring import CHROMATIC_RING, NoteFormatter, Ring, RingNode, chromatic_layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scale:
    """
    A root note plus a scale pattern, resolved to a ring of notes.

    Examples:
        Scale(Note.C, IntervalPattern.SCALE_MAJOR) = C D E F G A B
        Scale.from_notes([Note.E, Note.A, Note.D]) = an ad-hoc note list

    Immutable: construction either fully succeeds or raises.
    """

    root: Note
    pattern: IntervalPattern
    custom_notes: tuple[Note, ...] | None = None
    ring: Ring = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.pattern.kind is PatternKind.CHORD:
            raise InvalidPatternError(
                f"Interval pattern '{self.pattern.label}' is not a scale/mode pattern"
            )

        if self.custom_notes is not None:
            if (
                not self.custom_notes
                or self.custom_notes[0] != self.root
                or self.pattern != IntervalPattern.SCALE_CHROMATIC
            ):
                raise ValueError(
                    "Custom notes need the chromatic pattern and must start at the root"
                )
            # Interval labels are sequential and purely cosmetic here
            entries = [(note, Interval(i)) for i, note in enumerate(self.custom_notes)]
        else:
            root_node = CHROMATIC_RING.node_for(self.root)
            entries = [
                (CHROMATIC_RING.walk(root_node, offset).note, Interval(offset))
                for offset in self.pattern.offsets
            ]

        object.__setattr__(self, "ring", Ring(entries))
        if logger.isEnabledFor(logging.DEBUG):
            notes = " ".join(n.label for n in self.ordered_notes())
            logger.debug("Built %s: %s", self.title, notes)

    @classmethod
    def from_notes(cls, notes: Sequence[Note]) -> Scale:
        """
        Build an ad-hoc scale from an explicit, ordered list of notes.

        The first note is the root; the pattern is the chromatic one.

        Raises:
            ValueError: if the list is empty
        """
        if not notes:
            raise ValueError("At least one note is required")
        return cls(notes[0], IntervalPattern.SCALE_CHROMATIC, tuple(notes))

    @property
    def head(self) -> RingNode:
        return self.ring.head

    @property
    def title(self) -> str:
        if self.pattern == IntervalPattern.SCALE_CHROMATIC:
            return f"{self.pattern.label} Scale"
        return f"{self.root.label} {self.pattern.label}"

    def contains_note(self, note: Note) -> bool:
        """True if the note appears anywhere in the scale."""
        return self.ring.contains(note)

    def find_node(self, target: Note | Interval) -> RingNode | None:
        """
        Find the first node holding a note, or labelled with an interval.

        Returns None when nothing matches.
        """
        if isinstance(target, Interval):
            return self.ring.find_interval(target)
        return self.ring.find(target)

    def walk(self, node: RingNode, steps: int) -> RingNode:
        """Walk the scale's own ring (scale steps, not semitones)."""
        return self.ring.walk(node, steps)

    def nodes(self) -> list[RingNode]:
        """
        The scale's nodes in order from the head.

        Stops after one lap, or earlier if the head's note comes round again
        (an ad-hoc list may repeat a note).
        """
        result = [self.ring.head]
        for node in list(self.ring)[1:]:
            if node.note == self.ring.head.note:
                break
            result.append(node)
        return result

    def ordered_notes(self) -> list[Note]:
        """The scale's notes in order from the root."""
        return [node.note for node in self.nodes()]

    def derive_chords(self, sevenths: bool = False) -> list[Chord]:
        """
        Build a chord on each degree of the scale.

        Chords stack alternate notes of the scale (root, third, fifth and
        optionally seventh). For a pattern with a parent, chord shapes come
        from the parent scale on the same root, but only degrees this scale
        actually contains are used as chord roots.

        Args:
            sevenths: Add the seventh to each chord

        Returns:
            One chord per usable degree, or an empty list if the pattern
            does not support chord generation
        """
        if not self.pattern.chord_generation:
            logger.warning("Chord generation from %s is currently not supported", self.title)
            return []

        if self.pattern.parent is None:
            harmony = self
            candidates = list(self.ring)
        else:
            harmony = Scale(self.root, self.pattern.parent)
            candidates = [
                node
                for node in harmony.ring
                if any(node.equals_tonally(own) for own in self.ring)
            ]

        return [Chord.from_scale(harmony, node, sevenths=sevenths) for node in candidates]

    def describe(self, formatter: NoteFormatter | None = None) -> str:
        """
        Lay the scale out against the chromatic ring from its root.

        The first row holds the scale's notes, the second their intervals.
        """
        return chromatic_layout(
            self.root,
            self.nodes(),
            rows=[
                lambda node: node.note.label,
                lambda node: str(node.interval) if node.interval is not None else "",
            ],
            formatter=formatter,
        )

    def __len__(self) -> int:
        return len(self.ring)

    def __str__(self) -> str:
        return self.title
