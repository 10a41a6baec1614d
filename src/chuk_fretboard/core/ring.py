"""
Rings - the cyclic note structures all scale and chord math walks.

A ring is a fixed-size ordered tuple of nodes indexed modulo its length, so
walking off the tail wraps back to the head without any pointer cycle.

The chromatic ring holds all 12 notes in order. It is built once at import
and shared read-only; scales copy (note, interval) values out of it into
rings of their own.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from .errors import InternalError
from .pitch import Interval, Note


class NodePosition(str, Enum):
    """Where a node sits in its ring. Traversal bookkeeping only."""

    HEAD = "head"
    MIDDLE = "middle"
    TAIL = "tail"


@dataclass(frozen=True)
class RingNode:
    """
    A note on a ring, with the interval that placed it there.

    The index is the node's position within its own ring; two nodes on
    different rings (or at different positions) may hold the same note.
    """

    note: Note
    interval: Interval | None = None
    index: int = 0

    def equals_tonally(self, other: RingNode) -> bool:
        """True when both nodes hold the same pitch class."""
        return self.note == other.note

    def __str__(self) -> str:
        return self.note.label


class Ring:
    """
    An immutable cycle of ring nodes.

    Following next_node() from any node returns to it after exactly
    len(ring) steps.
    """

    __slots__ = ("_nodes",)

    def __init__(self, entries: Iterable[tuple[Note, Interval | None]]) -> None:
        nodes = tuple(
            RingNode(note, interval, index) for index, (note, interval) in enumerate(entries)
        )
        if not nodes:
            raise ValueError("A ring needs at least one note")
        self._nodes = nodes

    @property
    def head(self) -> RingNode:
        return self._nodes[0]

    @property
    def tail(self) -> RingNode:
        return self._nodes[-1]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[RingNode]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> RingNode:
        return self._nodes[index % len(self._nodes)]

    def _owned(self, node: RingNode) -> RingNode:
        if not 0 <= node.index < len(self._nodes) or self._nodes[node.index] != node:
            raise InternalError(f"Node {node!r} does not belong to this ring")
        return node

    def next_node(self, node: RingNode) -> RingNode:
        """The node after this one, wrapping from tail to head."""
        return self.walk(node, 1)

    def walk(self, node: RingNode, steps: int) -> RingNode:
        """
        Walk forward around the ring.

        Args:
            node: Starting node (must belong to this ring)
            steps: Number of positions to move; 0 returns the node itself,
                negative values walk backwards

        Returns:
            The node reached
        """
        start = self._owned(node)
        return self._nodes[(start.index + steps) % len(self._nodes)]

    def position(self, node: RingNode) -> NodePosition:
        """Classify a node as head, tail or somewhere in between."""
        index = self._owned(node).index
        if index == 0:
            return NodePosition.HEAD
        if index == len(self._nodes) - 1:
            return NodePosition.TAIL
        return NodePosition.MIDDLE

    def find(self, note: Note) -> RingNode | None:
        """First node holding this note, scanning from the head."""
        for node in self._nodes:
            if node.note == note:
                return node
        return None

    def find_interval(self, interval: Interval) -> RingNode | None:
        """First node labelled with this interval, scanning from the head."""
        for node in self._nodes:
            if node.interval == interval:
                return node
        return None

    def contains(self, note: Note) -> bool:
        return self.find(note) is not None

    def __repr__(self) -> str:
        return f"Ring({' '.join(node.note.label for node in self._nodes)})"


class ChromaticRing(Ring):
    """The 12 chromatic notes in order, each labelled with its interval from C."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__((note, Interval(note.value)) for note in Note)

    def node_for(self, note: Note) -> RingNode:
        """
        The chromatic node holding a note.

        Raises:
            InternalError: if the note is missing from the ring
        """
        node = self.find(note)
        if node is None:
            raise InternalError(f"Note {note!r} missing from the chromatic ring")
        return node

    def note_at(self, note: Note, semitones: int) -> Note:
        """The note reached by walking semitones forward from a note."""
        return self.walk(self.node_for(note), semitones).note

    def notes(self) -> list[Note]:
        """All 12 notes in chromatic order, starting at C."""
        return [node.note for node in self]

    def notes_from(self, note: Note) -> list[Note]:
        """All 12 notes in chromatic order, starting at the given note."""
        start = self.node_for(note)
        return [self.walk(start, step).note for step in range(len(self))]


CHROMATIC_RING = ChromaticRing()


NoteFormatter = Callable[[Note, str], str]

_CELL_WIDTH = 6
_INDENT = " " * 10


def chromatic_layout(
    root: Note,
    nodes: Iterable[RingNode],
    rows: Iterable[Callable[[RingNode], str]],
    formatter: NoteFormatter | None = None,
) -> str:
    """
    Lay nodes out against the chromatic ring rotated to start at root.

    Each row callable turns a node into the text for its cell; chromatic
    positions with no node stay blank so every row lines up.

    Args:
        root: First chromatic column
        nodes: Nodes to place (their notes pick the column)
        rows: One callable per output row
        formatter: Optional decoration for populated cells, e.g. colour

    Returns:
        Multi-line text, one line per row
    """
    by_note: dict[Note, RingNode] = {}
    for node in nodes:
        by_note.setdefault(node.note, node)

    lines = []
    for row in rows:
        cells = []
        for note in CHROMATIC_RING.notes_from(root):
            node = by_note.get(note)
            if node is None:
                cells.append(" " * _CELL_WIDTH)
                continue
            text = f"{row(node):<{_CELL_WIDTH}}"
            cells.append(formatter(note, text) if formatter else text)
        lines.append((_INDENT + "".join(cells)).rstrip())
    return "\n".join(lines)
