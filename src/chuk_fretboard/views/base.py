"""
Shared view plumbing - options and cell rendering.

Views place ring nodes on an instrument's strings. A fretboard position is
populated when its note belongs to the nodes being shown; the text put there
is the note label or, with the intervals option, the node's interval.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from chuk_fretboard.constants import ErrorMessages
from chuk_fretboard.core.pitch import Note
from chuk_fretboard.core.ring import RingNode
from chuk_fretboard.instruments.models import FrettedInstrument
from chuk_fretboard.views.colour import Colouriser


class ViewOptions(BaseModel):
    """Display options shared by every view."""

    intervals: bool = Field(False, description="Show interval labels instead of note names")
    colour: bool = Field(True, description="Use terminal colours")
    octaves: bool = Field(False, description="Colour by octave instead of by note")
    open_strings: bool = Field(True, description="Show notes on open strings")

    model_config = {"frozen": True}


class FretboardView:
    """Base for views that map nodes onto an instrument's strings and frets."""

    def __init__(self, instrument: FrettedInstrument):
        self.instrument = instrument

    def _check(self, options: ViewOptions) -> Colouriser:
        if options.octaves and not self.instrument.supports_octaves:
            raise ValueError(ErrorMessages.OCTAVES_UNSUPPORTED.format(name=self.instrument.name))
        return Colouriser(options.colour)

    @staticmethod
    def _index(nodes: Sequence[RingNode]) -> dict[Note, RingNode]:
        by_note: dict[Note, RingNode] = {}
        for node in nodes:
            by_note.setdefault(node.note, node)
        return by_note

    def _label(
        self,
        by_note: dict[Note, RingNode],
        string: int,
        fret: int,
        options: ViewOptions,
    ) -> str | None:
        """Plain text for a fretboard position, or None if it is not shown."""
        note = self.instrument.note_at(string, fret)
        node = by_note.get(note)
        if node is None or (fret == 0 and not options.open_strings):
            return None
        if options.intervals and node.interval is not None:
            return str(node.interval)
        return note.label

    def _paint(
        self,
        colouriser: Colouriser,
        text: str,
        string: int,
        fret: int,
        options: ViewOptions,
    ) -> str:
        if options.octaves:
            return colouriser.octave(self.instrument.octave_at(string, fret), text)
        return colouriser.note(self.instrument.note_at(string, fret), text)

    def _cell(
        self,
        colouriser: Colouriser,
        by_note: dict[Note, RingNode],
        string: int,
        fret: int,
        options: ViewOptions,
        width: int,
        fill: str,
    ) -> str:
        """A centred, coloured cell; only the label itself is coloured."""
        text = self._label(by_note, string, fret, options)
        if text is None:
            return fill * width
        left = (width - len(text)) // 2
        right = width - len(text) - left
        return fill * left + self._paint(colouriser, text, string, fret, options) + fill * right
