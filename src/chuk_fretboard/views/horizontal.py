"""
Horizontal view - the fretboard as seen from the player's side.

Strings run left to right as rows, highest-pitched string on top; frets are
columns. The first column holds the open strings, followed by the nut.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_fretboard.core.chord import Chord
from chuk_fretboard.core.ring import RingNode
from chuk_fretboard.core.scale import Scale
from chuk_fretboard.views.base import FretboardView, ViewOptions

_FRET_WIDTH = 5
_OPEN_WIDTH = 3
_MARKERS = frozenset({3, 5, 7, 9, 12, 15, 17, 19, 21, 24})


class HorizontalView(FretboardView):
    """Renders scales, chords and ad-hoc note lists across the strings."""

    def show_scale(self, scale: Scale, options: ViewOptions | None = None) -> str:
        """Render a scale under its title."""
        options = options or ViewOptions()
        return self.display(scale.nodes(), options, title=scale.title)

    def show_chord(self, chord: Chord, options: ViewOptions | None = None) -> str:
        """Render every position of a chord's notes under its title."""
        options = options or ViewOptions()
        return self.display(list(chord.nodes), options, title=chord.title)

    def display(
        self,
        nodes: Sequence[RingNode],
        options: ViewOptions | None = None,
        title: str | None = None,
    ) -> str:
        """
        Render the positions of the given nodes' notes.

        Args:
            nodes: Notes to show, with their interval labels
            options: Display options
            title: Optional heading

        Returns:
            The diagram as multi-line text

        Raises:
            ValueError: if octave colouring is requested for an instrument
                without octave data
        """
        options = options or ViewOptions()
        colouriser = self._check(options)
        by_note = self._index(nodes)
        frets = self.instrument.frets

        lines = []
        if title:
            lines.append(colouriser.highlight(title))
            lines.append("")

        for string in reversed(range(self.instrument.string_count)):
            row = self._cell(colouriser, by_note, string, 0, options, _OPEN_WIDTH, " ") + " ║"
            for fret in range(1, frets + 1):
                row += self._cell(colouriser, by_note, string, fret, options, _FRET_WIDTH, "-")
                row += "|"
            lines.append(row)

        footer = " " * (_OPEN_WIDTH + 2)
        for fret in range(1, frets + 1):
            footer += f"{fret:^{_FRET_WIDTH}} " if fret in _MARKERS else " " * (_FRET_WIDTH + 1)
        lines.append(footer.rstrip())
        return "\n".join(lines) + "\n"
