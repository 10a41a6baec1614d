"""
Vertical view - the fretboard stood on end, as in chord charts.

Strings are columns, lowest string on the left; frets are rows running
down from the nut.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_fretboard.core.chord import Chord
from chuk_fretboard.core.ring import RingNode
from chuk_fretboard.core.scale import Scale
from chuk_fretboard.views.base import FretboardView, ViewOptions

_COLUMN_WIDTH = 4
_GUTTER = " " * 5
_EMPTY = " │  "


class VerticalView(FretboardView):
    """Renders scales and arpeggios down the neck."""

    def show_scale(self, scale: Scale, options: ViewOptions | None = None) -> str:
        options = options or ViewOptions()
        return self.display(scale.nodes(), options, title=scale.title)

    def show_arpeggio(self, chord: Chord, options: ViewOptions | None = None) -> str:
        """Render every position of a chord's notes, played one at a time."""
        options = options or ViewOptions()
        return self.display(list(chord.nodes), options, title=chord.title)

    def display(
        self,
        nodes: Sequence[RingNode],
        options: ViewOptions | None = None,
        title: str | None = None,
    ) -> str:
        options = options or ViewOptions()
        colouriser = self._check(options)
        by_note = self._index(nodes)
        strings = range(self.instrument.string_count)

        lines = []
        if title:
            lines.append(colouriser.highlight(title))
            lines.append("")

        lines.append(
            _GUTTER
            + "".join(f"{self.instrument.strings[s].label:^{_COLUMN_WIDTH}}" for s in strings)
        )
        lines.append(
            _GUTTER
            + "".join(
                self._cell(colouriser, by_note, s, 0, options, _COLUMN_WIDTH, " ") for s in strings
            )
        )
        lines.append(_GUTTER + "═" * (_COLUMN_WIDTH * self.instrument.string_count))

        for fret in range(1, self.instrument.frets + 1):
            row = f"{fret:>3}  "
            for s in strings:
                if self._label(by_note, s, fret, options) is None:
                    row += _EMPTY
                else:
                    row += self._cell(colouriser, by_note, s, fret, options, _COLUMN_WIDTH, " ")
            lines.append(row.rstrip())
            lines.append(_GUTTER + "─┼──" * self.instrument.string_count)

        return "\n".join(lines) + "\n"
