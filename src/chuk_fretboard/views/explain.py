"""
Explain - the verbose walk-through of how chords come out of a scale.

For each chord: write the scale out twice, highlight the root and the
alternate notes taken from it, show those notes against the chromatic scale
from the chord root, and name the chord their intervals identify.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_fretboard.core.chord import Chord
from chuk_fretboard.core.scale import Scale
from chuk_fretboard.views.colour import Colouriser

_RULE = "┈" * 100
_INDENT = " " * 10


def _scale_twice(scale: Scale, chord: Chord, colouriser: Colouriser) -> str:
    """The scale written out twice with the chord's tones highlighted in turn."""
    chord_notes = chord.notes
    matched = 0
    cells = []
    for note in scale.ordered_notes() * 2:
        if matched < len(chord_notes) and chord_notes[matched] == note:
            matched += 1
            cells.append(colouriser.note(note))
        else:
            cells.append(note.label)
    return _INDENT + "    ".join(cells)


def explain(scale: Scale, chords: Sequence[Chord], colouriser: Colouriser | None = None) -> str:
    """
    Explain a scale and the chords derived from it.

    Args:
        scale: The scale the chords were derived from
        chords: Chords returned by scale.derive_chords()
        colouriser: Colour settings (default: colour on)

    Returns:
        Multi-line explanatory text
    """
    colouriser = colouriser or Colouriser()
    formatter = colouriser.note if colouriser.enabled else None

    lines = ["The scale is :", "", scale.describe(formatter), "", _RULE, ""]
    for chord in chords:
        source = chord.source or scale
        extra = "3" if len(chord.nodes) > 3 else "2"
        lines.append(
            f"Take {colouriser.note(chord.root)} and the following {extra} alternate notes "
            "from the source scale:"
        )
        lines.append("")
        lines.append(_scale_twice(source, chord, colouriser))
        lines.append("")
        lines.append(
            f"Find those notes in the chromatic scale relative to {colouriser.note(chord.root)}"
        )
        lines.append(chord.describe(formatter))
        lines.append("")
        lines.append(f"Those intervals identify the chord as : {colouriser.highlight(chord.title)}")
        lines.append("")
        lines.append(_RULE)
        lines.append("")
    return "\n".join(lines)
