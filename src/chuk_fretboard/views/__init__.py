"""
Text views - fretboard diagrams and explanations.

- HorizontalView: strings as rows, frets as columns
- VerticalView: strings as columns, frets as rows
- explain: verbose walk-through of scale chord derivation
- Colouriser: note/octave colours via colorama
"""

from chuk_fretboard.views.base import ViewOptions
from chuk_fretboard.views.colour import Colouriser, init_colours
from chuk_fretboard.views.explain import explain
from chuk_fretboard.views.horizontal import HorizontalView
from chuk_fretboard.views.vertical import VerticalView

__all__ = [
    "Colouriser",
    "HorizontalView",
    "VerticalView",
    "ViewOptions",
    "explain",
    "init_colours",
]
