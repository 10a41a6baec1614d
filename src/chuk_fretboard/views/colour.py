"""
Colour - terminal colour for notes and octaves.

Uses colorama for the ANSI codes (and for Windows consoles). Each of the 12
notes has a fixed colour, as does each octave number. In mono mode every
method returns the text unchanged.
"""

from __future__ import annotations

from colorama import Fore, Style, init

from chuk_fretboard.core.pitch import Note

NOTE_COLOURS: dict[Note, str] = {
    Note.C: Fore.RED,
    Note.Cs: Fore.LIGHTRED_EX,
    Note.D: Fore.YELLOW,
    Note.Ds: Fore.LIGHTYELLOW_EX,
    Note.E: Fore.GREEN,
    Note.F: Fore.CYAN,
    Note.Fs: Fore.LIGHTCYAN_EX,
    Note.G: Fore.BLUE,
    Note.Gs: Fore.LIGHTBLUE_EX,
    Note.A: Fore.MAGENTA,
    Note.As: Fore.LIGHTMAGENTA_EX,
    Note.B: Fore.WHITE,
}

OCTAVE_COLOURS: list[str] = [
    Fore.LIGHTBLACK_EX,
    Fore.MAGENTA,
    Fore.BLUE,
    Fore.CYAN,
    Fore.GREEN,
    Fore.YELLOW,
    Fore.RED,
    Fore.WHITE,
]

HIGHLIGHT = Fore.GREEN
RESET = Style.RESET_ALL

_colours_inited = False
_COLORAMA_PARAMS = {
    "autoreset": False,
    "strip": None,
    "convert": None,
    "wrap": True,
}


def init_colours(**kwargs: object) -> None:
    """
    Initialize colorama once. Later calls do nothing.

    Use kwargs to override the colorama init params.
    """
    global _colours_inited
    if not _colours_inited:
        params = {**_COLORAMA_PARAMS, **kwargs}
        init(**params)
        _colours_inited = True


class Colouriser:
    """Wraps text in note, octave or highlight colours."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def _wrap(self, code: str, text: str) -> str:
        if not self.enabled:
            return text
        return f"{code}{text}{RESET}"

    def note(self, note: Note, text: str | None = None) -> str:
        """Colour text (default: the note's label) in the note's colour."""
        return self._wrap(NOTE_COLOURS[note], note.label if text is None else text)

    def octave(self, octave: int | None, text: str) -> str:
        """Colour text by octave number; unknown octaves stay plain."""
        if octave is None:
            return text
        return self._wrap(OCTAVE_COLOURS[octave % len(OCTAVE_COLOURS)], text)

    def highlight(self, text: str) -> str:
        """Colour a title or heading."""
        return self._wrap(HIGHLIGHT, text)
