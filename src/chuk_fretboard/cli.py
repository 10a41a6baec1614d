#!/usr/bin/env python3
"""
Entry point for the fretboard command.

Parses the instrument, view, root note and interval pattern, builds the
scale or chord and prints the chosen diagram.

Usage:
    fretboard guitar horizontal C SCALE_MAJOR --chords
    fretboard bass-guitar v A SCALE_MINOR_PENTATONIC --intervals
    fretboard guitar chord --notes E,G,C --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from chuk_fretboard.constants import (
    DEFAULT_INSTRUMENT,
    DEFAULT_PATTERN,
    DEFAULT_ROOT,
    MAX_FRETS,
    ErrorMessages,
    ViewMode,
)
from chuk_fretboard.core import (
    Chord,
    FretboardError,
    IntervalPattern,
    Note,
    Scale,
    find_chord,
)
from chuk_fretboard.instruments import FrettedInstrument, InstrumentLoader
from chuk_fretboard.views import (
    Colouriser,
    HorizontalView,
    VerticalView,
    ViewOptions,
    explain,
    init_colours,
)

logger = logging.getLogger(__name__)


def _note_list(value: str) -> list[Note]:
    """argparse type for comma separated notes (e.g. 'E,A,D,G,B,E')."""
    try:
        return [Note.parse(part) for part in value.split(",") if part.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fretboard",
        description="Scales, modes and chords on fretted instruments",
    )
    parser.add_argument(
        "instrument",
        nargs="?",
        default=DEFAULT_INSTRUMENT,
        help=f"Instrument to display (default: {DEFAULT_INSTRUMENT})",
    )
    parser.add_argument(
        "view",
        nargs="?",
        default=ViewMode.HORIZONTAL.value,
        help="View: horizontal|h, vertical|v, chord|c, find|f (default: horizontal)",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=DEFAULT_ROOT,
        help=f"Root/tonic of the scale or chord (default: {DEFAULT_ROOT})",
    )
    parser.add_argument(
        "pattern",
        nargs="?",
        default=DEFAULT_PATTERN,
        help=f"Interval pattern, e.g. SCALE_MINOR or CHORD_MAJ7 (default: {DEFAULT_PATTERN})",
    )
    parser.add_argument(
        "-n",
        "--notes",
        type=_note_list,
        default=[],
        help="Comma separated notes for the chord and find views",
    )
    parser.add_argument(
        "-c",
        "--chords",
        action="store_true",
        help="Also derive the chords of the scale",
    )
    parser.add_argument(
        "--sevenths",
        action="store_true",
        help="Derive seventh chords instead of triads (with --chords)",
    )
    parser.add_argument(
        "-s",
        "--strings",
        type=_note_list,
        default=[],
        metavar="NOTES",
        help="Comma separated string tuning, lowest first, e.g. E,A,D,G,B,E",
    )
    parser.add_argument(
        "-f",
        "--frets",
        type=int,
        default=None,
        help="Number of frets to display (overrides the instrument default)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Explain the music theory behind the output",
    )
    parser.add_argument("-m", "--mono", action="store_true", help="Display without colour")
    parser.add_argument(
        "-o",
        "--octaves",
        action="store_true",
        help="Colour octaves instead of notes",
    )
    parser.add_argument(
        "-i",
        "--intervals",
        action="store_true",
        help="Show interval labels instead of note names",
    )
    parser.add_argument(
        "--instruments-dir",
        type=Path,
        default=None,
        help="Directory of extra instrument YAML files",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List instruments and interval patterns, then exit",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _list_everything(loader: InstrumentLoader) -> str:
    lines = ["Instruments:"]
    for instrument in loader.list_instruments():
        tuning = ",".join(note.label for note in instrument.strings)
        lines.append(f"  {instrument.name:<12} {tuning:<14} {instrument.description}")
    lines.append("")
    lines.append("Interval patterns:")
    for pattern in IntervalPattern.all():
        lines.append(f"  {pattern.name:<24} {pattern.label}")
    return "\n".join(lines)


def _show_pattern(
    view: ViewMode,
    instrument: FrettedInstrument,
    root: Note,
    pattern: IntervalPattern,
    options: ViewOptions,
    colouriser: Colouriser,
    args: argparse.Namespace,
) -> None:
    """Horizontal and vertical views: a scale (with its chords) or a chord."""
    renderer: HorizontalView | VerticalView
    if view is ViewMode.HORIZONTAL:
        renderer = HorizontalView(instrument)
    else:
        renderer = VerticalView(instrument)
    formatter = colouriser.note if colouriser.enabled else None

    if not pattern.is_chord:
        scale = Scale(root, pattern)
        print(renderer.show_scale(scale, options))
        chords = scale.derive_chords(sevenths=args.sevenths) if args.chords else []
        if args.verbose:
            print(explain(scale, chords, colouriser))
        else:
            for chord in chords:
                print(colouriser.highlight(chord.title))
        return

    chord = Chord.from_pattern(root, pattern)
    if isinstance(renderer, HorizontalView):
        print(renderer.show_chord(chord, options))
    else:
        print(renderer.show_arpeggio(chord, options))
    if args.verbose:
        print(chord.describe(formatter))


def _show_notes(
    view: ViewMode,
    instrument: FrettedInstrument,
    notes: list[Note],
    options: ViewOptions,
    colouriser: Colouriser,
    verbose: bool,
) -> None:
    """Find and chord views: work from an explicit list of notes."""
    if view is ViewMode.FIND:
        scale = Scale.from_notes(notes)
        find_options = options.model_copy(update={"intervals": False})
        print()
        print(HorizontalView(instrument).display(scale.nodes(), find_options))
        return

    chord = find_chord(notes)
    if chord is None:
        print(ErrorMessages.NO_CHORD_MATCH)
        return
    print(VerticalView(instrument).show_arpeggio(chord, options))
    if verbose:
        print(chord.describe(colouriser.note if colouriser.enabled else None))


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    loader = InstrumentLoader(project_path=args.instruments_dir)
    if args.list:
        print(_list_everything(loader))
        return 0

    try:
        view = ViewMode.parse(args.view)
        root = Note.parse(args.root)
        pattern = IntervalPattern.get(args.pattern)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    instrument = loader.get_instrument(args.instrument)
    if instrument is None:
        message = ErrorMessages.INSTRUMENT_NOT_FOUND.format(name=args.instrument)
        print(f"Error: {message}", file=sys.stderr)
        return 2

    if args.frets is not None and not 0 < args.frets <= MAX_FRETS:
        print(
            f"Error: {ErrorMessages.INVALID_FRETS.format(frets=args.frets, max_frets=MAX_FRETS)}",
            file=sys.stderr,
        )
        return 2
    if args.strings or args.frets is not None:
        instrument = instrument.with_overrides(strings=args.strings, frets=args.frets)

    if args.octaves and not instrument.supports_octaves:
        print(ErrorMessages.OCTAVES_UNSUPPORTED.format(name=instrument.name))
        return 1

    options = ViewOptions(intervals=args.intervals, colour=not args.mono, octaves=args.octaves)
    if options.colour:
        init_colours()
    colouriser = Colouriser(options.colour)

    logger.debug("Rendering %s view for %s on %s", view.value, pattern.name, instrument.name)

    try:
        if view in (ViewMode.FIND, ViewMode.CHORD):
            if not args.notes:
                message = ErrorMessages.NOTES_REQUIRED.format(view=view.value)
                print(f"Error: {message}", file=sys.stderr)
                return 2
            _show_notes(view, instrument, args.notes, options, colouriser, args.verbose)
        else:
            _show_pattern(view, instrument, root, pattern, options, colouriser, args)
    except FretboardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
