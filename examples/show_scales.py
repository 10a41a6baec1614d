#!/usr/bin/env python3
"""
Example: Scales, chords and chord lookup.

This walks through building a scale, deriving its chords, identifying a
chord from loose notes and drawing the results on two instruments.

Usage:
    python examples/show_scales.py
"""

from chuk_fretboard.core import IntervalPattern, Note, Scale, find_chord
from chuk_fretboard.instruments import InstrumentLoader
from chuk_fretboard.views import HorizontalView, VerticalView, ViewOptions, explain


def main() -> None:
    """Demonstrate the fretboard engine."""
    print("Fretboard Demo")
    print("=" * 40)
    print()

    loader = InstrumentLoader()
    print("Available instruments:")
    for instrument in loader.list_instruments():
        tuning = " ".join(note.label for note in instrument.strings)
        print(f"  {instrument.name}: {tuning}")
    print()

    guitar = loader.get_instrument("guitar")
    mandolin = loader.get_instrument("mandolin")
    if not guitar or not mandolin:
        print("Failed to load instruments")
        return

    options = ViewOptions(colour=False)

    # A scale on the guitar, then the chords built from it
    scale = Scale(Note.A, IntervalPattern.SCALE_MINOR)
    print(HorizontalView(guitar).show_scale(scale, options))
    for chord in scale.derive_chords():
        print(f"  {chord.title:<24} {' '.join(n.label for n in chord.notes)}")
    print()

    # Pentatonic chords borrow their shapes from the parent scale
    pentatonic = Scale(Note.A, IntervalPattern.SCALE_MINOR_PENTATONIC)
    print(f"{pentatonic.title} chords:")
    print(", ".join(chord.title for chord in pentatonic.derive_chords()))
    print()

    # Identify a chord from its notes and show it down the mandolin neck
    chord = find_chord([Note.B, Note.D, Note.G])
    if chord:
        print(VerticalView(mandolin).show_arpeggio(chord, options))
        print(chord.describe())
        print()

    # The long-form explanation of the first two chords
    print(explain(scale, scale.derive_chords()[:2]))


if __name__ == "__main__":
    main()
