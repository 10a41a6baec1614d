"""
Tests for Chord construction and reverse chord lookup.
"""

import pytest

from chuk_fretboard.core import (
    Chord,
    ChordProvenance,
    Interval,
    IntervalPattern,
    InvalidPatternError,
    Note,
    Scale,
    find_chord,
)


class TestChordFromScale:
    """STANDARD chords built on a scale position."""

    def test_tonic_triad(self, c_major: Scale) -> None:
        chord = Chord.from_scale(c_major, c_major.head)
        assert chord.notes == [Note.C, Note.E, Note.G]
        assert chord.intervals == [Interval.P1, Interval.M3, Interval.P5]
        assert chord.provenance is ChordProvenance.STANDARD
        assert chord.source is c_major
        assert chord.source_index == 0

    def test_seventh(self, c_major: Scale) -> None:
        g = c_major.find_node(Note.G)
        chord = Chord.from_scale(c_major, g, sevenths=True)
        assert chord.notes == [Note.G, Note.B, Note.D, Note.F]
        assert chord.pattern is IntervalPattern.CHORD_DOM7

    def test_sevenths_need_seven_notes(self) -> None:
        """Short scales fall back to triads."""
        scale = Scale(Note.C, IntervalPattern.SCALE_WHOLE_TONE)
        chord = Chord.from_scale(scale, scale.head, sevenths=True)
        assert len(chord.nodes) == 3

    def test_unmatched_shape_keeps_intervals(self) -> None:
        """A shape no chord pattern describes is titled by its intervals."""
        scale = Scale.from_notes([Note.C, Note.D, Note.E])
        chord = Chord.from_scale(scale, scale.head)
        assert chord.notes == [Note.C, Note.E, Note.D]
        assert chord.pattern is None
        assert chord.title == "C (P1 M3 M2)"


class TestChordFromPattern:
    """PATTERN chords built from a root and a chord pattern."""

    def test_minor_seventh(self) -> None:
        chord = Chord.from_pattern(Note.A, IntervalPattern.CHORD_MIN7)
        assert chord.notes == [Note.A, Note.C, Note.E, Note.G]
        assert chord.provenance is ChordProvenance.PATTERN
        assert chord.title == "A Minor 7th"
        assert str(chord) == chord.title

    def test_wraps_past_b(self) -> None:
        chord = Chord.from_pattern(Note.B, IntervalPattern.CHORD_MAJ)
        assert chord.notes == [Note.B, Note.Ds, Note.Fs]

    def test_scale_pattern_rejected(self) -> None:
        with pytest.raises(InvalidPatternError):
            Chord.from_pattern(Note.C, IntervalPattern.SCALE_MAJOR)

    def test_equality(self) -> None:
        a = Chord.from_pattern(Note.D, IntervalPattern.CHORD_SUS4)
        b = Chord.from_pattern(Note.D, IntervalPattern.CHORD_SUS4)
        assert a == b
        assert a.note_set == {Note.D, Note.G, Note.A}


class TestFindChord:
    """Reverse lookup from an unordered set of notes."""

    def test_root_position(self) -> None:
        chord = find_chord([Note.C, Note.E, Note.G])
        assert chord is not None
        assert chord.title == "C Major"
        assert chord.bass is None
        assert chord.provenance is ChordProvenance.LOOKUP

    def test_inversion_is_slash_chord(self) -> None:
        """The first note given is the bass."""
        chord = find_chord([Note.E, Note.G, Note.C])
        assert chord is not None
        assert chord.root == Note.C
        assert chord.bass == Note.E
        assert chord.title == "C Major/E"

    def test_duplicates_ignored(self) -> None:
        chord = find_chord([Note.G, Note.B, Note.D, Note.G, Note.B])
        assert chord is not None
        assert chord.title == "G Major"

    def test_seventh_chord(self) -> None:
        chord = find_chord([Note.A, Note.C, Note.E, Note.G])
        assert chord is not None
        assert chord.pattern is IntervalPattern.CHORD_MIN7

    def test_first_root_wins(self) -> None:
        """C E G A is both C6 and Am7; the first note tried as root decides."""
        chord = find_chord([Note.C, Note.E, Note.G, Note.A])
        assert chord is not None
        assert chord.title == "C Major 6th"

    def test_no_match(self) -> None:
        assert find_chord([Note.C, Note.D, Note.F]) is None

    def test_empty(self) -> None:
        assert find_chord([]) is None

    @pytest.mark.parametrize("pattern", IntervalPattern.chords(), ids=lambda p: p.name)
    def test_every_pattern_found_from_root(self, pattern: IntervalPattern) -> None:
        """Any chord spelled root first is identified as itself."""
        for root in Note:
            chord = find_chord(Chord.from_pattern(root, pattern).notes)
            assert chord is not None
            assert chord.root == root
            assert chord.pattern is pattern
            assert chord.bass is None

    @pytest.mark.parametrize("sevenths", [False, True])
    @pytest.mark.parametrize("pattern", IntervalPattern.scales(), ids=lambda p: p.name)
    def test_derived_chords_found_again(self, pattern: IntervalPattern, sevenths: bool) -> None:
        """A named chord derived from a scale looks up to the same notes."""
        for root in Note:
            for derived in Scale(root, pattern).derive_chords(sevenths=sevenths):
                if derived.pattern is None:
                    continue
                found = find_chord(derived.notes)
                assert found is not None
                assert found.note_set == derived.note_set
                assert found.root == derived.root

    def test_found_chord_matches_input_set(self) -> None:
        notes = [Note.F, Note.Gs, Note.B, Note.D]
        chord = find_chord(notes)
        assert chord is not None
        assert chord.note_set == set(notes)
        assert chord.root == Note.F
        assert chord.pattern is IntervalPattern.CHORD_DIM7


class TestChordDescribe:
    """Text layout of a chord's notes, intervals and roles."""

    def test_rows(self) -> None:
        chord = Chord.from_pattern(Note.G, IntervalPattern.CHORD_DOM7)
        lines = chord.describe().splitlines()
        assert len(lines) == 3
        assert lines[0].split() == ["G", "B", "D", "F"]
        assert lines[1].split() == ["P1", "M3", "P5", "m7"]
        assert lines[2].split() == ["root", "3rd", "5th", "7th"]

    def test_diminished_seventh_role(self) -> None:
        chord = Chord.from_pattern(Note.C, IntervalPattern.CHORD_DIM7)
        assert chord.describe().splitlines()[2].split() == ["root", "3rd", "5th", "6th"]
