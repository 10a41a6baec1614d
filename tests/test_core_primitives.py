"""
Tests for core music primitives.

Tests cover:
- Note and Interval (pitch.py)
- PatternKind and IntervalPattern (patterns.py)
- Ring, ChromaticRing and CHROMATIC_RING (ring.py)
"""

import pytest

from chuk_fretboard.core import (
    CHROMATIC_RING,
    InternalError,
    Interval,
    IntervalPattern,
    NodePosition,
    Note,
    PatternKind,
    Ring,
    RingNode,
    UnknownPatternError,
)


class TestNote:
    """Tests for Note enum."""

    def test_note_values(self) -> None:
        """Notes sit at their chromatic positions."""
        assert Note.C == 0
        assert Note.E == 4
        assert Note.G == 7
        assert Note.B == 11
        assert len(list(Note)) == 12

    def test_labels(self) -> None:
        """Labels use sharps."""
        assert Note.C.label == "C"
        assert Note.Fs.label == "F#"
        assert str(Note.As) == "A#"
        assert Note.As.spell(prefer_flats=True) == "Bb"

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave in both directions."""
        assert Note.B.transpose(1) == Note.C
        assert Note.G.transpose(7) == Note.D
        assert Note.C.transpose(-1) == Note.B

    def test_interval_to(self) -> None:
        assert Note.C.interval_to(Note.G) == Interval.P5
        assert Note.A.interval_to(Note.C) == Interval.m3

    def test_parse(self) -> None:
        """Parse sharp labels, flat labels and enum names."""
        assert Note.parse("C") == Note.C
        assert Note.parse("C#") == Note.Cs
        assert Note.parse("Db") == Note.Cs
        assert Note.parse("Fs") == Note.Fs
        assert Note.parse(" g ") == Note.G

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError):
            Note.parse("H")


class TestInterval:
    """Tests for Interval class."""

    def test_named_intervals(self) -> None:
        assert Interval.UNISON.semitones == 0
        assert Interval.MAJOR_THIRD.semitones == 4
        assert Interval.OCTAVE.semitones == 12
        assert Interval.P5 == Interval.PERFECT_FIFTH

    def test_labels(self) -> None:
        """Intervals print as their short labels."""
        assert str(Interval(0)) == "P1"
        assert str(Interval(3)) == "m3"
        assert str(Interval(6)) == "TT"
        assert str(Interval(11)) == "M7"
        assert Interval(13).label == "m2+1oct"

    def test_roles(self) -> None:
        assert Interval.P1.role == "root"
        assert Interval.m3.role == "3rd"
        assert Interval.P5.role == "5th"
        assert Interval.m7.role == "7th"

    def test_hashable_and_ordered(self) -> None:
        intervals = {Interval(4), Interval(4), Interval(7)}
        assert len(intervals) == 2
        assert Interval.m3 < Interval.M3


class TestIntervalPattern:
    """Tests for the interval pattern table."""

    def test_major_offsets(self) -> None:
        assert IntervalPattern.SCALE_MAJOR.offsets == (0, 2, 4, 5, 7, 9, 11)
        assert IntervalPattern.SCALE_MAJOR.kind is PatternKind.SCALE
        assert len(IntervalPattern.SCALE_MAJOR) == 7

    def test_get_exact_name(self) -> None:
        assert IntervalPattern.get("SCALE_MAJOR") is IntervalPattern.SCALE_MAJOR
        assert IntervalPattern.get("CHORD_MIN7") is IntervalPattern.CHORD_MIN7

    def test_get_is_case_sensitive(self) -> None:
        """Lookup never falls back to a default."""
        with pytest.raises(UnknownPatternError):
            IntervalPattern.get("scale_major")
        with pytest.raises(UnknownPatternError):
            IntervalPattern.get("SCALE_NOPE")

    def test_unknown_pattern_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            IntervalPattern.get("")

    def test_table_invariants(self) -> None:
        """Every pattern starts at 0, rises strictly and stays in the octave."""
        for pattern in IntervalPattern.all():
            assert pattern.offsets[0] == 0
            assert list(pattern.offsets) == sorted(set(pattern.offsets))
            assert all(0 <= offset <= 11 for offset in pattern.offsets)

    def test_kinds_partition_table(self) -> None:
        scales = IntervalPattern.scales()
        chords = IntervalPattern.chords()
        assert len(scales) + len(chords) == len(IntervalPattern.all())
        assert all(p.kind is PatternKind.SCALE for p in scales)
        assert all(p.is_chord for p in chords)
        assert chords[0] is IntervalPattern.CHORD_MAJ

    def test_parents(self) -> None:
        assert IntervalPattern.SCALE_MAJOR_PENTATONIC.parent is IntervalPattern.SCALE_MAJOR
        assert IntervalPattern.SCALE_MINOR_PENTATONIC.parent is IntervalPattern.SCALE_MINOR
        assert IntervalPattern.SCALE_MAJOR.parent is None

    def test_chord_generation_flags(self) -> None:
        assert IntervalPattern.SCALE_MAJOR.chord_generation
        assert not IntervalPattern.SCALE_CHROMATIC.chord_generation
        assert not IntervalPattern.SCALE_BLUES.chord_generation

    def test_invalid_offsets(self) -> None:
        with pytest.raises(ValueError):
            IntervalPattern("BAD", "Bad", (1, 2))
        with pytest.raises(ValueError):
            IntervalPattern("BAD", "Bad", (0, 4, 4))
        with pytest.raises(ValueError):
            IntervalPattern("BAD", "Bad", (0, 12))
        with pytest.raises(ValueError):
            IntervalPattern("BAD", "Bad", ())

    def test_chord_cannot_have_parent(self) -> None:
        with pytest.raises(ValueError):
            IntervalPattern(
                "BAD", "Bad", (0, 4, 7), PatternKind.CHORD, parent=IntervalPattern.SCALE_MAJOR
            )

    def test_match_chord(self) -> None:
        assert IntervalPattern.match_chord((0, 4, 7)) is IntervalPattern.CHORD_MAJ
        assert IntervalPattern.match_chord((0, 3, 6, 10)) is IntervalPattern.CHORD_MIN7B5
        assert IntervalPattern.match_chord((0, 1, 2)) is None


class TestChromaticRing:
    """Tests for the shared chromatic ring."""

    def test_order(self) -> None:
        assert CHROMATIC_RING.notes() == list(Note)
        assert len(CHROMATIC_RING) == 12

    def test_node_for_every_note(self) -> None:
        for note in Note:
            node = CHROMATIC_RING.node_for(note)
            assert node.note == note
            assert node.interval == Interval(note.value)

    def test_walk_zero_and_twelve(self) -> None:
        """Walking 0 or 12 steps comes back to the same node."""
        for note in Note:
            node = CHROMATIC_RING.node_for(note)
            assert CHROMATIC_RING.walk(node, 0) is node
            assert CHROMATIC_RING.walk(node, 12) is node

    def test_walk_wraps(self) -> None:
        b = CHROMATIC_RING.node_for(Note.B)
        assert CHROMATIC_RING.walk(b, 1).note == Note.C
        assert CHROMATIC_RING.walk(b, -2).note == Note.A
        assert CHROMATIC_RING.next_node(b).note == Note.C
        assert CHROMATIC_RING.note_at(Note.A, 3) == Note.C

    def test_cycle_length(self) -> None:
        """Following next_node returns to the start after exactly 12 steps."""
        start = CHROMATIC_RING.node_for(Note.E)
        node = CHROMATIC_RING.next_node(start)
        steps = 1
        while node is not start:
            node = CHROMATIC_RING.next_node(node)
            steps += 1
        assert steps == 12

    def test_notes_from(self) -> None:
        notes = CHROMATIC_RING.notes_from(Note.A)
        assert notes[0] == Note.A
        assert notes[3] == Note.C
        assert len(notes) == 12

    def test_positions(self) -> None:
        assert CHROMATIC_RING.position(CHROMATIC_RING.head) is NodePosition.HEAD
        assert CHROMATIC_RING.position(CHROMATIC_RING.tail) is NodePosition.TAIL
        assert CHROMATIC_RING.position(CHROMATIC_RING.node_for(Note.F)) is NodePosition.MIDDLE

    def test_foreign_node_rejected(self) -> None:
        with pytest.raises(InternalError):
            CHROMATIC_RING.walk(RingNode(Note.C, None, 40), 1)


class TestRing:
    """Tests for plain rings."""

    def test_empty_ring_rejected(self) -> None:
        with pytest.raises(ValueError):
            Ring([])

    def test_find(self) -> None:
        ring = Ring([(Note.D, Interval(0)), (Note.F, Interval(3)), (Note.A, Interval(7))])
        assert ring.find(Note.F).index == 1
        assert ring.find(Note.C) is None
        assert ring.find_interval(Interval(7)).note == Note.A
        assert ring.contains(Note.D)
        assert ring.walk(ring.tail, 1) is ring.head

    def test_single_node_ring(self) -> None:
        ring = Ring([(Note.G, None)])
        assert ring.position(ring.head) is NodePosition.HEAD
        assert ring.next_node(ring.head) is ring.head

    def test_tonal_equality(self) -> None:
        a = RingNode(Note.C, Interval(0), 0)
        b = RingNode(Note.C, Interval(5), 3)
        assert a.equals_tonally(b)
        assert a != b
