"""
Tests for core music primitives.

Tests cover:
- PitchClass and Pitch (pitch.py)
- Interval and Step (interval.py)
- The fail-fast range policy for pitch arithmetic
"""

import pytest

from chuk_music_theory.core import Interval, Pitch, PitchClass, PitchRangeError, Step


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.E == 4
        assert PitchClass.G == 7
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_to_pitch(self) -> None:
        """Place a pitch class in an octave."""
        assert PitchClass.C.to_pitch(4) == Pitch(60)
        assert PitchClass.A.to_pitch(4) == Pitch(69)
        assert PitchClass.C.to_pitch(-1) == Pitch(0)
        assert PitchClass.G.to_pitch(9) == Pitch(127)

    def test_parse(self) -> None:
        """Parse pitch class from string."""
        assert PitchClass.parse("C#") == PitchClass.Cs
        assert PitchClass.parse("Db") == PitchClass.Cs  # Enharmonic
        assert PitchClass.parse("fs") == PitchClass.Fs
        with pytest.raises(ValueError):
            PitchClass.parse("H")

    def test_interval_to(self) -> None:
        """Get ascending interval between pitch classes."""
        assert PitchClass.C.interval_to(PitchClass.G) == Interval.PERFECT_FIFTH
        assert PitchClass.A.interval_to(PitchClass.C) == Interval.MINOR_THIRD


class TestPitch:
    """Tests for absolute Pitch values."""

    def test_middle_c(self) -> None:
        """C4 is MIDI 60, A4 is 69."""
        assert Pitch(60).name() == "C4"
        assert Pitch(69).name() == "A4"
        assert Pitch(60).octave == 4
        assert Pitch(69).pitch_class == PitchClass.A

    def test_range_ends(self) -> None:
        """The range runs C-1 to G9."""
        assert Pitch(0).name() == "C-1"
        assert Pitch(127).name() == "G9"

    def test_spelling(self) -> None:
        """Sharps by default, flats on request."""
        assert Pitch(61).name() == "C#4"
        assert Pitch(61).name(prefer_flats=True) == "Db4"
        assert Pitch(70).spell(prefer_flats=True) == "Bb"
        assert str(Pitch(66)) == "F#4"
        assert repr(Pitch(60)) == "Pitch(60)"

    def test_parse(self) -> None:
        """Parse pitch names and MIDI numbers."""
        assert Pitch.parse("C4") == Pitch(60)
        assert Pitch.parse("C#4") == Pitch(61)
        assert Pitch.parse("Db4") == Pitch(61)
        assert Pitch.parse("eb3") == Pitch(51)
        assert Pitch.parse("C-1") == Pitch(0)
        assert Pitch.parse("G9") == Pitch(127)
        assert Pitch.parse("60") == Pitch(60)

    def test_parse_invalid(self) -> None:
        """Unparseable or out-of-range names raise."""
        with pytest.raises(ValueError):
            Pitch.parse("H2")
        with pytest.raises(PitchRangeError):
            Pitch.parse("G#9")

    def test_construct_out_of_range(self) -> None:
        """Only 0-127 are pitches."""
        with pytest.raises(PitchRangeError):
            Pitch(128)
        with pytest.raises(PitchRangeError):
            Pitch(-1)

    def test_construct_wrong_type(self) -> None:
        """Pitches are built from ints only."""
        with pytest.raises(TypeError):
            Pitch(60.0)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            Pitch(True)

    def test_enharmonic_equality(self) -> None:
        """Spelling is not stored - C#4 and Db4 are one pitch."""
        assert Pitch.parse("C#4") == Pitch.parse("Db4")
        assert len({Pitch.parse("C#4"), Pitch.parse("Db4")}) == 1

    def test_ordering(self) -> None:
        """Pitches order by note number."""
        assert Pitch(60) < Pitch(61)
        assert max(Pitch(72), Pitch(48)) == Pitch(72)
        assert sorted([Pitch(67), Pitch(60), Pitch(64)]) == [Pitch(60), Pitch(64), Pitch(67)]

    def test_not_equal_to_int(self) -> None:
        """A Pitch is not an int."""
        assert Pitch(60) != 60
        assert int(Pitch(60)) == 60
        assert Pitch(60).midi == 60


class TestPitchArithmetic:
    """Tests for pitch/interval arithmetic."""

    def test_add_interval(self) -> None:
        """pitch + interval -> pitch."""
        assert Pitch(60) + Interval.MAJOR_THIRD == Pitch(64)
        assert Pitch(60) + Interval.MAJOR_NINTH == Pitch(74)

    def test_add_step(self) -> None:
        """pitch + step -> pitch."""
        assert Pitch(60) + Step.WHOLE == Pitch(62)

    def test_subtract_pitches(self) -> None:
        """pitch - pitch -> signed interval."""
        assert Pitch(64) - Pitch(60) == Interval.MAJOR_THIRD
        assert Pitch(60) - Pitch(64) == Interval(-4)
        assert Pitch(60) - Pitch(60) == Interval.UNISON

    def test_subtract_interval(self) -> None:
        """pitch - interval -> pitch."""
        assert Pitch(64) - Interval.MAJOR_THIRD == Pitch(60)
        assert Pitch(62) - Step.WHOLE == Pitch(60)

    def test_octave_shift(self) -> None:
        """>> and << move by whole octaves."""
        assert Pitch(60) >> 1 == Pitch(72)
        assert Pitch(60) << 1 == Pitch(48)
        assert Pitch(60) >> 2 == Pitch(84)

    def test_add_then_subtract(self) -> None:
        """(p + i) - p == i wherever p + i stays in range."""
        for value in range(0, 128):
            for semitones in range(0, 25):
                if value + semitones > 127:
                    continue
                pitch = Pitch(value)
                interval = Interval(semitones)
                assert (pitch + interval) - pitch == interval

    def test_unsupported_operand(self) -> None:
        """Bare ints are not intervals."""
        with pytest.raises(TypeError):
            Pitch(60) + 4  # type: ignore[operator]


class TestRangePolicy:
    """Out-of-range arithmetic fails fast with PitchRangeError."""

    def test_overflow(self) -> None:
        """Past 127 raises."""
        with pytest.raises(PitchRangeError) as excinfo:
            Pitch(127) + Interval.MINOR_SECOND
        assert excinfo.value.value == 128

    def test_underflow(self) -> None:
        """Below 0 raises."""
        with pytest.raises(PitchRangeError):
            Pitch(0) - Interval.MINOR_SECOND

    def test_octave_shift_overflow(self) -> None:
        """Octave shifts are range checked too."""
        with pytest.raises(PitchRangeError):
            Pitch(120) >> 1
        with pytest.raises(PitchRangeError):
            Pitch(11) << 1

    def test_is_value_error(self) -> None:
        """PitchRangeError is a ValueError with a readable message."""
        with pytest.raises(ValueError, match="out of range"):
            Pitch(200)

    def test_edges_allowed(self) -> None:
        """0 and 127 themselves are fine."""
        assert Pitch(126) + Interval.MINOR_SECOND == Pitch(127)
        assert Pitch(1) - Interval.MINOR_SECOND == Pitch(0)


class TestInterval:
    """Tests for Interval class."""

    def test_named_intervals(self) -> None:
        """Named intervals have correct values."""
        assert Interval.UNISON.semitones == 0
        assert Interval.MINOR_THIRD.semitones == 3
        assert Interval.PERFECT_FIFTH.semitones == 7
        assert Interval.OCTAVE.semitones == 12
        assert Interval.MAJOR_NINTH.semitones == 14
        assert Interval.PERFECT_ELEVENTH.semitones == 17
        assert Interval.MAJOR_THIRTEENTH.semitones == 21
        assert Interval.DOUBLE_OCTAVE.semitones == 24

    def test_enharmonic_aliases(self) -> None:
        """Aliases share values."""
        assert Interval.AUGMENTED_FOURTH == Interval.DIMINISHED_FIFTH == Interval.TRITONE
        assert Interval.AUGMENTED_FIFTH == Interval.MINOR_SIXTH
        assert Interval.DIMINISHED_SEVENTH == Interval.MAJOR_SIXTH
        assert Interval.SEMITONE == Interval.MINOR_SECOND
        assert Interval.TONE == Interval.MAJOR_SECOND
        assert Interval.PERFECT_OCTAVE == Interval.OCTAVE

    def test_short_aliases(self) -> None:
        """Short aliases work."""
        assert Interval.m3 == Interval.MINOR_THIRD
        assert Interval.M3 == Interval.MAJOR_THIRD
        assert Interval.P5 == Interval.PERFECT_FIFTH
        assert Interval.M9 == Interval.MAJOR_NINTH

    def test_add_intervals(self) -> None:
        """Adding intervals works."""
        assert Interval.MAJOR_THIRD + Interval.MINOR_THIRD == Interval.PERFECT_FIFTH
        assert Interval.PERFECT_FIFTH - Interval.MAJOR_THIRD == Interval.MINOR_THIRD
        assert -Interval.MAJOR_THIRD == Interval(-4)

    def test_multiply(self) -> None:
        """Scaling by an integer."""
        assert Interval.MAJOR_SECOND * 3 == Interval.TRITONE
        assert 2 * Interval.OCTAVE == Interval.DOUBLE_OCTAVE

    def test_octave_shift(self) -> None:
        """>> widens and << narrows by octaves."""
        assert Interval.MAJOR_SECOND >> 1 == Interval.MAJOR_NINTH
        assert Interval.PERFECT_FOURTH >> 1 == Interval.PERFECT_ELEVENTH
        assert Interval.MAJOR_NINTH << 1 == Interval.MAJOR_SECOND

    def test_from_octaves(self) -> None:
        """Whole-octave intervals."""
        assert Interval.from_octaves(1) == Interval.OCTAVE
        assert Interval.from_octaves(2) == Interval.DOUBLE_OCTAVE

    def test_invert(self) -> None:
        """Inverting intervals works."""
        assert Interval.MAJOR_THIRD.invert() == Interval.MINOR_SIXTH
        assert Interval.PERFECT_FIFTH.invert() == Interval.PERFECT_FOURTH

    def test_compound(self) -> None:
        """Compound intervals are wider than an octave."""
        assert Interval.MAJOR_NINTH.is_compound()
        assert not Interval.OCTAVE.is_compound()

    def test_comparison(self) -> None:
        """Intervals can be compared."""
        assert Interval.MINOR_THIRD < Interval.MAJOR_THIRD
        assert Interval.MAJOR_NINTH > Interval.OCTAVE

    def test_hashable(self) -> None:
        """Intervals are hashable for use in sets."""
        intervals = {Interval.UNISON, Interval.MAJOR_THIRD, Interval(4)}
        assert len(intervals) == 2

    def test_repr(self) -> None:
        """repr names the constant when there is one."""
        assert repr(Interval(4)) == "Interval.MAJOR_THIRD"
        assert repr(Interval(6)) == "Interval.TRITONE"
        assert repr(Interval(14)) == "Interval.MAJOR_NINTH"
        assert repr(Interval(30)) == "Interval(30)"

    def test_str(self) -> None:
        """Short names, compound included."""
        assert str(Interval(7)) == "P5"
        assert str(Interval(14)) == "M9"
        assert str(Interval(24)) == "P15"
        assert str(Interval(28)) == "M3+2oct"
        assert str(Interval(-4)) == "-M3"


class TestStep:
    """Tests for Step class."""

    def test_named_steps(self) -> None:
        """Half, whole and whole-and-half steps."""
        assert Step.HALF.semitones == 1
        assert Step.WHOLE.semitones == 2
        assert Step.WHOLE_AND_HALF.semitones == 3

    def test_distinct_from_interval(self) -> None:
        """A step never equals an interval of the same size."""
        assert Step(2) != Interval(2)
        assert Interval(2) != Step(2)

    def test_conversion(self) -> None:
        """Steps and intervals convert losslessly."""
        assert Step.WHOLE.to_interval() == Interval.MAJOR_SECOND
        assert Interval.MAJOR_THIRD.to_step() == Step(4)
        assert Interval.from_step(Step.HALF) == Interval.MINOR_SECOND
        assert Step.from_interval(Interval.MINOR_THIRD) == Step.WHOLE_AND_HALF

    def test_add_steps(self) -> None:
        """Steps accumulate."""
        assert Step.WHOLE + Step.HALF == Step.WHOLE_AND_HALF

    def test_sum(self) -> None:
        """sum() works over steps and over intervals."""
        assert sum([Step.WHOLE, Step.WHOLE, Step.HALF]) == Step(5)
        assert sum([Interval.MAJOR_THIRD, Interval.MINOR_THIRD]) == Interval.PERFECT_FIFTH

    def test_no_mixed_addition(self) -> None:
        """Steps and intervals don't add to each other."""
        with pytest.raises(TypeError):
            Step.WHOLE + Interval.MAJOR_SECOND  # type: ignore[operator]

    def test_display(self) -> None:
        """repr names constants, str uses W/H shorthand."""
        assert repr(Step(2)) == "Step.WHOLE"
        assert repr(Step(5)) == "Step(5)"
        assert str(Step.HALF) == "H"
        assert str(Step.WHOLE_AND_HALF) == "WH"
