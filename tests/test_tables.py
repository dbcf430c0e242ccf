"""
Tests for the generated lookup tables and named pitch constants.
"""

import pytest

import chuk_music_theory.pitches as pitches
from chuk_music_theory.core import (
    ChordQuality,
    MajorScale,
    Pitch,
    ScaleQuality,
    major_scale,
    major_triad,
)
from chuk_music_theory.tables import (
    chords_by_root,
    lookup_pitch,
    pitch_table,
    scales_by_root,
)


@pytest.mark.usefixtures("fresh_tables")
class TestPitchTable:
    """Tests for named pitch constants."""

    def test_common_names(self) -> None:
        """Names with octave numbers."""
        table = pitch_table()
        assert table["C4"] == Pitch(60)
        assert table["A4"] == Pitch(69)
        assert table["G9"] == Pitch(127)

    def test_enharmonic_aliases(self) -> None:
        """Black keys have sharp and flat names."""
        table = pitch_table()
        assert table["CSHARP4"] == table["DFLAT4"] == Pitch(61)
        assert table["ASHARP3"] == table["BFLAT3"] == Pitch(58)

    def test_lowest_octave_has_no_digit(self) -> None:
        """MIDI 0-11 are bare names, so C0 is 12."""
        table = pitch_table()
        assert table["C"] == Pitch(0)
        assert table["BFLAT"] == Pitch(10)
        assert table["B"] == Pitch(11)
        assert table["C0"] == Pitch(12)

    def test_size(self) -> None:
        """128 pitches plus a flat alias for each of the 53 black keys."""
        table = pitch_table()
        assert len(table) == 128 + 53
        assert "GSHARP9" not in table

    def test_lookup(self) -> None:
        """Case-insensitive lookup with a clear error."""
        assert lookup_pitch("c4") == Pitch(60)
        assert lookup_pitch(" Eflat4 ") == Pitch(63)
        with pytest.raises(ValueError, match="Unknown pitch constant"):
            lookup_pitch("H4")

    def test_module_constants(self) -> None:
        """Constants import from chuk_music_theory.pitches."""
        from chuk_music_theory.pitches import C4, EFLAT4, G4

        assert C4 == Pitch(60)
        assert EFLAT4 == Pitch(63)
        assert G4 == Pitch(67)
        assert "FSHARP3" in dir(pitches)

    def test_unknown_module_constant(self) -> None:
        """Unknown names are attribute errors."""
        with pytest.raises(AttributeError):
            pitches.H4  # noqa: B018


@pytest.mark.usefixtures("fresh_tables")
class TestRootTables:
    """Tests for per-root chord and scale tables."""

    def test_chords_by_root(self) -> None:
        """Every root whose chord fits in range."""
        chords = chords_by_root(ChordQuality.MAJOR_TRIAD)
        assert len(chords) == 128 - 7
        assert max(chords) == Pitch(120)
        assert chords[Pitch(60)] == major_triad(Pitch(60))

    def test_thirteenths_by_root(self) -> None:
        """Wider chords have fewer roots."""
        chords = chords_by_root(ChordQuality.MAJOR_THIRTEENTH)
        assert len(chords) == 128 - 21
        assert chords[Pitch(106)].notes[-1] == Pitch(127)

    def test_scales_by_root(self) -> None:
        """Every root whose octave fits in range."""
        scales = scales_by_root(ScaleQuality.MAJOR)
        assert len(scales) == 116
        assert scales[Pitch(60)] == major_scale(Pitch(60))
        assert all(isinstance(s, MajorScale) for s in scales.values())

    def test_cached(self) -> None:
        """Tables are generated once."""
        assert chords_by_root(ChordQuality.SUS2) is chords_by_root(ChordQuality.SUS2)
        assert pitch_table() is pitch_table()

    def test_clear_caches(self) -> None:
        """clear_caches regenerates equal tables."""
        from chuk_music_theory.tables import clear_caches

        first = scales_by_root(ScaleQuality.HARMONIC_MINOR)
        clear_caches()
        second = scales_by_root(ScaleQuality.HARMONIC_MINOR)
        assert first is not second
        assert first == second
