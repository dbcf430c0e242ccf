"""
chuk-music-theory - pitches, intervals, chords and scales as values.

Pitches are MIDI note numbers (0-127, C4 = 60). Chords and scales are
generated from a root by fixed interval and step patterns:

    from chuk_music_theory import Pitch, major_scale, minor_seventh

    c4 = Pitch(60)
    str(minor_seventh(c4))               # 'Cm7'
    major_scale(c4).supertonic_triad()   # D minor triad

Pitch arithmetic outside 0-127 raises PitchRangeError.
The full chord constructor set lives in chuk_music_theory.core.
"""

from chuk_music_theory.core import (
    Chord,
    ChordQuality,
    DegreeTriads,
    HarmonicMinorScale,
    Interval,
    MajorScale,
    MelodicMinorScale,
    NaturalMinorScale,
    Pitch,
    PitchClass,
    PitchRangeError,
    Scale,
    ScaleQuality,
    Step,
    chord,
    dominant_seventh,
    from_intervals,
    from_steps,
    harmonic_minor_scale,
    intervals_of,
    major_scale,
    major_seventh,
    major_triad,
    melodic_minor_scale,
    minor_seventh,
    minor_triad,
    natural_minor_scale,
    pitches_from,
    scale,
)
from chuk_music_theory.tables import (
    chords_by_root,
    clear_caches,
    lookup_pitch,
    pitch_table,
    scales_by_root,
)

__version__ = "0.1.0"

__all__ = [
    # Pitch
    "PitchClass",
    "Pitch",
    "PitchRangeError",
    "Interval",
    "Step",
    # Sequences
    "from_steps",
    "from_intervals",
    "intervals_of",
    "pitches_from",
    # Chord
    "ChordQuality",
    "Chord",
    "chord",
    "major_triad",
    "minor_triad",
    "dominant_seventh",
    "minor_seventh",
    "major_seventh",
    # Scale
    "ScaleQuality",
    "Scale",
    "DegreeTriads",
    "MajorScale",
    "NaturalMinorScale",
    "HarmonicMinorScale",
    "MelodicMinorScale",
    "scale",
    "major_scale",
    "natural_minor_scale",
    "harmonic_minor_scale",
    "melodic_minor_scale",
    # Tables
    "pitch_table",
    "lookup_pitch",
    "chords_by_root",
    "scales_by_root",
    "clear_caches",
]
