"""
Core music primitives.

These are the value types everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Pitch: Absolute pitch as a MIDI note number (0-127, C4 = 60)
- Interval: Distance between pitches in semitones
- Step: Distance from one scale degree to the next
- from_steps / from_intervals: Grow a pitch sequence from a root
- intervals_of / pitches_from: Pitch <-> interval round trip
- ChordQuality: Closed set of root-relative chord patterns
- Chord: Concrete chord with root and quality
- ScaleQuality: Major, natural/harmonic/melodic minor step patterns
- Scale: Eight pitches from tonic to octave, one subclass per quality
"""

from chuk_music_theory.core.chord import (
    Chord,
    ChordQuality,
    augmented_seventh,
    augmented_triad,
    chord,
    diminished_seventh,
    diminished_triad,
    dominant_eleventh,
    dominant_ninth,
    dominant_seventh,
    dominant_seventh_ninth,
    dominant_thirteenth,
    half_diminished_seventh,
    major_eleventh,
    major_ninth,
    major_seventh,
    major_sixth,
    major_sixth_ninth,
    major_thirteenth,
    major_triad,
    minor_eleventh,
    minor_major_seventh,
    minor_ninth,
    minor_seventh,
    minor_seventh_ninth,
    minor_sixth,
    minor_sixth_ninth,
    minor_thirteenth,
    minor_triad,
    sus2,
    sus4,
)
from chuk_music_theory.core.interval import Interval, Step
from chuk_music_theory.core.pitch import Pitch, PitchClass, PitchRangeError
from chuk_music_theory.core.scale import (
    DegreeTriads,
    HarmonicMinorScale,
    MajorScale,
    MelodicMinorScale,
    NaturalMinorScale,
    Scale,
    ScaleQuality,
    harmonic_minor_scale,
    major_scale,
    melodic_minor_scale,
    natural_minor_scale,
    scale,
    scale_class,
)
from chuk_music_theory.core.sequence import (
    from_intervals,
    from_steps,
    intervals_of,
    pitches_from,
    root_intervals_of,
    steps_of,
)

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
    "steps_of",
    "root_intervals_of",
    # Chord
    "ChordQuality",
    "Chord",
    "chord",
    "major_triad",
    "minor_triad",
    "sus2",
    "sus4",
    "diminished_triad",
    "augmented_triad",
    "dominant_seventh",
    "minor_seventh",
    "major_seventh",
    "minor_major_seventh",
    "major_sixth",
    "minor_sixth",
    "diminished_seventh",
    "half_diminished_seventh",
    "augmented_seventh",
    "dominant_seventh_ninth",
    "minor_seventh_ninth",
    "major_sixth_ninth",
    "minor_sixth_ninth",
    "dominant_ninth",
    "minor_ninth",
    "major_ninth",
    "dominant_eleventh",
    "minor_eleventh",
    "major_eleventh",
    "dominant_thirteenth",
    "minor_thirteenth",
    "major_thirteenth",
    # Scale
    "ScaleQuality",
    "Scale",
    "DegreeTriads",
    "MajorScale",
    "NaturalMinorScale",
    "HarmonicMinorScale",
    "MelodicMinorScale",
    "scale",
    "scale_class",
    "major_scale",
    "natural_minor_scale",
    "harmonic_minor_scale",
    "melodic_minor_scale",
]
