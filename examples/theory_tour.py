#!/usr/bin/env python3
"""
Example: A tour of the theory primitives.

Usage:
    python examples/theory_tour.py

This example shows:
1. Pitch arithmetic - transposing, measuring, octave shifts
2. The two generators - cumulative steps vs root-relative intervals
3. The chord catalogue with display symbols
4. Scales and their degree triads
5. The range policy - out-of-range arithmetic fails loudly
6. Serializing a scale to JSON

Same root + same quality -> same notes. Always.
"""

from chuk_music_theory import (
    ChordQuality,
    Interval,
    PitchRangeError,
    Step,
    chord,
    from_intervals,
    from_steps,
    harmonic_minor_scale,
    intervals_of,
    major_scale,
    natural_minor_scale,
)
from chuk_music_theory.models import ScaleModel
from chuk_music_theory.pitches import A3, C4, G9


def main() -> None:
    """Walk through the library."""
    print("CHUK Music Theory Tour")
    print("=" * 50)
    print()

    print("1. Pitch arithmetic")
    e4 = C4 + Interval.MAJOR_THIRD
    print(f"   C4 + M3 = {e4} ({e4.midi})")
    print(f"   E4 - C4 = {e4 - C4}")
    print(f"   C4 >> 1 = {C4 >> 1}")
    print()

    print("2. Generators")
    print(f"   from_steps:     {[str(p) for p in from_steps(C4, [Step(4), Step(3)])]}")
    print(
        "   from_intervals: "
        f"{[str(p) for p in from_intervals(C4, [Interval.M3, Interval.P5])]}"
    )
    print()

    print("3. Chords on C4")
    for quality in ChordQuality:
        c = chord(C4, quality)
        print(f"   {str(c):<8}{' '.join(str(n) for n in c.notes)}")
    print()

    print("4. Scales")
    c_major = major_scale(C4)
    print(f"   {c_major}: {' '.join(str(n) for n in c_major)}")
    print(f"   steps: {' '.join(str(s) for s in c_major.steps())}")
    for numeral, triad in c_major.diatonic_chords():
        print(f"     {numeral:<5}{triad}")

    a_minor = natural_minor_scale(A3)
    print(f"   {a_minor}: {' '.join(str(n) for n in a_minor)}")
    for numeral, triad in a_minor.diatonic_chords():
        print(f"     {numeral:<5}{triad}")

    a_harmonic = harmonic_minor_scale(A3)
    print(f"   {a_harmonic}: intervals {[str(i) for i in intervals_of(a_harmonic.notes)]}")
    print()

    print("5. Range policy")
    try:
        G9 + Interval.MINOR_SECOND
    except PitchRangeError as e:
        print(f"   G9 + m2 -> PitchRangeError: {e}")
    print()

    print("6. JSON")
    print(ScaleModel.from_scale(c_major).model_dump_json(indent=2))


if __name__ == "__main__":
    main()
