"""
Distance primitives - Interval and Step.

Both count semitones. An Interval measures the distance between two pitches
(usually from a chord root). A Step is the distance from one scale degree to
the next. They share a representation but are separate types, so a step
pattern can't be handed to a root-relative generator by accident.
"""

from __future__ import annotations

from functools import total_ordering
from typing import ClassVar

from chuk_music_theory.constants import SEMITONES_PER_OCTAVE

# Short names by semitone count, simple and compound
_INTERVAL_NAMES: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
    12: "P8",
    13: "m9",
    14: "M9",
    15: "m10",
    16: "M10",
    17: "P11",
    18: "A11",
    19: "P12",
    20: "m13",
    21: "M13",
    22: "m14",
    23: "M14",
    24: "P15",
}

# Lookup order for repr - first match wins for enharmonic aliases
_INTERVAL_CONSTANTS: list[str] = [
    "UNISON",
    "MINOR_SECOND",
    "MAJOR_SECOND",
    "MINOR_THIRD",
    "MAJOR_THIRD",
    "PERFECT_FOURTH",
    "TRITONE",
    "PERFECT_FIFTH",
    "MINOR_SIXTH",
    "MAJOR_SIXTH",
    "MINOR_SEVENTH",
    "MAJOR_SEVENTH",
    "OCTAVE",
    "MINOR_NINTH",
    "MAJOR_NINTH",
    "MINOR_TENTH",
    "MAJOR_TENTH",
    "PERFECT_ELEVENTH",
    "AUGMENTED_ELEVENTH",
    "PERFECT_TWELFTH",
    "MINOR_THIRTEENTH",
    "MAJOR_THIRTEENTH",
    "MINOR_FOURTEENTH",
    "MAJOR_FOURTEENTH",
    "DOUBLE_OCTAVE",
]


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Signed and unbounded: compound intervals (ninths, elevenths, thirteenths)
    go past the octave, and descending intervals are negative.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    # Named intervals (class constants)
    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    SEMITONE: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    TONE: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    AUGMENTED_FOURTH: ClassVar[Interval]
    DIMINISHED_FIFTH: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    AUGMENTED_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    DIMINISHED_SEVENTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]
    PERFECT_OCTAVE: ClassVar[Interval]
    MINOR_NINTH: ClassVar[Interval]
    MAJOR_NINTH: ClassVar[Interval]
    MINOR_TENTH: ClassVar[Interval]
    MAJOR_TENTH: ClassVar[Interval]
    PERFECT_ELEVENTH: ClassVar[Interval]
    AUGMENTED_ELEVENTH: ClassVar[Interval]
    PERFECT_TWELFTH: ClassVar[Interval]
    MINOR_THIRTEENTH: ClassVar[Interval]
    MAJOR_THIRTEENTH: ClassVar[Interval]
    MINOR_FOURTEENTH: ClassVar[Interval]
    MAJOR_FOURTEENTH: ClassVar[Interval]
    DOUBLE_OCTAVE: ClassVar[Interval]

    # Short aliases
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    TT: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    A5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    d7: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]
    m9: ClassVar[Interval]
    M9: ClassVar[Interval]
    P11: ClassVar[Interval]
    M13: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @classmethod
    def from_octaves(cls, octaves: int) -> Interval:
        """An interval spanning a whole number of octaves."""
        return cls(octaves * SEMITONES_PER_OCTAVE)

    @classmethod
    def from_step(cls, step: Step) -> Interval:
        """Convert a scale step to the interval it spans."""
        return cls(step.semitones)

    def to_step(self) -> Step:
        """Convert to a scale step of the same size."""
        return Step(self._semitones)

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval(12 - (self._semitones % 12))

    def is_compound(self) -> bool:
        """True if the interval spans more than an octave."""
        return abs(self._semitones) > SEMITONES_PER_OCTAVE

    def __add__(self, other: Interval) -> Interval:
        """Add two intervals."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __radd__(self, other: int) -> Interval:
        """Allow sum() over intervals (start value 0)."""
        if other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Interval) -> Interval:
        """Subtract an interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones - other._semitones)

    def __neg__(self) -> Interval:
        """Negate the interval (descending instead of ascending)."""
        return Interval(-self._semitones)

    def __mul__(self, n: int) -> Interval:
        """Multiply an interval (e.g., two octaves)."""
        if not isinstance(n, int):
            return NotImplemented
        return Interval(self._semitones * n)

    def __rmul__(self, n: int) -> Interval:
        """Right multiply."""
        return self.__mul__(n)

    def __rshift__(self, octaves: int) -> Interval:
        """Widen by a number of octaves: M2 >> 1 == M9."""
        if not isinstance(octaves, int):
            return NotImplemented
        return Interval(self._semitones + octaves * SEMITONES_PER_OCTAVE)

    def __lshift__(self, octaves: int) -> Interval:
        """Narrow by a number of octaves: M9 << 1 == M2."""
        if not isinstance(octaves, int):
            return NotImplemented
        return Interval(self._semitones - octaves * SEMITONES_PER_OCTAVE)

    def __int__(self) -> int:
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(("Interval", self._semitones))

    def __repr__(self) -> str:
        # Try to find a named constant
        for name in _INTERVAL_CONSTANTS:
            named = getattr(Interval, name, None)
            if isinstance(named, Interval) and named._semitones == self._semitones:
                return f"Interval.{name}"
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Human-readable interval name."""
        if self._semitones < 0:
            return f"-{Interval(-self._semitones)}"
        if self._semitones in _INTERVAL_NAMES:
            return _INTERVAL_NAMES[self._semitones]
        octaves, mod = divmod(self._semitones, SEMITONES_PER_OCTAVE)
        return f"{_INTERVAL_NAMES[mod]}+{octaves}oct"


@total_ordering
class Step:
    """
    Distance from one scale degree to the next, in semitones.

    Scales are step patterns: a major scale is W W H W W W H.
    Never equal to an Interval, even of the same size - convert explicitly.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    HALF: ClassVar[Step]
    WHOLE: ClassVar[Step]
    WHOLE_AND_HALF: ClassVar[Step]

    # Short aliases
    H: ClassVar[Step]
    W: ClassVar[Step]

    def __init__(self, semitones: int) -> None:
        object.__setattr__(self, "_semitones", semitones)

    @property
    def semitones(self) -> int:
        """Number of semitones in this step."""
        return self._semitones

    @classmethod
    def from_interval(cls, interval: Interval) -> Step:
        """Convert an interval to a step of the same size."""
        return cls(interval.semitones)

    def to_interval(self) -> Interval:
        """Convert to an interval of the same size."""
        return Interval(self._semitones)

    def __add__(self, other: Step) -> Step:
        if not isinstance(other, Step):
            return NotImplemented
        return Step(self._semitones + other._semitones)

    def __radd__(self, other: int) -> Step:
        """Allow sum() over steps (start value 0)."""
        if other == 0:
            return self
        return NotImplemented

    def __int__(self) -> int:
        return self._semitones

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Step):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Step) -> bool:
        if not isinstance(other, Step):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(("Step", self._semitones))

    def __repr__(self) -> str:
        for name in ("HALF", "WHOLE", "WHOLE_AND_HALF"):
            named = getattr(Step, name, None)
            if isinstance(named, Step) and named._semitones == self._semitones:
                return f"Step.{name}"
        return f"Step({self._semitones})"

    def __str__(self) -> str:
        return {1: "H", 2: "W", 3: "WH"}.get(self._semitones, f"{self._semitones}st")


# Initialize class constants after class is defined
Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)
Interval.MINOR_NINTH = Interval(13)
Interval.MAJOR_NINTH = Interval(14)
Interval.MINOR_TENTH = Interval(15)
Interval.MAJOR_TENTH = Interval(16)
Interval.PERFECT_ELEVENTH = Interval(17)
Interval.AUGMENTED_ELEVENTH = Interval(18)
Interval.PERFECT_TWELFTH = Interval(19)
Interval.MINOR_THIRTEENTH = Interval(20)
Interval.MAJOR_THIRTEENTH = Interval(21)
Interval.MINOR_FOURTEENTH = Interval(22)
Interval.MAJOR_FOURTEENTH = Interval(23)
Interval.DOUBLE_OCTAVE = Interval(24)

# Enharmonic aliases
Interval.SEMITONE = Interval.MINOR_SECOND
Interval.TONE = Interval.MAJOR_SECOND
Interval.AUGMENTED_FOURTH = Interval.TRITONE
Interval.DIMINISHED_FIFTH = Interval.TRITONE
Interval.AUGMENTED_FIFTH = Interval.MINOR_SIXTH
Interval.DIMINISHED_SEVENTH = Interval.MAJOR_SIXTH
Interval.PERFECT_OCTAVE = Interval.OCTAVE

# Short aliases
Interval.P1 = Interval.UNISON
Interval.m2 = Interval.MINOR_SECOND
Interval.M2 = Interval.MAJOR_SECOND
Interval.m3 = Interval.MINOR_THIRD
Interval.M3 = Interval.MAJOR_THIRD
Interval.P4 = Interval.PERFECT_FOURTH
Interval.TT = Interval.TRITONE
Interval.d5 = Interval.DIMINISHED_FIFTH
Interval.P5 = Interval.PERFECT_FIFTH
Interval.A5 = Interval.AUGMENTED_FIFTH
Interval.m6 = Interval.MINOR_SIXTH
Interval.M6 = Interval.MAJOR_SIXTH
Interval.d7 = Interval.DIMINISHED_SEVENTH
Interval.m7 = Interval.MINOR_SEVENTH
Interval.M7 = Interval.MAJOR_SEVENTH
Interval.P8 = Interval.OCTAVE
Interval.m9 = Interval.MINOR_NINTH
Interval.M9 = Interval.MAJOR_NINTH
Interval.P11 = Interval.PERFECT_ELEVENTH
Interval.M13 = Interval.MAJOR_THIRTEENTH

Step.HALF = Step(1)
Step.WHOLE = Step(2)
Step.WHOLE_AND_HALF = Step(3)
Step.H = Step.HALF
Step.W = Step.WHOLE
