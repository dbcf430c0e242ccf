"""
Scale primitives - ScaleQuality, Scale and its quality subclasses.

Scales are step patterns from a root. A scale holds eight pitches, tonic
to octave inclusive. The quality is carried by the class: MajorScale,
NaturalMinorScale, HarmonicMinorScale and MelodicMinorScale.

Only major and natural minor scales derive degree triads. Their seven
triad qualities are a fixed lookup per degree, not computed by stacking
thirds.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from chuk_music_theory.constants import SCALE_LENGTH, TRIAD_DEGREES, ErrorMessages
from chuk_music_theory.core.chord import Chord, ChordQuality
from chuk_music_theory.core.interval import Interval, Step
from chuk_music_theory.core.pitch import Pitch, PitchClass
from chuk_music_theory.core.sequence import from_steps, root_intervals_of, steps_of


class ScaleQuality(str, Enum):
    """The supported scale qualities."""

    MAJOR = "major"
    NATURAL_MINOR = "natural_minor"
    HARMONIC_MINOR = "harmonic_minor"
    MELODIC_MINOR = "melodic_minor"  # ascending form

    @property
    def steps(self) -> tuple[Step, ...]:
        """Step pattern from the tonic up to the octave."""
        return _SCALE_STEPS[self]

    @property
    def display_name(self) -> str:
        """Conventional name: 'major', 'minor', 'harmonic minor', 'melodic minor'."""
        if self == ScaleQuality.NATURAL_MINOR:
            return "minor"
        return self.value.replace("_", " ")

    @classmethod
    def parse(cls, text: str) -> ScaleQuality:
        """Parse a scale quality like 'major', 'minor', 'harmonic minor'."""
        key = text.strip().lower().replace(" ", "_").replace("-", "_")
        if key == "minor":
            return cls.NATURAL_MINOR
        for quality in cls:
            if quality.value == key:
                return quality
        raise ValueError(ErrorMessages.UNKNOWN_SCALE_QUALITY.format(name=text))


# Step shorthand
_H = Step.HALF
_W = Step.WHOLE
_WH = Step.WHOLE_AND_HALF

_SCALE_STEPS: dict[ScaleQuality, tuple[Step, ...]] = {
    ScaleQuality.MAJOR: (_W, _W, _H, _W, _W, _W, _H),
    ScaleQuality.NATURAL_MINOR: (_W, _H, _W, _W, _H, _W, _W),
    ScaleQuality.HARMONIC_MINOR: (_W, _H, _W, _W, _H, _WH, _H),
    ScaleQuality.MELODIC_MINOR: (_W, _H, _W, _W, _W, _W, _H),
}

# Degree names used by the triad accessors and roman numerals
_NUMERALS: list[str] = ["I", "II", "III", "IV", "V", "VI", "VII"]


@dataclass(frozen=True)
class Scale:
    """
    Eight pitches built from a root by a quality's step pattern.

    Use a quality subclass (or scale()/major_scale()/...) to build one.
    The notes must follow the subclass's step pattern exactly.

    Immutable and hashable.
    """

    notes: tuple[Pitch, ...]

    QUALITY: ClassVar[ScaleQuality]

    def __post_init__(self) -> None:
        if not hasattr(self, "QUALITY"):
            raise TypeError(ErrorMessages.SCALE_WITHOUT_QUALITY)
        object.__setattr__(self, "notes", tuple(self.notes))
        for note in self.notes:
            if not isinstance(note, Pitch):
                raise TypeError(
                    ErrorMessages.EXPECTED_PITCH_NOTES.format(
                        kind="Scale", type_name=type(note).__name__
                    )
                )
        if len(self.notes) != SCALE_LENGTH:
            raise ValueError(
                ErrorMessages.SCALE_LENGTH.format(
                    quality=self.QUALITY.value, expected=SCALE_LENGTH, actual=len(self.notes)
                )
            )
        if tuple(steps_of(self.notes)) != self.QUALITY.steps:
            raise ValueError(
                ErrorMessages.SCALE_PATTERN.format(
                    notes=[str(note) for note in self.notes], quality=self.QUALITY.value
                )
            )

    @classmethod
    def from_root(cls, root: Pitch) -> Scale:
        """
        Build this scale on a root.

        Raises:
            PitchRangeError: If the octave above the root is above 127
        """
        return cls(tuple(from_steps(root, cls.QUALITY.steps)))

    @property
    def quality(self) -> ScaleQuality:
        return self.QUALITY

    @property
    def root(self) -> Pitch:
        """The tonic (first note)."""
        return self.notes[0]

    def steps(self) -> list[Step]:
        """The seven steps between adjacent notes."""
        return steps_of(self.notes)

    def intervals(self) -> list[Interval]:
        """Intervals from the tonic to degrees 2 through 8."""
        return root_intervals_of(self.notes)

    def degree(self, index: int) -> Pitch:
        """The pitch at a 0-indexed degree (0 = tonic, 7 = octave)."""
        return self.notes[index]

    def pitch_classes(self) -> list[PitchClass]:
        """The seven distinct pitch classes (octave excluded)."""
        return [note.pitch_class for note in self.notes[:-1]]

    def contains(self, pitch: Pitch) -> bool:
        """True if the pitch's class belongs to the scale, in any octave."""
        return pitch.pitch_class in self.pitch_classes()

    def transpose(self, interval: Interval) -> Scale:
        """The same scale on a moved root."""
        return type(self).from_root(self.root + interval)

    def to_midi(self) -> list[int]:
        """MIDI note numbers, tonic to octave."""
        return [note.midi for note in self.notes]

    def name(self, prefer_flats: bool = False) -> str:
        """Conventional name like 'C major' or 'Bb harmonic minor'."""
        return f"{self.root.spell(prefer_flats)} {self.QUALITY.display_name}"

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self.notes)

    def __getitem__(self, index: int) -> Pitch:
        return self.notes[index]

    def __str__(self) -> str:
        return self.name()


class DegreeTriads:
    """
    Triads on each degree of a diatonic scale.

    Mixed into scales whose triad qualities are fixed per degree.
    Degrees are 0-indexed: 0 = tonic, 6 = seventh degree.
    """

    notes: tuple[Pitch, ...]

    DEGREE_QUALITIES: ClassVar[tuple[ChordQuality, ...]]

    def triad(self, degree: int) -> Chord:
        """
        The triad built on a degree.

        Raises:
            ValueError: If degree is outside 0-6
            PitchRangeError: If a chord tone would be above 127
        """
        quality = self._degree_quality(degree)
        return Chord.build(self.notes[degree], quality)

    def _degree_quality(self, degree: int) -> ChordQuality:
        if not 0 <= degree < TRIAD_DEGREES:
            raise ValueError(
                ErrorMessages.INVALID_DEGREE.format(high=TRIAD_DEGREES - 1, degree=degree)
            )
        return self.DEGREE_QUALITIES[degree]

    def triads(self) -> list[Chord]:
        """All seven degree triads, tonic first."""
        return [self.triad(degree) for degree in range(TRIAD_DEGREES)]

    def tonic_triad(self) -> Chord:
        return self.triad(0)

    def supertonic_triad(self) -> Chord:
        return self.triad(1)

    def mediant_triad(self) -> Chord:
        return self.triad(2)

    def subdominant_triad(self) -> Chord:
        return self.triad(3)

    def dominant_triad(self) -> Chord:
        return self.triad(4)

    def submediant_triad(self) -> Chord:
        return self.triad(5)

    def roman_numeral(self, degree: int) -> str:
        """
        Roman numeral for a degree triad.

        Case indicates quality: upper for major, lower for minor,
        lower with ° for diminished.
        """
        quality = self._degree_quality(degree)
        base = _NUMERALS[degree]
        if quality == ChordQuality.MINOR_TRIAD:
            return base.lower()
        if quality == ChordQuality.DIMINISHED_TRIAD:
            return base.lower() + "°"
        return base

    def diatonic_chords(self) -> list[tuple[str, Chord]]:
        """
        All degree triads with their roman numerals.

        Returns:
            List of (roman numeral string, chord) tuples
        """
        return [(self.roman_numeral(degree), self.triad(degree)) for degree in range(TRIAD_DEGREES)]


@dataclass(frozen=True)
class MajorScale(DegreeTriads, Scale):
    """W W H W W W H. Triads: I ii iii IV V vi vii°."""

    QUALITY: ClassVar[ScaleQuality] = ScaleQuality.MAJOR
    DEGREE_QUALITIES: ClassVar[tuple[ChordQuality, ...]] = (
        ChordQuality.MAJOR_TRIAD,
        ChordQuality.MINOR_TRIAD,
        ChordQuality.MINOR_TRIAD,
        ChordQuality.MAJOR_TRIAD,
        ChordQuality.MAJOR_TRIAD,
        ChordQuality.MINOR_TRIAD,
        ChordQuality.DIMINISHED_TRIAD,
    )

    def leading_tone_triad(self) -> Chord:
        return self.triad(6)


@dataclass(frozen=True)
class NaturalMinorScale(DegreeTriads, Scale):
    """W H W W H W W. Triads: i ii° III iv v VI VII."""

    QUALITY: ClassVar[ScaleQuality] = ScaleQuality.NATURAL_MINOR
    DEGREE_QUALITIES: ClassVar[tuple[ChordQuality, ...]] = (
        ChordQuality.MINOR_TRIAD,
        ChordQuality.DIMINISHED_TRIAD,
        ChordQuality.MAJOR_TRIAD,
        ChordQuality.MINOR_TRIAD,
        ChordQuality.MINOR_TRIAD,
        ChordQuality.MAJOR_TRIAD,
        ChordQuality.MAJOR_TRIAD,
    )

    def subtonic_triad(self) -> Chord:
        return self.triad(6)


@dataclass(frozen=True)
class HarmonicMinorScale(Scale):
    """W H W W H WH H - natural minor with a raised seventh."""

    QUALITY: ClassVar[ScaleQuality] = ScaleQuality.HARMONIC_MINOR


@dataclass(frozen=True)
class MelodicMinorScale(Scale):
    """W H W W W W H - ascending melodic minor."""

    QUALITY: ClassVar[ScaleQuality] = ScaleQuality.MELODIC_MINOR


_SCALE_CLASSES: dict[ScaleQuality, type[Scale]] = {
    ScaleQuality.MAJOR: MajorScale,
    ScaleQuality.NATURAL_MINOR: NaturalMinorScale,
    ScaleQuality.HARMONIC_MINOR: HarmonicMinorScale,
    ScaleQuality.MELODIC_MINOR: MelodicMinorScale,
}


def scale_class(quality: ScaleQuality) -> type[Scale]:
    """The Scale subclass carrying a quality."""
    return _SCALE_CLASSES[quality]


def scale(root: Pitch, quality: ScaleQuality) -> Scale:
    """Build a scale of any quality on a root."""
    return _SCALE_CLASSES[quality].from_root(root)


def major_scale(root: Pitch) -> MajorScale:
    """Major scale (ionian) on a root."""
    return MajorScale(tuple(from_steps(root, ScaleQuality.MAJOR.steps)))


def natural_minor_scale(root: Pitch) -> NaturalMinorScale:
    """Natural minor scale (aeolian) on a root."""
    return NaturalMinorScale(tuple(from_steps(root, ScaleQuality.NATURAL_MINOR.steps)))


def harmonic_minor_scale(root: Pitch) -> HarmonicMinorScale:
    return HarmonicMinorScale(tuple(from_steps(root, ScaleQuality.HARMONIC_MINOR.steps)))


def melodic_minor_scale(root: Pitch) -> MelodicMinorScale:
    return MelodicMinorScale(tuple(from_steps(root, ScaleQuality.MELODIC_MINOR.steps)))
