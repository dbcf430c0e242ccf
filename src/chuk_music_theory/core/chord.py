"""
Chord primitives - ChordQuality and Chord.

A chord quality is a root-relative interval pattern (not stacked thirds).
A chord is a quality applied to a root pitch: the root plus one pitch per
interval in the pattern, so every quality has a fixed number of notes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.core.interval import Interval
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.sequence import from_intervals, intervals_of, root_intervals_of


class ChordQuality(str, Enum):
    """
    The closed set of supported chord qualities.

    Each quality knows its root-relative intervals, its arity (number of
    notes including the root) and its display suffix.
    """

    MAJOR_TRIAD = "major_triad"
    MINOR_TRIAD = "minor_triad"
    SUS2 = "sus2"
    SUS4 = "sus4"
    DIMINISHED_TRIAD = "diminished_triad"
    AUGMENTED_TRIAD = "augmented_triad"
    DOMINANT_SEVENTH = "dominant_seventh"
    MINOR_SEVENTH = "minor_seventh"
    MAJOR_SEVENTH = "major_seventh"
    MINOR_MAJOR_SEVENTH = "minor_major_seventh"
    MAJOR_SIXTH = "major_sixth"
    MINOR_SIXTH = "minor_sixth"
    DIMINISHED_SEVENTH = "diminished_seventh"
    HALF_DIMINISHED_SEVENTH = "half_diminished_seventh"
    AUGMENTED_SEVENTH = "augmented_seventh"
    DOMINANT_SEVENTH_NINTH = "dominant_seventh_ninth"
    MINOR_SEVENTH_NINTH = "minor_seventh_ninth"
    MAJOR_SIXTH_NINTH = "major_sixth_ninth"
    MINOR_SIXTH_NINTH = "minor_sixth_ninth"
    DOMINANT_NINTH = "dominant_ninth"
    MINOR_NINTH = "minor_ninth"
    MAJOR_NINTH = "major_ninth"
    DOMINANT_ELEVENTH = "dominant_eleventh"
    MINOR_ELEVENTH = "minor_eleventh"
    MAJOR_ELEVENTH = "major_eleventh"
    DOMINANT_THIRTEENTH = "dominant_thirteenth"
    MINOR_THIRTEENTH = "minor_thirteenth"
    MAJOR_THIRTEENTH = "major_thirteenth"

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Intervals from the root, ascending (root itself excluded)."""
        return _CHORD_PATTERNS[self]

    @property
    def arity(self) -> int:
        """Number of notes, root included."""
        return len(_CHORD_PATTERNS[self]) + 1

    @property
    def suffix(self) -> str:
        """Display suffix appended to the root name ('m', '7', 'maj7', ...)."""
        return _CHORD_SUFFIXES[self]

    @classmethod
    def parse(cls, text: str) -> ChordQuality:
        """
        Parse a chord quality from a suffix ('m7'), value ('minor_seventh')
        or member name ('MINOR_SEVENTH').
        """
        text = text.strip()
        for quality, suffix in _CHORD_SUFFIXES.items():
            if text == suffix:
                return quality

        key = text.lower().replace(" ", "_").replace("-", "_")
        for quality in cls:
            if quality.value == key:
                return quality
        if key in _QUALITY_ALIASES:
            return _QUALITY_ALIASES[key]

        raise ValueError(ErrorMessages.UNKNOWN_CHORD_QUALITY.format(name=text))


# Interval shorthand
_M2 = Interval.MAJOR_SECOND
_m3 = Interval.MINOR_THIRD
_M3 = Interval.MAJOR_THIRD
_P4 = Interval.PERFECT_FOURTH
_d5 = Interval.DIMINISHED_FIFTH
_P5 = Interval.PERFECT_FIFTH
_A5 = Interval.AUGMENTED_FIFTH
_M6 = Interval.MAJOR_SIXTH
_d7 = Interval.DIMINISHED_SEVENTH  # enharmonic with the major sixth
_m7 = Interval.MINOR_SEVENTH
_M7 = Interval.MAJOR_SEVENTH
_M9 = Interval.MAJOR_NINTH
_P11 = Interval.PERFECT_ELEVENTH
_M13 = Interval.MAJOR_THIRTEENTH

_CHORD_PATTERNS: dict[ChordQuality, tuple[Interval, ...]] = {
    # Triads
    ChordQuality.MAJOR_TRIAD: (_M3, _P5),
    ChordQuality.MINOR_TRIAD: (_m3, _P5),
    ChordQuality.SUS2: (_M2, _P5),
    ChordQuality.SUS4: (_P4, _P5),
    ChordQuality.DIMINISHED_TRIAD: (_m3, _d5),
    ChordQuality.AUGMENTED_TRIAD: (_M3, _A5),
    # Sixths and sevenths
    ChordQuality.DOMINANT_SEVENTH: (_M3, _P5, _m7),
    ChordQuality.MINOR_SEVENTH: (_m3, _P5, _m7),
    ChordQuality.MAJOR_SEVENTH: (_M3, _P5, _M7),
    ChordQuality.MINOR_MAJOR_SEVENTH: (_m3, _P5, _M7),
    ChordQuality.MAJOR_SIXTH: (_M3, _P5, _M6),
    ChordQuality.MINOR_SIXTH: (_m3, _P5, _M6),
    ChordQuality.DIMINISHED_SEVENTH: (_m3, _d5, _d7),
    ChordQuality.HALF_DIMINISHED_SEVENTH: (_m3, _d5, _m7),
    ChordQuality.AUGMENTED_SEVENTH: (_M3, _A5, _m7),
    # Ninths
    ChordQuality.DOMINANT_SEVENTH_NINTH: (_M3, _P5, _m7, _M9),
    ChordQuality.MINOR_SEVENTH_NINTH: (_m3, _P5, _m7, _M9),
    ChordQuality.MAJOR_SIXTH_NINTH: (_M3, _P5, _M6, _M9),
    ChordQuality.MINOR_SIXTH_NINTH: (_m3, _P5, _M6, _M9),
    ChordQuality.DOMINANT_NINTH: (_M3, _P5, _m7, _M9),
    ChordQuality.MINOR_NINTH: (_m3, _P5, _m7, _M9),
    ChordQuality.MAJOR_NINTH: (_M3, _P5, _M7, _M9),
    # Elevenths
    ChordQuality.DOMINANT_ELEVENTH: (_M3, _P5, _m7, _M9, _P11),
    ChordQuality.MINOR_ELEVENTH: (_m3, _P5, _m7, _M9, _P11),
    ChordQuality.MAJOR_ELEVENTH: (_M3, _P5, _M7, _M9, _P11),
    # Thirteenths
    ChordQuality.DOMINANT_THIRTEENTH: (_M3, _P5, _m7, _M9, _P11, _M13),
    ChordQuality.MINOR_THIRTEENTH: (_m3, _P5, _m7, _M9, _P11, _M13),
    ChordQuality.MAJOR_THIRTEENTH: (_M3, _P5, _M7, _M9, _P11, _M13),
}

_CHORD_SUFFIXES: dict[ChordQuality, str] = {
    ChordQuality.MAJOR_TRIAD: "",
    ChordQuality.MINOR_TRIAD: "m",
    ChordQuality.SUS2: "sus2",
    ChordQuality.SUS4: "sus4",
    ChordQuality.DIMINISHED_TRIAD: "dim",
    ChordQuality.AUGMENTED_TRIAD: "aug",
    ChordQuality.DOMINANT_SEVENTH: "7",
    ChordQuality.MINOR_SEVENTH: "m7",
    ChordQuality.MAJOR_SEVENTH: "maj7",
    ChordQuality.MINOR_MAJOR_SEVENTH: "mM7",
    ChordQuality.MAJOR_SIXTH: "6",
    ChordQuality.MINOR_SIXTH: "m6",
    ChordQuality.DIMINISHED_SEVENTH: "dim7",
    ChordQuality.HALF_DIMINISHED_SEVENTH: "hdim7",
    ChordQuality.AUGMENTED_SEVENTH: "aug7",
    ChordQuality.DOMINANT_SEVENTH_NINTH: "7/9",
    ChordQuality.MINOR_SEVENTH_NINTH: "m7/9",
    ChordQuality.MAJOR_SIXTH_NINTH: "6/9",
    ChordQuality.MINOR_SIXTH_NINTH: "m6/9",
    ChordQuality.DOMINANT_NINTH: "9",
    ChordQuality.MINOR_NINTH: "m9",
    ChordQuality.MAJOR_NINTH: "maj9",
    ChordQuality.DOMINANT_ELEVENTH: "11",
    ChordQuality.MINOR_ELEVENTH: "m11",
    ChordQuality.MAJOR_ELEVENTH: "maj11",
    ChordQuality.DOMINANT_THIRTEENTH: "13",
    ChordQuality.MINOR_THIRTEENTH: "m13",
    ChordQuality.MAJOR_THIRTEENTH: "maj13",
}

# Plain-word names for the triads
_QUALITY_ALIASES: dict[str, ChordQuality] = {
    "major": ChordQuality.MAJOR_TRIAD,
    "minor": ChordQuality.MINOR_TRIAD,
    "diminished": ChordQuality.DIMINISHED_TRIAD,
    "augmented": ChordQuality.AUGMENTED_TRIAD,
}


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: a quality applied to a root pitch.

    notes[0] is the root; the rest follow the quality's root-relative
    pattern in ascending order. The note count always equals the
    quality's arity - a chord that breaks its pattern can't be built.

    Immutable and hashable.
    """

    quality: ChordQuality
    notes: tuple[Pitch, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "notes", tuple(self.notes))
        for note in self.notes:
            if not isinstance(note, Pitch):
                raise TypeError(
                    ErrorMessages.EXPECTED_PITCH_NOTES.format(
                        kind="Chord", type_name=type(note).__name__
                    )
                )
        if len(self.notes) != self.quality.arity:
            raise ValueError(
                ErrorMessages.CHORD_ARITY.format(
                    quality=self.quality.value,
                    expected=self.quality.arity,
                    actual=len(self.notes),
                )
            )
        if tuple(root_intervals_of(self.notes)) != self.quality.intervals:
            raise ValueError(
                ErrorMessages.CHORD_PATTERN.format(
                    notes=[str(note) for note in self.notes], quality=self.quality.value
                )
            )

    @classmethod
    def build(cls, root: Pitch, quality: ChordQuality) -> Chord:
        """
        Build a chord from its root and quality.

        Raises:
            PitchRangeError: If a chord tone would be above 127
        """
        return cls(quality, tuple(from_intervals(root, quality.intervals)))

    @property
    def root(self) -> Pitch:
        """The root pitch (always the first note)."""
        return self.notes[0]

    @property
    def arity(self) -> int:
        return len(self.notes)

    def intervals(self) -> list[Interval]:
        """Intervals from the root to each other chord tone."""
        return root_intervals_of(self.notes)

    def stacked_intervals(self) -> list[Interval]:
        """Intervals between adjacent chord tones."""
        return intervals_of(self.notes)

    def transpose(self, interval: Interval) -> Chord:
        """The same quality built on a moved root."""
        return Chord.build(self.root + interval, self.quality)

    def to_midi(self) -> list[int]:
        """MIDI note numbers, root first."""
        return [note.midi for note in self.notes]

    def symbol(self, prefer_flats: bool = False) -> str:
        """Chord symbol like 'C', 'Cm7' or 'Bbmaj9'."""
        return f"{self.root.spell(prefer_flats)}{self.quality.suffix}"

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Pitch]:
        return iter(self.notes)

    def __getitem__(self, index: int) -> Pitch:
        return self.notes[index]

    def __str__(self) -> str:
        return self.symbol()


def chord(root: Pitch, quality: ChordQuality) -> Chord:
    """Build a chord of any quality on a root."""
    return Chord.build(root, quality)


# One constructor per quality


def major_triad(root: Pitch) -> Chord:
    """Root, major third, perfect fifth."""
    return Chord.build(root, ChordQuality.MAJOR_TRIAD)


def minor_triad(root: Pitch) -> Chord:
    """Root, minor third, perfect fifth."""
    return Chord.build(root, ChordQuality.MINOR_TRIAD)


def sus2(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.SUS2)


def sus4(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.SUS4)


def diminished_triad(root: Pitch) -> Chord:
    """Root, minor third, diminished fifth."""
    return Chord.build(root, ChordQuality.DIMINISHED_TRIAD)


def augmented_triad(root: Pitch) -> Chord:
    """Root, major third, augmented fifth."""
    return Chord.build(root, ChordQuality.AUGMENTED_TRIAD)


def dominant_seventh(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.DOMINANT_SEVENTH)


def minor_seventh(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MINOR_SEVENTH)


def major_seventh(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MAJOR_SEVENTH)


def minor_major_seventh(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MINOR_MAJOR_SEVENTH)


def major_sixth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MAJOR_SIXTH)


def minor_sixth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MINOR_SIXTH)


def diminished_seventh(root: Pitch) -> Chord:
    """Stacked minor thirds; the top note is spelled as a major sixth (9 semitones)."""
    return Chord.build(root, ChordQuality.DIMINISHED_SEVENTH)


def half_diminished_seventh(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.HALF_DIMINISHED_SEVENTH)


def augmented_seventh(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.AUGMENTED_SEVENTH)


def dominant_seventh_ninth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.DOMINANT_SEVENTH_NINTH)


def minor_seventh_ninth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MINOR_SEVENTH_NINTH)


def major_sixth_ninth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MAJOR_SIXTH_NINTH)


def minor_sixth_ninth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MINOR_SIXTH_NINTH)


def dominant_ninth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.DOMINANT_NINTH)


def minor_ninth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MINOR_NINTH)


def major_ninth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MAJOR_NINTH)


def dominant_eleventh(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.DOMINANT_ELEVENTH)


def minor_eleventh(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MINOR_ELEVENTH)


def major_eleventh(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MAJOR_ELEVENTH)


def dominant_thirteenth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.DOMINANT_THIRTEENTH)


def minor_thirteenth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MINOR_THIRTEENTH)


def major_thirteenth(root: Pitch) -> Chord:
    return Chord.build(root, ChordQuality.MAJOR_THIRTEENTH)
