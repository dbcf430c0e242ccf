"""
Pitch primitives - PitchClass and Pitch.

PitchClass represents the 12 chromatic pitches (octave-independent).
Pitch is an absolute pitch on the MIDI scale (0-127, C4 = 60).

Pitch arithmetic fails fast: any result outside 0-127 raises
PitchRangeError instead of clamping or wrapping.
"""

from __future__ import annotations

import re
from enum import IntEnum
from functools import total_ordering
from typing import TYPE_CHECKING

from chuk_music_theory.constants import (
    DEFAULT_OCTAVE,
    MAX_PITCH,
    MIDDLE_C,
    MIN_PITCH,
    SEMITONES_PER_OCTAVE,
    ErrorMessages,
)
from chuk_music_theory.core.interval import Interval, Step

if TYPE_CHECKING:
    from chuk_music_theory.core.chord import Chord, ChordQuality
    from chuk_music_theory.core.scale import (
        HarmonicMinorScale,
        MajorScale,
        MelodicMinorScale,
        NaturalMinorScale,
        Scale,
        ScaleQuality,
    )

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Letter, optional accidental, signed octave: C4, F#3, Bb-1
_PITCH_NAME_RE = re.compile(r"^([A-Ga-g][#b]?)(-?\d+)$")


class PitchRangeError(ValueError):
    """A pitch, or the result of pitch arithmetic, fell outside 0-127."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            ErrorMessages.PITCH_OUT_OF_RANGE.format(value=value, low=MIN_PITCH, high=MAX_PITCH)
        )


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def interval_to(self, other: PitchClass) -> Interval:
        """Get the interval from this pitch class to another (ascending)."""
        return Interval((other.value - self.value) % 12)

    def to_pitch(self, octave: int = DEFAULT_OCTAVE) -> Pitch:
        """The absolute pitch of this class in an octave. C in octave 4 = 60."""
        return Pitch(MIDDLE_C + (octave - DEFAULT_OCTAVE) * SEMITONES_PER_OCTAVE + self.value)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum names (C, Cs, D, Ds, etc.)
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")


@total_ordering
class Pitch:
    """
    An absolute pitch as a MIDI note number (0-127).

    Spelling is not stored: C#4 and Db4 are the same Pitch(61).
    Ordering and equality follow the note number.

    Arithmetic:
        pitch + interval -> pitch
        pitch - pitch    -> interval (signed)
        pitch - interval -> pitch
        pitch >> n       -> pitch n octaves up
        pitch << n       -> pitch n octaves down

    Immutable and hashable.
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int) -> None:
        """Create a pitch from a MIDI note number."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(ErrorMessages.PITCH_NOT_INT.format(type_name=type(value).__name__))
        if not MIN_PITCH <= value <= MAX_PITCH:
            raise PitchRangeError(value)
        object.__setattr__(self, "_value", int(value))

    @property
    def midi(self) -> int:
        """MIDI note number."""
        return self._value

    @property
    def pitch_class(self) -> PitchClass:
        """Octave-independent pitch class."""
        return PitchClass(self._value % SEMITONES_PER_OCTAVE)

    @property
    def octave(self) -> int:
        """Octave number, C4 = 60. The lowest octave is -1."""
        return self._value // SEMITONES_PER_OCTAVE - 1

    def spell(self, prefer_flats: bool = False) -> str:
        """Pitch-class name without octave ('C#', or 'Db' with prefer_flats)."""
        return self.pitch_class.spell(prefer_flats)

    def name(self, prefer_flats: bool = False) -> str:
        """Full name with octave ('C#4', or 'Db4' with prefer_flats)."""
        return f"{self.spell(prefer_flats)}{self.octave}"

    def transpose(self, semitones: int) -> Pitch:
        """
        Move by a number of semitones.

        Raises:
            PitchRangeError: If the result leaves 0-127
        """
        return Pitch(self._value + semitones)

    @classmethod
    def from_pitch_class(cls, pitch_class: PitchClass, octave: int = DEFAULT_OCTAVE) -> Pitch:
        """Build a pitch from a pitch class and an octave."""
        return pitch_class.to_pitch(octave)

    @classmethod
    def parse(cls, name: str) -> Pitch:
        """
        Parse a pitch from a string like 'C4', 'F#3', 'Eb5' or 'C-1'.

        A bare integer string is read as a MIDI note number.
        """
        text = name.strip()
        if text.isdigit():
            return cls(int(text))

        match = _PITCH_NAME_RE.match(text)
        if match is None:
            raise ValueError(ErrorMessages.UNKNOWN_PITCH.format(name=name))

        letter, octave = match.groups()
        pitch_class = PitchClass.parse(letter[0].upper() + letter[1:])
        return cls.from_pitch_class(pitch_class, int(octave))

    # Shortcuts rooted on this pitch. Imported lazily: chord and scale import Pitch.

    def chord(self, quality: ChordQuality) -> Chord:
        """The chord of a quality rooted here."""
        from chuk_music_theory.core.chord import chord

        return chord(self, quality)

    def major_triad(self) -> Chord:
        from chuk_music_theory.core.chord import major_triad

        return major_triad(self)

    def minor_triad(self) -> Chord:
        from chuk_music_theory.core.chord import minor_triad

        return minor_triad(self)

    def scale(self, quality: ScaleQuality) -> Scale:
        """The scale of a quality with this pitch as tonic."""
        from chuk_music_theory.core.scale import scale

        return scale(self, quality)

    def major_scale(self) -> MajorScale:
        from chuk_music_theory.core.scale import major_scale

        return major_scale(self)

    def natural_minor_scale(self) -> NaturalMinorScale:
        from chuk_music_theory.core.scale import natural_minor_scale

        return natural_minor_scale(self)

    def harmonic_minor_scale(self) -> HarmonicMinorScale:
        from chuk_music_theory.core.scale import harmonic_minor_scale

        return harmonic_minor_scale(self)

    def melodic_minor_scale(self) -> MelodicMinorScale:
        from chuk_music_theory.core.scale import melodic_minor_scale

        return melodic_minor_scale(self)

    def __add__(self, other: Interval | Step) -> Pitch:
        if not isinstance(other, (Interval, Step)):
            return NotImplemented
        return self.transpose(other.semitones)

    def __sub__(self, other: Pitch | Interval | Step) -> Pitch | Interval:
        if isinstance(other, Pitch):
            return Interval(self._value - other._value)
        if isinstance(other, (Interval, Step)):
            return self.transpose(-other.semitones)
        return NotImplemented

    def __rshift__(self, octaves: int) -> Pitch:
        if not isinstance(octaves, int):
            return NotImplemented
        return self.transpose(octaves * SEMITONES_PER_OCTAVE)

    def __lshift__(self, octaves: int) -> Pitch:
        if not isinstance(octaves, int):
            return NotImplemented
        return self.transpose(-octaves * SEMITONES_PER_OCTAVE)

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return bool(self._value == other._value)

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return bool(self._value < other._value)

    def __hash__(self) -> int:
        return hash(("Pitch", self._value))

    def __repr__(self) -> str:
        return f"Pitch({self._value})"

    def __str__(self) -> str:
        return self.name()
