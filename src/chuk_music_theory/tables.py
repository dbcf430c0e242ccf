"""
Generated lookup tables.

Named pitch constants and per-root chord and scale instances are derived
from the core generators on first use and cached. Everything here is pure,
so the caches only save work.

Pitch constant names spell accidentals out: C4, CSHARP4, DFLAT4.
The lowest octave (MIDI 0-11) has no octave digit, so C == 0 and C0 == 12.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from chuk_music_theory.constants import MAX_PITCH, MIN_PITCH, SEMITONES_PER_OCTAVE, ErrorMessages
from chuk_music_theory.core.chord import Chord, ChordQuality
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.scale import Scale, ScaleQuality, scale_class

logger = logging.getLogger(__name__)


def _constant_names(pitch: Pitch) -> list[str]:
    """Constant names for a pitch: sharp spelling, plus the flat alias on black keys."""
    octave = "" if pitch.octave < 0 else str(pitch.octave)
    spellings = {pitch.spell(), pitch.spell(prefer_flats=True)}
    return sorted(
        spelling.replace("#", "SHARP").replace("b", "FLAT") + octave for spelling in spellings
    )


@lru_cache(maxsize=1)
def pitch_table() -> dict[str, Pitch]:
    """Every pitch 0-127 under its constant name(s)."""
    table: dict[str, Pitch] = {}
    for value in range(MIN_PITCH, MAX_PITCH + 1):
        pitch = Pitch(value)
        for name in _constant_names(pitch):
            table[name] = pitch
    logger.debug(f"Generated {len(table)} pitch constants")
    return table


def lookup_pitch(name: str) -> Pitch:
    """
    Resolve a pitch constant name like 'C4', 'FSHARP3' or 'BFLAT'.

    Raises:
        ValueError: If the name is not a pitch constant
    """
    table = pitch_table()
    key = name.strip().upper()
    if key not in table:
        raise ValueError(ErrorMessages.UNKNOWN_PITCH_CONSTANT.format(name=name))
    return table[key]


@lru_cache(maxsize=None)
def chords_by_root(quality: ChordQuality) -> dict[Pitch, Chord]:
    """One chord of a quality on every root where the whole chord fits in 0-127."""
    highest_root = MAX_PITCH - quality.intervals[-1].semitones
    chords = {
        Pitch(value): Chord.build(Pitch(value), quality)
        for value in range(MIN_PITCH, highest_root + 1)
    }
    logger.debug(f"Generated {len(chords)} {quality.value} chords")
    return chords


@lru_cache(maxsize=None)
def scales_by_root(quality: ScaleQuality) -> dict[Pitch, Scale]:
    """One scale of a quality on every root whose octave fits in 0-127."""
    cls = scale_class(quality)
    highest_root = MAX_PITCH - SEMITONES_PER_OCTAVE
    scales = {
        Pitch(value): cls.from_root(Pitch(value)) for value in range(MIN_PITCH, highest_root + 1)
    }
    logger.debug(f"Generated {len(scales)} {quality.value} scales")
    return scales


def clear_caches() -> None:
    """Drop all generated tables."""
    pitch_table.cache_clear()
    chords_by_root.cache_clear()
    scales_by_root.cache_clear()
