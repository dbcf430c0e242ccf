"""
Pydantic models for the music theory library.

This module provides:
- PitchModel: A pitch as MIDI number and name
- ChordModel: A chord as plain data
- ScaleModel: A scale as plain data, with degree triads
"""

from chuk_music_theory.models.theory import ChordModel, MidiNote, PitchModel, ScaleModel

__all__ = [
    "ChordModel",
    "MidiNote",
    "PitchModel",
    "ScaleModel",
]
