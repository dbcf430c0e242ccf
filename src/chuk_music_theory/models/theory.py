"""
Theory models - plain-data views of pitches, chords and scales.

The core types are the source of truth. These models are the boundary
form: validated, frozen, and serializable with model_dump()/model_dump_json().
Converting back regenerates the value from root + quality and checks the
stored notes agree.
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import BaseModel, Field

from chuk_music_theory.constants import MAX_PITCH, MIN_PITCH, ErrorMessages
from chuk_music_theory.core.chord import Chord, ChordQuality
from chuk_music_theory.core.pitch import Pitch, PitchRangeError
from chuk_music_theory.core.scale import DegreeTriads, Scale, ScaleQuality, scale

logger = logging.getLogger(__name__)

MidiNote = Annotated[int, Field(ge=MIN_PITCH, le=MAX_PITCH)]


class PitchModel(BaseModel):
    """A single pitch as MIDI number and display name."""

    midi: int = Field(..., ge=MIN_PITCH, le=MAX_PITCH, description="MIDI note number")
    name: str = Field(..., description="Pitch name with octave (C4, F#3)")

    model_config = {"frozen": True}

    @classmethod
    def from_pitch(cls, pitch: Pitch, prefer_flats: bool = False) -> PitchModel:
        return cls(midi=pitch.midi, name=pitch.name(prefer_flats))

    def to_pitch(self) -> Pitch:
        return Pitch(self.midi)


class ChordModel(BaseModel):
    """
    A chord as plain data.

    The quality and root determine the notes; the notes and names are
    carried for consumers that don't know the catalogue.
    """

    symbol: str = Field(..., description="Chord symbol (C, Cm7, Bbmaj9)")
    quality: ChordQuality = Field(..., description="Chord quality")
    root: MidiNote = Field(..., description="Root MIDI note")
    notes: list[MidiNote] = Field(..., description="MIDI notes, root first")
    note_names: list[str] = Field(default_factory=list, description="Note names, root first")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord, prefer_flats: bool = False) -> ChordModel:
        return cls(
            symbol=chord.symbol(prefer_flats),
            quality=chord.quality,
            root=chord.root.midi,
            notes=chord.to_midi(),
            note_names=[note.name(prefer_flats) for note in chord.notes],
        )

    def to_chord(self) -> Chord:
        """
        Rebuild the chord from root and quality.

        Raises:
            ValueError: If the stored notes disagree with the quality
        """
        chord = Chord.build(Pitch(self.root), self.quality)
        if chord.to_midi() != self.notes:
            raise ValueError(
                ErrorMessages.MODEL_MISMATCH.format(stored=self.notes, generated=chord.to_midi())
            )
        return chord


class ScaleModel(BaseModel):
    """A scale as plain data, with degree triads where the quality has them."""

    name: str = Field(..., description="Scale name (C major, A harmonic minor)")
    quality: ScaleQuality = Field(..., description="Scale quality")
    root: MidiNote = Field(..., description="Tonic MIDI note")
    notes: list[MidiNote] = Field(..., description="MIDI notes, tonic to octave")
    note_names: list[str] = Field(default_factory=list, description="Note names")
    steps: list[int] = Field(default_factory=list, description="Semitones between degrees")
    intervals: list[int] = Field(
        default_factory=list, description="Semitones from the tonic to each degree"
    )
    triads: list[ChordModel] | None = Field(
        None, description="Degree triads (major and natural minor only)"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_scale(
        cls, value: Scale, prefer_flats: bool = False, include_triads: bool = True
    ) -> ScaleModel:
        """
        Snapshot a scale.

        Triads are included only for qualities that have them and only
        when all seven stay within 0-127; otherwise triads is None.
        """
        triads = None
        if include_triads and isinstance(value, DegreeTriads):
            try:
                triads = [ChordModel.from_chord(c, prefer_flats) for c in value.triads()]
            except PitchRangeError as e:
                logger.debug(f"Omitting triads for {value.name()} on {value.root!r}: {e}")

        return cls(
            name=value.name(prefer_flats),
            quality=value.quality,
            root=value.root.midi,
            notes=value.to_midi(),
            note_names=[note.name(prefer_flats) for note in value.notes],
            steps=[step.semitones for step in value.steps()],
            intervals=[interval.semitones for interval in value.intervals()],
            triads=triads,
        )

    def to_scale(self) -> Scale:
        """
        Rebuild the scale from root and quality.

        Raises:
            ValueError: If the stored notes disagree with the quality
        """
        result = scale(Pitch(self.root), self.quality)
        if result.to_midi() != self.notes:
            raise ValueError(
                ErrorMessages.MODEL_MISMATCH.format(stored=self.notes, generated=result.to_midi())
            )
        return result
