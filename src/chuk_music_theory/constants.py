"""
Constants for the music theory library.

No magic numbers - range limits, octave size and error messages live here.
"""

# MIDI pitch range (one byte, 0-127)
MIN_PITCH: int = 0
MAX_PITCH: int = 127

SEMITONES_PER_OCTAVE: int = 12

# C4 = 60, A4 = 69
MIDDLE_C: int = 60
DEFAULT_OCTAVE: int = 4

# Tonic to octave, inclusive
SCALE_LENGTH: int = 8

# One triad per scale degree (octave excluded)
TRIAD_DEGREES: int = 7


class ErrorMessages:
    """Standardized error messages."""

    PITCH_OUT_OF_RANGE = "Pitch {value} out of range. Must be between {low} and {high}."
    PITCH_NOT_INT = "Pitch value must be an int, got {type_name}."
    UNKNOWN_PITCH = "Unknown pitch: '{name}'. Expected a name like 'C4', 'F#3' or 'Bb-1'."
    UNKNOWN_PITCH_CONSTANT = "Unknown pitch constant: '{name}'."
    EXPECTED_STEP = "Expected a Step, got {type_name}. Use from_intervals() for intervals."
    EXPECTED_INTERVAL = "Expected an Interval, got {type_name}. Use from_steps() for steps."
    UNKNOWN_CHORD_QUALITY = "Unknown chord quality: '{name}'."
    UNKNOWN_SCALE_QUALITY = "Unknown scale quality: '{name}'."
    CHORD_ARITY = "{quality} chord needs {expected} notes, got {actual}."
    CHORD_PATTERN = "Notes {notes} do not form a {quality} chord."
    SCALE_LENGTH = "{quality} scale needs {expected} notes, got {actual}."
    SCALE_PATTERN = "Notes {notes} do not form a {quality} scale."
    INVALID_DEGREE = "Degree must be 0-{high}, got {degree}."
    MODEL_MISMATCH = "Stored notes {stored} disagree with generated notes {generated}."
    EXPECTED_PITCH_NOTES = "{kind} notes must be Pitch values, got {type_name}."
    SCALE_WITHOUT_QUALITY = "Scale has no quality. Use MajorScale, NaturalMinorScale, etc."
