"""
Pitch sequence generators and conversions.

Two ways to grow a pitch sequence from a root:
- from_steps: cumulative, each pitch is the previous plus a step (scales)
- from_intervals: root-relative, each pitch is the root plus an interval (chords)

And the pitch <-> interval round trip:
- intervals_of: adjacent differences
- pitches_from: cumulative reconstruction

A major triad either way:
    from_steps(C4, [Step(4), Step(3)])                              -> C4 E4 G4
    from_intervals(C4, [Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH]) -> C4 E4 G4
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from chuk_music_theory.constants import ErrorMessages
from chuk_music_theory.core.interval import Interval, Step
from chuk_music_theory.core.pitch import Pitch


def from_steps(root: Pitch, steps: Iterable[Step]) -> list[Pitch]:
    """
    Build a pitch sequence by accumulating steps.

    Args:
        root: First pitch of the sequence
        steps: Distances from each pitch to the next

    Returns:
        k + 1 pitches for k steps, starting with root

    Raises:
        TypeError: If an element is not a Step
        PitchRangeError: If the sequence leaves 0-127
    """
    pitches = [root]
    for step in steps:
        if not isinstance(step, Step):
            raise TypeError(ErrorMessages.EXPECTED_STEP.format(type_name=type(step).__name__))
        pitches.append(pitches[-1] + step)
    return pitches


def from_intervals(root: Pitch, intervals: Iterable[Interval]) -> list[Pitch]:
    """
    Build a pitch sequence by adding each interval to the root.

    Args:
        root: First pitch of the sequence
        intervals: Distances from the root

    Returns:
        k + 1 pitches for k intervals, starting with root

    Raises:
        TypeError: If an element is not an Interval
        PitchRangeError: If any pitch leaves 0-127
    """
    pitches = [root]
    for interval in intervals:
        if not isinstance(interval, Interval):
            raise TypeError(
                ErrorMessages.EXPECTED_INTERVAL.format(type_name=type(interval).__name__)
            )
        pitches.append(root + interval)
    return pitches


def intervals_of(pitches: Sequence[Pitch]) -> list[Interval]:
    """
    Intervals between adjacent pitches.

    Empty or single-pitch input gives an empty list.
    """
    return [b - a for a, b in zip(pitches, pitches[1:])]


def pitches_from(root: Pitch, intervals: Iterable[Interval]) -> list[Pitch]:
    """
    Rebuild a pitch sequence from a root and adjacent intervals.

    Inverse of intervals_of: pitches_from(s[0], intervals_of(s)) == s.

    Raises:
        TypeError: If an element is not an Interval
        PitchRangeError: If the sequence leaves 0-127
    """
    pitches = [root]
    for interval in intervals:
        if not isinstance(interval, Interval):
            raise TypeError(
                ErrorMessages.EXPECTED_INTERVAL.format(type_name=type(interval).__name__)
            )
        pitches.append(pitches[-1] + interval)
    return pitches


def steps_of(pitches: Sequence[Pitch]) -> list[Step]:
    """Adjacent differences as scale steps."""
    return [Step.from_interval(interval) for interval in intervals_of(pitches)]


def root_intervals_of(pitches: Sequence[Pitch]) -> list[Interval]:
    """Distance of every pitch after the first from the first."""
    if not pitches:
        return []
    root = pitches[0]
    return [pitch - root for pitch in pitches[1:]]
