#!/usr/bin/env python3
"""
Command-line entry point for chuk-music-theory.

Inspect chords, scales and intervals from the shell:

    chuk-music-theory chord C4 m7
    chuk-music-theory scale A3 minor --triads
    chuk-music-theory intervals C4 E4 G4
    chuk-music-theory qualities
"""

from __future__ import annotations

import argparse
import logging
import sys

from chuk_music_theory.core.chord import Chord, ChordQuality, chord
from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.core.scale import DegreeTriads, ScaleQuality, scale
from chuk_music_theory.core.sequence import intervals_of
from chuk_music_theory.models.theory import ChordModel, ScaleModel

logger = logging.getLogger(__name__)


def _chord_command(args: argparse.Namespace) -> None:
    result = chord(Pitch.parse(args.root), ChordQuality.parse(args.quality))
    logger.debug(f"Built {result.quality.value} on {result.root!r}")

    if args.json:
        print(ChordModel.from_chord(result, args.flats).model_dump_json(indent=2))
        return

    names = " ".join(note.name(args.flats) for note in result.notes)
    print(f"{result.symbol(args.flats)}: {names}")


def _scale_command(args: argparse.Namespace) -> None:
    result = scale(Pitch.parse(args.root), ScaleQuality.parse(args.quality))
    logger.debug(f"Built {result.quality.value} scale on {result.root!r}")

    if args.json:
        model = ScaleModel.from_scale(result, args.flats, include_triads=args.triads)
        print(model.model_dump_json(indent=2))
        return

    # Triads first: an out-of-range triad fails before anything is printed
    chords: list[tuple[str, Chord]] = []
    if args.triads:
        if isinstance(result, DegreeTriads):
            chords = result.diatonic_chords()
        else:
            logger.info(f"{result.name(args.flats)} has no degree triads")

    names = " ".join(note.name(args.flats) for note in result.notes)
    print(f"{result.name(args.flats)}: {names}")
    for numeral, triad in chords:
        print(f"  {numeral:<5}{triad.symbol(args.flats)}")


def _intervals_command(args: argparse.Namespace) -> None:
    pitches = [Pitch.parse(name) for name in args.pitches]
    print(" ".join(str(interval) for interval in intervals_of(pitches)))


def _qualities_command(args: argparse.Namespace) -> None:
    for quality in ChordQuality:
        pattern = " ".join(str(interval.semitones) for interval in quality.intervals)
        suffix = quality.suffix or "-"
        print(f"{quality.value:<26}{suffix:<7}{pattern}")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with one subcommand per inspection."""
    parser = argparse.ArgumentParser(description="Music theory: pitches, chords and scales")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    chord_parser = subparsers.add_parser("chord", help="Show the notes of a chord")
    chord_parser.add_argument("root", help="Root pitch (C4, F#3, 60)")
    chord_parser.add_argument("quality", help="Chord quality (m7, maj9, minor_seventh)")
    chord_parser.add_argument("--flats", action="store_true", help="Spell with flats")
    chord_parser.add_argument("--json", action="store_true", help="Print JSON")
    chord_parser.set_defaults(handler=_chord_command)

    scale_parser = subparsers.add_parser("scale", help="Show the notes of a scale")
    scale_parser.add_argument("root", help="Tonic pitch (C4, A3, 57)")
    scale_parser.add_argument(
        "quality", help="Scale quality (major, minor, harmonic_minor, melodic_minor)"
    )
    scale_parser.add_argument("--triads", action="store_true", help="Show degree triads")
    scale_parser.add_argument("--flats", action="store_true", help="Spell with flats")
    scale_parser.add_argument("--json", action="store_true", help="Print JSON")
    scale_parser.set_defaults(handler=_scale_command)

    intervals_parser = subparsers.add_parser(
        "intervals", help="Show the intervals between adjacent pitches"
    )
    intervals_parser.add_argument("pitches", nargs="+", help="Pitches (C4 E4 G4)")
    intervals_parser.set_defaults(handler=_intervals_command)

    qualities_parser = subparsers.add_parser("qualities", help="List chord qualities")
    qualities_parser.set_defaults(handler=_qualities_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    try:
        args.handler(args)
    except ValueError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
