"""
Named pitch constants.

    from chuk_music_theory.pitches import C4, EFLAT4, G4

Names resolve lazily through the generated pitch table, covering every
pitch 0-127 (C, CSHARP, DFLAT, ... C4 ... G9).
"""

from __future__ import annotations

from chuk_music_theory.core.pitch import Pitch
from chuk_music_theory.tables import pitch_table


def __getattr__(name: str) -> Pitch:
    """Lazy lookup of named pitch constants."""
    table = pitch_table()
    if name in table:
        return table[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(pitch_table())
