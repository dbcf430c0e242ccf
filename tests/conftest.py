"""
Pytest configuration and shared fixtures.
"""

from collections.abc import Iterator

import pytest

from chuk_music_theory.core import Pitch
from chuk_music_theory.tables import clear_caches


@pytest.fixture
def c4() -> Pitch:
    """Middle C (MIDI 60)."""
    return Pitch(60)


@pytest.fixture
def a3() -> Pitch:
    """A below middle C (MIDI 57)."""
    return Pitch(57)


@pytest.fixture
def fresh_tables() -> Iterator[None]:
    """Start and finish with empty generated-table caches."""
    clear_caches()
    yield
    clear_caches()
