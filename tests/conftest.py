import random

import pytest

from app_types import Hand, Player, SessionSettings
from constants import (
    DEFAULT_COURT_RATE,
    DEFAULT_HOURS_PLAYED,
    DEFAULT_SHUTTLE_COUNT,
    DEFAULT_SHUTTLE_PRICE,
)


@pytest.fixture
def sample_players():
    """Returns a list of eight sample players with mixed hands and skills."""
    return [
        Player(name="Alice", hand=Hand.RIGHT, skill=5),
        Player(name="Bob", hand=Hand.LEFT, skill=4),
        Player(name="Charlie", hand=Hand.RIGHT, skill=3),
        Player(name="Dave", hand=Hand.RIGHT, skill=3),
        Player(name="Eve", hand=Hand.LEFT, skill=2),
        Player(name="Frank", hand=Hand.RIGHT, skill=1),
        Player(name="Grace", hand=Hand.RIGHT, skill=4),
        Player(name="Heidi", hand=Hand.LEFT, skill=5),
    ]


@pytest.fixture
def strong_four():
    """Four players who all have skill 5."""
    return [
        Player(name=name, hand=Hand.RIGHT, skill=5) for name in ("A", "B", "C", "D")
    ]


@pytest.fixture
def default_settings():
    """Setup defaults with a single court."""
    return SessionSettings(
        num_courts=1,
        hours_played=DEFAULT_HOURS_PLAYED,
        court_rate=DEFAULT_COURT_RATE,
        shuttle_count=DEFAULT_SHUTTLE_COUNT,
        shuttle_price=DEFAULT_SHUTTLE_PRICE,
    )


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
