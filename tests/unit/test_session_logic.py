import random

import pytest

from app_types import Hand, Player, SessionSettings, Tier
from exceptions import (
    InvalidConfigurationError,
    RosterError,
    SessionError,
    ValidationError,
)
from session_logic import ClubNightSession, Roster
from tests.utils import ScriptedRandom, generate_random_players


# =============================================================================
# Roster
# =============================================================================


def test_add_player_appends_in_order():
    roster = Roster()
    roster.add_player("Alice", Hand.RIGHT, 3)
    roster.add_player("  Bob  ", "Left", 5)

    assert [p.name for p in roster] == ["Alice", "Bob"]
    assert roster[1] == Player(name="Bob", hand=Hand.LEFT, skill=5)
    assert len(roster) == 2


@pytest.mark.parametrize(
    "name, hand, skill",
    [
        ("", Hand.RIGHT, 3),
        ("   ", Hand.RIGHT, 3),
        ("Zoe", "Both", 3),
        ("Zoe", Hand.RIGHT, 0),
        ("Zoe", Hand.RIGHT, 6),
        ("Zoe", Hand.RIGHT, 2.5),
        ("Zoe", Hand.RIGHT, "3"),
    ],
)
def test_add_player_rejects_invalid_entries(name, hand, skill):
    roster = Roster()

    with pytest.raises(ValidationError):
        roster.add_player(name, hand, skill)
    assert len(roster) == 0


def test_remove_player_by_index(sample_players):
    roster = Roster(sample_players)

    removed = roster.remove_player(0)

    assert removed.name == "Alice"
    assert [p.name for p in roster][0] == "Bob"
    assert len(roster) == 7


def test_replace_player(sample_players):
    roster = Roster(sample_players)
    replacement = Player(name="Zoe", hand=Hand.LEFT, skill=2)

    roster.replace_player(2, replacement)

    assert roster[2] == replacement
    assert len(roster) == 8


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_bad_index_raises_roster_error(sample_players, index):
    roster = Roster(sample_players)

    with pytest.raises(RosterError):
        roster.remove_player(index)
    with pytest.raises(RosterError):
        roster.replace_player(index, sample_players[0])


def test_players_is_a_snapshot(sample_players):
    roster = Roster(sample_players)
    snapshot = roster.players

    roster.add_player("Zoe", Hand.RIGHT, 1)

    assert len(snapshot) == 8
    assert len(roster) == 9


def test_extend_and_clear(sample_players):
    roster = Roster()

    assert roster.extend(sample_players) == 8
    roster.clear()
    assert len(roster) == 0


# =============================================================================
# Settings
# =============================================================================


@pytest.mark.parametrize(
    "overrides",
    [
        {"num_courts": 0},
        {"num_courts": -2},
        {"hours_played": -1},
        {"court_rate": -1},
        {"shuttle_count": -1},
        {"shuttle_price": -1},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    values = dict(num_courts=2, hours_played=2, court_rate=200, shuttle_count=20, shuttle_price=15)
    values.update(overrides)

    with pytest.raises(InvalidConfigurationError):
        SessionSettings(**values)


# =============================================================================
# Session Flow
# =============================================================================


def test_shuffle_and_pair_groups_teams(sample_players, default_settings):
    session = ClubNightSession(roster=sample_players, settings=default_settings)

    result = session.shuffle_and_pair(rng=random.Random(5))

    assert len(result.matches) == 2
    assert session.round_num == 1
    assert sum(len(h) for h in session.groups.values()) == 4
    assert session.schedule == []


def test_generate_schedule_before_pairing_fails(sample_players, default_settings):
    session = ClubNightSession(roster=sample_players, settings=default_settings)

    with pytest.raises(SessionError):
        session.generate_schedule()


def test_generate_schedule_uses_current_courts(default_settings):
    players = generate_random_players(16, rng=random.Random(2))
    session = ClubNightSession(roster=players, settings=default_settings)
    session.shuffle_and_pair(rng=random.Random(8))

    schedule = session.generate_schedule()
    assert len(schedule) == 4
    assert {row.court for row in schedule} == {1}

    session.update_settings(
        SessionSettings(num_courts=3, hours_played=2, court_rate=200, shuttle_count=20, shuttle_price=15)
    )
    schedule = session.generate_schedule()
    assert [row.court for row in schedule] == [1, 2, 3, 1]


def test_repairing_discards_old_schedule(sample_players, default_settings):
    session = ClubNightSession(roster=sample_players, settings=default_settings)
    session.shuffle_and_pair(rng=random.Random(1))
    session.generate_schedule()

    session.shuffle_and_pair(rng=random.Random(2))

    assert session.schedule == []
    assert session.round_num == 2


def test_pairing_uses_roster_at_trigger_time(sample_players, default_settings):
    session = ClubNightSession(roster=sample_players[:4], settings=default_settings)
    session.roster.extend(sample_players[4:])

    result = session.shuffle_and_pair(rng=ScriptedRandom())

    assert len(result.matches) == 2


def test_incomplete_group_is_reported(sample_players, default_settings):
    session = ClubNightSession(roster=sample_players[:7], settings=default_settings)

    assert session.has_incomplete_group
    assert session.leftover_count == 3

    result = session.shuffle_and_pair(rng=random.Random(0))
    assert result.dropped_count == 3


def test_empty_session(default_settings):
    session = ClubNightSession(roster=[], settings=default_settings)

    result = session.shuffle_and_pair()

    assert result.matches == []
    assert session.generate_schedule() == []
    assert session.cost_summary().cost_per_person == 0.0
    assert all(session.groups[tier] == [] for tier in Tier)


def test_cost_summary_uses_roster_size(sample_players):
    settings = SessionSettings(num_courts=2, hours_played=2, court_rate=200, shuttle_count=20, shuttle_price=15)
    session = ClubNightSession(roster=sample_players, settings=settings)

    summary = session.cost_summary()

    assert summary.total_cost == 700
    assert summary.cost_per_person == pytest.approx(87.5)
