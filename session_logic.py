# session_logic.py
import logging
import numbers
from typing import Iterable, Iterator

from app_types import (
    CostSummary,
    Hand,
    PairingResult,
    Player,
    Schedule,
    SessionSettings,
    TierGroups,
    is_valid_skill,
)
from constants import PLAYERS_PER_MATCH
from cost import compute_cost
from exceptions import RosterError, SessionError, ValidationError
from grouping import empty_groups, group_teams
from pairing import RandomSource, pair_players
from scheduler import build_schedule

logger = logging.getLogger("app.session_logic")


class Roster:
    """Ordered list of registered players. Players are addressed by index."""

    def __init__(self, players: Iterable[Player] | None = None):
        self._players: list[Player] = list(players) if players is not None else []

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __getitem__(self, index: int) -> Player:
        self._check_index(index)
        return self._players[index]

    @property
    def players(self) -> tuple[Player, ...]:
        """Snapshot of the current roster."""
        return tuple(self._players)

    def add_player(self, name: str, hand: Hand | str, skill: int) -> Player:
        """
        Appends a new player to the end of the roster.

        Raises:
            ValidationError: If the name is blank, the hand is unknown or the
                skill is outside 1-5.
        """
        name = name.strip() if isinstance(name, str) else ""
        if not name:
            raise ValidationError("Please enter a player name.")
        try:
            hand = Hand(hand)
        except ValueError as e:
            raise ValidationError(f"Unknown hand: {hand!r}") from e
        if (
            isinstance(skill, bool)
            or not isinstance(skill, numbers.Integral)
            or not is_valid_skill(int(skill))
        ):
            raise ValidationError(f"Skill must be a whole number from 1 to 5 (got {skill!r}).")
        skill = int(skill)

        player = Player(name=name, hand=hand, skill=skill)
        self._players.append(player)
        return player

    def extend(self, players: Iterable[Player]) -> int:
        """Appends already-validated players (e.g. from an import). Returns how many."""
        new_players = list(players)
        self._players.extend(new_players)
        return len(new_players)

    def remove_player(self, index: int) -> Player:
        """Removes and returns the player at index."""
        self._check_index(index)
        return self._players.pop(index)

    def replace_player(self, index: int, player: Player) -> None:
        """Replaces the player at index. Players are never edited in place."""
        self._check_index(index)
        self._players[index] = player

    def clear(self) -> None:
        self._players.clear()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._players):
            raise RosterError(
                f"No player at position {index} (roster has {len(self._players)})."
            )


class ClubNightSession:
    """
    Orchestrates a club night: pairing, tier grouping, court schedule and cost.
    This class only contains game logic and no presentation code.

    Every trigger recomputes its results from scratch from the current roster
    snapshot; nothing is updated incrementally.
    """

    def __init__(self, roster: Roster | Iterable[Player], settings: SessionSettings):
        self.roster = roster if isinstance(roster, Roster) else Roster(roster)
        self.settings = settings
        self.round_num = 0

        self.pairing: PairingResult | None = None
        self.groups: TierGroups = empty_groups()
        self.schedule: Schedule = []

    @property
    def leftover_count(self) -> int:
        """Players that cannot be placed in a group of four."""
        return len(self.roster) % PLAYERS_PER_MATCH

    @property
    def has_incomplete_group(self) -> bool:
        return self.leftover_count != 0

    def shuffle_and_pair(self, rng: RandomSource | None = None) -> PairingResult:
        """
        Randomly pairs the current roster and groups the teams into tiers.
        Any previously built schedule is discarded.
        """
        self.round_num += 1
        result = pair_players(self.roster.players, rng=rng)

        self.pairing = result
        self.groups = group_teams(result.matches)
        self.schedule = []

        logger.info(
            f"Round {self.round_num}: {len(result.matches)} match(es), "
            f"{result.dropped_count} player(s) sitting out"
        )
        return result

    def generate_schedule(self) -> Schedule:
        """
        Builds the court schedule from the current tier groups.

        Raises:
            SessionError: If no pairing has been made yet.
            InvalidConfigurationError: If the court count is invalid.
        """
        if self.pairing is None:
            raise SessionError("Shuffle and pair the players before building a schedule.")
        self.schedule = build_schedule(self.groups, self.settings.num_courts)
        return self.schedule

    def cost_summary(self) -> CostSummary:
        """Returns the cost split for the current roster and settings."""
        return compute_cost(
            hours_played=self.settings.hours_played,
            court_rate=self.settings.court_rate,
            shuttle_count=self.settings.shuttle_count,
            shuttle_price=self.settings.shuttle_price,
            roster_size=len(self.roster),
        )

    def update_settings(self, settings: SessionSettings) -> None:
        """Replaces the session settings; applies on the next schedule build."""
        self.settings = settings
