# app_types.py
"""
Data types for the Badminton Pairing App.

This module defines the entities passed between the pairing, grouping,
scheduling and cost steps, plus type aliases that give semantic meaning
to the collections built from them.
"""

from dataclasses import dataclass, field
from enum import Enum

from constants import (
    MAX_SKILL,
    MIN_SKILL,
    PLACEHOLDER_TIME,
    TEAM_NAME_SEPARATOR,
)
from exceptions import InvalidConfigurationError

# =============================================================================
# Enumerations
# =============================================================================


class Hand(str, Enum):
    """Playing hand of a player."""

    RIGHT = "Right"
    LEFT = "Left"


class Tier(str, Enum):
    """Strength bucket of a doubles team, assigned from the team skill sum."""

    HEAVY = "Heavy"
    MEDIUM = "Medium"
    LIGHT = "Light"


# =============================================================================
# Roster Data Classes
# =============================================================================


@dataclass(frozen=True)
class Player:
    """A registered player.

    Players have no id; their identity is their position in the roster.

    Attributes:
        name: Display name (non-empty)
        hand: Playing hand
        skill: Skill level from 1 (beginner) to 5 (strongest)
    """

    name: str
    hand: Hand
    skill: int


@dataclass(frozen=True)
class Team:
    """A doubles team of exactly two players."""

    player_1: Player
    player_2: Player

    @property
    def skill(self) -> int:
        return self.player_1.skill + self.player_2.skill

    @property
    def names(self) -> tuple[str, str]:
        return (self.player_1.name, self.player_2.name)

    @property
    def hands(self) -> str:
        return f"{self.player_1.hand.value}+{self.player_2.hand.value}"


@dataclass(frozen=True)
class Match:
    """Two opposing teams produced by one pairing round.

    Attributes:
        team_1: Team formed by the first two players drawn
        team_2: Team formed by the next two players drawn
    """

    team_1: Team
    team_2: Team

    @property
    def hands(self) -> str:
        """Hand composition of all four players, e.g. 'Right+Left vs Right+Right'."""
        return f"{self.team_1.hands} vs {self.team_2.hands}"

    @property
    def players(self) -> tuple[Player, Player, Player, Player]:
        return (
            self.team_1.player_1,
            self.team_1.player_2,
            self.team_2.player_1,
            self.team_2.player_2,
        )


@dataclass(frozen=True)
class HalfMatch:
    """A team lifted out of its match for tier-based regrouping.

    A half-match has no opponent. Opponents are assigned later by position
    in the schedule, not from the original match.

    Attributes:
        team: The team being scheduled
        tier: Tier the team was classified into
        hands: Hand summary of the match the team came from
    """

    team: Team
    tier: Tier
    hands: str = ""

    @property
    def team_skill(self) -> int:
        return self.team.skill


@dataclass
class ScheduledMatch:
    """A row of the court schedule.

    Attributes:
        match_number: Sequential play order, starting at 1
        court: Court number (1-indexed)
        half_1: First half-match on court
        half_2: Opposing half-match, or None when the schedule has an odd tail
        start: Start time placeholder (not computed)
        end: End time placeholder (not computed)
    """

    match_number: int
    court: int
    half_1: HalfMatch
    half_2: HalfMatch | None = None
    start: str = PLACEHOLDER_TIME
    end: str = PLACEHOLDER_TIME

    @property
    def tier_label(self) -> str:
        tier_2 = self.half_2.tier.value if self.half_2 is not None else ""
        return f"{self.half_1.tier.value}/{tier_2}"

    @property
    def team_1(self) -> str:
        return TEAM_NAME_SEPARATOR.join(self.half_1.team.names)

    @property
    def team_2(self) -> str:
        if self.half_2 is None:
            return ""
        return TEAM_NAME_SEPARATOR.join(self.half_2.team.names)


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class PairingResult:
    """Result from the random pairing step.

    Attributes:
        matches: Matches formed, one per group of four players
        dropped_players: Players left over when the roster size is not a
            multiple of four (at most three)
    """

    matches: list[Match]
    dropped_players: list[Player] = field(default_factory=list)

    @property
    def dropped_count(self) -> int:
        return len(self.dropped_players)

    @property
    def is_complete(self) -> bool:
        return not self.dropped_players


@dataclass(frozen=True)
class CostSummary:
    """Shared-cost split for a session."""

    total_court_cost: float
    total_shuttle_cost: float
    total_cost: float
    cost_per_person: float


# =============================================================================
# Configuration Data Classes
# =============================================================================


@dataclass
class SessionSettings:
    """User-editable scheduling and cost parameters for a session.

    Raises:
        InvalidConfigurationError: If the court count is not a positive
            integer or any cost input is negative.
    """

    num_courts: int
    hours_played: float
    court_rate: float
    shuttle_count: float
    shuttle_price: float

    def __post_init__(self) -> None:
        self.num_courts = validate_num_courts(self.num_courts)
        for field_name in ("hours_played", "court_rate", "shuttle_count", "shuttle_price"):
            value = getattr(self, field_name)
            if value < 0:
                raise InvalidConfigurationError(
                    f"{field_name} must not be negative (got {value})."
                )


def validate_num_courts(num_courts) -> int:
    """Returns the court count as an int, rejecting anything below 1."""
    try:
        as_int = int(num_courts)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidConfigurationError(
            f"Number of courts must be a whole number (got {num_courts!r})."
        ) from e
    if isinstance(num_courts, bool) or as_int != num_courts:
        raise InvalidConfigurationError(
            f"Number of courts must be a whole number (got {num_courts!r})."
        )
    num_courts = as_int
    if num_courts < 1:
        raise InvalidConfigurationError("Number of courts must be at least 1.")
    return num_courts


def is_valid_skill(skill: int) -> bool:
    return MIN_SKILL <= skill <= MAX_SKILL


# =============================================================================
# Type Aliases
# =============================================================================

# Half-matches bucketed by tier, always holding all three tiers
TierGroups = dict[Tier, list[HalfMatch]]

# Ordered court schedule
Schedule = list[ScheduledMatch]
