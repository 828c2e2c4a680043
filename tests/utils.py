import random

from app_types import Hand, HalfMatch, Match, Player, Team, Tier
from grouping import classify_tier


def generate_random_players(n, skill_range=(1, 5), rng=None):
    """
    Generates N players with names P1 to Pn, random skills, and alternating hands.

    Args:
        n: Number of players to generate
        skill_range: Tuple of (min_skill, max_skill), inclusive
        rng: Optional random.Random for reproducible rosters

    Returns:
        List of Player objects.
    """
    rng = rng or random.Random()
    players = []
    for i in range(1, n + 1):
        # Alternate hands for variety
        hand = Hand.RIGHT if i % 2 == 1 else Hand.LEFT
        players.append(Player(name=f"P{i}", hand=hand, skill=rng.randint(*skill_range)))
    return players


class ScriptedRandom:
    """
    Random source that replays a fixed list of draws.

    randint(a, b) returns the next scripted value, or b when the script is
    exhausted (which leaves a Fisher-Yates shuffle as the identity).
    """

    def __init__(self, draws=None):
        self.draws = list(draws or [])
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        if self.draws:
            value = self.draws.pop(0)
            assert a <= value <= b, f"scripted draw {value} outside [{a}, {b}]"
            return value
        return b


def make_team(name_1, skill_1, name_2, skill_2, hand=Hand.RIGHT):
    return Team(Player(name_1, hand, skill_1), Player(name_2, hand, skill_2))


def make_half(team, tier=None):
    return HalfMatch(team=team, tier=tier or classify_tier(team.skill))


def make_match(team_1, team_2):
    return Match(team_1=team_1, team_2=team_2)


def make_groups(heavy=0, medium=0, light=0):
    """Builds tier groups with the given number of placeholder half-matches per tier."""
    counter = iter(range(1, 1000))

    def halves(count, skill_1, skill_2):
        result = []
        for _ in range(count):
            n = next(counter)
            result.append(make_half(make_team(f"X{n}a", skill_1, f"X{n}b", skill_2)))
        return result

    return {
        Tier.HEAVY: halves(heavy, 5, 5),
        Tier.MEDIUM: halves(medium, 4, 3),
        Tier.LIGHT: halves(light, 2, 2),
    }
