# pairing.py
"""
Random pairing of a roster into doubles matches.

The roster is shuffled with Fisher-Yates and then consumed four players at a
time from the end of the shuffled list. Players left over when the roster
size is not a multiple of four sit out the round and are reported back in
the PairingResult.
"""

import logging
import random
from typing import Protocol, Sequence

from app_types import Match, PairingResult, Player, Team
from constants import PLAYERS_PER_MATCH

logger = logging.getLogger("app.pairing")


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [a, b], e.g. random.Random."""

    def randint(self, a: int, b: int) -> int: ...


def shuffle_players(players: Sequence[Player], rng: RandomSource) -> list[Player]:
    """Returns a uniformly random permutation of players (Fisher-Yates)."""
    shuffled = list(players)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def _log_dropped(dropped: list[Player]) -> None:
    if dropped:
        logger.warning(
            f"{len(dropped)} player(s) sit out this round: "
            f"{', '.join(p.name for p in dropped)}"
        )


def pair_players(
    roster: Sequence[Player], rng: RandomSource | None = None
) -> PairingResult:
    """
    Randomly partitions the roster into doubles matches.

    Args:
        roster: Players to pair. Not modified.
        rng: Random source. A fresh random.Random() is used when omitted, so
            the module-level random state is never touched.

    Returns:
        PairingResult with floor(len(roster) / 4) matches and the 0-3 players
        that could not be placed.
    """
    if rng is None:
        rng = random.Random()

    if len(roster) < PLAYERS_PER_MATCH:
        logger.info(
            f"Not enough players to form a match ({len(roster)} in roster)."
        )
        _log_dropped(list(roster))
        return PairingResult(matches=[], dropped_players=list(roster))

    shuffled = shuffle_players(roster, rng)

    matches = []
    while len(shuffled) >= PLAYERS_PER_MATCH:
        p1 = shuffled.pop()
        p2 = shuffled.pop()
        p3 = shuffled.pop()
        p4 = shuffled.pop()
        matches.append(Match(team_1=Team(p1, p2), team_2=Team(p3, p4)))

    _log_dropped(shuffled)

    logger.info(f"Paired {len(matches)} match(es) from {len(roster)} player(s)")
    return PairingResult(matches=matches, dropped_players=shuffled)
