# scheduler.py
"""
Court schedule builder.

Half-matches from all tiers are laid out Heavy first, then Medium, then
Light, and paired up two at a time by position. Opponents therefore come
from the schedule order, not from the match the teams were drawn in.
Courts are handed out round-robin.
"""

import logging
from typing import Mapping, Sequence

from app_types import HalfMatch, Schedule, ScheduledMatch, Tier, validate_num_courts
from grouping import TIER_ORDER
from logger import log_schedule_debug

logger = logging.getLogger("app.scheduler")


def flatten_groups(groups: Mapping[Tier, Sequence[HalfMatch]]) -> list[HalfMatch]:
    """Concatenates the tier lists in precedence order. Missing tiers count as empty."""
    flat: list[HalfMatch] = []
    for tier in TIER_ORDER:
        flat.extend(groups.get(tier, []))
    return flat


def build_schedule(
    groups: Mapping[Tier, Sequence[HalfMatch]], num_courts: int
) -> Schedule:
    """
    Builds the ordered court schedule.

    Args:
        groups: Half-matches per tier, as produced by grouping.group_teams
        num_courts: Number of courts available (must be >= 1)

    Returns:
        One ScheduledMatch per two half-matches (rounded up). When the total
        is odd, the last row has no second team.

    Raises:
        InvalidConfigurationError: If num_courts is not a positive integer.
    """
    num_courts = validate_num_courts(num_courts)
    flat = flatten_groups(groups)

    schedule: Schedule = []
    for i in range(0, len(flat), 2):
        index = i // 2
        schedule.append(
            ScheduledMatch(
                match_number=index + 1,
                court=(index % num_courts) + 1,
                half_1=flat[i],
                half_2=flat[i + 1] if i + 1 < len(flat) else None,
            )
        )

    logger.info(
        f"Built schedule of {len(schedule)} match(es) on {num_courts} court(s)"
    )
    log_schedule_debug(logger, schedule, num_courts)
    return schedule
