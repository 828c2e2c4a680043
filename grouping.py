# grouping.py
"""
Skill-tier grouping of paired teams.

Each team of every match is classified on its own, so the two teams of a
match can end up in different tiers. The output keeps every tier key, in
precedence order, even when a tier is empty.
"""

import logging
from typing import Sequence

from app_types import HalfMatch, Match, Tier, TierGroups
from constants import HEAVY_TEAM_SKILL_MIN, MEDIUM_TEAM_SKILL_MIN

logger = logging.getLogger("app.grouping")

# Order in which tiers are laid onto the schedule
TIER_ORDER = (Tier.HEAVY, Tier.MEDIUM, Tier.LIGHT)

# Headings shown above each tier's team list
TIER_DESCRIPTIONS = {
    Tier.HEAVY: f"Heavy (team >= {HEAVY_TEAM_SKILL_MIN})",
    Tier.MEDIUM: f"Medium (team {MEDIUM_TEAM_SKILL_MIN}-{HEAVY_TEAM_SKILL_MIN - 1})",
    Tier.LIGHT: f"Light (team < {MEDIUM_TEAM_SKILL_MIN})",
}


def classify_tier(team_skill: int) -> Tier:
    """Maps a team skill sum to its tier: 9+ Heavy, 7-8 Medium, otherwise Light."""
    if team_skill >= HEAVY_TEAM_SKILL_MIN:
        return Tier.HEAVY
    if team_skill >= MEDIUM_TEAM_SKILL_MIN:
        return Tier.MEDIUM
    return Tier.LIGHT


def empty_groups() -> TierGroups:
    return {tier: [] for tier in TIER_ORDER}


def group_teams(matches: Sequence[Match]) -> TierGroups:
    """
    Splits matches into half-matches bucketed by tier.

    Match order is preserved within each tier, and team 1 of a match is
    appended before team 2.
    """
    groups = empty_groups()
    for match in matches:
        for team in (match.team_1, match.team_2):
            tier = classify_tier(team.skill)
            groups[tier].append(HalfMatch(team=team, tier=tier, hands=match.hands))

    logger.debug(
        "Tier sizes: %s", {tier.value: len(groups[tier]) for tier in TIER_ORDER}
    )
    return groups
