"""
Service layer for orchestrating session operations between the UI pages and
the pairing/scheduling logic.

This module sits between the UI (pages) and the lower-level logic modules,
ensuring that the same rules apply regardless of where an operation is
initiated (UI or Tests). It also turns results into DataFrames for display
and spreadsheet export.
"""

import io
import logging
from typing import Iterable

import pandas as pd

from app_types import Player, Schedule, SessionSettings, TierGroups
from constants import TEAM_NAME_SEPARATOR
from grouping import TIER_ORDER
from session_logic import ClubNightSession, Roster

logger = logging.getLogger("app.session_service")

SCHEDULE_COLUMNS = ["#", "Group", "Team 1", "Team 2", "Court", "Start", "End"]
GROUP_COLUMNS = ["Tier", "Team", "Team Skill", "Hands"]


def create_new_session(
    players: Roster | Iterable[Player],
    num_courts: int,
    hours_played: float,
    court_rate: float,
    shuttle_count: float,
    shuttle_price: float,
) -> ClubNightSession:
    """
    Creates a new session from the roster and the setup parameters.

    Raises:
        InvalidConfigurationError: If any parameter is out of range.
    """
    settings = SessionSettings(
        num_courts=num_courts,
        hours_played=hours_played,
        court_rate=court_rate,
        shuttle_count=shuttle_count,
        shuttle_price=shuttle_price,
    )
    roster = players if isinstance(players, Roster) else Roster(players)
    session = ClubNightSession(roster=roster, settings=settings)
    logger.info(
        f"Created session with {len(roster)} player(s) on {settings.num_courts} court(s)"
    )
    return session


def groups_to_dataframe(groups: TierGroups) -> pd.DataFrame:
    """One row per half-match, Heavy tier first."""
    rows = [
        {
            "Tier": tier.value,
            "Team": TEAM_NAME_SEPARATOR.join(half.team.names),
            "Team Skill": half.team_skill,
            "Hands": half.hands,
        }
        for tier in TIER_ORDER
        for half in groups.get(tier, [])
    ]
    return pd.DataFrame(rows, columns=GROUP_COLUMNS)


def schedule_to_dataframe(schedule: Schedule) -> pd.DataFrame:
    """One row per scheduled match, in play order."""
    rows = [
        {
            "#": row.match_number,
            "Group": row.tier_label,
            "Team 1": row.team_1,
            "Team 2": row.team_2,
            "Court": row.court,
            "Start": row.start,
            "End": row.end,
        }
        for row in schedule
    ]
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def cost_to_dataframe(session: ClubNightSession) -> pd.DataFrame:
    summary = session.cost_summary()
    return pd.DataFrame(
        {
            "Item": ["Court", "Shuttlecocks", "Total", "Per Person"],
            "Amount": [
                round(summary.total_court_cost, 2),
                round(summary.total_shuttle_cost, 2),
                round(summary.total_cost, 2),
                round(summary.cost_per_person, 2),
            ],
        }
    )


def export_schedule_to_excel(session: ClubNightSession) -> bytes:
    """
    Writes the session's schedule, tier groups and cost to an .xlsx workbook.

    Returns:
        The workbook contents, ready for a download button.
    """
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        schedule_to_dataframe(session.schedule).to_excel(
            writer, sheet_name="Schedule", index=False
        )
        groups_to_dataframe(session.groups).to_excel(
            writer, sheet_name="Groups", index=False
        )
        cost_to_dataframe(session).to_excel(writer, sheet_name="Cost", index=False)
    logger.info(f"Exported schedule of {len(session.schedule)} match(es)")
    return out.getvalue()
