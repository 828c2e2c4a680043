# player_registry.py
"""
Player registry data processing utilities.

This module handles conversion between Player objects and pandas DataFrames
for the roster editor, and bulk import of rosters from CSV or Excel files.

Imported rows that cannot form a valid Player (missing name, unknown hand,
non-integer or out-of-range skill) are dropped here, so the pairing code
only ever sees valid players.
"""

import logging
import os
from typing import IO, Sequence

import pandas as pd

from app_types import Hand, Player, is_valid_skill
from constants import (
    COL_HAND,
    COL_NAME,
    COL_SKILL,
    LEFT_HAND_ALIASES,
    RIGHT_HAND_ALIASES,
    ROSTER_COLUMNS,
    ROSTER_FILE_TYPES,
)
from exceptions import ValidationError

logger = logging.getLogger("app.player_registry")


def parse_hand(value) -> Hand | None:
    """Maps a cell value to a Hand, or None when it is not a recognised hand."""
    if isinstance(value, Hand):
        return value
    if not isinstance(value, str):
        return None
    key = value.strip().lower()
    if key in RIGHT_HAND_ALIASES:
        return Hand.RIGHT
    if key in LEFT_HAND_ALIASES:
        return Hand.LEFT
    return None


def parse_skill(value) -> int | None:
    """Maps a cell value to a skill level 1-5, or None when it is not one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    numeric = pd.to_numeric(pd.Series([value]), errors="coerce").iloc[0]
    if pd.isna(numeric) or not float(numeric).is_integer():
        return None
    skill = int(numeric)
    return skill if is_valid_skill(skill) else None


def parse_name(value) -> str | None:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    name = str(value).strip()
    return name or None


def create_roster_dataframe(players: Sequence[Player]) -> pd.DataFrame:
    """Creates a DataFrame for the roster editor."""
    return pd.DataFrame(
        {
            "#": range(1, len(players) + 1),
            COL_NAME: [p.name for p in players],
            COL_HAND: [p.hand.value for p in players],
            COL_SKILL: [p.skill for p in players],
        }
    )


def split_roster_rows(df: pd.DataFrame) -> tuple[list[Player], int]:
    """
    Converts a roster DataFrame into a list of Players, in row order.

    Rows with a missing name, an unrecognised hand or an invalid skill are
    skipped.

    Args:
        df: DataFrame with "Player Name", "Hand" and "Skill" columns

    Returns:
        Tuple of (valid Player objects, number of rows skipped)

    Raises:
        ValidationError: If a required column is missing.
    """
    missing = [col for col in ROSTER_COLUMNS if col not in df.columns]
    if missing:
        raise ValidationError(f"Roster is missing column(s): {', '.join(missing)}")

    players = []
    skipped = 0
    for _, row in df.iterrows():
        name = parse_name(row[COL_NAME])
        hand = parse_hand(row[COL_HAND])
        skill = parse_skill(row[COL_SKILL])
        if name is None or hand is None or skill is None:
            skipped += 1
            continue
        players.append(Player(name=name, hand=hand, skill=skill))

    if skipped:
        logger.warning(f"Skipped {skipped} invalid roster row(s)")
    return players, skipped


def dataframe_to_players(df: pd.DataFrame) -> list[Player]:
    """Like split_roster_rows, but returns only the valid players."""
    players, _ = split_roster_rows(df)
    return players


def normalize_roster_columns(df: pd.DataFrame) -> pd.DataFrame:
    """
    Returns a DataFrame with the standard roster columns.

    Files with "Player Name", "Hand" and "Skill" headers are used as-is.
    Otherwise the first three columns are taken as name, hand and skill,
    whatever their headers say.
    """
    if all(col in df.columns for col in ROSTER_COLUMNS):
        return df[ROSTER_COLUMNS].copy()
    if len(df.columns) < len(ROSTER_COLUMNS):
        raise ValidationError(
            f"Roster file must have at least {len(ROSTER_COLUMNS)} columns: "
            f"{', '.join(ROSTER_COLUMNS)}"
        )
    positional = df.iloc[:, : len(ROSTER_COLUMNS)].copy()
    positional.columns = ROSTER_COLUMNS
    return positional


def read_roster_file(file: str | IO, filename: str | None = None) -> list[Player]:
    """
    Reads players from a CSV or Excel file. The first row is a header.
    Only the first sheet of a workbook is read.

    Args:
        file: Path or file-like object (e.g. a Streamlit UploadedFile)
        filename: Name used to detect the format when file is not a path

    Returns:
        Valid players found in the file, in file order

    Raises:
        ValidationError: If the format is unsupported or the file cannot be read.
    """
    if filename is None:
        filename = file if isinstance(file, str) else getattr(file, "name", "")
    extension = os.path.splitext(filename)[1].lower().lstrip(".")
    if extension not in ROSTER_FILE_TYPES:
        raise ValidationError(
            f"Unsupported file type '.{extension}'. "
            f"Use one of: {', '.join(ROSTER_FILE_TYPES)}"
        )

    try:
        if extension == "csv":
            raw_df = pd.read_csv(file)
        else:
            raw_df = pd.read_excel(file, sheet_name=0, engine="openpyxl")
    except (ValueError, OSError, ImportError) as e:
        logger.exception(f"Failed to read roster file {filename}")
        raise ValidationError(f"Could not read {filename}: {e}") from e

    players = dataframe_to_players(normalize_roster_columns(raw_df))
    logger.info(f"Imported {len(players)} player(s) from {filename}")
    return players
