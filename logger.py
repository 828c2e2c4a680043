# logger.py
"""
Logging configuration for the Badminton Pairing App.

This module provides centralized logging setup. The setup_logging() function
should be called once at application startup (e.g., in 1_Setup.py).

All app modules should use the "app" namespace:
    import logging
    logger = logging.getLogger("app.module_name")

This keeps third-party library logs quiet while allowing granular control
over the app's own logging level via the LOG_LEVEL environment variable.
"""

import logging
import os
import sys

# App namespace prefix - all app loggers should use this
APP_LOGGER_NAME = "app"

# Environment variable that overrides the app logging level
LOG_LEVEL_ENV_VAR = "LOG_LEVEL"


def get_app_log_level(default: int = logging.INFO) -> int:
    """
    Reads the app logging level from the LOG_LEVEL environment variable.

    Accepts level names ("DEBUG", "info") or numeric values ("10").
    Unknown values fall back to the default.
    """
    raw_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    if not raw_level:
        return default
    if raw_level.isdigit():
        return int(raw_level)
    level = logging.getLevelName(raw_level.upper())
    return level if isinstance(level, int) else default


def setup_logging(app_level: int | None = None) -> None:
    """
    Configure logging for the application.

    - Root logger is set to WARNING (keeps third-party libraries quiet)
    - App namespace logger ("app.*") is set to the specified level

    This should be called ONCE at application startup (entry point).

    Args:
        app_level: The logging level for app modules. When omitted, the
            LOG_LEVEL environment variable is used (default: INFO)
    """
    if app_level is None:
        app_level = get_app_log_level()

    # Configure root logger to WARNING - silences third-party library noise
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    # Avoid adding duplicate handlers if setup is called multiple times
    if not root_logger.handlers:
        # Create console handler
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.DEBUG)  # Handler accepts all; loggers filter

        # Create formatter
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)

        root_logger.addHandler(handler)

    # Configure the app namespace logger
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(app_level)


def log_schedule_debug(
    logger: logging.Logger,
    schedule: list,
    num_courts: int,
) -> None:
    """
    Log a built schedule in a consistent format.

    Args:
        logger: Logger instance to use
        schedule: List of ScheduledMatch rows
        num_courts: Number of courts the schedule was built for
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    matches_per_court = {c: 0 for c in range(1, num_courts + 1)}
    for row in schedule:
        matches_per_court[row.court] += 1

    logger.debug("Matches per Court: %s", matches_per_court)
    for row in schedule:
        logger.debug(
            "Match %d (court %d, %s): %s vs %s",
            row.match_number,
            row.court,
            row.tier_label,
            row.team_1,
            row.team_2 or "-",
        )
