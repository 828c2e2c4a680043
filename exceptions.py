# exceptions.py
"""
Custom exceptions for the Badminton Pairing App.

This module defines domain-specific exceptions for better error handling
and debugging throughout the application.

An empty roster and a roster that is not a multiple of four are not errors:
they produce empty results and a dropped-player count respectively.
"""


class BadmintonAppError(Exception):
    """Base exception for all application errors."""

    pass


class InvalidConfigurationError(BadmintonAppError):
    """Raised when session settings are out of range (courts, costs)."""

    pass


class ValidationError(BadmintonAppError):
    """Raised when input validation fails."""

    pass


class RosterError(BadmintonAppError):
    """Raised when a roster operation refers to a missing player."""

    pass


class SessionError(BadmintonAppError):
    """Raised when a session operation is requested out of order."""

    pass
