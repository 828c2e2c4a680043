# cost.py
"""Shared-cost split for court rental and shuttlecocks."""

from app_types import CostSummary
from exceptions import InvalidConfigurationError


def compute_cost(
    hours_played: float,
    court_rate: float,
    shuttle_count: float,
    shuttle_price: float,
    roster_size: int,
) -> CostSummary:
    """
    Computes total and per-person session cost.

    With an empty roster the per-person cost is reported as 0.0.

    Raises:
        InvalidConfigurationError: If any input is negative.
    """
    inputs = {
        "hours_played": hours_played,
        "court_rate": court_rate,
        "shuttle_count": shuttle_count,
        "shuttle_price": shuttle_price,
        "roster_size": roster_size,
    }
    for name, value in inputs.items():
        if value < 0:
            raise InvalidConfigurationError(f"{name} must not be negative (got {value}).")

    total_court_cost = hours_played * court_rate
    total_shuttle_cost = shuttle_count * shuttle_price
    total_cost = total_court_cost + total_shuttle_cost
    cost_per_person = total_cost / roster_size if roster_size > 0 else 0.0

    return CostSummary(
        total_court_cost=total_court_cost,
        total_shuttle_cost=total_shuttle_cost,
        total_cost=total_cost,
        cost_per_person=cost_per_person,
    )


def format_currency(amount: float) -> str:
    """Formats an amount with two decimals, e.g. 87.5 -> '87.50'."""
    return f"{amount:,.2f}"
