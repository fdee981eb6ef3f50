"""Month-over-month change between the two most recent bills."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from homewatt.models.bill import BillAnalysis
from homewatt.schemas.insights import Trend


def percent_change(current: float | None, previous: float | None) -> float | None:
    """(current - previous) / previous * 100. None unless previous is positive."""
    if current is None or previous is None or previous <= 0:
        return None
    return (current - previous) / previous * 100


def describe(change: float, subject: str) -> Trend:
    """Label a change. Anything not strictly positive counts as "down"."""
    pct = round(change, 1)
    if change > 0:
        direction, verb = "up", "increased"
    else:
        direction, verb = "down", "decreased"
    return Trend(
        percentage=pct,
        direction=direction,
        message=f"Your {subject} {verb} by {abs(pct)}% compared to last month",
    )


@dataclass
class BillTrends:
    consumption: Trend | None = None
    cost: Trend | None = None


def bill_trends(bills: Sequence[BillAnalysis]) -> BillTrends | None:
    """Trends for bills ordered newest first. None with fewer than two bills."""
    if len(bills) < 2:
        return None
    current, previous = bills[0], bills[1]

    consumption = percent_change(current.total_kwh, previous.total_kwh)
    cost = percent_change(current.bill_total, previous.bill_total)
    return BillTrends(
        consumption=describe(consumption, "consumption") if consumption is not None else None,
        cost=describe(cost, "bill") if cost is not None else None,
    )
