"""Assemble the device-insights and dashboard views."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from homewatt.insights import aggregator, recommendations, trends
from homewatt.insights.aggregator import round2
from homewatt.models.bill import BillAnalysis
from homewatt.models.device import UserDevice
from homewatt.schemas.insights import (
    DashboardBreakdown,
    DashboardStats,
    DashboardSummary,
    DeviceBreakdown,
    DeviceInsights,
    DeviceInsightsSummary,
    LatestBill,
    PotentialSavings,
    QuickStats,
    UsageSnapshot,
)
from homewatt.schemas.profile import HouseholdProfile

logger = logging.getLogger(__name__)

SAVINGS_RATE = 0.25
SAVINGS_MESSAGE = (
    "By following the energy-saving tips for your devices, you could save up to "
    "20-30% on energy costs."
)
NO_DEVICES_MESSAGE = "No devices saved yet. Start scanning devices to see insights!"
NO_DATA_MESSAGE = "No data yet. Scan a device or upload your electricity bill to get started."


def build_device_insights(
    devices: Sequence[UserDevice],
    profile: HouseholdProfile,
    currency: str = "€",
) -> DeviceInsights:
    """Statistics and advice over a user's saved devices."""
    active = aggregator.active_devices(devices)
    if not active:
        return DeviceInsights(total_devices=0, currency=currency, message=NO_DEVICES_MESSAGE)

    totals = aggregator.compute_totals(active)
    savings = totals.annual_cost * SAVINGS_RATE if totals.annual_cost is not None else None
    logger.debug("Device insights over %d devices, annual cost %s", totals.device_count, totals.annual_cost)

    return DeviceInsights(
        total_devices=totals.device_count,
        currency=currency,
        summary=DeviceInsightsSummary(
            total_devices=totals.device_count,
            estimated_daily_kwh=round2(totals.daily_kwh),
            estimated_annual_kwh=round2(totals.annual_kwh),
            estimated_annual_cost=round2(totals.annual_cost),
            average_cost_per_device=round2(totals.average_annual_cost),
        ),
        breakdown=DeviceBreakdown(
            by_category=aggregator.group_breakdown(active, "device_category"),
            by_location=aggregator.group_breakdown(active, "location"),
        ),
        highest_consumers=aggregator.top_consumers(active),
        household_info=profile,
        recommendations=recommendations.device_recommendations(active, totals),
        potential_savings=PotentialSavings(
            message=SAVINGS_MESSAGE,
            estimated_annual_savings=round2(savings),
        ),
    )


def _usage(kwh: float | None, cost: float | None, total_kwh: float | None) -> UsageSnapshot:
    percentage = None
    if kwh is not None and total_kwh:
        percentage = round(kwh / total_kwh * 100, 1)
    return UsageSnapshot(kwh=kwh, cost=round2(cost), percentage=percentage)


def _latest_bill(bills: Sequence[BillAnalysis]) -> LatestBill | None:
    if not bills:
        return None
    latest = bills[0]
    bill_trends = trends.bill_trends(bills)
    return LatestBill(
        id=latest.id,
        month=latest.bill_month,
        total_kwh=latest.total_kwh,
        total_cost=round2(latest.bill_total),
        analyzed_at=latest.created_at,
        consumption_trend=bill_trends.consumption if bill_trends else None,
        cost_trend=bill_trends.cost if bill_trends else None,
    )


def build_dashboard_stats(
    devices: Sequence[UserDevice],
    bills: Sequence[BillAnalysis],
    month: int,
    currency: str = "€",
) -> DashboardStats:
    """Dashboard overview. ``bills`` must be ordered newest first."""
    active = aggregator.active_devices(devices)
    totals = aggregator.compute_totals(active)
    latest = bills[0] if bills else None

    quick_stats = None
    if latest is not None:
        quick_stats = QuickStats(
            daytime_usage=_usage(latest.a1_b1_kwh, latest.amount_a1_b1, latest.total_kwh),
            nighttime_usage=_usage(latest.a2_b1_kwh, latest.amount_a2_b1, latest.total_kwh),
        )

    return DashboardStats(
        currency=currency,
        message=NO_DATA_MESSAGE if not active and not bills else None,
        summary=DashboardSummary(
            total_devices=totals.device_count,
            total_bills_analyzed=len(bills),
            estimated_monthly_cost=round2(totals.monthly_cost),
            estimated_monthly_kwh=round2(totals.monthly_kwh),
        ),
        latest_bill=_latest_bill(bills),
        device_breakdown=DashboardBreakdown(
            by_category=aggregator.group_breakdown(active, "device_category"),
            top_consumers=aggregator.top_consumers(active),
        ),
        insights=recommendations.dashboard_recommendations(active, latest, month, currency),
        quick_stats=quick_stats,
    )
