"""Insight view schemas — device insights and dashboard stats."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from homewatt.schemas.profile import HouseholdProfile

Priority = Literal["high", "medium", "low"]


class Recommendation(BaseModel):
    """Single advisory item."""
    type: str  # action, info, savings, warning, seasonal, high_cost_alert, ...
    title: str
    message: str
    priority: Priority
    icon: str | None = None


class GroupStats(BaseModel):
    """Per-category or per-location totals."""
    count: int
    monthly_cost: float | None = None
    monthly_kwh: float | None = None


class TopConsumer(BaseModel):
    """Device ranked by estimated annual cost. Raw strings are echoed as stored."""
    id: int | None = None
    name: str
    category: str
    annual_kwh: str | None = None
    estimated_annual_cost: str | None = None
    monthly_cost: float | None = None
    daily_kwh: str | None = None


# --- Device insights ---


class DeviceInsightsSummary(BaseModel):
    total_devices: int
    estimated_daily_kwh: float | None = None
    estimated_annual_kwh: float | None = None
    estimated_annual_cost: float | None = None
    average_cost_per_device: float | None = None


class DeviceBreakdown(BaseModel):
    by_category: dict[str, GroupStats]
    by_location: dict[str, GroupStats]


class PotentialSavings(BaseModel):
    message: str
    estimated_annual_savings: float | None = None


class DeviceInsights(BaseModel):
    """Insights over the saved device inventory.

    With no active devices only ``total_devices`` (0) and ``message`` are set.
    """
    total_devices: int
    currency: str
    message: str | None = None
    summary: DeviceInsightsSummary | None = None
    breakdown: DeviceBreakdown | None = None
    highest_consumers: list[TopConsumer] = []
    household_info: HouseholdProfile | None = None
    recommendations: list[Recommendation] = []
    potential_savings: PotentialSavings | None = None


# --- Dashboard ---


class Trend(BaseModel):
    """Period-over-period change between the two latest bills."""
    percentage: float
    direction: Literal["up", "down"]
    message: str


class LatestBill(BaseModel):
    id: int | None = None
    month: str | None = None
    total_kwh: float | None = None
    total_cost: float | None = None
    analyzed_at: datetime | None = None
    consumption_trend: Trend | None = None
    cost_trend: Trend | None = None


class DashboardSummary(BaseModel):
    total_devices: int
    total_bills_analyzed: int
    estimated_monthly_cost: float | None = None
    estimated_monthly_kwh: float | None = None


class DashboardBreakdown(BaseModel):
    by_category: dict[str, GroupStats] = {}
    top_consumers: list[TopConsumer] = []


class UsageSnapshot(BaseModel):
    kwh: float | None = None
    cost: float | None = None
    percentage: float | None = None


class QuickStats(BaseModel):
    daytime_usage: UsageSnapshot
    nighttime_usage: UsageSnapshot


class DashboardStats(BaseModel):
    """Dashboard overview combining devices and bills."""
    currency: str
    message: str | None = None
    summary: DashboardSummary
    latest_bill: LatestBill | None = None
    device_breakdown: DashboardBreakdown
    insights: list[Recommendation] = []
    quick_stats: QuickStats | None = None
