"""Tests for the device-insights and dashboard views."""

from datetime import datetime

import pytest

from homewatt.insights import build_dashboard_stats, build_device_insights
from homewatt.models.bill import BillAnalysis
from homewatt.models.device import UserDevice
from homewatt.schemas.profile import HouseholdProfile

PROFILE = HouseholdProfile(
    property_ownership="rent",
    house_type="flat",
    number_of_occupants=2,
    number_of_bedrooms=1,
    heating_type="gas",
    property_age="older",
)


def _device(name, category, location=None, daily=None, annual=None, cost=None, active=True):
    return UserDevice(
        user_id="user-1",
        device_name=name,
        device_category=category,
        location=location,
        daily_kwh=daily,
        annual_kwh=annual,
        estimated_annual_cost=cost,
        is_active=active,
    )


def _bill(bill_id, **fields):
    return BillAnalysis(id=bill_id, user_id="user-1", created_at=datetime(2025, 11, 1), **fields)


@pytest.fixture
def devices():
    return [
        _device("Fridge", "refrigerator", "Kitchen", "1.0-1.4", "400-500", "€90-110"),
        _device("TV", "tv", "Living Room", "0.3", "110", "$30"),
        _device("Old AC", "air_conditioner", "Bedroom", "N/A", None, "Unable to determine"),
        _device("Retired fridge", "refrigerator", "Garage", "2", "700", "€200", active=False),
    ]


# --- Device insights ---


def test_device_insights_empty():
    view = build_device_insights([], PROFILE)

    assert view.total_devices == 0
    assert view.message.startswith("No devices saved yet")
    assert view.summary is None
    assert view.potential_savings is None
    assert view.recommendations == []


def test_device_insights_only_inactive_devices_is_empty():
    view = build_device_insights(
        [_device("Off", "tv", cost="$10", active=False)], PROFILE
    )
    assert view.total_devices == 0


def test_device_insights_summary(devices):
    view = build_device_insights(devices, PROFILE)

    assert view.total_devices == 3
    assert view.summary.estimated_daily_kwh == 1.5
    assert view.summary.estimated_annual_kwh == 560.0
    assert view.summary.estimated_annual_cost == 130.0
    assert view.summary.average_cost_per_device == pytest.approx(43.33)
    assert view.potential_savings.estimated_annual_savings == 32.5
    assert "20-30%" in view.potential_savings.message
    assert view.household_info == PROFILE
    assert view.currency == "€"


def test_device_insights_breakdown_and_ranking(devices):
    view = build_device_insights(devices, PROFILE)

    assert set(view.breakdown.by_category) == {"refrigerator", "tv", "air_conditioner"}
    assert view.breakdown.by_category["refrigerator"].count == 1
    assert view.breakdown.by_location["Kitchen"].monthly_kwh == 36.0
    assert [c.name for c in view.highest_consumers] == ["Fridge", "TV", "Old AC"]
    assert view.highest_consumers[0].estimated_annual_cost == "€90-110"


def test_device_insights_recommendations(devices):
    view = build_device_insights(devices, PROFILE)
    assert [r.type for r in view.recommendations] == ["general_tip"]


# --- Dashboard ---


def test_dashboard_no_data():
    view = build_dashboard_stats([], [], month=10)

    assert view.message is not None
    assert view.summary.total_devices == 0
    assert view.summary.total_bills_analyzed == 0
    assert view.summary.estimated_monthly_cost is None
    assert view.summary.estimated_monthly_kwh is None
    assert view.latest_bill is None
    assert view.quick_stats is None
    assert view.device_breakdown.top_consumers == []
    assert [i.type for i in view.insights] == ["action", "action"]


def test_dashboard_with_devices_and_bills(devices):
    bills = [
        _bill(2, bill_month="November 2025", total_kwh=120, a1_b1_kwh=90, a2_b1_kwh=30,
              amount_a1_b1=7.011, amount_a2_b1=1.002, bill_total=30,
              price_a1_b1=0.0779, price_a2_b1=0.0334),
        _bill(1, bill_month="October 2025", total_kwh=100, bill_total=25),
    ]
    view = build_dashboard_stats(devices, bills, month=12)

    assert view.message is None
    assert view.summary.total_devices == 3
    assert view.summary.total_bills_analyzed == 2
    assert view.summary.estimated_monthly_cost == pytest.approx(10.83)
    assert view.summary.estimated_monthly_kwh == 45.0

    latest = view.latest_bill
    assert latest.id == 2
    assert latest.month == "November 2025"
    assert latest.total_cost == 30.0
    assert latest.consumption_trend.percentage == 20.0
    assert latest.consumption_trend.direction == "up"
    assert latest.cost_trend.percentage == 20.0

    assert view.quick_stats.daytime_usage.kwh == 90
    assert view.quick_stats.daytime_usage.cost == 7.01
    assert view.quick_stats.daytime_usage.percentage == 75.0
    assert view.quick_stats.nighttime_usage.percentage == 25.0

    assert [i.type for i in view.insights] == ["info", "savings", "seasonal"]


def test_dashboard_single_bill_has_no_trend():
    view = build_dashboard_stats([], [_bill(1, total_kwh=100, bill_total=25)], month=10)

    assert view.message is None
    assert view.latest_bill.consumption_trend is None
    assert view.latest_bill.cost_trend is None
    assert [i.type for i in view.insights] == ["action"]


def test_dashboard_snapshot_without_total_kwh():
    view = build_dashboard_stats([], [_bill(1, total_kwh=0, a1_b1_kwh=0)], month=10)
    assert view.quick_stats.daytime_usage.percentage is None
