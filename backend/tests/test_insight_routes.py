"""Tests for the insights and dashboard routes."""

from datetime import datetime, timezone

import pytest
from httpx import AsyncClient

from homewatt.api.deps import get_clock


async def _save_device(client: AsyncClient, headers, **fields):
    resp = await client.post("/api/devices", json=fields, headers=headers)
    assert resp.status_code == 201
    return resp.json()


async def _record_bill(client: AsyncClient, headers, **consumption_and_costs):
    resp = await client.post("/api/bills", json=consumption_and_costs, headers=headers)
    assert resp.status_code == 201
    return resp.json()


@pytest.mark.asyncio
async def test_insights_without_devices(client: AsyncClient, auth_headers):
    resp = await client.get("/api/insights", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["total_devices"] == 0
    assert data["message"].startswith("No devices saved yet")
    assert data["summary"] is None


@pytest.mark.asyncio
async def test_insights_air_conditioners(client: AsyncClient, auth_headers):
    for i in range(3):
        await _save_device(
            client, auth_headers,
            device_name=f"AC {i}",
            device_category="air_conditioner",
            estimated_annual_cost="$100",
        )

    resp = await client.get("/api/insights", headers=auth_headers)
    data = resp.json()

    assert data["total_devices"] == 3
    assert data["summary"]["estimated_annual_cost"] == 300.0
    assert data["summary"]["average_cost_per_device"] == 100.0
    assert [r["type"] for r in data["recommendations"]] == ["heating_upgrade", "general_tip"]
    assert data["potential_savings"]["estimated_annual_savings"] == 75.0
    assert data["household_info"]["house_type"] == "apartment"
    assert data["household_info"]["number_of_occupants"] == 3


@pytest.mark.asyncio
async def test_insights_ignore_removed_devices(client: AsyncClient, auth_headers):
    device = await _save_device(
        client, auth_headers,
        device_name="Old Fridge", device_category="refrigerator", estimated_annual_cost="€600",
    )
    await client.delete(f"/api/devices/{device['id']}", headers=auth_headers)

    data = (await client.get("/api/insights", headers=auth_headers)).json()
    assert data["total_devices"] == 0


@pytest.mark.asyncio
async def test_dashboard_empty(client: AsyncClient, auth_headers):
    resp = await client.get("/api/dashboard/stats", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()

    assert data["message"] is not None
    assert data["summary"]["estimated_monthly_cost"] is None
    assert data["latest_bill"] is None
    assert data["quick_stats"] is None
    assert [i["title"] for i in data["insights"]] == [
        "Start Tracking Devices",
        "Upload Your Electricity Bill",
    ]


@pytest.mark.asyncio
async def test_dashboard_trend_and_quick_stats(client: AsyncClient, auth_headers):
    await _record_bill(
        client, auth_headers,
        bill_month="October 2025",
        consumption={"total_kwh": 100},
        costs={"bill_total": 25},
    )
    await _record_bill(
        client, auth_headers,
        bill_month="November 2025",
        consumption={"total_kwh": 120, "a1_b1_kwh": 96, "a2_b1_kwh": 24},
        pricing={"price_a1_b1": 0.0779, "price_a2_b1": 0.0334},
        costs={"amount_a1_b1": 7.48, "amount_a2_b1": 0.80, "bill_total": 30},
    )
    await _save_device(
        client, auth_headers,
        device_name="Fridge", device_category="refrigerator",
        daily_kwh="1.2", estimated_annual_cost="€120-144",
    )

    data = (await client.get("/api/dashboard/stats", headers=auth_headers)).json()

    assert data["summary"]["total_bills_analyzed"] == 2
    assert data["summary"]["estimated_monthly_cost"] == 11.0
    assert data["summary"]["estimated_monthly_kwh"] == 36.0

    latest = data["latest_bill"]
    assert latest["month"] == "November 2025"
    assert latest["consumption_trend"] == {
        "percentage": 20.0,
        "direction": "up",
        "message": "Your consumption increased by 20.0% compared to last month",
    }
    assert latest["cost_trend"]["direction"] == "up"

    assert data["quick_stats"]["daytime_usage"] == {"kwh": 96.0, "cost": 7.48, "percentage": 80.0}
    assert data["quick_stats"]["nighttime_usage"]["percentage"] == 20.0

    assert [i["type"] for i in data["insights"]] == ["info", "savings", "warning"]
    savings = data["insights"][1]
    assert "80.0%" in savings["message"]
    # 96 kWh * 0.30 * (0.0779 - 0.0334) = 1.28
    assert "€1.28 per month" in savings["message"]
    assert data["device_breakdown"]["top_consumers"][0]["name"] == "Fridge"


@pytest.mark.asyncio
async def test_dashboard_seasonal_advice_follows_clock(app, client: AsyncClient, auth_headers):
    app.dependency_overrides[get_clock] = (
        lambda: datetime(2025, 1, 10, tzinfo=timezone.utc)
    )
    data = (await client.get("/api/dashboard/stats", headers=auth_headers)).json()
    assert data["insights"][-1]["title"] == "Winter Energy Tips"
