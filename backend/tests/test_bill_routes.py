"""Tests for the bill routes."""

import pytest
from httpx import AsyncClient

NOVEMBER = {
    "bill_month": "November 2025",
    "consumption": {"total_kwh": 300, "a1_b1_kwh": 240, "a2_b1_kwh": 60},
    "pricing": {"price_a1_b1": 0.0779, "price_a2_b1": 0.0334},
    "costs": {
        "amount_a1_b1": 18.70,
        "amount_a2_b1": 2.00,
        "standing_charge": 2.50,
        "net_total": 23.20,
        "vat": 1.86,
        "bill_total": 25.06,
    },
    "human_readable_breakdown": {"en": "Day rate 240 kWh"},
    "insights": ["Most of your usage is during the day"],
}


async def _record(client: AsyncClient, headers, body=NOVEMBER) -> dict:
    resp = await client.post("/api/bills", json=body, headers=headers)
    assert resp.status_code == 201
    return resp.json()


@pytest.mark.asyncio
async def test_record_bill_without_devices(client: AsyncClient, auth_headers):
    result = await _record(client, auth_headers)

    assert result["bill"]["month"] == "November 2025"
    assert result["bill"]["total_cost"] == 25.06
    assert result["bill"]["human_readable"] == {"en": "Day rate 240 kWh"}
    assert [t["percentage"] for t in result["tariffs"]] == [80.0, 20.0]
    assert result["your_devices"]["count"] == 0
    assert result["your_devices"]["share_of_consumption"] is None


@pytest.mark.asyncio
async def test_record_bill_correlates_devices(client: AsyncClient, auth_headers):
    await client.post(
        "/api/devices",
        json={
            "device_name": "Heater",
            "device_category": "other",
            "daily_kwh": "3",
            "estimated_annual_cost": "€240",
        },
        headers=auth_headers,
    )

    result = await _record(client, auth_headers)
    devices = result["your_devices"]
    assert devices["count"] == 1
    assert devices["estimated_monthly_cost"] == 20.0
    assert devices["share_of_consumption"] == 30
    assert "approximately 30%" in devices["message"]


@pytest.mark.asyncio
async def test_missing_prices_take_default_tariff(client: AsyncClient, auth_headers):
    result = await _record(client, auth_headers, {"consumption": {"total_kwh": 100}})
    bill_id = result["bill"]["id"]

    resp = await client.get(f"/api/bills/{bill_id}/breakdown", headers=auth_headers)
    tariffs = resp.json()["tariffs"]
    assert [t["price_per_kwh"] for t in tariffs] == [0.0779, 0.0334, 0.1445, 0.0681]
    assert tariffs[0]["kwh"] == 0.0


@pytest.mark.asyncio
async def test_negative_consumption_is_rejected(client: AsyncClient, auth_headers):
    resp = await client.post(
        "/api/bills", json={"consumption": {"total_kwh": -5}}, headers=auth_headers
    )
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_list_bills_newest_first(client: AsyncClient, auth_headers):
    await _record(client, auth_headers, {**NOVEMBER, "bill_month": "October 2025"})
    await _record(client, auth_headers)

    resp = await client.get("/api/bills", headers=auth_headers)
    data = resp.json()
    assert data["total"] == 2
    assert [b["month"] for b in data["bills"]] == ["November 2025", "October 2025"]


@pytest.mark.asyncio
async def test_get_bill(client: AsyncClient, auth_headers):
    bill_id = (await _record(client, auth_headers))["bill"]["id"]

    resp = await client.get(f"/api/bills/{bill_id}", headers=auth_headers)
    assert resp.status_code == 200
    bill = resp.json()
    assert bill["breakdown"]["daytime_kwh"] == 240
    assert bill["breakdown"]["outstanding_debt"] == 0.0
    assert bill["insights"] == ["Most of your usage is during the day"]


@pytest.mark.asyncio
async def test_breakdown(client: AsyncClient, auth_headers):
    await client.post(
        "/api/devices",
        json={"device_name": "TV", "device_category": "tv", "estimated_annual_cost": "$60"},
        headers=auth_headers,
    )
    bill_id = (await _record(client, auth_headers))["bill"]["id"]

    resp = await client.get(f"/api/bills/{bill_id}/breakdown", headers=auth_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["tariffs"]) == 4
    assert data["cost_breakdown"]["energy_costs"] == 20.7
    assert data["cost_breakdown"]["total"] == 25.06
    assert data["your_devices"] == [
        {"name": "TV", "category": "tv", "estimated_monthly_cost": 5.0}
    ]
    assert data["recommendations"] == ["Most of your usage is during the day"]


@pytest.mark.asyncio
async def test_unknown_bill(client: AsyncClient, auth_headers):
    assert (await client.get("/api/bills/42", headers=auth_headers)).status_code == 404
    assert (await client.get("/api/bills/42/breakdown", headers=auth_headers)).status_code == 404
