"""Bill snapshots — recording scanned bills and reading them back."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.config import settings
from homewatt.insights import aggregator
from homewatt.insights.aggregator import round2
from homewatt.models.bill import TARIFF_BUCKETS, BillAnalysis
from homewatt.models.device import UserDevice

logger = logging.getLogger(__name__)

TARIFF_NAMES = {
    "a1_b1": "A1/B1 - Daytime (Standard)",
    "a2_b1": "A2/B1 - Nighttime (22:00-06:00)",
    "a1_b2": "A1/B2 - Daytime (Peak)",
    "a2_b2": "A2/B2 - Nighttime (Peak)",
}


def _percentage(kwh: float | None, total_kwh: float | None) -> float | None:
    if kwh is None or not total_kwh:
        return None
    return round(kwh / total_kwh * 100, 1)


def tariff_lines(bill: BillAnalysis, buckets: tuple[str, ...] = TARIFF_BUCKETS) -> list[dict[str, Any]]:
    lines = []
    for bucket in buckets:
        kwh = getattr(bill, f"{bucket}_kwh")
        lines.append({
            "name": TARIFF_NAMES[bucket],
            "kwh": kwh,
            "price_per_kwh": getattr(bill, f"price_{bucket}"),
            "total_cost": round2(getattr(bill, f"amount_{bucket}")),
            "percentage": _percentage(kwh, bill.total_kwh),
        })
    return lines


def bill_summary(bill: BillAnalysis) -> dict[str, Any]:
    return {
        "id": bill.id,
        "month": bill.bill_month,
        "total_kwh": bill.total_kwh,
        "total_cost": round2(bill.bill_total),
        "analyzed_at": bill.created_at,
    }


def bill_detail(bill: BillAnalysis) -> dict[str, Any]:
    return {
        **bill_summary(bill),
        "breakdown": {
            "daytime_kwh": bill.a1_b1_kwh,
            "nighttime_kwh": bill.a2_b1_kwh,
            "net_total": round2(bill.net_total),
            "vat": round2(bill.vat),
            "standing_charge": round2(bill.standing_charge),
            "outstanding_debt": round2(bill.outstanding_debt),
        },
        "human_readable": bill.human_readable_breakdown,
        "insights": bill.insights,
        "device_estimates": bill.device_cost_estimates,
    }


def device_correlation(devices: list[UserDevice], bill: BillAnalysis) -> dict[str, Any]:
    """Relate the user's active devices to one bill's consumption."""
    active = aggregator.active_devices(devices)
    totals = aggregator.compute_totals(active)
    share = aggregator.device_share_of_bill(active, bill.total_kwh)

    if not active:
        message = "Scan your devices to see which ones are using the most energy!"
    elif share is None:
        message = "Your saved devices have no consumption estimates to compare with this bill yet."
    else:
        message = (
            "Based on your scanned devices, we estimate they account for "
            f"approximately {share}% of your consumption."
        )
    return {
        "count": len(active),
        "estimated_monthly_cost": round2(totals.monthly_cost),
        "share_of_consumption": share,
        "message": message,
    }


class BillService:
    """Bill persistence plus the read views built from stored bills."""

    async def bills_newest_first(self, db: AsyncSession, user_id: str) -> list[BillAnalysis]:
        result = await db.execute(
            select(BillAnalysis)
            .where(BillAnalysis.user_id == user_id)
            .order_by(BillAnalysis.created_at.desc(), BillAnalysis.id.desc())
        )
        return list(result.scalars().all())

    async def _get(self, db: AsyncSession, user_id: str, bill_id: int) -> BillAnalysis | None:
        result = await db.execute(
            select(BillAnalysis).where(BillAnalysis.id == bill_id, BillAnalysis.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def record(
        self,
        db: AsyncSession,
        user_id: str,
        extraction: dict[str, Any],
        devices: list[UserDevice],
    ) -> dict[str, Any]:
        """Store one extracted bill and correlate it with the user's devices.

        Missing quantities and amounts are stored as 0, missing unit prices
        take the configured default tariff.
        """
        consumption = extraction.get("consumption") or {}
        pricing = extraction.get("pricing") or {}
        costs = extraction.get("costs") or {}
        default_tariff = settings.default_tariff

        values: dict[str, Any] = {}
        for field in ("total_kwh", *(f"{b}_kwh" for b in TARIFF_BUCKETS)):
            values[field] = consumption.get(field) or 0.0
        for field, default in default_tariff.items():
            price = pricing.get(field)
            values[field] = price if price is not None else default
        for field in (
            *(f"amount_{b}" for b in TARIFF_BUCKETS),
            "standing_charge", "net_total", "vat", "bill_total", "outstanding_debt",
        ):
            values[field] = costs.get(field) or 0.0

        bill = BillAnalysis(
            user_id=user_id,
            bill_month=extraction.get("bill_month"),
            human_readable_breakdown=extraction.get("human_readable_breakdown") or {},
            device_cost_estimates=extraction.get("device_estimates"),
            insights=extraction.get("insights") or [],
            **values,
        )
        db.add(bill)
        await db.commit()
        await db.refresh(bill)
        logger.info("User %s recorded bill %d (%s, %.2f kWh)", user_id, bill.id, bill.bill_month, bill.total_kwh)

        return {
            "bill": bill_detail(bill),
            "tariffs": tariff_lines(bill, ("a1_b1", "a2_b1")),
            "your_devices": device_correlation(devices, bill),
        }

    async def list_bills(self, db: AsyncSession, user_id: str) -> dict[str, Any]:
        bills = [bill_summary(b) for b in await self.bills_newest_first(db, user_id)]
        return {"total": len(bills), "bills": bills}

    async def get(self, db: AsyncSession, user_id: str, bill_id: int) -> dict[str, Any] | None:
        bill = await self._get(db, user_id, bill_id)
        return bill_detail(bill) if bill else None

    async def breakdown(
        self, db: AsyncSession, user_id: str, bill_id: int, devices: list[UserDevice]
    ) -> dict[str, Any] | None:
        """Tariff split, cost lines and per-device monthly estimates for one bill."""
        bill = await self._get(db, user_id, bill_id)
        if bill is None:
            return None

        energy_costs = sum(getattr(bill, f"amount_{b}") or 0.0 for b in TARIFF_BUCKETS)
        return {
            "total_kwh": bill.total_kwh,
            "tariffs": tariff_lines(bill),
            "cost_breakdown": {
                "energy_costs": round(energy_costs, 2),
                "standing_charge": round2(bill.standing_charge),
                "subtotal": round2(bill.net_total),
                "vat": round2(bill.vat),
                "total": round2(bill.bill_total),
            },
            "your_devices": [
                {
                    "name": d.device_name,
                    "category": d.device_category,
                    "estimated_monthly_cost": round2(aggregator.monthly_cost(d)),
                }
                for d in aggregator.active_devices(devices)
            ],
            "recommendations": bill.insights,
        }
