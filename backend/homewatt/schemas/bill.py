"""Electricity bill schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class BillConsumption(BaseModel):
    total_kwh: float | None = Field(default=None, ge=0)
    a1_b1_kwh: float | None = Field(default=None, ge=0)
    a2_b1_kwh: float | None = Field(default=None, ge=0)
    a1_b2_kwh: float | None = Field(default=None, ge=0)
    a2_b2_kwh: float | None = Field(default=None, ge=0)


class BillPricing(BaseModel):
    price_a1_b1: float | None = Field(default=None, ge=0)
    price_a2_b1: float | None = Field(default=None, ge=0)
    price_a1_b2: float | None = Field(default=None, ge=0)
    price_a2_b2: float | None = Field(default=None, ge=0)


class BillCosts(BaseModel):
    amount_a1_b1: float | None = None
    amount_a2_b1: float | None = None
    amount_a1_b2: float | None = None
    amount_a2_b2: float | None = None
    standing_charge: float | None = None
    net_total: float | None = None
    vat: float | None = None
    bill_total: float | None = None
    outstanding_debt: float | None = None


class BillCreate(BaseModel):
    """Structured extraction of a scanned bill.

    Only ``consumption``, ``pricing`` and ``costs`` are interpreted. The other
    payloads are stored as-is.
    """
    bill_month: str | None = Field(default=None, max_length=50)
    consumption: BillConsumption = BillConsumption()
    pricing: BillPricing = BillPricing()
    costs: BillCosts = BillCosts()
    human_readable_breakdown: dict[str, Any] | None = None
    device_estimates: dict[str, Any] | None = None
    insights: list[Any] | None = None


class BillSummary(BaseModel):
    id: int
    month: str | None = None
    total_kwh: float | None = None
    total_cost: float | None = None
    analyzed_at: datetime | None = None


class BillList(BaseModel):
    total: int
    bills: list[BillSummary]


class BillAmounts(BaseModel):
    daytime_kwh: float | None = None
    nighttime_kwh: float | None = None
    net_total: float | None = None
    vat: float | None = None
    standing_charge: float | None = None
    outstanding_debt: float | None = None


class BillDetail(BillSummary):
    breakdown: BillAmounts
    human_readable: dict[str, Any] | None = None
    insights: list[Any] | None = None
    device_estimates: dict[str, Any] | None = None


class TariffLine(BaseModel):
    name: str
    kwh: float | None = None
    price_per_kwh: float | None = None
    total_cost: float | None = None
    percentage: float | None = None


class CostBreakdown(BaseModel):
    energy_costs: float
    standing_charge: float | None = None
    subtotal: float | None = None
    vat: float | None = None
    total: float | None = None


class DeviceCostEstimate(BaseModel):
    name: str
    category: str
    estimated_monthly_cost: float | None = None


class DeviceCorrelation(BaseModel):
    """How the saved devices relate to a bill."""
    count: int
    estimated_monthly_cost: float | None = None
    share_of_consumption: int | None = None  # percent of the bill's kWh
    message: str


class BillBreakdown(BaseModel):
    total_kwh: float | None = None
    tariffs: list[TariffLine]
    cost_breakdown: CostBreakdown
    your_devices: list[DeviceCostEstimate]
    recommendations: list[Any] | None = None


class BillScanResult(BaseModel):
    bill: BillDetail
    tariffs: list[TariffLine]
    your_devices: DeviceCorrelation
