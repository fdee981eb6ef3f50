"""Fold device records into totals, group breakdowns and rankings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from homewatt.insights.extraction import extract_optional, extract_value
from homewatt.models.device import UserDevice
from homewatt.schemas.insights import GroupStats, TopConsumer

TOP_CONSUMER_LIMIT = 3
DAYS_PER_MONTH = 30
MONTHS_PER_YEAR = 12
UNSPECIFIED_LOCATION = "unspecified"


def round2(value: float | None) -> float | None:
    return round(value, 2) if value is not None else None


def _sum_present(values: Iterable[float | None]) -> float | None:
    """Sum the values that exist. None when nothing contributed."""
    total = None
    for value in values:
        if value is None:
            continue
        total = value if total is None else total + value
    return total


def active_devices(devices: Iterable[UserDevice]) -> list[UserDevice]:
    return [d for d in devices if d.is_active]


def monthly_cost(device: UserDevice) -> float | None:
    annual = extract_optional(device.estimated_annual_cost)
    return annual / MONTHS_PER_YEAR if annual is not None else None


def monthly_kwh(device: UserDevice) -> float | None:
    daily = extract_optional(device.daily_kwh)
    return daily * DAYS_PER_MONTH if daily is not None else None


@dataclass
class DeviceTotals:
    """Full-precision sums over one user's active devices."""
    device_count: int
    daily_kwh: float | None = None
    annual_kwh: float | None = None
    annual_cost: float | None = None

    @property
    def average_annual_cost(self) -> float | None:
        if self.device_count == 0 or self.annual_cost is None:
            return None
        return self.annual_cost / self.device_count

    @property
    def monthly_cost(self) -> float | None:
        if self.annual_cost is None:
            return None
        return self.annual_cost / MONTHS_PER_YEAR

    @property
    def monthly_kwh(self) -> float | None:
        if self.daily_kwh is None:
            return None
        return self.daily_kwh * DAYS_PER_MONTH


def compute_totals(devices: Sequence[UserDevice]) -> DeviceTotals:
    return DeviceTotals(
        device_count=len(devices),
        daily_kwh=_sum_present(extract_optional(d.daily_kwh) for d in devices),
        annual_kwh=_sum_present(extract_optional(d.annual_kwh) for d in devices),
        annual_cost=_sum_present(extract_optional(d.estimated_annual_cost) for d in devices),
    )


def group_breakdown(devices: Sequence[UserDevice], key: str) -> dict[str, GroupStats]:
    """Count and monthly totals per group, in first-seen order.

    ``key`` is the device attribute to group on (``device_category`` or
    ``location``). Devices without a value land in ``unspecified``.
    """
    groups: dict[str, list[UserDevice]] = {}
    for device in devices:
        name = getattr(device, key) or UNSPECIFIED_LOCATION
        groups.setdefault(name, []).append(device)

    return {
        name: GroupStats(
            count=len(members),
            monthly_cost=round2(_sum_present(monthly_cost(d) for d in members)),
            monthly_kwh=round2(_sum_present(monthly_kwh(d) for d in members)),
        )
        for name, members in groups.items()
    }


def _ranking_cost(device: UserDevice) -> float:
    if not device.estimated_annual_cost:
        return 0.0
    return extract_value(device.estimated_annual_cost)


def top_consumers(
    devices: Sequence[UserDevice], limit: int = TOP_CONSUMER_LIMIT
) -> list[TopConsumer]:
    """Most expensive devices by annual cost; ties keep input order."""
    ranked = sorted(devices, key=_ranking_cost, reverse=True)
    return [
        TopConsumer(
            id=d.id,
            name=d.device_name,
            category=d.device_category,
            annual_kwh=d.annual_kwh,
            estimated_annual_cost=d.estimated_annual_cost,
            monthly_cost=round2(monthly_cost(d)),
            daily_kwh=d.daily_kwh or None,
        )
        for d in ranked[:limit]
    ]


def count_high_cost(devices: Iterable[UserDevice], monthly_threshold: float) -> int:
    """Devices whose estimated monthly cost is strictly above the threshold."""
    count = 0
    for device in devices:
        cost = monthly_cost(device)
        if cost is not None and cost > monthly_threshold:
            count += 1
    return count


def count_category(devices: Iterable[UserDevice], category: str) -> int:
    return sum(1 for d in devices if d.device_category == category)


def device_share_of_bill(devices: Sequence[UserDevice], bill_kwh: float | None) -> int | None:
    """Percent of a bill's kWh explained by the devices' monthly estimate, capped at 100."""
    if not bill_kwh:
        return None
    device_kwh = _sum_present(monthly_kwh(d) for d in devices)
    if not device_kwh:
        return None
    return min(100, round(device_kwh / bill_kwh * 100))
