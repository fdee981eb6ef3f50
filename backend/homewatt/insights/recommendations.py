"""Rule-based advisory messages.

Two rule sets exist: the dashboard set (onboarding, bill, high-cost
devices, season) and the device-insights set (aggregate cost and
appliance mix). Within a set every matching rule fires, always in the
order listed here.
"""

from __future__ import annotations

from collections.abc import Sequence

from homewatt.insights import aggregator
from homewatt.insights.aggregator import DeviceTotals
from homewatt.models.bill import BillAnalysis
from homewatt.models.device import UserDevice
from homewatt.schemas.insights import Recommendation

ONBOARDING_DEVICE_TARGET = 5
DAYTIME_SHARE_THRESHOLD = 70.0  # percent
SHIFTABLE_FRACTION = 0.30
HIGH_MONTHLY_COST = 10.0
HIGH_ANNUAL_TOTAL = 500.0
MAX_AIR_CONDITIONERS = 2
MAX_REFRIGERATORS = 1

# Used when a bill carries no unit price for the bucket
DEFAULT_DAYTIME_PRICE = 0.0779
DEFAULT_NIGHTTIME_PRICE = 0.0334

WINTER_MONTHS = (12, 1, 2)
SUMMER_MONTHS = (6, 7, 8)


def daytime_share(bill: BillAnalysis) -> float | None:
    """Percent of the bill's kWh billed at the daytime standard rate."""
    if not bill.total_kwh or bill.a1_b1_kwh is None:
        return None
    return bill.a1_b1_kwh / bill.total_kwh * 100


def nighttime_shift_savings(bill: BillAnalysis) -> float:
    """Monthly saving from moving 30% of daytime kWh to the night rate."""
    day_price = bill.price_a1_b1 if bill.price_a1_b1 is not None else DEFAULT_DAYTIME_PRICE
    night_price = bill.price_a2_b1 if bill.price_a2_b1 is not None else DEFAULT_NIGHTTIME_PRICE
    return (bill.a1_b1_kwh or 0.0) * SHIFTABLE_FRACTION * (day_price - night_price)


# --- Dashboard rule set ---


def _device_count_rule(count: int) -> Recommendation | None:
    if count == 0:
        return Recommendation(
            type="action",
            title="Start Tracking Devices",
            message="Scan your devices to see which ones are using the most energy!",
            priority="high",
            icon="📸",
        )
    if count < ONBOARDING_DEVICE_TARGET:
        return Recommendation(
            type="info",
            title="Add More Devices",
            message=(
                f"You have {count} devices tracked. Scan more devices to get a "
                "complete picture of your energy usage."
            ),
            priority="low",
            icon="📱",
        )
    return None


def _bill_rule(latest_bill: BillAnalysis | None, currency: str) -> Recommendation | None:
    if latest_bill is None:
        return Recommendation(
            type="action",
            title="Upload Your Electricity Bill",
            message="Upload a photo of your electricity bill to see detailed breakdowns and insights.",
            priority="high",
            icon="📄",
        )

    share = daytime_share(latest_bill)
    if share is None or share <= DAYTIME_SHARE_THRESHOLD:
        return None
    savings = nighttime_shift_savings(latest_bill)
    return Recommendation(
        type="savings",
        title="Shift to Nighttime Usage",
        message=(
            f"You use {share:.1f}% of your electricity during the day. Try running heavy "
            "appliances (washing machine, dishwasher) between 22:00-06:00 to save "
            f"approximately {currency}{savings:.2f} per month."
        ),
        priority="medium",
        icon="🌙",
    )


def _high_cost_devices_rule(devices: Sequence[UserDevice], currency: str) -> Recommendation | None:
    count = aggregator.count_high_cost(devices, HIGH_MONTHLY_COST)
    if count == 0:
        return None
    return Recommendation(
        type="warning",
        title="High Energy Consumers Detected",
        message=(
            f"You have {count} device(s) costing over {currency}{HIGH_MONTHLY_COST:.0f}/month. "
            "Consider energy-efficient alternatives or adjust usage patterns."
        ),
        priority="high",
        icon="⚠️",
    )


def _seasonal_rule(month: int, currency: str) -> Recommendation | None:
    if month in WINTER_MONTHS:
        return Recommendation(
            type="seasonal",
            title="Winter Energy Tips",
            message=(
                "Winter bills are typically higher due to heating. Set your heater to "
                "20-21°C and use a timer to avoid running it overnight."
            ),
            priority="low",
            icon="❄️",
        )
    if month in SUMMER_MONTHS:
        return Recommendation(
            type="seasonal",
            title="Summer Energy Tips",
            message=(
                "Keep your fridge efficient by not overfilling it and ensuring the door "
                f"seals properly. This can save up to {currency}5/month."
            ),
            priority="low",
            icon="☀️",
        )
    return None


def dashboard_recommendations(
    devices: Sequence[UserDevice],
    latest_bill: BillAnalysis | None,
    month: int,
    currency: str = "€",
) -> list[Recommendation]:
    candidates = (
        _device_count_rule(len(devices)),
        _bill_rule(latest_bill, currency),
        _high_cost_devices_rule(devices, currency),
        _seasonal_rule(month, currency),
    )
    return [item for item in candidates if item is not None]


# --- Device-insights rule set ---


def device_recommendations(
    devices: Sequence[UserDevice], totals: DeviceTotals
) -> list[Recommendation]:
    items: list[Recommendation] = []

    if totals.annual_cost is not None and totals.annual_cost > HIGH_ANNUAL_TOTAL:
        items.append(Recommendation(
            type="high_cost_alert",
            title="High Energy Consumption Detected",
            message="Your devices consume significant energy. Focus on the highest consumers first.",
            priority="high",
        ))

    if aggregator.count_category(devices, "air_conditioner") > MAX_AIR_CONDITIONERS:
        items.append(Recommendation(
            type="heating_upgrade",
            title="Consider Heat Pump Upgrade",
            message="Switching to a heat pump could reduce heating costs by up to 50%.",
            priority="medium",
        ))

    if aggregator.count_category(devices, "refrigerator") > MAX_REFRIGERATORS:
        items.append(Recommendation(
            type="appliance_optimization",
            title="Multiple Refrigerators Detected",
            message="Consider unplugging secondary refrigerators when not needed to save energy.",
            priority="medium",
        ))

    items.append(Recommendation(
        type="general_tip",
        title="Smart Power Strips",
        message="Use smart power strips to eliminate phantom power draw from electronics.",
        priority="low",
    ))
    return items
