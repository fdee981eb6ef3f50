"""Electricity bill snapshots extracted from scanned bills."""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from homewatt.models.base import Base

# Tariff buckets: A1/A2 = day/night, B1/B2 = standard/peak
TARIFF_BUCKETS = ("a1_b1", "a2_b1", "a1_b2", "a2_b2")


class BillAnalysis(Base):
    """One monthly bill. Written once per scan, never updated."""
    __tablename__ = "bill_analyses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    bill_month: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)  # "November 2025"

    # Consumption (kWh)
    total_kwh: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    a1_b1_kwh: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    a2_b1_kwh: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    a1_b2_kwh: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    a2_b2_kwh: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Unit prices (per kWh)
    price_a1_b1: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    price_a2_b1: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    price_a1_b2: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    price_a2_b2: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Amounts
    amount_a1_b1: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    amount_a2_b1: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    amount_a1_b2: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    amount_a2_b2: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    standing_charge: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    net_total: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    vat: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    bill_total: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    outstanding_debt: Mapped[Optional[float]] = mapped_column(Float, default=0.0, nullable=True)

    # Opaque AI payloads, passed through untouched
    human_readable_breakdown: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    device_cost_estimates: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    insights: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<BillAnalysis(id={self.id}, month='{self.bill_month}', total_kwh={self.total_kwh})>"
