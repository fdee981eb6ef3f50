"""Saved appliance inventory."""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from homewatt.models.base import Base

DEVICE_CATEGORIES = (
    "laptop",
    "desktop",
    "monitor",
    "tv",
    "refrigerator",
    "air_conditioner",
    "microwave",
    "washing_machine",
    "dryer",
    "dishwasher",
    "printer",
    "scanner",
    "router",
    "gaming_console",
    "other",
)


class UserDevice(Base):
    """An appliance a user saved to their inventory.

    Energy columns hold measurement strings exactly as the device analysis
    produced them ("1.2 - 2.0", "$45", "N/A"). NULL means unknown.
    """
    __tablename__ = "user_devices"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    device_name: Mapped[str] = mapped_column(String(255), nullable=False)
    device_category: Mapped[str] = mapped_column(String(100), nullable=False)
    device_brand: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    device_model: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)  # Kitchen, Bedroom, ...
    device_analysis_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("device_analyses.id", ondelete="SET NULL"), nullable=True
    )

    typical_wattage: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    daily_kwh: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    annual_kwh: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    estimated_annual_cost: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    energy_saving_tips: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, onupdate=func.now(), nullable=True
    )

    def __repr__(self) -> str:
        return f"<UserDevice(id={self.id}, name='{self.device_name}', category='{self.device_category}')>"
