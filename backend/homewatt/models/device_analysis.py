"""Device analyses: what the photo recognizer said about one appliance."""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from homewatt.models.base import Base


class DeviceAnalysis(Base):
    """One recognition result. Written once, never updated.

    Energy columns keep the recognizer's measurement strings. A saved device
    may point back at the analysis it was seeded from.
    """
    __tablename__ = "device_analyses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image_path: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    device_category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    device_brand: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    device_model: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    confidence_level: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)  # high/medium/low
    fallback_level: Mapped[str] = mapped_column(String(20), default="generic", nullable=False)  # specific/category/generic

    typical_wattage: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    daily_kwh: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    annual_kwh: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    estimated_annual_cost: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    energy_saving_tips: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    raw_response: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return (
            f"<DeviceAnalysis(id={self.id}, category='{self.device_category}', "
            f"fallback='{self.fallback_level}')>"
        )
