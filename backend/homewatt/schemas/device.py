"""Saved device schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from homewatt.models.device import DEVICE_CATEGORIES


class DeviceCreate(BaseModel):
    """Save a device, usually copied from a device analysis result."""
    device_name: str = Field(min_length=1, max_length=255)
    device_category: str = Field(max_length=100)
    device_brand: str | None = Field(default=None, max_length=100)
    device_model: str | None = Field(default=None, max_length=255)
    location: str | None = Field(default=None, max_length=100)
    typical_wattage: str | None = Field(default=None, max_length=50)
    daily_kwh: str | None = Field(default=None, max_length=50)
    annual_kwh: str | None = Field(default=None, max_length=50)
    estimated_annual_cost: str | None = Field(default=None, max_length=50)
    energy_saving_tips: list[str] | None = None
    device_analysis_id: int | None = None

    @field_validator("device_category")
    @classmethod
    def known_category(cls, value: str) -> str:
        if value not in DEVICE_CATEGORIES:
            raise ValueError(f"unknown device category '{value}'")
        return value


class DeviceUpdate(BaseModel):
    """Partial update — only these fields are editable."""
    device_name: str | None = Field(default=None, min_length=1, max_length=255)
    location: str | None = Field(default=None, max_length=100)
    is_active: bool | None = None


class DeviceEnergy(BaseModel):
    typical_wattage: str | None = None
    daily_kwh: str | None = None
    annual_kwh: str | None = None
    estimated_annual_cost: str | None = None


class DeviceOut(BaseModel):
    id: int
    name: str
    category: str
    brand: str | None = None
    model: str | None = None
    location: str | None = None
    device_analysis_id: int | None = None
    energy: DeviceEnergy
    tips: list[str] | None = None
    is_active: bool
    added_at: datetime | None = None


class DeviceList(BaseModel):
    total: int
    devices: list[DeviceOut]


class DeviceCategories(BaseModel):
    categories: list[str]
