"""Saved device inventory — create, list, partial update, soft delete."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.models.device import UserDevice
from homewatt.models.device_analysis import DeviceAnalysis

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("device_name", "location", "is_active")
# Filled from the linked analysis when the request leaves them out
SEEDED_FIELDS = (
    "device_brand",
    "device_model",
    "typical_wattage",
    "daily_kwh",
    "annual_kwh",
    "estimated_annual_cost",
    "energy_saving_tips",
)


def device_to_dict(device: UserDevice) -> dict[str, Any]:
    return {
        "id": device.id,
        "name": device.device_name,
        "category": device.device_category,
        "brand": device.device_brand,
        "model": device.device_model,
        "location": device.location,
        "device_analysis_id": device.device_analysis_id,
        "energy": {
            "typical_wattage": device.typical_wattage,
            "daily_kwh": device.daily_kwh,
            "annual_kwh": device.annual_kwh,
            "estimated_annual_cost": device.estimated_annual_cost,
        },
        "tips": device.energy_saving_tips,
        "is_active": bool(device.is_active),
        "added_at": device.created_at,
    }


class DeviceService:
    """CRUD over ``user_devices``, always scoped to one user."""

    async def active_devices(self, db: AsyncSession, user_id: str) -> list[UserDevice]:
        """Active devices, newest first."""
        result = await db.execute(
            select(UserDevice)
            .where(UserDevice.user_id == user_id, UserDevice.is_active.is_(True))
            .order_by(UserDevice.created_at.desc(), UserDevice.id.desc())
        )
        return list(result.scalars().all())

    async def _get(self, db: AsyncSession, user_id: str, device_id: int) -> UserDevice | None:
        result = await db.execute(
            select(UserDevice).where(UserDevice.id == device_id, UserDevice.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        user_id: str,
        data: dict[str, Any],
        analysis: DeviceAnalysis | None = None,
    ) -> dict[str, Any]:
        """Save a device. Fields the caller left empty are seeded from ``analysis``."""
        if analysis is not None:
            data = {**data, "device_analysis_id": analysis.id}
            for field in SEEDED_FIELDS:
                if data.get(field) is None:
                    data[field] = getattr(analysis, field)
        device = UserDevice(user_id=user_id, is_active=True, **data)
        db.add(device)
        await db.commit()
        await db.refresh(device)
        logger.info("User %s saved device %d (%s)", user_id, device.id, device.device_category)
        return device_to_dict(device)

    async def list_devices(self, db: AsyncSession, user_id: str) -> dict[str, Any]:
        devices = [device_to_dict(d) for d in await self.active_devices(db, user_id)]
        return {"total": len(devices), "devices": devices}

    async def get(self, db: AsyncSession, user_id: str, device_id: int) -> dict[str, Any] | None:
        device = await self._get(db, user_id, device_id)
        return device_to_dict(device) if device else None

    async def update(
        self, db: AsyncSession, user_id: str, device_id: int, changes: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Apply a partial update. Only name, location and the active flag change."""
        device = await self._get(db, user_id, device_id)
        if device is None:
            return None
        for field in EDITABLE_FIELDS:
            if field not in changes:
                continue
            # location may be cleared, name and flag may not
            if changes[field] is None and field != "location":
                continue
            setattr(device, field, changes[field])
        await db.commit()
        await db.refresh(device)
        return device_to_dict(device)

    async def deactivate(self, db: AsyncSession, user_id: str, device_id: int) -> bool:
        """Soft delete: the row stays, flagged inactive."""
        device = await self._get(db, user_id, device_id)
        if device is None:
            return False
        device.is_active = False
        await db.commit()
        logger.info("User %s removed device %d", user_id, device_id)
        return True
