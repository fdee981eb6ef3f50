"""Fetches a user's records and hands them to the insights engine."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.config import settings
from homewatt.insights import build_dashboard_stats, build_device_insights
from homewatt.models.user import User
from homewatt.schemas.insights import DashboardStats, DeviceInsights
from homewatt.schemas.profile import HouseholdProfile
from homewatt.services.bill_service import BillService
from homewatt.services.device_service import DeviceService

logger = logging.getLogger(__name__)


class InsightsService:
    """Read-only views over devices, bills and the household profile."""

    def __init__(self, device_service: DeviceService, bill_service: BillService) -> None:
        self._devices = device_service
        self._bills = bill_service

    async def device_insights(self, db: AsyncSession, user: User) -> DeviceInsights:
        devices = await self._devices.active_devices(db, user.id)
        profile = HouseholdProfile.model_validate(user)
        return build_device_insights(devices, profile, currency=settings.currency_symbol)

    async def dashboard_stats(self, db: AsyncSession, user: User, now: datetime) -> DashboardStats:
        devices = await self._devices.active_devices(db, user.id)
        bills = await self._bills.bills_newest_first(db, user.id)
        logger.debug(
            "Dashboard for %s: %d devices, %d bills, month %d",
            user.id, len(devices), len(bills), now.month,
        )
        return build_dashboard_stats(devices, bills, now.month, currency=settings.currency_symbol)
