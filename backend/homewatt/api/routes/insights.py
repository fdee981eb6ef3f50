"""Insight views — device insights and dashboard stats."""

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.api.deps import get_clock, get_current_user
from homewatt.database import get_db
from homewatt.models.user import User
from homewatt.schemas.insights import DashboardStats, DeviceInsights
from homewatt.services import get_insights_service

router = APIRouter()


@router.get("/insights", response_model=DeviceInsights)
async def device_insights(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Totals, breakdowns and advice over the saved devices."""
    return await get_insights_service().device_insights(db, user)


@router.get("/dashboard/stats", response_model=DashboardStats)
async def dashboard_stats(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    now: datetime = Depends(get_clock),
):
    """Dashboard overview: devices, latest bill with trends, advice."""
    return await get_insights_service().dashboard_stats(db, user, now)
