"""Electricity bill routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.api.deps import get_current_user
from homewatt.database import get_db
from homewatt.models.user import User
from homewatt.schemas.bill import BillBreakdown, BillCreate, BillDetail, BillList, BillScanResult
from homewatt.services import get_bill_service, get_device_service

router = APIRouter()


@router.post("", response_model=BillScanResult, status_code=201)
async def record_bill(
    body: BillCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Store an extracted bill and relate it to the saved devices."""
    devices = await get_device_service().active_devices(db, user.id)
    return await get_bill_service().record(db, user.id, body.model_dump(), devices)


@router.get("", response_model=BillList)
async def list_bills(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """All bills, newest first."""
    return await get_bill_service().list_bills(db, user.id)


@router.get("/{bill_id}", response_model=BillDetail)
async def get_bill(
    bill_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    bill = await get_bill_service().get(db, user.id, bill_id)
    if bill is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bill not found")
    return bill


@router.get("/{bill_id}/breakdown", response_model=BillBreakdown)
async def bill_breakdown(
    bill_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Tariff and cost breakdown with per-device monthly estimates."""
    devices = await get_device_service().active_devices(db, user.id)
    breakdown = await get_bill_service().breakdown(db, user.id, bill_id, devices)
    if breakdown is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Bill not found")
    return breakdown
