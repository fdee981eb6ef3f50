"""Saved device inventory routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.api.deps import get_current_user
from homewatt.database import get_db
from homewatt.models.device import DEVICE_CATEGORIES
from homewatt.models.user import User
from homewatt.schemas.device import DeviceCategories, DeviceCreate, DeviceList, DeviceOut, DeviceUpdate
from homewatt.services import get_analysis_service, get_device_service

router = APIRouter()


@router.get("/device/categories", response_model=DeviceCategories)
async def device_categories():
    """Supported device categories (public)."""
    return {"categories": list(DEVICE_CATEGORIES)}


@router.post("/devices", response_model=DeviceOut, status_code=201)
async def save_device(
    body: DeviceCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Save a device to the user's inventory, optionally from one of their analyses."""
    analysis = None
    if body.device_analysis_id is not None:
        analysis = await get_analysis_service().get_record(db, user.id, body.device_analysis_id)
        if analysis is None:
            raise HTTPException(
                status_code=422,
                detail="Device analysis not found",
            )
    return await get_device_service().create(db, user.id, body.model_dump(), analysis)


@router.get("/devices", response_model=DeviceList)
async def list_devices(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """All active devices, newest first."""
    return await get_device_service().list_devices(db, user.id)


@router.get("/devices/{device_id}", response_model=DeviceOut)
async def get_device(
    device_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    device = await get_device_service().get(db, user.id, device_id)
    if device is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return device


@router.put("/devices/{device_id}", response_model=DeviceOut)
async def update_device(
    device_id: int,
    body: DeviceUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Rename, relocate or (de)activate a device."""
    device = await get_device_service().update(
        db, user.id, device_id, body.model_dump(exclude_unset=True)
    )
    if device is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return device


@router.delete("/devices/{device_id}")
async def remove_device(
    device_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Soft delete — the device is kept but marked inactive."""
    if not await get_device_service().deactivate(db, user.id, device_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return {"status": "ok", "message": "Device removed successfully"}
