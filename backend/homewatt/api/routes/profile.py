"""Household profile routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.api.deps import get_current_user
from homewatt.database import get_db
from homewatt.models.user import User
from homewatt.schemas.profile import HouseholdUpdate, ProfileOut
from homewatt.services import get_profile_service

router = APIRouter()


@router.get("", response_model=ProfileOut)
async def read_profile(user: User = Depends(get_current_user)):
    return get_profile_service().profile(user)


@router.put("", response_model=ProfileOut)
async def update_profile(
    body: HouseholdUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update household fields. Omitted fields keep their value."""
    return await get_profile_service().update_household(
        db, user, body.model_dump(exclude_unset=True, exclude_none=True)
    )
