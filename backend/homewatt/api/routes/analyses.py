"""Device analysis routes."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.api.deps import get_current_user
from homewatt.database import get_db
from homewatt.models.user import User
from homewatt.schemas.analysis import AnalysisCreate, AnalysisHistory, AnalysisOut
from homewatt.services import get_analysis_service

router = APIRouter()


@router.post("/device/analysis", response_model=AnalysisOut, status_code=201)
async def record_analysis(
    body: AnalysisCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Store a recognizer result so a device can be saved from it."""
    return await get_analysis_service().record(db, user.id, body.model_dump())


@router.get("/device/analysis/{analysis_id}", response_model=AnalysisOut)
async def get_analysis(
    analysis_id: int,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    analysis = await get_analysis_service().get(db, user.id, analysis_id)
    if analysis is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Analysis not found")
    return analysis


@router.get("/device/history", response_model=AnalysisHistory)
async def analysis_history(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """All analyses, newest first."""
    return await get_analysis_service().history(db, user.id)
