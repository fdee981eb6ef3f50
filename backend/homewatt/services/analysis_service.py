"""Device analyses — recording recognizer output and reading it back."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.models.device_analysis import DeviceAnalysis

logger = logging.getLogger(__name__)

ENERGY_FIELDS = ("typical_wattage", "daily_kwh", "annual_kwh", "estimated_annual_cost")


def analysis_to_dict(analysis: DeviceAnalysis) -> dict[str, Any]:
    raw = analysis.raw_response or {}
    raw_energy = raw.get("energy") or {}
    return {
        "id": analysis.id,
        "device": {
            "category": analysis.device_category,
            "brand": analysis.device_brand,
            "model": analysis.device_model,
            "confidence": analysis.confidence_level,
        },
        "energy": {
            **{field: getattr(analysis, field) for field in ENERGY_FIELDS},
            "idle_wattage": raw_energy.get("idle_wattage"),
            "active_wattage": raw_energy.get("active_wattage"),
        },
        "tips": analysis.energy_saving_tips,
        "fallback_level": analysis.fallback_level,
        "reasoning": raw.get("reasoning"),
        "analyzed_at": analysis.created_at,
    }


class AnalysisService:
    """Persistence for device analyses, scoped to one user."""

    async def get_record(
        self, db: AsyncSession, user_id: str, analysis_id: int
    ) -> DeviceAnalysis | None:
        result = await db.execute(
            select(DeviceAnalysis).where(
                DeviceAnalysis.id == analysis_id, DeviceAnalysis.user_id == user_id
            )
        )
        return result.scalar_one_or_none()

    async def record(self, db: AsyncSession, user_id: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Store one recognizer result.

        Unrecognized identity fields get placeholder values, missing energy
        figures stay empty and the fallback level defaults to ``generic``.
        """
        device = payload.get("device") or {}
        energy = payload.get("energy") or {}

        analysis = DeviceAnalysis(
            user_id=user_id,
            image_path=payload.get("image_path"),
            device_category=device.get("category") or "unknown",
            device_brand=device.get("brand") or "Unknown",
            device_model=device.get("model") or "Unknown",
            confidence_level=device.get("confidence") or "low",
            fallback_level=payload.get("fallback_level") or "generic",
            energy_saving_tips=payload.get("tips") or [],
            raw_response=payload,
            **{field: energy.get(field) for field in ENERGY_FIELDS},
        )
        db.add(analysis)
        await db.commit()
        await db.refresh(analysis)
        logger.info(
            "User %s recorded analysis %d (%s, %s)",
            user_id, analysis.id, analysis.device_category, analysis.fallback_level,
        )
        return analysis_to_dict(analysis)

    async def get(self, db: AsyncSession, user_id: str, analysis_id: int) -> dict[str, Any] | None:
        analysis = await self.get_record(db, user_id, analysis_id)
        return analysis_to_dict(analysis) if analysis else None

    async def history(self, db: AsyncSession, user_id: str) -> dict[str, Any]:
        """All of the user's analyses, newest first."""
        result = await db.execute(
            select(DeviceAnalysis)
            .where(DeviceAnalysis.user_id == user_id)
            .order_by(DeviceAnalysis.created_at.desc(), DeviceAnalysis.id.desc())
        )
        analyses = [analysis_to_dict(a) for a in result.scalars().all()]
        return {"total": len(analyses), "analyses": analyses}
