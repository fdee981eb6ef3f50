"""Household profile read/update."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.models.user import User
from homewatt.schemas.profile import HouseholdProfile

logger = logging.getLogger(__name__)


class ProfileService:

    def profile(self, user: User) -> dict[str, Any]:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "household": HouseholdProfile.model_validate(user).model_dump(),
        }

    async def update_household(
        self, db: AsyncSession, user: User, changes: dict[str, Any]
    ) -> dict[str, Any]:
        for field, value in changes.items():
            setattr(user, field, value)
        await db.commit()
        await db.refresh(user)
        logger.info("User %s updated household fields: %s", user.id, ", ".join(sorted(changes)))
        return self.profile(user)
