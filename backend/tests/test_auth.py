"""Tests for bearer-token authentication."""

import pytest
from fastapi import HTTPException
from httpx import AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.api.deps import get_current_user
from homewatt.config import settings


def _make_token(user_id: str, secret: str = settings.secret_key) -> str:
    """Create a JWT token for testing."""
    return jwt.encode({"sub": user_id}, secret, algorithm=settings.token_algorithm)


@pytest.mark.asyncio
async def test_missing_token_is_rejected(client: AsyncClient):
    resp = await client.get("/api/devices")
    assert resp.status_code == 401
    assert resp.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_wrong_secret_is_rejected(client: AsyncClient, user):
    token = _make_token(user.id, secret="not-the-secret")
    resp = await client.get("/api/devices", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_valid_token_resolves_user(db_session: AsyncSession, user):
    resolved = await get_current_user(_make_token(user.id), db_session)
    assert resolved.id == user.id


@pytest.mark.asyncio
async def test_unknown_user_is_rejected(db_session: AsyncSession):
    with pytest.raises(HTTPException) as exc_info:
        await get_current_user(_make_token("ghost"), db_session)
    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_token_without_subject_is_rejected(db_session: AsyncSession):
    token = jwt.encode({"name": "x"}, settings.secret_key, algorithm=settings.token_algorithm)
    with pytest.raises(HTTPException) as exc_info:
        await get_current_user(token, db_session)
    assert exc_info.value.detail == "Invalid token: no subject claim"
