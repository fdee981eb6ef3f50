"""Test fixtures — in-memory SQLite database, FastAPI test client, auth."""

from datetime import datetime, timezone

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import AsyncSession

from homewatt.api.deps import get_clock
from homewatt.config import settings
from homewatt.database import MEMORY_URL, build_engine, get_db, init_db, session_factory
from homewatt.main import create_app
from homewatt.models import User
from homewatt.services import init_services

# October: no seasonal advice
FIXED_NOW = datetime(2025, 10, 15, 12, 0, tzinfo=timezone.utc)


def _make_token(user_id: str, secret: str = settings.secret_key) -> str:
    """Create a JWT token for testing."""
    return jwt.encode({"sub": user_id}, secret, algorithm=settings.token_algorithm)


@pytest_asyncio.fixture
async def db_session():
    """Provide an async in-memory SQLite session for tests."""
    engine = build_engine(MEMORY_URL)
    await init_db(engine)

    async with session_factory(engine)() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def user(db_session: AsyncSession) -> User:
    """A registered user with a complete household profile."""
    u = User(
        id="user-1",
        name="Alice",
        email="alice@example.com",
        property_ownership="own",
        house_type="apartment",
        number_of_occupants=3,
        number_of_bedrooms=2,
        heating_type="electric",
        property_age="modern",
    )
    db_session.add(u)
    await db_session.commit()
    await db_session.refresh(u)
    return u


@pytest_asyncio.fixture
async def auth_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {_make_token(user.id)}"}


@pytest_asyncio.fixture
async def app(db_session: AsyncSession):
    """Application with the DB session and clock pinned for tests."""
    init_services()
    application = create_app()

    async def _override_db():
        yield db_session

    application.dependency_overrides[get_db] = _override_db
    application.dependency_overrides[get_clock] = lambda: FIXED_NOW
    return application


@pytest_asyncio.fixture
async def client(app):
    """Provide an async test client against the test application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
