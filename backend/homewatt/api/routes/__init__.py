"""API route registration."""

from fastapi import APIRouter

from homewatt.api.routes import analyses, bills, devices, health, insights, profile

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(devices.router, tags=["devices"])
api_router.include_router(analyses.router, tags=["analyses"])
api_router.include_router(insights.router, tags=["insights"])
api_router.include_router(bills.router, prefix="/bills", tags=["bills"])
