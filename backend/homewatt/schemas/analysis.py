"""Device analysis schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class RecognizedDevice(BaseModel):
    category: str | None = Field(default=None, max_length=100)
    brand: str | None = Field(default=None, max_length=100)
    model: str | None = Field(default=None, max_length=255)
    confidence: str | None = Field(default=None, max_length=20)


class EstimatedEnergy(BaseModel):
    typical_wattage: str | None = Field(default=None, max_length=50)
    idle_wattage: str | None = Field(default=None, max_length=50)
    active_wattage: str | None = Field(default=None, max_length=50)
    daily_kwh: str | None = Field(default=None, max_length=50)
    annual_kwh: str | None = Field(default=None, max_length=50)
    estimated_annual_cost: str | None = Field(default=None, max_length=50)


class AnalysisCreate(BaseModel):
    """Recognizer output for one photographed appliance.

    ``fallback_level`` is stored as given. The whole payload is also kept
    verbatim for later reference.
    """
    image_path: str | None = Field(default=None, max_length=500)
    device: RecognizedDevice = RecognizedDevice()
    energy: EstimatedEnergy = EstimatedEnergy()
    tips: list[str] | None = None
    fallback_level: str | None = Field(default=None, max_length=20)
    reasoning: str | None = None


class AnalysisOut(BaseModel):
    """A stored analysis. Idle/active wattage and reasoning come from the raw payload."""
    id: int
    device: RecognizedDevice
    energy: EstimatedEnergy
    tips: list[str] | None = None
    fallback_level: str
    reasoning: str | None = None
    analyzed_at: datetime | None = None


class AnalysisHistory(BaseModel):
    total: int
    analyses: list[AnalysisOut]
