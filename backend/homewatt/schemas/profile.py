"""Household profile schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Ownership = Literal["own", "rent"]
HouseType = Literal["detached", "semi_detached", "terraced", "apartment", "flat", "bungalow", "other"]
HeatingType = Literal[
    "gas", "electric", "oil", "solar", "heat_pump", "biomass", "district_heating", "other"
]
PropertyAge = Literal["new_build", "modern", "established", "older", "historic"]


class HouseholdProfile(BaseModel):
    """Household metadata attached to a user."""
    model_config = ConfigDict(from_attributes=True)

    property_ownership: str | None = None
    house_type: str | None = None
    number_of_occupants: int | None = None
    number_of_bedrooms: int | None = None
    heating_type: str | None = None
    property_age: str | None = None


class HouseholdUpdate(BaseModel):
    """Partial household profile update."""
    property_ownership: Ownership | None = None
    house_type: HouseType | None = None
    number_of_occupants: int | None = Field(default=None, ge=1, le=20)
    number_of_bedrooms: int | None = Field(default=None, ge=1, le=20)
    heating_type: HeatingType | None = None
    property_age: PropertyAge | None = None


class ProfileOut(BaseModel):
    id: str
    name: str
    email: str
    household: HouseholdProfile
