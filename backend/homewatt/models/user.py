"""User model — account identity plus household profile."""

from datetime import datetime
from typing import Optional

from sqlalchemy import String, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from homewatt.models.base import Base

PROPERTY_OWNERSHIP = ("own", "rent")
HOUSE_TYPES = (
    "detached",
    "semi_detached",
    "terraced",
    "apartment",
    "flat",
    "bungalow",
    "other",
)
HEATING_TYPES = (
    "gas",
    "electric",
    "oil",
    "solar",
    "heat_pump",
    "biomass",
    "district_heating",
    "other",
)
PROPERTY_AGES = ("new_build", "modern", "established", "older", "historic")


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)

    # Household profile
    property_ownership: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    house_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    number_of_occupants: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    number_of_bedrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    heating_type: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    property_age: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
