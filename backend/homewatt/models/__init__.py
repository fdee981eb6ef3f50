"""SQLAlchemy ORM models for HomeWatt."""

from homewatt.models.base import Base
from homewatt.models.user import User
from homewatt.models.device import UserDevice
from homewatt.models.device_analysis import DeviceAnalysis
from homewatt.models.bill import BillAnalysis

__all__ = [
    "Base",
    "User",
    "UserDevice",
    "DeviceAnalysis",
    "BillAnalysis",
]
