"""Business logic services — singleton registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from homewatt.services.analysis_service import AnalysisService
    from homewatt.services.bill_service import BillService
    from homewatt.services.device_service import DeviceService
    from homewatt.services.insights_service import InsightsService
    from homewatt.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

_device_service: DeviceService | None = None
_bill_service: BillService | None = None
_insights_service: InsightsService | None = None
_profile_service: ProfileService | None = None
_analysis_service: AnalysisService | None = None


def init_services() -> None:
    """Create and wire up all service singletons."""
    global _device_service, _bill_service, _insights_service, _profile_service, _analysis_service

    from homewatt.services.analysis_service import AnalysisService
    from homewatt.services.bill_service import BillService
    from homewatt.services.device_service import DeviceService
    from homewatt.services.insights_service import InsightsService
    from homewatt.services.profile_service import ProfileService

    _device_service = DeviceService()
    _bill_service = BillService()
    _insights_service = InsightsService(_device_service, _bill_service)
    _profile_service = ProfileService()
    _analysis_service = AnalysisService()
    logger.info("Services initialized (devices, analyses, bills, insights, profile)")


def shutdown_services() -> None:
    global _device_service, _bill_service, _insights_service, _profile_service, _analysis_service
    _device_service = _bill_service = _insights_service = _profile_service = None
    _analysis_service = None


def get_device_service() -> DeviceService:
    if _device_service is None:
        raise RuntimeError("Services not initialized — call init_services() first")
    return _device_service


def get_bill_service() -> BillService:
    if _bill_service is None:
        raise RuntimeError("Services not initialized — call init_services() first")
    return _bill_service


def get_insights_service() -> InsightsService:
    if _insights_service is None:
        raise RuntimeError("Services not initialized — call init_services() first")
    return _insights_service


def get_profile_service() -> ProfileService:
    if _profile_service is None:
        raise RuntimeError("Services not initialized — call init_services() first")
    return _profile_service


def get_analysis_service() -> AnalysisService:
    if _analysis_service is None:
        raise RuntimeError("Services not initialized — call init_services() first")
    return _analysis_service
