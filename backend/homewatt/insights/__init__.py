"""Energy metrics and insights engine.

Pure functions over already-fetched device and bill records. Nothing in
this package touches the database or the clock.
"""

from homewatt.insights.extraction import extract_optional, extract_value
from homewatt.insights.facade import build_dashboard_stats, build_device_insights

__all__ = [
    "extract_value",
    "extract_optional",
    "build_device_insights",
    "build_dashboard_stats",
]
