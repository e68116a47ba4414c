"""
Default Configuration for the ButtonBox dashboard

Factory defaults used on first start and whenever persisted state cannot be
decoded.
"""

from dataclasses import replace
from typing import List

from ..constants import MAX_BUTTONS, GPS_SPEED_HASH
from .dashboard import ButtonConfig, GaugeConfig
from .enums import DisplayType, GaugePosition


# GPS speed pseudo-gauge, fed by the phone's location service
GPS_SPEED_GAUGE = GaugeConfig(
    variable_hash=GPS_SPEED_HASH,
    variable_name="gpsSpeed",
    label="GPS Speed",
    unit="MPH",
    min_value=0.0,
    max_value=200.0,
    position=GaugePosition.TOP,
    is_gps_speed=True,
)

# Common dashboard variables with their firmware hashes
COMMON_GAUGES: List[GaugeConfig] = [
    GaugeConfig(-1093429509, "AFRValue", "AFR", "", 10.0, 20.0, 14.7, 16.0,
                DisplayType.GAUGE, GaugePosition.TOP),
    GaugeConfig(-2066867294, "baroPressure", "Baro", "kPa", 80.0, 110.0, None, None,
                DisplayType.NUMBER),
    GaugeConfig(309572379, "ambientTemp", "Ambient", "°C", -20.0, 50.0, None, None,
                DisplayType.NUMBER),
    GaugeConfig(-1777838088, "baseDwell", "Dwell", "ms", 0.0, 10.0, None, None,
                DisplayType.NUMBER),
    GaugeConfig(493641747, "baseIgnitionAdvance", "Timing", "°", -10.0, 50.0, None, None,
                DisplayType.GAUGE),
    GaugeConfig(459143268, "boostboostOutput", "Boost", "%", 0.0, 100.0, 80.0, 95.0,
                DisplayType.GAUGE),
]


def default_buttons(count: int = MAX_BUTTONS) -> List[ButtonConfig]:
    """Create momentary, unlabeled buttons with positional ids 0..count-1."""
    return [ButtonConfig(id=i) for i in range(count)]


def default_gauges() -> List[GaugeConfig]:
    """Create the factory gauge set: GPS speed plus the first common gauge.

    Returns copies so callers can modify the result freely.
    """
    return [replace(GPS_SPEED_GAUGE)] + [replace(g) for g in COMMON_GAUGES[:1]]
