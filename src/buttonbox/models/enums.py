"""
Dashboard Enums - All enumeration types for the dashboard configuration

Persisted values are the member names ("MOMENTARY", "GAUGE", "TOP", "MPH"),
the same strings the Android and iOS apps write.
"""

from enum import Enum


class VariableSource(Enum):
    """Where an ECU variable lives in firmware"""
    OUTPUT = "output"    # Live runtime value, can be shown on a gauge
    CONFIG = "config"    # Calibration/config value

    @classmethod
    def parse(cls, value: str) -> "VariableSource":
        """Parse catalog source string ("output", "OUTPUT", ...)"""
        if isinstance(value, VariableSource):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid variable source: {value!r}")
        return cls(value.strip().lower())


class ButtonMode(Enum):
    """Button behavior mode"""
    MOMENTARY = "momentary"  # Active only while pressed
    TOGGLE = "toggle"        # Latched, flips on every press


class DisplayType(Enum):
    """How a gauge renders its value"""
    GAUGE = "gauge"          # Circular gauge
    BAR = "bar"              # Horizontal bar
    NUMBER = "number"        # Large number display
    INDICATOR = "indicator"  # On/off indicator light


class GaugePosition(Enum):
    """Dashboard row for a gauge"""
    TOP = "top"              # Top row (2 columns, larger)
    SECONDARY = "secondary"  # Secondary row (4 columns, smaller)


class GaugeSource(Enum):
    """What feeds a gauge"""
    CATALOG = "catalog"      # ECU variable, resolved by hash
    GPS_SPEED = "gps_speed"  # Phone GPS, not in the ECU catalog


class SpeedUnit(Enum):
    """Speedometer units"""
    MPH = "mph"
    KMH = "kmh"
    MS = "ms"

    @property
    def symbol(self) -> str:
        """Display symbol"""
        symbols = {"mph": "MPH", "kmh": "KMH", "ms": "M/S"}
        return symbols[self.value]

    @property
    def multiplier(self) -> float:
        """Conversion multiplier from meters per second"""
        multipliers = {"mph": 2.23694, "kmh": 3.6, "ms": 1.0}
        return multipliers[self.value]

    def from_meters_per_second(self, value: float) -> float:
        """Convert a GPS speed in m/s to this unit"""
        return value * self.multiplier


def enum_from_name(enum_cls, name, default=None):
    """Look up enum member by persisted name.

    Raises ValueError for unknown names unless a default is given.
    """
    if isinstance(name, enum_cls):
        return name
    if isinstance(name, str) and name in enum_cls.__members__:
        return enum_cls[name]
    if default is not None:
        return default
    raise ValueError(f"Invalid {enum_cls.__name__}: {name!r}")
