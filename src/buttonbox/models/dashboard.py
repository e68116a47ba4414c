"""
Dashboard Model - button, gauge and dashboard configuration

Records serialize to the camelCase shape shared with the mobile apps:

    {"id": 3, "label": "Fan", "mode": "TOGGLE", "colorOff": null, "colorOn": -16711936}
    {"variableHash": 459143268, "variableName": "boostboostOutput", "label": "Boost", ...}
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from ..constants import MAX_BUTTONS, GPS_SPEED_HASH
from .enums import (
    ButtonMode,
    DisplayType,
    GaugePosition,
    GaugeSource,
    SpeedUnit,
    enum_from_name,
)


def _require_int(value: Any, field_name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"'{field_name}' must be an integer, got {value!r}")
    return value


def _optional_int(value: Any, field_name: str) -> Optional[int]:
    if value is None:
        return None
    return _require_int(value, field_name)


def _optional_float(value: Any, field_name: str) -> Optional[float]:
    if value is None:
        return None
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ValueError(f"'{field_name}' must be a number, got {value!r}")
    return float(value)


def _string(value: Any, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{field_name}' must be a string, got {value!r}")
    return value


@dataclass
class ButtonConfig:
    """One button slot.

    Architecture:
    - id: Slot index 0-15, also the bit in the button mask
    - label: Custom label, empty means "show the slot number"
    - color_off/color_on: ARGB colors, None means theme default
    """
    id: int
    label: str = ""
    mode: ButtonMode = ButtonMode.MOMENTARY
    color_off: Optional[int] = None
    color_on: Optional[int] = None

    @property
    def is_toggle(self) -> bool:
        return self.mode == ButtonMode.TOGGLE

    def display_label(self) -> str:
        """Label to render, falling back to the 1-based slot number"""
        return self.label if self.label else str(self.id + 1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "id": self.id,
            "label": self.label,
            "mode": self.mode.name,
            "colorOff": self.color_off,
            "colorOn": self.color_on,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ButtonConfig":
        """Create from dictionary"""
        if not isinstance(data, dict):
            raise ValueError(f"Button record must be an object, got {data!r}")
        button_id = _require_int(data["id"], "id")
        if not 0 <= button_id < MAX_BUTTONS:
            raise ValueError(f"Button id must be 0-{MAX_BUTTONS - 1}, got {button_id}")
        return cls(
            id=button_id,
            label=_string(data.get("label"), "label"),
            mode=enum_from_name(ButtonMode, data.get("mode") or "MOMENTARY"),
            color_off=_optional_int(data.get("colorOff"), "colorOff"),
            color_on=_optional_int(data.get("colorOn"), "colorOn"),
        )

    def validate(self) -> List[str]:
        """Validate configuration, return list of errors"""
        errors = []
        if not 0 <= self.id < MAX_BUTTONS:
            errors.append(f"Button id must be 0-{MAX_BUTTONS - 1}")
        if not isinstance(self.mode, ButtonMode):
            errors.append("Invalid button mode")
        return errors


@dataclass
class GaugeConfig:
    """A dashboard gauge bound to one ECU variable (or GPS speed).

    variable_hash is the foreign key into the variable catalog and the
    uniqueness key of the gauge list. min_value < max_value is expected
    from callers, validate() reports violations.
    """
    variable_hash: int
    variable_name: str
    label: str
    unit: str = ""
    min_value: float = 0.0
    max_value: float = 100.0
    warning_threshold: Optional[float] = None
    critical_threshold: Optional[float] = None
    display_type: DisplayType = DisplayType.GAUGE
    position: GaugePosition = GaugePosition.SECONDARY
    is_gps_speed: bool = False

    @property
    def source(self) -> GaugeSource:
        """Tagged source of the gauge value"""
        return GaugeSource.GPS_SPEED if self.is_gps_speed else GaugeSource.CATALOG

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "variableHash": self.variable_hash,
            "variableName": self.variable_name,
            "label": self.label,
            "unit": self.unit,
            "minValue": self.min_value,
            "maxValue": self.max_value,
            "warningThreshold": self.warning_threshold,
            "criticalThreshold": self.critical_threshold,
            "displayType": self.display_type.name,
            "position": self.position.name,
            "isGpsSpeed": self.is_gps_speed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GaugeConfig":
        """Create from dictionary"""
        if not isinstance(data, dict):
            raise ValueError(f"Gauge record must be an object, got {data!r}")
        is_gps_speed = data.get("isGpsSpeed", False)
        if not isinstance(is_gps_speed, bool):
            raise ValueError(f"'isGpsSpeed' must be a boolean, got {is_gps_speed!r}")
        min_value = _optional_float(data.get("minValue"), "minValue")
        max_value = _optional_float(data.get("maxValue"), "maxValue")
        return cls(
            variable_hash=_require_int(data["variableHash"], "variableHash"),
            variable_name=_string(data.get("variableName"), "variableName"),
            label=_string(data.get("label"), "label"),
            unit=_string(data.get("unit"), "unit"),
            min_value=0.0 if min_value is None else min_value,
            max_value=100.0 if max_value is None else max_value,
            warning_threshold=_optional_float(data.get("warningThreshold"), "warningThreshold"),
            critical_threshold=_optional_float(data.get("criticalThreshold"), "criticalThreshold"),
            display_type=enum_from_name(DisplayType, data.get("displayType") or "GAUGE"),
            position=enum_from_name(GaugePosition, data.get("position") or "SECONDARY"),
            is_gps_speed=is_gps_speed,
        )

    def validate(self) -> List[str]:
        """Validate configuration, return list of errors"""
        errors = []
        if self.min_value >= self.max_value:
            errors.append(
                f"Gauge '{self.label}': min value ({self.min_value}) must be "
                f"less than max value ({self.max_value})"
            )
        if self.is_gps_speed and self.variable_hash != GPS_SPEED_HASH:
            errors.append(f"GPS speed gauge must use hash {GPS_SPEED_HASH}")
        if (self.warning_threshold is not None and self.critical_threshold is not None
                and self.warning_threshold > self.critical_threshold):
            errors.append(f"Gauge '{self.label}': warning threshold above critical threshold")
        return errors


@dataclass
class DashboardConfig:
    """Read-only snapshot of the whole dashboard, assembled by the store"""
    button_count: int = 16
    button_columns: int = 4
    buttons: List[ButtonConfig] = field(default_factory=list)
    gauges: List[GaugeConfig] = field(default_factory=list)
    show_speedometer: bool = True
    speed_unit: SpeedUnit = SpeedUnit.MPH

    @property
    def button_rows(self) -> int:
        """Rows needed to lay out button_count buttons"""
        return -(-self.button_count // self.button_columns)

    def gauges_at(self, position: GaugePosition) -> List[GaugeConfig]:
        """Gauges for one dashboard row, in stored order"""
        return [g for g in self.gauges if g.position == position]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            "buttonCount": self.button_count,
            "buttonColumns": self.button_columns,
            "buttons": [b.to_dict() for b in self.buttons],
            "gauges": [g.to_dict() for g in self.gauges],
            "showSpeedometer": self.show_speedometer,
            "speedUnit": self.speed_unit.name,
        }
