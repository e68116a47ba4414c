"""
Dashboard Configuration Store

Durable get/set of every dashboard setting on top of a SettingsBackend.

- Scalar settings are clamped into their bounds on write and on read
- Button and gauge lists are stored as JSON arrays; a missing or corrupt
  value reads back as the factory default and is never raised to callers
- Every getter reads the backend again, nothing is cached here
"""

import json
import logging
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ..constants import (
    KEY_BUTTON_COUNT,
    KEY_BUTTON_COLUMNS,
    KEY_SPEED_UNIT,
    KEY_GAUGES,
    KEY_BUTTONS,
    KEY_ECU_ID,
    KEY_SHOW_SPEEDOMETER,
    KEY_DATA_RATE,
    ALL_KEYS,
    MAX_BUTTONS,
    BUTTON_COUNT_MIN,
    BUTTON_COUNT_MAX,
    BUTTON_COLUMNS_MIN,
    BUTTON_COLUMNS_MAX,
    ECU_ID_MIN,
    ECU_ID_MAX,
    DATA_RATE_MIN,
    DATA_RATE_MAX,
    DEFAULT_BUTTON_COUNT,
    DEFAULT_BUTTON_COLUMNS,
    DEFAULT_ECU_ID,
    DEFAULT_SHOW_SPEEDOMETER,
    DEFAULT_DATA_RATE,
    EXPORT_FORMAT_VERSION,
    clamp,
)
from ..storage.base import SettingsBackend, StorageError
from ..utils.error_handler import ErrorHandler, ErrorCategory, ErrorSeverity
from .dashboard import ButtonConfig, GaugeConfig, DashboardConfig
from .defaults import default_buttons, default_gauges
from .enums import SpeedUnit, enum_from_name

logger = logging.getLogger(__name__)


def _unique_buttons(buttons: List[ButtonConfig]) -> List[ButtonConfig]:
    """Drop buttons whose id was already seen (first occurrence wins)."""
    seen = set()
    result = []
    for button in buttons:
        if button.id in seen:
            logger.warning(f"Dropping duplicate button id {button.id}")
            continue
        seen.add(button.id)
        result.append(button)
    return result


def _unique_gauges(gauges: List[GaugeConfig]) -> List[GaugeConfig]:
    """Drop gauges whose variable hash was already seen (first occurrence wins)."""
    seen = set()
    result = []
    for gauge in gauges:
        if gauge.variable_hash in seen:
            logger.warning(f"Dropping duplicate gauge for hash {gauge.variable_hash}")
            continue
        seen.add(gauge.variable_hash)
        result.append(gauge)
    return result


class ConfigStore:
    """Persists the dashboard configuration into a SettingsBackend."""

    def __init__(self, backend: SettingsBackend,
                 error_handler: Optional[ErrorHandler] = None):
        self.backend = backend
        self._error_handler = error_handler

    # ========================================================================
    # Scalar settings
    # ========================================================================

    @property
    def button_count(self) -> int:
        value = self.backend.get_int(KEY_BUTTON_COUNT, DEFAULT_BUTTON_COUNT)
        return clamp(value, BUTTON_COUNT_MIN, BUTTON_COUNT_MAX)

    @button_count.setter
    def button_count(self, value: int) -> None:
        self._write(KEY_BUTTON_COUNT, clamp(int(value), BUTTON_COUNT_MIN, BUTTON_COUNT_MAX))

    @property
    def button_columns(self) -> int:
        value = self.backend.get_int(KEY_BUTTON_COLUMNS, DEFAULT_BUTTON_COLUMNS)
        return clamp(value, BUTTON_COLUMNS_MIN, BUTTON_COLUMNS_MAX)

    @button_columns.setter
    def button_columns(self, value: int) -> None:
        self._write(KEY_BUTTON_COLUMNS, clamp(int(value), BUTTON_COLUMNS_MIN, BUTTON_COLUMNS_MAX))

    @property
    def speed_unit(self) -> SpeedUnit:
        name = self.backend.get_str(KEY_SPEED_UNIT, SpeedUnit.MPH.name)
        return enum_from_name(SpeedUnit, name, default=SpeedUnit.MPH)

    @speed_unit.setter
    def speed_unit(self, value: SpeedUnit) -> None:
        self._write(KEY_SPEED_UNIT, enum_from_name(SpeedUnit, value).name)

    @property
    def ecu_id(self) -> int:
        value = self.backend.get_int(KEY_ECU_ID, DEFAULT_ECU_ID)
        return clamp(value, ECU_ID_MIN, ECU_ID_MAX)

    @ecu_id.setter
    def ecu_id(self, value: int) -> None:
        self._write(KEY_ECU_ID, clamp(int(value), ECU_ID_MIN, ECU_ID_MAX))

    @property
    def show_speedometer(self) -> bool:
        return self.backend.get_bool(KEY_SHOW_SPEEDOMETER, DEFAULT_SHOW_SPEEDOMETER)

    @show_speedometer.setter
    def show_speedometer(self, value: bool) -> None:
        self._write(KEY_SHOW_SPEEDOMETER, bool(value))

    @property
    def data_rate_hz(self) -> int:
        """Variable polling rate (requests per second)"""
        value = self.backend.get_int(KEY_DATA_RATE, DEFAULT_DATA_RATE)
        return clamp(value, DATA_RATE_MIN, DATA_RATE_MAX)

    @data_rate_hz.setter
    def data_rate_hz(self, value: int) -> None:
        self._write(KEY_DATA_RATE, clamp(int(value), DATA_RATE_MIN, DATA_RATE_MAX))

    @property
    def data_delay_ms(self) -> int:
        """Delay between variable requests, derived from data_rate_hz"""
        return 1000 // self.data_rate_hz

    # ========================================================================
    # Buttons
    # ========================================================================

    def get_buttons(self) -> List[ButtonConfig]:
        """Stored buttons, or 16 default buttons if missing or corrupt."""
        buttons = self._read_records(KEY_BUTTONS, ButtonConfig.from_dict)
        if buttons is None:
            return default_buttons(MAX_BUTTONS)
        return _unique_buttons(buttons)

    def set_buttons(self, buttons: List[ButtonConfig]) -> None:
        """Replace the whole button list.

        Buttons with ids outside 0-15 are dropped, a single one would make
        the stored list unreadable.
        """
        storable = []
        for button in buttons:
            if 0 <= button.id < MAX_BUTTONS:
                storable.append(button)
            else:
                self._record_warning(
                    f"Dropping button {button.id}: id must be 0-{MAX_BUTTONS - 1}",
                    ErrorCategory.VALIDATION,
                )
        self._write_records(KEY_BUTTONS, _unique_buttons(storable))

    def get_button(self, button_id: int) -> ButtonConfig:
        """Button with this id, or a fresh default button."""
        for button in self.get_buttons():
            if button.id == button_id:
                return button
        return ButtonConfig(id=button_id)

    def update_button(self, button_id: int, config: ButtonConfig) -> bool:
        """
        Replace the button with this id in place, or append it.

        Args:
            button_id: Slot 0-15
            config: New configuration, its id is forced to button_id

        Returns:
            True if stored, False if button_id is outside 0-15
        """
        if not 0 <= button_id < MAX_BUTTONS:
            self._record_warning(
                f"Ignoring update for button {button_id}: id must be 0-{MAX_BUTTONS - 1}",
                ErrorCategory.VALIDATION,
            )
            return False

        if config.id != button_id:
            logger.warning(f"Button config id {config.id} does not match slot {button_id}, using slot")
            config = replace(config, id=button_id)

        buttons = self.get_buttons()
        for index, button in enumerate(buttons):
            if button.id == button_id:
                buttons[index] = config
                break
        else:
            buttons.append(config)

        self.set_buttons(buttons)
        logger.debug(f"Updated button {button_id}: {config}")
        return True

    # ========================================================================
    # Gauges
    # ========================================================================

    def get_gauges(self) -> List[GaugeConfig]:
        """Stored gauges, or GPS speed plus the first common gauge if missing or corrupt."""
        gauges = self._read_records(KEY_GAUGES, GaugeConfig.from_dict)
        if gauges is None:
            return default_gauges()
        return _unique_gauges(gauges)

    def set_gauges(self, gauges: List[GaugeConfig]) -> None:
        """Replace the whole gauge list."""
        self._write_records(KEY_GAUGES, _unique_gauges(list(gauges)))

    def add_gauge(self, gauge: GaugeConfig) -> bool:
        """
        Add gauge unless one with the same variable hash exists.

        Returns:
            True if added, False if it was a duplicate
        """
        gauges = self.get_gauges()
        if any(g.variable_hash == gauge.variable_hash for g in gauges):
            logger.debug(f"Gauge for hash {gauge.variable_hash} already present")
            return False

        for error in gauge.validate():
            logger.warning(error)

        gauges.append(gauge)
        self.set_gauges(gauges)
        logger.debug(f"Added gauge '{gauge.label}' ({gauge.variable_hash})")
        return True

    def remove_gauge(self, variable_hash: int) -> bool:
        """
        Remove every gauge with this variable hash.

        Returns:
            True if a gauge was removed
        """
        gauges = self.get_gauges()
        remaining = [g for g in gauges if g.variable_hash != variable_hash]
        if len(remaining) == len(gauges):
            return False
        self.set_gauges(remaining)
        logger.debug(f"Removed gauge for hash {variable_hash}")
        return True

    # ========================================================================
    # Snapshot
    # ========================================================================

    def get_dashboard_config(self) -> DashboardConfig:
        """Assemble the dashboard snapshot. Read-only."""
        button_count = self.button_count
        stored = {b.id: b for b in self.get_buttons()}
        buttons = [stored.get(i) or ButtonConfig(id=i) for i in range(button_count)]
        return DashboardConfig(
            button_count=button_count,
            button_columns=self.button_columns,
            buttons=buttons,
            gauges=self.get_gauges(),
            show_speedometer=self.show_speedometer,
            speed_unit=self.speed_unit,
        )

    def reset_to_defaults(self) -> None:
        """Remove every stored setting so all reads return factory defaults."""
        for key in ALL_KEYS:
            try:
                self.backend.remove(key)
            except StorageError as e:
                self._record_exception(e, f"Failed to remove setting '{key}'", ErrorCategory.STORAGE)
        logger.info("Dashboard settings reset to defaults")

    # ========================================================================
    # Import / export
    # ========================================================================

    def export_to_file(self, filepath: Union[str, Path]) -> Tuple[bool, Optional[str]]:
        """
        Save all settings to a JSON file.

        Returns:
            Tuple[bool, Optional[str]]: (success, error_message)
        """
        document = {
            "version": EXPORT_FORMAT_VERSION,
            "exported": datetime.now().isoformat(),
            "buttonCount": self.button_count,
            "buttonColumns": self.button_columns,
            "speedUnit": self.speed_unit.name,
            "showSpeedometer": self.show_speedometer,
            "ecuId": self.ecu_id,
            "dataRateHz": self.data_rate_hz,
            "buttons": [b.to_dict() for b in self.get_buttons()],
            "gauges": [g.to_dict() for g in self.get_gauges()],
        }
        try:
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
        except OSError as e:
            error_msg = f"Failed to export dashboard settings: {e}"
            self._record_exception(e, error_msg, ErrorCategory.FILE, ErrorSeverity.ERROR)
            return False, error_msg

        logger.info(f"Exported dashboard settings to: {filepath}")
        return True, None

    def import_from_file(self, filepath: Union[str, Path]) -> Tuple[bool, Optional[str]]:
        """
        Load all settings from a JSON file written by export_to_file.

        Nothing is written unless the whole file decodes.

        Returns:
            Tuple[bool, Optional[str]]: (success, error_message)
        """
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                document = json.load(f)
            settings = self._decode_document(document)
        except json.JSONDecodeError as e:
            error_msg = (
                f"Invalid JSON format in settings file:\n\n"
                f"Line {e.lineno}, Column {e.colno}:\n{e.msg}"
            )
            self._record_exception(e, error_msg, ErrorCategory.CONFIG, ErrorSeverity.ERROR)
            return False, error_msg
        except (OSError, ValueError, KeyError, TypeError, RecursionError) as e:
            error_msg = f"Failed to import dashboard settings:\n\n{e}"
            self._record_exception(e, error_msg, ErrorCategory.CONFIG, ErrorSeverity.ERROR)
            return False, error_msg

        self.button_count = settings["buttonCount"]
        self.button_columns = settings["buttonColumns"]
        self.speed_unit = settings["speedUnit"]
        self.show_speedometer = settings["showSpeedometer"]
        self.ecu_id = settings["ecuId"]
        self.data_rate_hz = settings["dataRateHz"]
        self.set_buttons(settings["buttons"])
        self.set_gauges(settings["gauges"])

        logger.info(f"Imported dashboard settings from: {filepath}")
        return True, None

    @staticmethod
    def _decode_document(document: Any) -> Dict[str, Any]:
        if not isinstance(document, dict):
            raise ValueError("Settings file root must be an object")

        version = str(document.get("version", ""))
        if version.split(".")[0] != EXPORT_FORMAT_VERSION.split(".")[0]:
            raise ValueError(f"Unsupported settings file version: {version or 'missing'}")

        def integer(name: str, default: int) -> int:
            value = document.get(name, default)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"'{name}' must be an integer, got {value!r}")
            return value

        show_speedometer = document.get("showSpeedometer", DEFAULT_SHOW_SPEEDOMETER)
        if not isinstance(show_speedometer, bool):
            raise ValueError(f"'showSpeedometer' must be a boolean, got {show_speedometer!r}")

        buttons = document.get("buttons", [])
        gauges = document.get("gauges", [])
        if not isinstance(buttons, list) or not isinstance(gauges, list):
            raise ValueError("'buttons' and 'gauges' must be arrays")

        return {
            "buttonCount": integer("buttonCount", DEFAULT_BUTTON_COUNT),
            "buttonColumns": integer("buttonColumns", DEFAULT_BUTTON_COLUMNS),
            "speedUnit": enum_from_name(SpeedUnit, document.get("speedUnit", SpeedUnit.MPH.name)),
            "showSpeedometer": show_speedometer,
            "ecuId": integer("ecuId", DEFAULT_ECU_ID),
            "dataRateHz": integer("dataRateHz", DEFAULT_DATA_RATE),
            "buttons": [ButtonConfig.from_dict(b) for b in buttons],
            "gauges": [GaugeConfig.from_dict(g) for g in gauges],
        }

    # ========================================================================
    # Internals
    # ========================================================================

    def _read_records(self, key: str, from_dict: Callable[[Dict[str, Any]], Any]) -> Optional[list]:
        """
        Decode a stored JSON array of records.

        Returns:
            Decoded list, or None if the key is missing or the value is corrupt
        """
        raw = self.backend.get_str(key)
        if raw is None:
            return None
        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise ValueError(f"expected a JSON array, got {type(records).__name__}")
            return [from_dict(record) for record in records]
        except (ValueError, KeyError, TypeError, RecursionError) as e:
            self._record_exception(
                e,
                f"Stored '{key}' is corrupt, using defaults: {e}",
                ErrorCategory.STORAGE,
            )
            return None

    def _write_records(self, key: str, items: list) -> None:
        self._write(key, json.dumps([item.to_dict() for item in items]))

    def _write(self, key: str, value: Any) -> None:
        try:
            self.backend.set_value(key, value)
        except StorageError as e:
            self._record_exception(e, f"Failed to save setting '{key}'", ErrorCategory.STORAGE,
                                   ErrorSeverity.ERROR)

    def _record_exception(self, exception: Exception, message: str,
                          category: ErrorCategory,
                          severity: ErrorSeverity = ErrorSeverity.WARNING) -> None:
        if self._error_handler is not None:
            self._error_handler.handle_exception(exception, message, category, severity)
        else:
            logger.warning(message)

    def _record_warning(self, message: str, category: ErrorCategory) -> None:
        if self._error_handler is not None:
            self._error_handler.warning(message, category)
        else:
            logger.warning(message)
