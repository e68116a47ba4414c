"""Dashboard Registry - the API surface for UI collaborators.

Composes the variable catalog and the configuration store:
1. Variable search for the gauge picker
2. Gauge add/remove (search-add, GPS quick-add, common gauges)
3. Gauge to variable resolution for display
4. Button lookup and editing

Holds no state of its own beyond the two collaborators.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from ..constants import GAUGE_LABEL_MAX_LENGTH
from .config_store import ConfigStore
from .dashboard import ButtonConfig, DashboardConfig, GaugeConfig
from .defaults import GPS_SPEED_GAUGE, COMMON_GAUGES
from .enums import ButtonMode, DisplayType, GaugePosition, GaugeSource
from .variable import VariableDefinition
from .variable_catalog import VariableCatalog

logger = logging.getLogger(__name__)

_UNSET = object()


class DashboardRegistry:
    """Facade over VariableCatalog and ConfigStore.

    Usage:
        registry = DashboardRegistry(VariableCatalog(), ConfigStore(QSettingsBackend()))
        registry.add_variable_gauge("boostboostOutput", GaugePosition.TOP)
        for gauge in registry.gauges():
            print(registry.gauge_display_name(gauge) or gauge.variable_name)
    """

    def __init__(self, catalog: VariableCatalog, store: ConfigStore):
        self.catalog = catalog
        self.store = store

    # =========================================================================
    # Variables
    # =========================================================================

    def search_variables(self, query: str) -> List[VariableDefinition]:
        """Output variables whose name contains query (all outputs for "")."""
        return self.catalog.search(query)

    def output_variables(self) -> List[VariableDefinition]:
        return self.catalog.output_variables()

    # =========================================================================
    # Gauges
    # =========================================================================

    def gauges(self) -> List[GaugeConfig]:
        return self.store.get_gauges()

    def add_gauge(self, gauge: GaugeConfig) -> bool:
        """Add gauge, False if its variable already has one."""
        return self.store.add_gauge(gauge)

    def add_variable_gauge(self, name: str,
                           position: GaugePosition = GaugePosition.SECONDARY) -> Optional[GaugeConfig]:
        """Add a number gauge for a catalog variable picked by name.

        Args:
            name: Variable name, matched case-insensitively
            position: Dashboard row

        Returns:
            The gauge now on the dashboard for that variable, or None if the
            name is not in the catalog
        """
        variable = self.catalog.find_by_name(name)
        if variable is None:
            logger.info(f"Variable not found: {name}")
            return None

        gauge = GaugeConfig(
            variable_hash=variable.hash,
            variable_name=variable.name,
            label=variable.name[:GAUGE_LABEL_MAX_LENGTH],
            display_type=DisplayType.NUMBER,
            position=position,
        )
        if self.store.add_gauge(gauge):
            return gauge
        return self.find_gauge(variable.hash)

    def add_gps_speed_gauge(self) -> GaugeConfig:
        """Add the GPS speed gauge in the current speed unit."""
        gauge = replace(GPS_SPEED_GAUGE, unit=self.store.speed_unit.name)
        self.store.add_gauge(gauge)
        return gauge

    def add_common_gauge(self, index: int) -> bool:
        """Add entry `index` of the common gauges list."""
        if not 0 <= index < len(COMMON_GAUGES):
            logger.warning(f"Common gauge index must be 0-{len(COMMON_GAUGES) - 1}, got {index}")
            return False
        return self.store.add_gauge(replace(COMMON_GAUGES[index]))

    def remove_gauge(self, variable_hash: int) -> bool:
        return self.store.remove_gauge(variable_hash)

    def find_gauge(self, variable_hash: int) -> Optional[GaugeConfig]:
        for gauge in self.store.get_gauges():
            if gauge.variable_hash == variable_hash:
                return gauge
        return None

    def resolve_variable(self, gauge: GaugeConfig) -> Optional[VariableDefinition]:
        """Catalog variable behind a gauge, None for GPS speed or unknown hashes."""
        if gauge.source == GaugeSource.GPS_SPEED:
            return None
        return self.catalog.find_by_hash(gauge.variable_hash)

    def gauge_display_name(self, gauge: GaugeConfig) -> Optional[str]:
        """Name to show for a gauge.

        GPS speed gauges use their label, catalog gauges the catalog name.
        Returns None when the hash is not in the catalog; the caller picks
        the fallback text (usually gauge.variable_name).
        """
        if gauge.source == GaugeSource.GPS_SPEED:
            return gauge.label
        variable = self.resolve_variable(gauge)
        return variable.name if variable else None

    def requested_hashes(self) -> List[int]:
        """Variable hashes the telemetry layer should poll, in gauge order."""
        return [g.variable_hash for g in self.store.get_gauges()
                if g.source == GaugeSource.CATALOG]

    # =========================================================================
    # Buttons
    # =========================================================================

    def buttons(self) -> List[ButtonConfig]:
        return self.store.get_buttons()

    def visible_buttons(self) -> List[ButtonConfig]:
        """One button per configured slot (length == button_count)."""
        return self.store.get_dashboard_config().buttons

    def button(self, button_id: int) -> ButtonConfig:
        return self.store.get_button(button_id)

    def button_label(self, button_id: int) -> str:
        return self.store.get_button(button_id).display_label()

    def update_button(self, button_id: int, label=_UNSET, mode: Optional[ButtonMode] = None,
                      color_off=_UNSET, color_on=_UNSET) -> Optional[ButtonConfig]:
        """Edit fields of one button, keeping the rest.

        Returns:
            The stored config, or None if button_id is out of range
        """
        config = self.store.get_button(button_id)
        changes = {}
        if label is not _UNSET:
            changes["label"] = (label or "").strip()
        if mode is not None:
            changes["mode"] = mode
        if color_off is not _UNSET:
            changes["color_off"] = color_off
        if color_on is not _UNSET:
            changes["color_on"] = color_on
        config = replace(config, **changes)
        if not self.store.update_button(button_id, config):
            return None
        return config

    # =========================================================================
    # Settings read by the telemetry layer
    # =========================================================================

    @property
    def ecu_id(self) -> int:
        return self.store.ecu_id

    @property
    def data_rate_hz(self) -> int:
        return self.store.data_rate_hz

    @property
    def data_delay_ms(self) -> int:
        return self.store.data_delay_ms

    def dashboard_config(self) -> DashboardConfig:
        return self.store.get_dashboard_config()
