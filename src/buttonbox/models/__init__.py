"""
Models Package

Configuration model, variable catalog, configuration store and registry
facade for the ButtonBox dashboard.
"""

from .enums import (
    VariableSource,
    ButtonMode,
    DisplayType,
    GaugePosition,
    GaugeSource,
    SpeedUnit,
)
from .variable import VariableDefinition
from .dashboard import ButtonConfig, GaugeConfig, DashboardConfig
from .defaults import GPS_SPEED_GAUGE, COMMON_GAUGES, default_buttons, default_gauges
from .variable_catalog import VariableCatalog
from .config_store import ConfigStore
from .registry import DashboardRegistry

__all__ = [
    'VariableSource',
    'ButtonMode',
    'DisplayType',
    'GaugePosition',
    'GaugeSource',
    'SpeedUnit',
    'VariableDefinition',
    'ButtonConfig',
    'GaugeConfig',
    'DashboardConfig',
    'GPS_SPEED_GAUGE',
    'COMMON_GAUGES',
    'default_buttons',
    'default_gauges',
    'VariableCatalog',
    'ConfigStore',
    'DashboardRegistry',
]
