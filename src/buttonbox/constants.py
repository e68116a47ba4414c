"""
ButtonBox Dashboard Constants

Storage keys, value bounds and factory defaults shared by the configuration
store and the registry.

IMPORTANT: Key names and button/gauge limits must match the mobile apps and
the button box firmware (16-bit button mask, one ECU id byte).
"""

from pathlib import Path


# ============================================================================
# Storage Namespace
# ============================================================================

SETTINGS_ORGANIZATION = "ButtonBox"
SETTINGS_APPLICATION = "Dashboard"
SETTINGS_GROUP = "dashboard"

KEY_BUTTON_COUNT = f"{SETTINGS_GROUP}/button_count"
KEY_BUTTON_COLUMNS = f"{SETTINGS_GROUP}/button_columns"
KEY_SPEED_UNIT = f"{SETTINGS_GROUP}/speed_unit"
KEY_GAUGES = f"{SETTINGS_GROUP}/gauges"
KEY_BUTTONS = f"{SETTINGS_GROUP}/buttons"
KEY_ECU_ID = f"{SETTINGS_GROUP}/ecu_id"
KEY_SHOW_SPEEDOMETER = f"{SETTINGS_GROUP}/show_speedometer"
KEY_DATA_RATE = f"{SETTINGS_GROUP}/data_rate"

ALL_KEYS = (
    KEY_BUTTON_COUNT,
    KEY_BUTTON_COLUMNS,
    KEY_SPEED_UNIT,
    KEY_GAUGES,
    KEY_BUTTONS,
    KEY_ECU_ID,
    KEY_SHOW_SPEEDOMETER,
    KEY_DATA_RATE,
)


# ============================================================================
# Bounds
# ============================================================================

# Buttons: 1-16 (firmware sends a 16-bit mask)
MAX_BUTTONS = 16
BUTTON_COUNT_MIN = 1
BUTTON_COUNT_MAX = MAX_BUTTONS

# Grid columns: 2-4
BUTTON_COLUMNS_MIN = 2
BUTTON_COLUMNS_MAX = 4

# ECU address selector: one byte
ECU_ID_MIN = 0
ECU_ID_MAX = 255

# Variable polling rate: 1-60 Hz
DATA_RATE_MIN = 1
DATA_RATE_MAX = 60


# ============================================================================
# Defaults
# ============================================================================

DEFAULT_BUTTON_COUNT = 16
DEFAULT_BUTTON_COLUMNS = 4
DEFAULT_ECU_ID = 1
DEFAULT_SHOW_SPEEDOMETER = True
DEFAULT_DATA_RATE = 20

# Search-added gauges get the variable name cut to this length as label
GAUGE_LABEL_MAX_LENGTH = 12

# GPS speed pseudo-variable (not part of the ECU catalog)
GPS_SPEED_HASH = 0

# Bundled catalog asset
RESOURCES_DIR = Path(__file__).parent / "resources"
DEFAULT_CATALOG_PATH = RESOURCES_DIR / "variables.json"

# Export file format
EXPORT_FORMAT_VERSION = "1.0"


def clamp(value: int, minimum: int, maximum: int) -> int:
    """Clamp value into [minimum, maximum]."""
    return max(minimum, min(maximum, value))
