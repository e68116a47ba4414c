"""Tests for the settings backends."""

import pytest

from buttonbox.constants import KEY_GAUGES
from buttonbox.models import ButtonConfig, ButtonMode, ConfigStore, GaugeConfig, SpeedUnit
from buttonbox.storage import MemoryBackend, QSettingsBackend


class TestTypedReads:
    """Typed reads coerce text values the way INI files return them."""

    @pytest.fixture
    def backend(self):
        return MemoryBackend({
            "int_text": " 12 ",
            "int_bad": "twelve",
            "bool_text": "true",
            "bool_zero": "0",
            "bool_bad": "maybe",
            "number": 7,
        })

    def test_get_int(self, backend):
        assert backend.get_int("int_text", 0) == 12
        assert backend.get_int("number", 0) == 7
        assert backend.get_int("int_bad", 3) == 3
        assert backend.get_int("missing", 4) == 4

    def test_get_bool(self, backend):
        assert backend.get_bool("bool_text", False) is True
        assert backend.get_bool("bool_zero", True) is False
        assert backend.get_bool("bool_bad", True) is True
        assert backend.get_bool("missing", False) is False

    def test_get_str(self, backend):
        assert backend.get_str("number") == "7"
        assert backend.get_str("missing") is None
        assert backend.get_str("missing", "x") == "x"


class TestMemoryBackend:
    """Tests for MemoryBackend."""

    def test_set_contains_remove(self):
        backend = MemoryBackend()
        backend.set_value("a", 1)
        assert backend.contains("a")
        backend.remove("a")
        backend.remove("a")
        assert not backend.contains("a")
        assert backend.get_value("a", "default") == "default"


class TestQSettingsBackend:
    """QSettings persistence through an INI file."""

    @pytest.fixture
    def ini_path(self, tmp_path):
        return tmp_path / "dashboard.ini"

    def test_values_survive_new_instance(self, ini_path):
        backend = QSettingsBackend(ini_path=ini_path)
        backend.set_value("dashboard/button_count", 5)
        backend.set_value("dashboard/show_speedometer", False)

        reopened = QSettingsBackend(ini_path=ini_path)
        assert reopened.get_int("dashboard/button_count", 16) == 5
        assert reopened.get_bool("dashboard/show_speedometer", True) is False
        assert ini_path.exists()

    def test_remove(self, ini_path):
        backend = QSettingsBackend(ini_path=ini_path)
        backend.set_value("dashboard/ecu_id", 9)
        backend.remove("dashboard/ecu_id")
        assert not backend.contains("dashboard/ecu_id")
        assert backend.get_value("dashboard/ecu_id") is None

    def test_store_round_trip_across_sessions(self, ini_path):
        store = ConfigStore(QSettingsBackend(ini_path=ini_path))
        store.button_count = 12
        store.speed_unit = SpeedUnit.KMH
        store.update_button(3, ButtonConfig(id=3, label="Fan, rear", mode=ButtonMode.TOGGLE))
        store.add_gauge(GaugeConfig(1001, "boost", "Boost", unit="psi", min_value=-15.0, max_value=30.0))

        reopened = ConfigStore(QSettingsBackend(ini_path=ini_path))
        assert reopened.button_count == 12
        assert reopened.speed_unit == SpeedUnit.KMH
        assert reopened.get_button(3) == ButtonConfig(id=3, label="Fan, rear", mode=ButtonMode.TOGGLE)
        assert reopened.get_gauges() == store.get_gauges()

    def test_corrupt_value_falls_back(self, ini_path):
        backend = QSettingsBackend(ini_path=ini_path)
        backend.set_value(KEY_GAUGES, "[{\"variableHash\": ")
        store = ConfigStore(QSettingsBackend(ini_path=ini_path))
        assert [g.label for g in store.get_gauges()] == ["GPS Speed", "AFR"]
