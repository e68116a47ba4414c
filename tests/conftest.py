"""
Pytest configuration and shared fixtures for the dashboard registry tests
"""

import json
import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from buttonbox.models import ConfigStore, DashboardRegistry, VariableCatalog
from buttonbox.storage import MemoryBackend
from buttonbox.utils import ErrorHandler


CATALOG_RECORDS = [
    {"name": "boost", "hash": 1001, "source": "output"},
    {"name": "RPMValue", "hash": 1002, "source": "output"},
    {"name": "coolantTemp", "hash": 1003, "source": "output"},
    {"name": "intakeTemp", "hash": 1004, "source": "output"},
    {"name": "AFRValue", "hash": -1093429509, "source": "output"},
    {"name": "rpmHardLimit", "hash": 2001, "source": "config"},
]


@pytest.fixture
def catalog_file(tmp_path):
    """Variable catalog file with a few output and config variables."""
    path = tmp_path / "variables.json"
    path.write_text(json.dumps(CATALOG_RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def error_handler():
    return ErrorHandler()


@pytest.fixture
def catalog(catalog_file, error_handler):
    return VariableCatalog(catalog_file, error_handler=error_handler)


@pytest.fixture
def memory_backend():
    return MemoryBackend()


@pytest.fixture
def store(memory_backend, error_handler):
    return ConfigStore(memory_backend, error_handler=error_handler)


@pytest.fixture
def registry(catalog, store):
    return DashboardRegistry(catalog, store)
