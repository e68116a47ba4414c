"""
Variable Definition - one ECU telemetry variable from the bundled catalog
"""

from dataclasses import dataclass
from typing import Dict, Any

from .enums import VariableSource


@dataclass(frozen=True)
class VariableDefinition:
    """ECU variable as exported by the firmware tooling.

    Architecture:
    - name: Unique within the catalog, matched case-insensitively
    - hash: Firmware-assigned stable id, used as the gauge foreign key
    - source: OUTPUT (live value) or CONFIG (calibration)
    """
    name: str
    hash: int
    source: VariableSource

    @property
    def is_output(self) -> bool:
        return self.source == VariableSource.OUTPUT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to catalog record"""
        return {
            "name": self.name,
            "hash": self.hash,
            "source": self.source.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VariableDefinition":
        """Create from catalog record"""
        name = data["name"]
        if not isinstance(name, str) or not name:
            raise ValueError(f"Variable record missing name: {data!r}")
        var_hash = data["hash"]
        # bool is an int subclass, reject it explicitly
        if not isinstance(var_hash, int) or isinstance(var_hash, bool):
            raise ValueError(f"Variable '{name}' has non-integer hash: {var_hash!r}")
        return cls(
            name=name,
            hash=var_hash,
            source=VariableSource.parse(data["source"]),
        )
