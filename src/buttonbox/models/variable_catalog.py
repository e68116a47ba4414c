"""
Variable Catalog - ECU variables loaded from the bundled variables.json

The catalog is read once and cached. A failed load leaves the cache empty,
so the next call tries the file again.

Usage:
    catalog = VariableCatalog()
    boost = catalog.find_by_name("BoostBoostOutput")
    matches = catalog.search("temp")
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..constants import DEFAULT_CATALOG_PATH
from ..utils.error_handler import ErrorHandler, ErrorCategory, ErrorSeverity
from .variable import VariableDefinition

logger = logging.getLogger(__name__)


class VariableCatalog:
    """Read-only index of the ECU variable definitions."""

    def __init__(self, path: Union[str, Path] = DEFAULT_CATALOG_PATH,
                 error_handler: Optional[ErrorHandler] = None):
        self.path = Path(path)
        self._error_handler = error_handler
        self._variables: List[VariableDefinition] = []
        self.last_error: Optional[str] = None

    def __len__(self) -> int:
        return len(self._variables)

    @property
    def is_loaded(self) -> bool:
        return bool(self._variables)

    def load(self) -> List[VariableDefinition]:
        """
        Load variable definitions, returning the cached list if already loaded.

        Returns:
            List of VariableDefinition, empty if the file is missing or malformed
        """
        if self._variables:
            return list(self._variables)

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                records = json.load(f)
            if not isinstance(records, list):
                raise ValueError("Catalog root must be an array of variable records")
            self._variables = [VariableDefinition.from_dict(r) for r in records]
            self.last_error = None
            output_count = sum(1 for v in self._variables if v.is_output)
            logger.info(
                f"Loaded {len(self._variables)} variables "
                f"({output_count} outputs) from {self.path}"
            )
        except (OSError, ValueError, KeyError, TypeError, RecursionError) as e:
            self._variables = []
            self.last_error = f"Failed to load variable catalog {self.path}: {e}"
            self._record_failure(e)

        return list(self._variables)

    def all_variables(self) -> List[VariableDefinition]:
        """All variables (output and config)."""
        return self.load()

    def output_variables(self) -> List[VariableDefinition]:
        """Variables that can be shown on a gauge."""
        return [v for v in self.load() if v.is_output]

    def find_by_hash(self, var_hash: int) -> Optional[VariableDefinition]:
        """Find variable by firmware hash, None if unknown."""
        for variable in self.load():
            if variable.hash == var_hash:
                return variable
        return None

    def find_by_name(self, name: str) -> Optional[VariableDefinition]:
        """Find variable by exact name, ignoring case."""
        wanted = name.lower()
        for variable in self.load():
            if variable.name.lower() == wanted:
                return variable
        return None

    def search(self, query: str) -> List[VariableDefinition]:
        """
        Case-insensitive substring search over output variable names.

        An empty query returns every output variable.
        """
        outputs = self.output_variables()
        if not query:
            return outputs
        wanted = query.lower()
        return [v for v in outputs if wanted in v.name.lower()]

    def _record_failure(self, exception: Exception) -> None:
        if self._error_handler is not None:
            self._error_handler.handle_exception(
                exception,
                message=self.last_error,
                category=ErrorCategory.CATALOG,
                severity=ErrorSeverity.WARNING,
            )
        else:
            logger.warning(self.last_error)
