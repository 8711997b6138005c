"""Parser for the Figma "Export/Import Variables" JSON format."""

import json
from typing import Any, Dict, List, Optional
from pathlib import Path

from ..models.variables import LocaleCode, ModeId, VariableRecord, VariablesDocument


class VariablesParser:
    """Parser for Figma variables export files."""

    def parse(self, file_path: str) -> VariablesDocument:
        """
        Parse a variables export file and return a structured representation.

        Args:
            file_path: Path to the .json export

        Returns:
            VariablesDocument with modes and variable records

        Raises:
            FileNotFoundError: The file does not exist
            ValueError: The file is not valid JSON or not a variables export
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        return self.parse_string(content)

    def parse_string(self, content: str) -> VariablesDocument:
        """
        Parse a variables export from a string.

        Args:
            content: JSON string content

        Returns:
            VariablesDocument
        """
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in variables file: {e}")

        return self._parse_data(data)

    def _parse_data(self, data: Any) -> VariablesDocument:
        """Parse the JSON data structure into our model."""
        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid variables file: expected an object, got {type(data).__name__}"
            )

        raw_modes = data.get("modes", {})
        if not isinstance(raw_modes, dict):
            raise ValueError("Invalid variables file: 'modes' must be an object")

        raw_variables = data.get("variables", [])
        if not isinstance(raw_variables, list):
            raise ValueError("Invalid variables file: 'variables' must be a list")

        modes: Dict[LocaleCode, ModeId] = {
            LocaleCode(str(locale)): ModeId(str(mode_id)) for locale, mode_id in raw_modes.items()
        }

        variables: List[VariableRecord] = []
        skipped = 0
        for record_data in raw_variables:
            record = self._parse_record(record_data)
            if record is None:
                skipped += 1
                continue
            variables.append(record)

        return VariablesDocument(modes=modes, variables=variables, skipped_records=skipped)

    def _parse_record(self, record_data: Any) -> Optional[VariableRecord]:
        """Parse a single variable, or None when it lacks a name or values."""
        if not isinstance(record_data, dict):
            return None

        name = record_data.get("name")
        values = record_data.get("valuesByMode")
        if not isinstance(name, str) or not isinstance(values, dict):
            return None

        return VariableRecord(
            name=name,
            values_by_mode={ModeId(str(mode_id)): value for mode_id, value in values.items()},
        )
