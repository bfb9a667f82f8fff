"""JSON structure format."""

import json
from typing import Any

from dfunc.formats.base import StructureFormat


class JsonFormat(StructureFormat):
    """Parse JSON documents with the standard library decoder."""

    name = "json"

    def parse(self, text: str) -> Any:
        """Parse JSON text."""
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}") from e
