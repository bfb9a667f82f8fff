"""YAML structure format."""

from typing import Any

import yaml

from dfunc.formats.base import StructureFormat


class YamlFormat(StructureFormat):
    """Parse YAML documents with ``yaml.safe_load``."""

    name = "yaml"

    def parse(self, text: str) -> Any:
        """Parse YAML text."""
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML: {e}") from e
