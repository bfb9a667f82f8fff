"""Tests for structure loader."""

from pathlib import Path
from unittest.mock import patch

import pytest

from dfunc.formats.loading import FormatNotFoundError
from dfunc.structure_loader import load_structure


class TestLoadStructure:
    """Tests for load_structure function."""

    def test_loads_yaml_by_suffix(self, tmp_path: Path) -> None:
        """Loads and parses a YAML file based on its suffix."""
        path = tmp_path / "config.yaml"
        path.write_text(
            """
servers:
  - host: db1
    port: 5432
name: cluster
"""
        )

        structure = load_structure(path)

        assert structure == {
            "servers": [{"host": "db1", "port": 5432}],
            "name": "cluster",
        }

    def test_loads_json_by_suffix(self, tmp_path: Path) -> None:
        """Loads and parses a JSON file based on its suffix."""
        path = tmp_path / "config.json"
        path.write_text('[1, {"a": null}]')

        assert load_structure(path) == [1, {"a": None}]

    def test_explicit_format_overrides_suffix(self, tmp_path: Path) -> None:
        """Uses the given format key regardless of suffix."""
        path = tmp_path / "config.txt"
        path.write_text("a: 1\n")

        assert load_structure(path, "yaml") == {"a": 1}

    def test_raises_for_missing_file(self, tmp_path: Path) -> None:
        """Raises FileNotFoundError for missing file."""
        with pytest.raises(FileNotFoundError, match="Structure file not found"):
            load_structure(tmp_path / "missing.yaml")

    def test_raises_for_empty_file(self, tmp_path: Path) -> None:
        """Raises ValueError for blank file."""
        path = tmp_path / "config.json"
        path.write_text("  \n")

        with pytest.raises(ValueError, match="Empty structure file"):
            load_structure(path)

    def test_raises_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ValueError for malformed YAML."""
        path = tmp_path / "config.yml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_structure(path)

    def test_raises_for_non_utf8_file(self, tmp_path: Path) -> None:
        """Raises ValueError naming the format for undecodable bytes."""
        path = tmp_path / "config.json"
        path.write_bytes(b'{"a": "\xff"}')

        with pytest.raises(ValueError, match="Invalid JSON .*not UTF-8") as exc_info:
            load_structure(path)

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_raises_for_unreadable_file(self, tmp_path: Path) -> None:
        """Raises ValueError when the file cannot be read."""
        path = tmp_path / "config.json"
        path.write_text("{}")
        read_text = Path.read_text

        def deny(self: Path, *args: object, **kwargs: object) -> str:
            if self == path:
                raise PermissionError("denied")
            return read_text(self, *args, **kwargs)  # type: ignore[arg-type]

        with (
            patch.object(Path, "read_text", autospec=True, side_effect=deny),
            pytest.raises(ValueError, match="Cannot read structure file"),
        ):
            load_structure(path)

    def test_raises_for_unknown_suffix(self, tmp_path: Path) -> None:
        """Raises FormatNotFoundError when the suffix has no format."""
        path = tmp_path / "config.ini"
        path.write_text("[section]\n")

        with pytest.raises(FormatNotFoundError):
            load_structure(path)
