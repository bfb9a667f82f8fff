"""Load nested structures from JSON and YAML files."""

import logging
from pathlib import Path
from typing import Any

from dfunc.formats.loading import load_format_manifest, manifest_for_suffix

log = logging.getLogger(__name__)


def load_structure(path: Path, format_key: str | None = None) -> Any:
    """Load and parse a structure file.

    Args:
        path: File to read
        format_key: Registered format key; inferred from the suffix when None

    Returns:
        The parsed structure

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is unreadable, empty or cannot be parsed
        FormatNotFoundError: If no format matches the key or suffix

    """
    if not path.is_file():
        raise FileNotFoundError(f"Structure file not found: {path}")

    if format_key is None:
        manifest = manifest_for_suffix(path.suffix)
    else:
        manifest = load_format_manifest(format_key)

    structure_format = manifest.format_factory()

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(
            f"Invalid {structure_format.name.upper()} in {path}: not UTF-8 ({e})"
        ) from e
    except OSError as e:
        raise ValueError(f"Cannot read structure file {path}: {e}") from e

    if not text.strip():
        raise ValueError(f"Empty structure file: {path}")

    log.debug("Parsing %s as %s", path, structure_format.name)
    return structure_format.parse(text)
