"""Loading of structure formats from entry points."""

import logging
from importlib.metadata import entry_points

from dfunc.formats.manifest import FormatManifest

ENTRY_POINT_GROUP = "dfunc.formats"

log = logging.getLogger(__name__)


class FormatNotFoundError(Exception):
    """Raised when a format is not found."""


def load_format_manifest(key: str) -> FormatManifest:
    """Load a format manifest by key.

    Args:
        key: The format key as registered in pyproject.toml (e.g., "json")

    Returns:
        The format manifest instance

    Raises:
        FormatNotFoundError: If no format with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: FormatManifest = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise FormatNotFoundError(
        f"Format '{key}' not found. Available formats: {available}"
    )


def manifest_for_suffix(suffix: str) -> FormatManifest:
    """Find the format manifest handling a file suffix such as ".yml".

    Raises:
        FormatNotFoundError: If no registered format claims the suffix

    """
    suffix = suffix.lower()
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        manifest: FormatManifest = entry.load()
        if suffix in manifest.suffixes:
            log.debug("Using format %s for suffix %s", entry.name, suffix)
            return manifest

    available = sorted(e.name for e in entries)
    raise FormatNotFoundError(
        f"No format handles suffix '{suffix}'. Available formats: {available}"
    )
