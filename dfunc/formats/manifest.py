"""Format manifest definition for the plugin system."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from dfunc.formats.base import StructureFormat


@dataclass(frozen=True, kw_only=True)
class FormatManifest:
    """Manifest describing a structure format plugin.

    The manifest maps file suffixes to a factory so formats are only
    instantiated once a file actually needs them.
    """

    suffixes: Sequence[str]
    format_factory: Callable[[], StructureFormat]
