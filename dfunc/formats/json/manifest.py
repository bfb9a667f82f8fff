"""JSON format manifest."""

from dfunc.formats.json.format import JsonFormat
from dfunc.formats.manifest import FormatManifest

json_manifest = FormatManifest(suffixes=(".json",), format_factory=JsonFormat)
