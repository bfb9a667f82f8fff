"""JSON format module."""

from dfunc.formats.json.format import JsonFormat
from dfunc.formats.json.manifest import json_manifest

__all__ = ["JsonFormat", "json_manifest"]
