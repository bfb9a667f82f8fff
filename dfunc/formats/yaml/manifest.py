"""YAML format manifest."""

from dfunc.formats.manifest import FormatManifest
from dfunc.formats.yaml.format import YamlFormat

yaml_manifest = FormatManifest(suffixes=(".yaml", ".yml"), format_factory=YamlFormat)
