"""YAML format module."""

from dfunc.formats.yaml.format import YamlFormat
from dfunc.formats.yaml.manifest import yaml_manifest

__all__ = ["YamlFormat", "yaml_manifest"]
