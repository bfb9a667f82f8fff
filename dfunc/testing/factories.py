"""Test factories for generating test data."""

from polyfactory import Use
from polyfactory.factories import DataclassFactory
from polyfactory.factories.pydantic_factory import ModelFactory

from dfunc.models.path import KeyPath
from dfunc.models.result import LookupResult


class LookupResultFactory(DataclassFactory[LookupResult]):
    """Factory for LookupResult."""

    __model__ = LookupResult

    value = None
    message = None


class KeyPathFactory(ModelFactory[KeyPath]):
    """Factory for KeyPath."""

    __model__ = KeyPath

    keys = Use(lambda: ("servers", "0", "host"))
    separator = "."
