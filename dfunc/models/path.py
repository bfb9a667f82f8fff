"""Models for key paths parsed from the command line."""

from collections.abc import Sequence

from pydantic import Field, ValidationError, field_validator

from dfunc.models.base import Model

DEFAULT_SEPARATOR = "."


class KeyPath(Model):
    """Ordered keys and indices applied one lookup at a time."""

    keys: Sequence[str | int] = Field(
        default_factory=tuple, description="Keys to apply (empty means the root)"
    )
    separator: str = Field(
        default=DEFAULT_SEPARATOR, min_length=1, description="Separator for str()"
    )

    @field_validator("keys")
    @classmethod
    def _reject_empty_keys(cls, keys: Sequence[str | int]) -> tuple[str | int, ...]:
        if any(key == "" for key in keys):
            raise ValueError("key path contains an empty segment")
        return tuple(keys)

    @classmethod
    def parse(cls, text: str, separator: str = DEFAULT_SEPARATOR) -> "KeyPath":
        """Parse a path such as ``servers.0.host``.

        Segments stay strings; decimal segments still index sequences because
        lookups accept them as indices. An empty string is the root path.

        Raises:
            ValueError: If the path has an empty segment or separator

        """
        if not separator:
            raise ValueError("Invalid key path separator: must not be empty")
        if text == "":
            return cls(separator=separator)

        keys = text.split(separator)
        try:
            return cls(keys=keys, separator=separator)
        except ValidationError as e:
            raise ValueError(f"Invalid key path {text!r}: {e}") from e

    def __str__(self) -> str:
        return self.separator.join(str(key) for key in self.keys)
