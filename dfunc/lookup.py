"""Wrap nested lookup structures as functions."""

import logging
import re
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)

INDEX_PATTERN = re.compile(r"-?\d+")

_MISSING = object()


class PathLookupError(LookupError):
    """Raised when a key path cannot be resolved against a structure."""

    def __init__(
        self, keys: Sequence[Hashable], depth: int, node: object, reason: str
    ) -> None:
        self.keys = tuple(keys)
        self.depth = depth
        self.node = type(node).__name__
        self.reason = reason
        path = ".".join(str(key) for key in self.keys)
        super().__init__(
            f"Cannot resolve {self.keys[depth]!r} at depth {depth} "
            f"(path: {path}): {reason}"
        )


def is_sequence(node: object) -> bool:
    """Check if node is an indexable sequence (strings and bytes are leaves)."""
    return isinstance(node, Sequence) and not isinstance(
        node, str | bytes | bytearray
    )


def _as_index(key: Hashable) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and INDEX_PATTERN.fullmatch(key):
        return int(key)
    return None


def _step(node: Any, key: Hashable) -> Any:
    """Resolve a single key against node.

    Returns the child value, or raises an exception whose first argument is a
    short reason that the caller folds into a ``PathLookupError``.
    """
    if isinstance(node, Mapping):
        if key in node:
            return node[key]
        index = _as_index(key)
        if isinstance(key, str) and index is not None and index in node:
            return node[index]
        raise KeyError(f"key not found in {type(node).__name__}")

    if is_sequence(node):
        index = _as_index(key)
        if index is None:
            raise TypeError(f"{type(node).__name__} indices must be integers")
        try:
            return node[index]
        except IndexError:
            raise IndexError(
                f"index out of range for {type(node).__name__} of length {len(node)}"
            ) from None

    if callable(node):
        return node(key)

    raise TypeError(f"{type(node).__name__} is not subscriptable")


def lookup(structure: Any, keys: Sequence[Hashable]) -> Any:
    """Walk keys through structure one lookup at a time.

    Equivalent to ``structure[k0][k1]...[kn]``, with decimal strings accepted
    as sequence indices and callables invoked with the key.

    Args:
        structure: Nested mappings, sequences and callables
        keys: Keys and indices to apply in order

    Returns:
        The value reached after the last key (the structure itself for no keys)

    Raises:
        PathLookupError: If any step cannot be resolved

    """
    keys = tuple(keys)
    node = structure
    for depth, key in enumerate(keys):
        try:
            node = _step(node, key)
        except Exception as e:
            # callable nodes may raise anything
            log.debug("Lookup failed at depth %d for key %r: %s", depth, key, e)
            reason = e.args[0] if e.args else type(e).__name__
            raise PathLookupError(keys, depth, node, str(reason)) from e
    return node


@dataclass(frozen=True, slots=True)
class NestedLookup:
    """A nested structure exposed through a callable contract."""

    structure: Any

    def __call__(self, *keys: Hashable) -> Any:
        """Resolve keys through the wrapped structure."""
        return lookup(self.structure, keys)

    def get(self, keys: Sequence[Hashable], default: Any = None) -> Any:
        """Resolve keys, returning default when the path does not exist."""
        try:
            return lookup(self.structure, keys)
        except PathLookupError:
            return default

    def at(self, *keys: Hashable) -> "NestedLookup":
        """Return a lookup rooted at the sub-structure reached by keys."""
        return NestedLookup(lookup(self.structure, keys))

    def __contains__(self, keys: object) -> bool:
        if not is_sequence(keys):
            keys = (keys,)
        return self.get(keys, _MISSING) is not _MISSING


def dfunc(structure: Any) -> NestedLookup:
    """Wrap structure so that ``dfunc(s)(a, b) == s[a][b]``."""
    if isinstance(structure, NestedLookup):
        return structure
    return NestedLookup(structure)
