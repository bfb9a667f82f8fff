"""Models for lookup results reported by the CLI."""

from dataclasses import dataclass
from typing import Any, Literal


@dataclass(frozen=True, kw_only=True)
class LookupResult:
    """Result of resolving one key path against a structure.

    A "default" status means the path was missing and the fallback value was
    reported instead.
    """

    path: str
    status: Literal["found", "missing", "default"]
    value: Any = None
    message: str | None = None
