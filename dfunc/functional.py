"""Function composition over callables and wrapped containers."""

from collections.abc import Callable, Mapping
from typing import Any

from dfunc.lookup import dfunc, is_sequence


def as_function(obj: Any) -> Callable[..., Any]:
    """Return obj as a callable.

    Callables are returned unchanged; mappings and sequences are wrapped with
    :func:`dfunc.lookup.dfunc` so they can sit anywhere a function can.

    Raises:
        TypeError: If obj is neither callable nor a container

    """
    if callable(obj):
        return obj
    if isinstance(obj, Mapping) or is_sequence(obj):
        return dfunc(obj)
    raise TypeError(f"Cannot use {type(obj).__name__} as a function")


def compose(*fns: Any) -> Callable[..., Any]:
    """Compose functions from right to left.

    ``compose(f, g, h)(*args)`` is ``f(g(h(*args)))``. Containers are accepted
    in place of functions.
    """
    functions = [as_function(fn) for fn in fns]

    if not functions:
        return _identity

    def composed(*args: Any, **kwargs: Any) -> Any:
        result = functions[-1](*args, **kwargs)
        for fn in reversed(functions[:-1]):
            result = fn(result)
        return result

    return composed


def pipe(value: Any, *fns: Any) -> Any:
    """Thread value through fns from left to right."""
    for fn in fns:
        value = as_function(fn)(value)
    return value


def _identity(value: Any) -> Any:
    return value
