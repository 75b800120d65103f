"""Small helpers shared by the assertion functions."""

from typing import Any


def checker_short_name(fn: Any) -> str:
    """Return the unqualified name of a checker callable."""
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if name is None:
        name = type(fn).__name__
    return name.rsplit(".", 1)[-1]