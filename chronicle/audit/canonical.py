"""Canonical forms for payload equality.

Payload data is arbitrary, so the no-op check in change reconstruction
compares canonical forms instead of the raw values. Containers become
nested tuples with a stable order, pydantic models become their dumped
dicts, and anything that still cannot be compared falls back to repr.
"""

from collections.abc import Mapping, Set
from typing import Any

from pydantic import BaseModel

_SCALARS = (str, bytes, int, float, bool, type(None))


def canonicalize(data: Any) -> Any:
    """Return a hashable, structurally comparable form of data."""
    if isinstance(data, _SCALARS):
        return data
    if isinstance(data, BaseModel):
        return ("model", type(data).__name__, canonicalize(data.model_dump()))
    if isinstance(data, Mapping):
        items = [(canonicalize(k), canonicalize(v)) for k, v in data.items()]
        return ("map", tuple(sorted(items, key=repr)))
    if isinstance(data, Set):
        return ("set", tuple(sorted((canonicalize(v) for v in data), key=repr)))
    if isinstance(data, (list, tuple)):
        return ("seq", tuple(canonicalize(v) for v in data))
    try:
        hash(data)
    except TypeError:
        return ("repr", type(data).__name__, repr(data))
    return data


def same_value(left: Any, right: Any) -> bool:
    """Structural equality that never raises."""
    try:
        return bool(canonicalize(left) == canonicalize(right))
    except Exception:  # noqa: BLE001 - foreign __eq__ implementations
        return repr(left) == repr(right)
