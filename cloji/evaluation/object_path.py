"""Utilities for reading and writing host values along property paths.

Scripts refer to nested host data with dotted identifiers (``user.address.city``)
and with ``aget``/``aset``. Every string segment is checked against the
denylist before it reaches the host object, which keeps scripts away from
prototype-style escapes (``__class__``, ``__globals__`` and friends).
"""
from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any, Iterable

from cloji import HostValue
from cloji.config import get_forbidden_props
from cloji.errors import ForbiddenAccessError
from cloji.builtin.sequence_methods import STRING_METHODS, bind_sequence_method
from cloji.types.undefined import Undefined, is_nullish

FORBIDDEN_PROPS = get_forbidden_props()


def guard_name(name: Any) -> None:
    if name in FORBIDDEN_PROPS:
        raise ForbiddenAccessError(f"Forbidden property {name}")


def guard_prop(key: Any) -> None:
    """Reject denylisted names and any dunder attribute."""
    if isinstance(key, str):
        guard_name(key)
        if key.startswith("__"):
            raise ForbiddenAccessError(f"Forbidden property {key}")


def _as_index(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, float) and key.is_integer():
        return int(key)
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None


def string_method(text: str, key: Any) -> HostValue:
    """Allowlisted ``str`` methods; any other ``str`` attribute is forbidden."""
    if isinstance(key, str) and key in STRING_METHODS:
        return getattr(text, key)
    if isinstance(key, str) and hasattr(text, key):
        raise ForbiddenAccessError(f"Forbidden property {key}")
    return Undefined


def get_property(obj: Any, key: Any) -> HostValue:
    """Read ``key`` from ``obj``; missing properties are ``Undefined``."""
    guard_prop(key)
    if is_nullish(obj):
        raise TypeError(f"Cannot read property {key!r} of {obj!r}")

    if isinstance(obj, Mapping):
        return obj[key] if key in obj else Undefined

    if isinstance(obj, (list, tuple, str)):
        index = _as_index(key)
        if index is not None:
            return obj[index] if 0 <= index < len(obj) else Undefined
        if key == "length":
            return len(obj)
        if isinstance(obj, str):
            return string_method(obj, key)
        method = bind_sequence_method(obj, key)
        if method is not None:
            return method

    if not isinstance(key, str):
        return Undefined
    return getattr(obj, key, Undefined)


def set_property(obj: Any, key: Any, value: Any) -> None:
    guard_prop(key)
    if is_nullish(obj):
        raise TypeError(f"Cannot set property {key!r} of {obj!r}")
    if isinstance(obj, MutableMapping):
        obj[key] = value
        return
    if isinstance(obj, list):
        index = _as_index(key)
        if index is not None:
            if index == len(obj):
                obj.append(value)
            else:
                obj[index] = value
            return
    setattr(obj, str(key), value)


def object_path_get(obj: Any, path: Iterable[Any]) -> HostValue:
    """Walk ``path`` from ``obj``.

    Python attribute access already binds methods to the object they were read
    from, so a callable found along the way keeps method-call semantics.
    """
    current = obj
    for key in path:
        current = get_property(current, key)
    return current


def object_path_set(obj: Any, path: list[Any], value: Any) -> HostValue:
    if not path:
        raise TypeError("Cannot assign to an empty property path")
    for key in path:
        guard_prop(key)
    *parents, last = path
    current = obj
    for key in parents:
        current = get_property(current, key)
    set_property(current, last, value)
    return value


def own_properties(value: Any) -> dict[str, HostValue]:
    """The own enumerable properties of ``value`` as a fresh dict.

    Sequences contribute their indices as string keys.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple, str)):
        return {str(i): item for i, item in enumerate(value)}
    if is_nullish(value) or isinstance(value, (bytes, int, float, bool)):
        return {}
    try:
        attrs = vars(value)
    except TypeError:
        return {}
    return {k: v for k, v in attrs.items() if not k.startswith("_")}
