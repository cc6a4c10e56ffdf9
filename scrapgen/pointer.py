"""Dotted variable lookup against render contexts."""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Mapping, Sequence
from typing import Any


class _Missing:
    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _lookup(segment: str, context: Any) -> Any:
    if context is None or isinstance(context, (str, bytes)):
        return MISSING
    if isinstance(context, Mapping):
        if segment in context:
            return context[segment]
        return MISSING
    if isinstance(context, Sequence):
        if segment.isdigit() and int(segment) < len(context):
            return context[int(segment)]
        return MISSING
    if segment.startswith("_"):
        return MISSING
    try:
        return getattr(context, segment, MISSING)
    except Exception:
        return MISSING


def resolve_pointer(path: str, context: Any) -> Any:
    """Resolve ``a.b.c`` against ``context``, returning ``MISSING`` if absent.

    Each segment is looked up in the value produced by the previous one, so
    mappings, stores, sequences and plain objects can be mixed freely.
    Resolution never mutates the context and never raises for odd inputs.
    """

    if not path:
        return MISSING
    current = context
    for segment in path.split("."):
        current = _lookup(segment, current)
        if current is MISSING:
            return MISSING
    return current


def is_missing(value: Any) -> bool:
    """Values that fall back to a placeholder when substituted."""

    return value is MISSING or value is None or (isinstance(value, str) and not value)


class _AttributeView(Mapping):
    """Read-only mapping over the public attributes of an object."""

    def __init__(self, obj: Any) -> None:
        self._obj = obj

    def __getitem__(self, key: str) -> Any:
        value = _lookup(key, self._obj)
        if value is MISSING:
            raise KeyError(key)
        return value

    def __iter__(self):
        return (name for name in dir(self._obj) if not name.startswith("_"))

    def __len__(self) -> int:
        return sum(1 for _ in self)


def scoped(local: Mapping, outer: Any) -> ChainMap:
    """Layer ``local`` bindings over ``outer`` so local names shadow outer ones."""

    if outer is None or isinstance(outer, (str, bytes)):
        return ChainMap(dict(local))
    if isinstance(outer, Mapping):
        return ChainMap(dict(local), outer)
    return ChainMap(dict(local), _AttributeView(outer))


__all__ = ["MISSING", "is_missing", "resolve_pointer", "scoped"]
