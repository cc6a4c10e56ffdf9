"""Ordered, indentation-based key/value store used as the page source format.

A store is written one entry per line::

    header
     type h1
     content Hello {{name}}
    intro
     content First line
      second line

``key value`` is a string entry, a bare ``key`` opens a nested store whose
entries are indented one space deeper, and lines indented past a string
entry continue that string on a new line.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Iterator, Tuple, Union

Value = Union[str, "Space"]


class SpaceParseError(ValueError):
    """Raised when store text cannot be parsed."""

    def __init__(self, lineno: int, message: str) -> None:
        super().__init__(f"line {lineno}: {message}")
        self.lineno = lineno


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _check_key(key: str) -> str:
    if not isinstance(key, str) or not key:
        raise ValueError(f"store keys must be non-empty strings, got {key!r}")
    if " " in key or "\n" in key:
        raise ValueError(f"store keys cannot contain spaces or newlines: {key!r}")
    return key


def _scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Space(Mapping):
    """Ordered mapping of string keys to strings or nested stores."""

    def __init__(self, source: Union[str, Mapping, None] = None) -> None:
        self._data: dict[str, Value] = {}
        if source is None:
            return
        if isinstance(source, str):
            self._data = Space.parse(source)._data
        else:
            self.patch(source)

    # Construction

    @classmethod
    def parse(cls, text: str) -> "Space":
        root = cls()
        # (indent expected for children, store receiving them)
        stack: list[Tuple[int, Space]] = [(0, root)]
        pending: Tuple[Space, str, int] | None = None

        for lineno, line in enumerate(_normalize_newlines(text).split("\n"), start=1):
            if not line:
                continue
            indent = len(line) - len(line.lstrip(" "))

            if pending is not None:
                owner, key, continuation_indent = pending
                if indent >= continuation_indent:
                    owner._data[key] = f"{owner._data[key]}\n{line[continuation_indent:]}"
                    continue
                pending = None

            if not line.strip():
                continue

            while indent < stack[-1][0]:
                stack.pop()
            expected, parent = stack[-1]
            if indent != expected:
                raise SpaceParseError(
                    lineno, f"unexpected indentation of {indent} (expected {expected})"
                )

            key, sep, rest = line[indent:].partition(" ")
            if sep:
                parent._data[key] = rest
                pending = (parent, key, indent + 1)
            else:
                child = cls()
                parent._data[key] = child
                stack.append((indent + 1, child))
        return root

    @classmethod
    def load(cls, path: Path) -> "Space":
        return cls.parse(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def from_mapping(cls, obj: Any) -> "Space":
        """Build a store from plain dicts, lists and scalars."""

        if isinstance(obj, Space):
            return obj.clone()
        space = cls()
        if isinstance(obj, Mapping):
            items = obj.items()
        elif isinstance(obj, (list, tuple)):
            items = ((str(index), item) for index, item in enumerate(obj))
        else:
            raise TypeError(f"cannot build a store from {type(obj).__name__}")
        for key, value in items:
            space.set(str(key), value)
        return space

    # Mapping protocol

    def __getitem__(self, key: str) -> Value:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Space):
            return list(self._data.items()) == list(other._data.items())
        if isinstance(other, Mapping):
            return dict(self._data) == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Space({self.to_dict()!r})"

    def __str__(self) -> str:
        return self.to_string()

    # Access

    def get(self, path: Union[str, Tuple[str, ...]], default: Any = None) -> Any:
        """Look up a value by key or by a space-separated path of keys."""

        parts = path.split(" ") if isinstance(path, str) else list(path)
        current: Any = self
        for part in parts:
            if not isinstance(current, Space) or part not in current._data:
                return default
            current = current._data[part]
        return current

    def each(self, fn: Callable[[str, Value], Any]) -> None:
        for key, value in list(self._data.items()):
            fn(key, value)

    # Mutation

    def set(self, key: str, value: Any) -> None:
        _check_key(key)
        if isinstance(value, Space):
            self._data[key] = value
        elif isinstance(value, (Mapping, list, tuple)):
            self._data[key] = Space.from_mapping(value)
        else:
            self._data[key] = _scalar_text(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def patch(self, other: Mapping) -> "Space":
        """Shallow merge ``other`` into this store, last write wins."""

        for key, value in other.items():
            self.set(str(key), value)
        return self

    def clone(self) -> "Space":
        return copy.deepcopy(self)

    # Serialization

    def to_string(self, indent: int = 0) -> str:
        pad = " " * indent
        lines: list[str] = []
        for key, value in self._data.items():
            if isinstance(value, Space):
                lines.append(f"{pad}{key}\n")
                lines.append(value.to_string(indent + 1))
                continue
            first, *rest = value.split("\n")
            lines.append(f"{pad}{key} {first}\n")
            for line in rest:
                lines.append(f"{pad} {line}\n")
        return "".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            key: value.to_dict() if isinstance(value, Space) else value
            for key, value in self._data.items()
        }


__all__ = ["Space", "SpaceParseError"]
