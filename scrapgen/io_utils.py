"""Utility helpers for reading page sources and contexts, and for logging."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

from .space import Space


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def read_space(path: Path) -> Space:
    return Space.load(path)


def read_context(path: Path) -> Any:
    """Load a render context from a ``.json``, ``.yaml``/``.yml`` or ``.space`` file."""

    suffix = path.suffix.lower()
    if suffix == ".json":
        return read_json(path)
    if suffix in (".yaml", ".yml"):
        return read_yaml(path) or {}
    if suffix == ".space":
        return read_space(path)
    raise ValueError(f"unsupported context file type: {path.name}")


def read_mapping_source(path: Path) -> Space:
    """Load a YAML or JSON page description and convert it to a store."""

    data = read_json(path) if path.suffix.lower() == ".json" else read_yaml(path)
    return Space.from_mapping(data or {})


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
