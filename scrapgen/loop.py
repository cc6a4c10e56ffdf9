"""Expansion of `loop` declarations into repeated scraps."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Callable, List, Tuple

from .errors import TemplateExpansionError
from .pointer import MISSING, is_missing, resolve_pointer, scoped
from .space import Space, SpaceParseError
from .substitute import MARKER_RE, substitute

logger = logging.getLogger(__name__)

_SINGLE_MARKER_RE = re.compile(r"^\s*\{\{([_a-zA-Z0-9.]+)\}\}\s*$")

RenderEntry = Callable[[str, Any, Mapping], str]


def _split_words(text: str) -> List[Tuple[str, Any]]:
    return [(str(index), word) for index, word in enumerate(text.split())]


def loop_items(source: Any, context: Any) -> List[Tuple[str, Any]]:
    """Turn a loop declaration into ordered ``(key, value)`` pairs.

    ``source`` is the raw `loop` value of a scrap: a ``{{variable}}``
    pointing into ``context``, a whitespace separated list of words, or a
    nested store declared in place.
    """

    if isinstance(source, str):
        match = _SINGLE_MARKER_RE.match(source)
        if match:
            items = resolve_pointer(match.group(1), context)
        elif MARKER_RE.search(source):
            items = substitute(source, context)
        else:
            items = source
    else:
        items = source

    if is_missing(items):
        return []
    if isinstance(items, str):
        return _split_words(items)
    if isinstance(items, Mapping):
        return [(str(key), value) for key, value in items.items()]
    if isinstance(items, (list, tuple)):
        return [(str(index), value) for index, value in enumerate(items)]

    logger.warning("ignoring loop source of type %s", type(items).__name__)
    return []


def _inlineable(value: Any) -> bool:
    if is_missing(value):
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, str):
        return "\n" not in value and "\r" not in value
    return isinstance(value, (int, float))


def fill_mold(mold: str, local: Mapping, context: Any) -> str:
    """Substitute single-line values into the serialized mold.

    Markers are looked up in ``local`` first, then in ``context`` when the
    name is not bound locally. Markers that resolve to nothing, to an empty
    string, to a structure, or to multi-line text stay in place so the
    generated scraps can resolve them when rendered.
    """

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        value = resolve_pointer(name, local)
        if value is MISSING:
            value = resolve_pointer(name, context)
        if not _inlineable(value):
            return match.group(0)
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    return MARKER_RE.sub(_replace, mold)


def expand_loop(
    path: str,
    source: Any,
    mold: Space,
    context: Any,
    render_entry: RenderEntry,
) -> str:
    """Render the mold once per loop item and concatenate the results."""

    items = loop_items(source, context)
    if not items:
        return ""

    mold_text = mold.to_string()
    fragments: List[str] = []
    for key, value in items:
        local = {"key": key, "value": value}
        filled = fill_mold(mold_text, local, context)
        try:
            scraps = Space.parse(filled)
        except SpaceParseError as exc:
            raise TemplateExpansionError(path, key, str(exc)) from exc

        layered = scoped(local, context)
        for scrap_key, scrap_value in scraps.items():
            fragments.append(render_entry(scrap_key, scrap_value, layered))
    return "".join(fragments)


__all__ = ["expand_loop", "fill_mold", "loop_items"]
