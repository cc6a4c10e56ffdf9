"""``{{variable}}`` substitution and style helpers."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .pointer import is_missing, resolve_pointer
from .space import Space

# {{name}} or {{name placeholder text}}
MARKER_RE = re.compile(r"\{\{([_a-zA-Z0-9.]+)( [^}]+)?\}\}")


def stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return " ".join(stringify(item) for item in value)
    if isinstance(value, Space):
        return value.to_string()
    return str(value)


def substitute(text: str, context: Any) -> str:
    """Replace every marker in ``text`` using values from ``context``.

    Missing values use the marker's placeholder text when one is given and
    collapse to an empty string otherwise. Substituted values are not
    scanned again.
    """

    def _replace(match: re.Match) -> str:
        name, placeholder = match.group(1), match.group(2)
        value = resolve_pointer(name, context)
        if not is_missing(value):
            return stringify(value)
        return placeholder[1:] if placeholder else ""

    return MARKER_RE.sub(_replace, text)


def _declarations(style: Mapping) -> str:
    parts = []
    for prop, value in style.items():
        text = stringify(value)
        if text.endswith(";"):
            text = text[:-1]
        parts.append(f"{prop}: {text}; ")
    return "".join(parts)


def style_to_inline(style: Mapping, context: Any) -> str:
    """Render ``{color: red}`` as ``color: red;`` for a ``style`` attribute."""

    return substitute(_declarations(style), context).rstrip()


def style_to_css_block(selector: str, style: Mapping, context: Any) -> str:
    """Render a style map as a CSS rule for ``selector``."""

    return substitute(f"{selector} {{ {_declarations(style)}}}", context)


__all__ = ["MARKER_RE", "stringify", "style_to_css_block", "style_to_inline", "substitute"]
