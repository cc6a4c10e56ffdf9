"""Scraps: the nodes of a page tree and their HTML rendering."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Tuple, Union

from .element import Element
from .formatting import format_content
from .loop import expand_loop
from .models import RenderOptions
from .space import Space
from .substitute import style_to_css_block, style_to_inline, substitute
from .tables import EVENT_ATTRIBUTES, FIXED_INPUT_TYPES, INPUT_TYPES, STANDARD_ATTRIBUTES

ScrapSource = Union[Space, Mapping, str]


def _as_space(source: ScrapSource) -> Space:
    # A bare string is shorthand for a container holding that content.
    if isinstance(source, str):
        space = Space()
        space.set("content", source)
        return space
    return Space.from_mapping(source)


def _declared(value: Any) -> bool:
    return value is not None and value != ""


class Scrap:
    """One element of a page.

    The tree below a scrap is built once, when the scrap is created: every
    entry of its `scraps` store becomes a child ``Scrap``. Rendering does not
    change the tree, but it does replace ``self.element`` with a fresh
    builder, so a single instance must not be rendered from two threads at
    the same time.
    """

    def __init__(
        self,
        path: Union[str, Tuple[str, ...]],
        source: ScrapSource,
        *,
        options: RenderOptions | None = None,
    ) -> None:
        self.path: Tuple[str, ...] = tuple(path.split(" ")) if isinstance(path, str) else tuple(path)
        if not self.path or not self.path[-1]:
            raise ValueError(f"scrap id must be non-empty (path {self.path!r})")
        self.id = self.path[-1]
        self.options = options or RenderOptions()
        self._values = _as_space(source)
        self.element: Element | None = None

        self.children: Dict[str, Scrap] = {}
        nested = self._values.get("scraps")
        if isinstance(nested, Space):
            for key, value in nested.items():
                self.children[key] = Scrap(self.path + (key,), value, options=self.options)

    def __repr__(self) -> str:
        return f"Scrap({' '.join(self.path)!r})"

    @property
    def values(self) -> Space:
        return self._values

    def get(self, path: str, default: Any = None) -> Any:
        return self._values.get(path, default)

    @property
    def html_id(self) -> str:
        if self.options.id_mode == "local":
            return self.id
        return self.options.id_separator.join(self.path)

    def selector(self) -> str:
        if self.options.id_mode == "local":
            return "#" + " #".join(self.path)
        return f"#{self.html_id}"

    @property
    def is_loop(self) -> bool:
        return _declared(self._values.get("loop"))

    def walk(self) -> Iterator["Scrap"]:
        """Yield this scrap and its descendants, skipping loop molds."""

        yield self
        if self.is_loop:
            return
        for child in self.children.values():
            yield from child.walk()

    def clone(self) -> "Scrap":
        return Scrap(self.path, self._values.clone(), options=self.options)

    # Rendering

    def render(self, context: Any = None) -> str:
        if context is None:
            context = {}
        self._set_element_type(context)
        self._set_content(context)
        self._set_style(context)
        self._set_events()
        return self.element.to_html()

    def _set_element_type(self, context: Any) -> None:
        kind = self._values.get("type")
        if not isinstance(kind, str) or not kind:
            kind = self.options.default_tag

        if kind in INPUT_TYPES:
            self.element = Element("input", {"type": kind})
        elif kind in FIXED_INPUT_TYPES:
            self.element = Element("input", {"type": FIXED_INPUT_TYPES[kind]})
        else:
            self.element = Element(kind)

        self.element.attr("id", self.html_id)
        for name in STANDARD_ATTRIBUTES:
            value = self._values.get(name)
            if isinstance(value, str) and value:
                self.element.attr(name, substitute(value, context))

    def _set_content(self, context: Any) -> None:
        if self.is_loop:
            loop = self._values.get("loop")
            mold = self._values.get("scraps")
            if isinstance(mold, Space):
                self.element.append(
                    expand_loop(" ".join(self.path), loop, mold, context, self._render_loop_entry)
                )
            return

        content = self._values.get("content")
        if isinstance(content, str) and content:
            text = substitute(content, context)
            self.element.append(format_content(text, self._values.get("content_format")))
            return

        for child in self.children.values():
            self.element.append(child.render(context))

    def _render_loop_entry(self, key: str, source: Any, context: Mapping) -> str:
        return Scrap(self.path + (key,), source, options=self.options).render(context)

    def _set_style(self, context: Any) -> None:
        style = self._values.get("style")
        if isinstance(style, Space):
            self.element.attr("style", style_to_inline(style, context))
        elif isinstance(style, str) and style:
            self.element.attr("style", style)

    def _set_events(self) -> None:
        # Handlers are trusted markup and are never substituted or escaped.
        for name in EVENT_ATTRIBUTES:
            value = self._values.get(name)
            if isinstance(value, str) and value:
                self.element.attr(name, value)

    def css(self, context: Any = None) -> str | None:
        """CSS rule for a structured `style`, or ``None`` when there is none."""

        style = self._values.get("style")
        if not isinstance(style, Space):
            return None
        return style_to_css_block(self.selector(), style, context if context is not None else {})


__all__ = ["Scrap"]
