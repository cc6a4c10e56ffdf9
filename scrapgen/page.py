"""Pages: ordered collections of root scraps rendered as one HTML document."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from .models import RenderOptions
from .scrap import Scrap
from .space import Space

logger = logging.getLogger(__name__)

PageSource = Union[Space, Mapping, str, None]


class Page:
    """A page built from a store whose top-level entries are root scraps.

    The scrap tree is materialized once at construction. ``render`` may be
    called any number of times and returns the same markup for the same
    context.
    """

    def __init__(self, source: PageSource = None, *, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()
        if source is None:
            self._values = Space()
        elif isinstance(source, str):
            self._values = Space.parse(source)
        else:
            self._values = Space.from_mapping(source)

        self.scraps: Dict[str, Scrap] = {
            key: Scrap((key,), value, options=self.options)
            for key, value in self._values.items()
        }

    def __repr__(self) -> str:
        return f"Page({list(self.scraps)!r})"

    def get(self, path: str, default: Any = None) -> Any:
        return self._values.get(path, default)

    def clone(self) -> "Page":
        return Page(self._values.clone(), options=self.options)

    def find(self, path: Union[str, Tuple[str, ...]]) -> Optional[Scrap]:
        """Return the scrap at ``path`` (``"header title"`` or a tuple)."""

        parts = path.split(" ") if isinstance(path, str) else list(path)
        if not parts:
            return None
        current = self.scraps.get(parts[0])
        for part in parts[1:]:
            if current is None:
                return None
            current = current.children.get(part)
        return current

    def walk(self) -> Iterator[Scrap]:
        for scrap in self.scraps.values():
            yield from scrap.walk()

    def visible_scraps(self) -> Iterator[Scrap]:
        for key, scrap in self.scraps.items():
            if scrap.get("draft") == "true":
                logger.debug("skipping draft scrap %s", key)
                continue
            yield scrap

    def render(self, context: Any = None) -> str:
        if context is None:
            context = {}
        parts = [self.options.doctype, "\n"]
        for scrap in self.visible_scraps():
            parts.append(scrap.render(context))
        return "".join(parts)

    def stylesheet(self, context: Any = None) -> str:
        """CSS rules for every scrap declaring a structured style."""

        if context is None:
            context = {}
        rules = [scrap.css(context) for root in self.visible_scraps() for scrap in root.walk()]
        return "\n".join(rule for rule in rules if rule is not None)


__all__ = ["Page"]
