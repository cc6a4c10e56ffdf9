"""Minimal element builder used while rendering a scrap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


def _render_attrs(attrs: Dict[str, str]) -> str:
    if not attrs:
        return ""
    # Values are written as-is; callers sanitize anything untrusted.
    parts = [f'{name}="{value}"' for name, value in attrs.items()]
    return " " + " ".join(parts)


@dataclass
class Element:
    tag: str
    attrs: Dict[str, str] = field(default_factory=dict)
    content: str = ""

    def attr(self, name: str, value: str) -> None:
        self.attrs[name] = value

    def append(self, markup: str) -> None:
        self.content += markup

    def to_html(self) -> str:
        return f"<{self.tag}{_render_attrs(self.attrs)}>{self.content}</{self.tag}>"


__all__ = ["Element"]
