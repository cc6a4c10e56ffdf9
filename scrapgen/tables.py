"""Static lookup tables shared by every render."""

from __future__ import annotations

from enum import Enum


# `type` keywords rendered as <input type="...">
INPUT_TYPES = frozenset(
    """
    checkbox color date datetime email file month number password radio
    range search tel text time url week
    """.split()
)

# `type` keywords rendered as <input> with a fixed type attribute
FIXED_INPUT_TYPES = {
    "inputbutton": "button",
    "hidden": "hidden",
}

# Attributes copied from a scrap, with variables substituted
STANDARD_ATTRIBUTES = tuple(
    """
    checked class disabled draggable dropzone end for height href max
    maxlength min name origin pattern placeholder readonly rel required
    selected spellcheck src tabindex target title width value
    """.split()
)

# Event handler attributes, copied verbatim
EVENT_ATTRIBUTES = tuple(
    """
    onblur onchange onclick oncontextmenu onenterkey onfocus onhold
    onkeydown onkeypress onkeyup onmousedown onmouseout onmouseover
    onmouseup onorientationchange onsubmit ontouchend ontouchmove
    ontouchstart
    """.split()
)


class ContentFormat(str, Enum):
    """Supported values of the `content_format` key."""

    TEXT = "text"
    HTML = "html"
    NL2BR = "nl2br"
    MARKDOWN = "markdown"


__all__ = [
    "ContentFormat",
    "EVENT_ATTRIBUTES",
    "FIXED_INPUT_TYPES",
    "INPUT_TYPES",
    "STANDARD_ATTRIBUTES",
]
