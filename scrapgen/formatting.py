"""Conversion of literal content into HTML according to `content_format`."""

from __future__ import annotations

import logging

from markdown import markdown

from .tables import ContentFormat

logger = logging.getLogger(__name__)


def format_content(text: str, content_format: str | None = None) -> str:
    if not content_format:
        return text
    try:
        fmt = ContentFormat(content_format)
    except ValueError:
        logger.debug("unknown content_format %r, passing content through", content_format)
        return text

    if fmt is ContentFormat.NL2BR:
        return text.replace("\n", "<br>")
    if fmt is ContentFormat.MARKDOWN:
        return markdown(text)
    return text


__all__ = ["format_content"]
