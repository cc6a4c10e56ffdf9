"""Exceptions raised by scrapgen."""


class ScrapgenError(Exception):
    """Base class for scrapgen errors."""


class TemplateExpansionError(ScrapgenError):
    """A loop mold could not be re-parsed after variable substitution."""

    def __init__(self, path: str, key: str, reason: str) -> None:
        super().__init__(f"loop in '{path}' failed to expand item {key!r}: {reason}")
        self.path = path
        self.key = key
        self.reason = reason


__all__ = ["ScrapgenError", "TemplateExpansionError"]
