"""Pydantic models for render configuration."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderOptions(BaseModel):
    """Settings shared by every scrap rendered for a page."""

    doctype: str = Field(
        "<!doctype html>", description="Declaration written before the first root element."
    )
    default_tag: str = Field(
        "div", description="Tag used when a scrap does not declare a type."
    )
    id_mode: Literal["path", "local"] = Field(
        "path",
        alias="idMode",
        description=(
            "How the id attribute is derived: the full scrap path (unique across "
            "the page) or only the scrap's own key."
        ),
    )
    id_separator: str = Field(
        "-",
        alias="idSeparator",
        description="Separator placed between path segments when id_mode is 'path'.",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("id_separator")
    @classmethod
    def _separator_has_no_whitespace(cls, value: str) -> str:
        if not value or any(ch.isspace() for ch in value):
            raise ValueError("id_separator must be non-empty and contain no whitespace")
        return value


def load_render_options(path: Path) -> RenderOptions:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return RenderOptions.model_validate(data)


__all__ = ["RenderOptions", "load_render_options"]
