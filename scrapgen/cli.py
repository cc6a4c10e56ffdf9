"""Command-line interface for scrapgen."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Iterable, Optional

import yaml
from pydantic import ValidationError

from .errors import TemplateExpansionError
from .io_utils import read_context, read_mapping_source, read_space, warn
from .models import RenderOptions, load_render_options
from .page import Page
from .space import SpaceParseError


def _load_page(path: Path, options: RenderOptions) -> Page:
    try:
        return Page(read_space(path), options=options)
    except SpaceParseError as exc:
        raise SystemExit(f"Invalid page file {path}: {exc}") from exc


def _load_options(path: Optional[str]) -> RenderOptions:
    if not path:
        return RenderOptions()
    try:
        return load_render_options(Path(path))
    except (yaml.YAMLError, ValidationError) as exc:
        raise SystemExit(f"Invalid options file {path}: {exc}") from exc


def _load_context(path: Optional[str]) -> Any:
    if not path:
        return {}
    try:
        return read_context(Path(path))
    except (json.JSONDecodeError, yaml.YAMLError, SpaceParseError, ValueError) as exc:
        raise SystemExit(f"Invalid context file {path}: {exc}") from exc


def _emit(text: str, output: Optional[str]) -> None:
    if not output:
        sys.stdout.write(text)
        return
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")


def _render(page: Page, context: Any) -> str:
    try:
        return page.render(context)
    except TemplateExpansionError as exc:
        raise SystemExit(f"Render failed: {exc}") from exc


def _handle_render(args: argparse.Namespace) -> None:
    options = _load_options(args.options)
    page = _load_page(Path(args.page), options)
    context = _load_context(args.context)

    html = _render(page, context)
    if args.check:
        if _render(page.clone(), context) != html:
            raise SystemExit("Determinism check failed: outputs differ between renders")
        warn("Determinism check passed.")
    _emit(html, args.output)


def _handle_stylesheet(args: argparse.Namespace) -> None:
    options = _load_options(args.options)
    page = _load_page(Path(args.page), options)
    context = _load_context(args.context)

    css = page.stylesheet(context)
    _emit(css + "\n" if css else "", args.output)


def _handle_convert(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    try:
        space = read_mapping_source(input_path)
    except (json.JSONDecodeError, yaml.YAMLError, TypeError, ValueError) as exc:
        raise SystemExit(f"Invalid page description {input_path}: {exc}") from exc
    _emit(space.to_string(), args.output)


def _add_page_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("page", help="Path to the page store (.space) file.")
    parser.add_argument(
        "--context",
        default=None,
        help="Variables for substitution (.json, .yaml/.yml or .space).",
    )
    parser.add_argument(
        "--options",
        default=None,
        help="YAML file with render options (doctype, default_tag, id_mode, id_separator).",
    )
    parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="File to write; standard output when omitted.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrapgen",
        description="Render scrap page stores into HTML",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="scrapgen 0.1.0",
        help="Show the scrapgen version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a page to HTML.",
        description="Render every non-draft root scrap of a page into one HTML document.",
    )
    _add_page_arguments(render_parser)
    render_parser.add_argument(
        "--check",
        action="store_true",
        help="Render twice and fail if the outputs differ.",
    )
    render_parser.set_defaults(func=_handle_render)

    stylesheet_parser = subparsers.add_parser(
        "stylesheet",
        help="Export structured scrap styles as CSS.",
        description="Write one CSS rule per scrap that declares a structured style.",
    )
    _add_page_arguments(stylesheet_parser)
    stylesheet_parser.set_defaults(func=_handle_stylesheet)

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a YAML or JSON page description into store text.",
        description="Read nested YAML/JSON and write the equivalent page store.",
    )
    convert_parser.add_argument("input", help="Path to the YAML or JSON file.")
    convert_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="File to write; standard output when omitted.",
    )
    convert_parser.set_defaults(func=_handle_convert)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
