"""Command-line interface for pagegen."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .io_utils import warn, write_text
from .model import Page
from .page_spec import load_page
from .render import render, render_with_warnings


def _load_page_or_exit(path: Path) -> Page:
    try:
        return load_page(path)
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except (ValueError, json.JSONDecodeError, yaml.YAMLError) as exc:
        # pydantic's ValidationError is a ValueError subclass.
        raise SystemExit(f"Invalid page description in {path}: {exc}") from exc


def _handle_render(args: argparse.Namespace) -> None:
    page_path = Path(args.page)
    out_path = Path(args.out)

    page = _load_page_or_exit(page_path)
    result = render_with_warnings(page)
    for warning in result.warnings:
        warn(f"{page_path}: {warning}")
    if args.strict and result.warnings:
        raise SystemExit(1)

    if args.check and render(page) != result.html:
        raise SystemExit("Determinism check failed: renders differ between runs")

    write_text(out_path, result.html)
    print(f"Rendered {page_path} into {out_path}")


def _handle_validate(args: argparse.Namespace) -> None:
    errors: list[str] = []
    validated = 0
    for raw_path in args.pages:
        path = Path(raw_path)
        try:
            load_page(path)
        except FileNotFoundError as exc:
            errors.append(str(exc))
            continue
        except (ValidationError, ValueError, yaml.YAMLError) as exc:
            errors.append(f"{path}: {exc}")
            continue
        validated += 1

    if errors:
        for message in errors:
            warn(message)
        raise SystemExit(1)

    print(f"Validated {validated} page description(s).")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render typed HTML page descriptions.")
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a page description to HTML.",
        description="Load a YAML or JSON page description and write the rendered HTML.",
    )
    render_parser.add_argument("--page", required=True, help="Path to the page description.")
    render_parser.add_argument("--out", required=True, help="Output HTML file.")
    render_parser.add_argument(
        "--check",
        action="store_true",
        help="Render twice and fail if the outputs differ.",
    )
    render_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail without writing output when any attribute was dropped.",
    )
    render_parser.set_defaults(func=_handle_render)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate page descriptions.",
        description="Check that each page description loads and converts to a page.",
    )
    validate_parser.add_argument("pages", nargs="+", help="Page description files.")
    validate_parser.set_defaults(func=_handle_validate)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
