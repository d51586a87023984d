"""Verify the structure of a rendered page."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from bs4 import BeautifulSoup

REQUIRED_TAGS = ("html", "head", "title", "body")


def _indentation_errors(text: str) -> list[str]:
    errors: list[str] = []
    for number, line in enumerate(text.splitlines(), start=1):
        stripped = line.lstrip(" ")
        width = len(line) - len(stripped)
        if width % 2:
            errors.append(f"Line {number} is indented by {width} spaces")
    return errors


def verify_page_text(text: str) -> list[str]:
    errors: list[str] = []
    soup = BeautifulSoup(text, "html.parser")

    for name in REQUIRED_TAGS:
        if soup.find(name) is None:
            errors.append(f"Missing <{name}> element")

    titles = soup.find_all("title")
    if len(titles) > 1:
        errors.append(f"Expected one <title>, found {len(titles)}")

    head = soup.find("head")
    if head is not None and head.find_parent("body") is not None:
        errors.append("<head> must not be nested inside <body>")

    errors.extend(_indentation_errors(text))
    return errors


def verify_page(path: Path) -> list[str]:
    if not path.exists():
        return [f"Rendered page not found: {path}"]
    return verify_page_text(path.read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Verify a rendered HTML page.")
    parser.add_argument("page", help="Rendered HTML file")
    args = parser.parse_args(argv)

    path = Path(args.page)
    errors = verify_page(path)
    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        return 1

    print(f"Verified page structure at {path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
