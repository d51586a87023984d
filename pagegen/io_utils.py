"""Utility helpers for reading page descriptions, writing output, and logging."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]

YAML_SUFFIXES = (".yaml", ".yml")


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def read_document(path: Path) -> Any:
    """Load a YAML or JSON file, picking the parser from the suffix."""
    if not path.exists():
        raise FileNotFoundError(f"Page description not found: {path}")
    if path.suffix.lower() in YAML_SUFFIXES:
        return read_yaml(path)
    return read_json(path)


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["read_document", "read_json", "read_yaml", "warn", "write_text"]
