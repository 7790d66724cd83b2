"""File helpers for CLI - reading inputs and writing outputs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .types import Failure, Result, Success


def read_mapping(path: Path) -> Result[dict[str, Any]]:
    """Read a JSON or YAML file holding a mapping.

    JSON is valid YAML, so both go through ``yaml.safe_load``.

    Returns:
        Result containing the mapping or failure
    """
    if not path.exists():
        return Failure(f"File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return Failure(f"Could not parse {path.name}", {"path": str(path), "error": str(e)})

    if not isinstance(data, dict):
        return Failure(f"Expected a mapping in {path.name}", {"path": str(path)})

    return Success(data)


def write_json(path: Path, data: Any) -> Path:
    """Write data as indented UTF-8 JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    return path


def write_text(path: Path, text: str) -> Path:
    """Write UTF-8 text, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
