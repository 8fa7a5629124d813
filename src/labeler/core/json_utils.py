#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON reading and writing with consistent pretty-printing.
Labels, cached transactions, match results and update logs are all written
through these helpers.
"""

import json
from pathlib import Path
from typing import Any


def write_json(filepath: str | Path, data: Any, ensure_ascii: bool = False, sort_keys: bool = False) -> None:
    """
    Write data to a JSON file with standard pretty-printing.

    Parent directories are created as needed.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys)


def read_json(filepath: str | Path) -> Any:
    """Read data from a JSON file."""
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)

