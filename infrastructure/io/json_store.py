"""JSON document reading and atomic writing."""

import json
from pathlib import Path
from typing import Any

from infrastructure.io.fs import atomic_write_text


def read_json(path: Path) -> Any:
    """
    Read and parse a UTF-8 JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: Any, *, indent: int = 2) -> None:
    """Serialize `data` with a trailing newline and replace `path` atomically."""
    atomic_write_text(path, json.dumps(data, ensure_ascii=False, indent=indent) + "\n")
