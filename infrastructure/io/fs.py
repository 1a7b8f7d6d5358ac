"""Filesystem utility functions."""

import os
from pathlib import Path

from domain.errors import MissingFileError


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise MissingFileError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        MissingFileError: If path does not exist
    """
    if not path.exists():
        raise MissingFileError(f"Missing {what} at: {path}")


def read_text(path: Path) -> str:
    """Read a UTF-8 text file as-is."""
    return path.read_text(encoding="utf-8")


def atomic_write_text(path: Path, content: str) -> None:
    """
    Write a UTF-8 text file via a sibling temp file and os.replace.

    Readers never observe a partially written file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, path)
    finally:
        if tmp.exists():
            tmp.unlink()
