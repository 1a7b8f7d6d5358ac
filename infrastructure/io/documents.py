"""Document metadata loader: scan the tool document tree into ToolRecords."""

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from domain.header import parse_header_lines, split_document
from domain.schemas import ToolRecord
from domain.tools import decode_tool_record, extract_description
from infrastructure.io.fs import ensure_exists, read_text

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".md"
# Placeholder and index pages, matched case-insensitively
EXCLUDED_FILENAMES = frozenset({"readme.md", "index.md"})


def iter_document_paths(docs_dir: Path, exclude_dirs: Iterable[Path] = ()) -> Iterator[Path]:
    """
    Yield eligible markdown files under `docs_dir` in directory-listing order.

    Hidden directories and `exclude_dirs` (e.g. generated theme pages) are
    not descended into.
    """
    excluded = {p.resolve() for p in exclude_dirs}
    for dirpath, dirnames, filenames in os.walk(docs_dir):
        current = Path(dirpath)
        dirnames[:] = [d for d in dirnames if not d.startswith(".") and (current / d).resolve() not in excluded]
        for name in filenames:
            lowered = name.lower()
            if lowered.endswith(DOCUMENT_SUFFIX) and lowered not in EXCLUDED_FILENAMES:
                yield current / name


def load_tool_record(path: Path, docs_dir: Path) -> ToolRecord | None:
    """
    Parse one document into a ToolRecord.

    Returns None (after logging a warning) when the document has no header
    block or is not valid UTF-8.
    """
    try:
        text = read_text(path)
    except UnicodeDecodeError:
        logger.warning("Skipping %s: not valid UTF-8", path)
        return None

    block, _ = split_document(text)
    if block is None:
        logger.warning("Skipping %s: no header block found", path)
        return None

    relative = path.relative_to(docs_dir)
    default_category = relative.parent.name if relative.parent != Path(".") else None

    return decode_tool_record(
        parse_header_lines(block),
        source_file=relative.as_posix(),
        description=extract_description(text),
        default_category=default_category,
    )


def load_tool_records(docs_dir: Path, exclude_dirs: Iterable[Path] = ()) -> list[ToolRecord]:
    """
    Scan a document tree and build the in-memory tool index.

    Args:
        docs_dir: Root of the document collection
        exclude_dirs: Directories to skip (e.g. generated theme pages)

    Returns:
        ToolRecords in directory-listing order (sort explicitly for determinism)

    Raises:
        MissingFileError: If docs_dir does not exist
    """
    ensure_exists(docs_dir, "documents directory")

    tools: list[ToolRecord] = []
    skipped = 0
    for path in iter_document_paths(docs_dir, exclude_dirs):
        record = load_tool_record(path, docs_dir)
        if record is None:
            skipped += 1
            continue
        tools.append(record)

    logger.info("Loaded %d tool records from %s (%d skipped)", len(tools), docs_dir, skipped)
    return tools
