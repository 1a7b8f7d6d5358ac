"""Typed decode of parsed document headers into ToolRecord objects."""

import logging
import re
from pathlib import PurePath

from domain.header import HeaderValue, split_document
from domain.schemas import ToolRecord

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "uncategorized"
NO_DESCRIPTION = "No description available"

_DESCRIPTION_RE = re.compile(r"\*\*Description:\*\*\s*(.+)")


def _as_str(fields: dict[str, HeaderValue], key: str, source: str) -> str | None:
    value = fields.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        logger.debug("Ignoring non-scalar '%s' in %s", key, source)
        return None
    return value


def _as_str_list(fields: dict[str, HeaderValue], key: str, source: str) -> list[str]:
    value = fields.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        logger.debug("Ignoring non-list '%s' in %s", key, source)
        return []
    return [item for item in value if item]


def extract_description(text: str) -> str:
    """
    Extract a one-line description from a tool document.

    Prefers a `**Description:**` line; otherwise the first body line after the
    title that is neither a heading nor bold; otherwise a fixed fallback.
    """
    block, body = split_document(text)
    if block is None:
        body = text

    match = _DESCRIPTION_RE.search(body)
    if match:
        return match.group(1).strip()

    lines = [line for line in body.split("\n") if line.strip()]
    for line in lines[1:]:
        if not line.startswith("#") and not line.startswith("**"):
            return line.strip()

    return NO_DESCRIPTION


def decode_tool_record(
    fields: dict[str, HeaderValue],
    *,
    source_file: str,
    description: str = NO_DESCRIPTION,
    default_category: str | None = None,
) -> ToolRecord:
    """
    Map an untyped header mapping to a validated ToolRecord.

    Unexpected value types are treated as absent (never coerced).

    Args:
        fields: Output of parse_header()
        source_file: Path of the document, used for fallbacks and messages
        description: Pre-extracted description text
        default_category: Category to use when the header has none

    Returns:
        ToolRecord snapshot
    """
    stem = PurePath(source_file).stem
    return ToolRecord(
        name=_as_str(fields, "tool_name", source_file) or stem,
        repository_url=_as_str(fields, "repository", source_file) or "",
        category=_as_str(fields, "category", source_file) or default_category or DEFAULT_CATEGORY,
        themes=_as_str_list(fields, "themes", source_file),
        tags=_as_str_list(fields, "tags", source_file),
        submitted_date=_as_str(fields, "submitted_date", source_file) or None,
        source_file=source_file,
        description=description,
    )
