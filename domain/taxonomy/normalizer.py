"""Tag normalization utilities."""

import re

_SEPARATOR_RE = re.compile(r"[\s_]+")
_DISALLOWED_RE = re.compile(r"[^a-z0-9-]")
_HYPHEN_RUN_RE = re.compile(r"-+")


def normalize_tag(tag: object) -> str:
    """
    Normalize a free-text tag to its canonical slug form.

    Examples:
        >>> normalize_tag("JavaScript")
        'javascript'
        >>> normalize_tag("  Code_Quality & Testing! ")
        'code-quality-testing'
        >>> normalize_tag("!!!@@@###")
        ''

    Args:
        tag: Raw tag value (None and non-strings are tolerated)

    Returns:
        Lowercase, hyphen-separated slug; empty string if nothing survives
    """
    if tag is None:
        return ""
    s = str(tag).lower()
    s = _SEPARATOR_RE.sub("-", s)
    s = _DISALLOWED_RE.sub("", s)
    s = _HYPHEN_RUN_RE.sub("-", s)
    return s.strip("-")


def normalize_tags(tags: list[str]) -> list[str]:
    """Normalize a list of tags, dropping empties and duplicates while keeping order."""
    seen: dict[str, None] = {}
    for tag in tags:
        normalized = normalize_tag(tag)
        if normalized:
            seen.setdefault(normalized, None)
    return list(seen)
