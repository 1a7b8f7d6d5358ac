"""
Tool records: typed decode of document headers and tool/theme queries.

All functions in this module are pure (no file I/O).
"""

from domain.tools.decode import (
    DEFAULT_CATEGORY,
    NO_DESCRIPTION,
    decode_tool_record,
    extract_description,
)
from domain.tools.queries import get_related_themes, get_tools_for_theme, get_tools_without_themes

__all__ = [
    "decode_tool_record",
    "extract_description",
    "DEFAULT_CATEGORY",
    "NO_DESCRIPTION",
    "get_tools_for_theme",
    "get_related_themes",
    "get_tools_without_themes",
]
