"""
Themes: discovery, confidence scoring and lifecycle operations.

All functions in this module are pure (no file I/O).
"""

from domain.themes.confidence import calculate_confidence
from domain.themes.discovery import build_candidate, candidate_name, discover_themes, partition_candidates
from domain.themes.lifecycle import (
    DEFAULT_APPROVER,
    activate_themes,
    add_or_get_theme,
    add_suggested_tag,
    add_theme,
    get_active_themes,
    get_theme_by_id,
    get_themes_by_category,
    get_themes_under_review,
    increment_theme_tool_counts,
    recount_theme_tool_counts,
    require_slug_id,
    require_theme,
)

__all__ = [
    # Discovery
    "calculate_confidence",
    "discover_themes",
    "partition_candidates",
    "build_candidate",
    "candidate_name",
    # Lifecycle
    "activate_themes",
    "increment_theme_tool_counts",
    "recount_theme_tool_counts",
    "add_theme",
    "add_or_get_theme",
    "add_suggested_tag",
    "DEFAULT_APPROVER",
    "require_slug_id",
    # Queries
    "get_theme_by_id",
    "require_theme",
    "get_active_themes",
    "get_themes_under_review",
    "get_themes_by_category",
]
