"""
Tag taxonomy: normalization, fuzzy validation, statistics and registry parsing.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.loader import parse_categories_config, parse_themes_config
from domain.taxonomy.normalizer import normalize_tag, normalize_tags
from domain.taxonomy.stats import (
    POPULAR_TAG_MIN_COUNT,
    compute_tag_stats,
    get_all_used_tags,
    get_popular_tags,
    get_related_tools,
    rank_tags,
)
from domain.taxonomy.validator import (
    SUGGESTION_MAX_DISTANCE,
    TagVocabulary,
    closest_match,
    levenshtein_distance,
    validate_tag,
    validate_tags,
)

__all__ = [
    # Normalization
    "normalize_tag",
    "normalize_tags",
    # Validation
    "validate_tag",
    "validate_tags",
    "levenshtein_distance",
    "closest_match",
    "TagVocabulary",
    "SUGGESTION_MAX_DISTANCE",
    # Statistics
    "compute_tag_stats",
    "rank_tags",
    "get_popular_tags",
    "get_all_used_tags",
    "get_related_tools",
    "POPULAR_TAG_MIN_COUNT",
    # Registry parsing
    "parse_themes_config",
    "parse_categories_config",
]
