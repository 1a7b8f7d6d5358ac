"""Tag frequency statistics and tag-based tool lookups."""

from collections import Counter
from collections.abc import Iterable

from domain.schemas import ToolRecord
from domain.taxonomy.normalizer import normalize_tag, normalize_tags

# A tag used by at least this many tools counts as popular
POPULAR_TAG_MIN_COUNT = 3


def compute_tag_stats(tools: Iterable[ToolRecord]) -> Counter[str]:
    """
    Count, for each normalized tag, how many tools carry it.

    A tool listing the same tag twice (or two spellings that normalize to the
    same slug) is counted once.
    """
    counts: Counter[str] = Counter()
    for tool in tools:
        counts.update(normalize_tags(tool.tags))
    return counts


def rank_tags(tag_stats: Counter[str], min_count: int = 1) -> list[tuple[str, int]]:
    """Tags with at least `min_count` uses, most used first, ties alphabetical."""
    ranked = [(tag, count) for tag, count in tag_stats.items() if count >= min_count]
    ranked.sort(key=lambda item: (-item[1], item[0]))
    return ranked


def get_popular_tags(tools: Iterable[ToolRecord], min_count: int = POPULAR_TAG_MIN_COUNT) -> list[str]:
    return [tag for tag, _ in rank_tags(compute_tag_stats(tools), min_count)]


def get_all_used_tags(tools: Iterable[ToolRecord]) -> list[str]:
    """All distinct normalized tags in use, sorted."""
    used: set[str] = set()
    for tool in tools:
        used.update(normalize_tags(tool.tags))
    return sorted(used)


def get_related_tools(tags: Iterable[str], tools: Iterable[ToolRecord]) -> list[ToolRecord]:
    """Tools sharing at least one (normalized) tag with `tags`."""
    wanted = {t for t in (normalize_tag(tag) for tag in tags) if t}
    if not wanted:
        return []
    return [tool for tool in tools if wanted.intersection(normalize_tags(tool.tags))]
