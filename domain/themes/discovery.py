"""Theme discovery: cluster tools by popular tags and score each cluster."""

import logging
from collections import Counter
from collections.abc import Sequence

from domain.schemas import ThemeCandidate, ToolRecord
from domain.taxonomy.normalizer import normalize_tags
from domain.taxonomy.stats import compute_tag_stats, rank_tags
from domain.themes.confidence import calculate_confidence
from infrastructure.config.models import DiscoveryConfig

logger = logging.getLogger(__name__)


def _dedupe(values: list[str]) -> list[str]:
    return list(dict.fromkeys(values))


def candidate_name(tag: str) -> str:
    """`"code-quality"` -> `"Code Quality Tools"`."""
    words = [word[:1].upper() + word[1:] for word in tag.split("-") if word]
    return " ".join(words + ["Tools"])


def build_candidate(tag: str, members: Sequence[ToolRecord], max_related_keywords: int) -> ThemeCandidate:
    """
    Build the candidate for one seed tag from the tools carrying it.

    Keywords are the seed tag followed by the tags that co-occur most often
    with it among the members (ties alphabetical).
    """
    related: Counter[str] = Counter()
    for tool in members:
        related.update(t for t in normalize_tags(tool.tags) if t != tag)

    keywords = [tag] + [t for t, _ in rank_tags(related)[:max_related_keywords]]
    tool_names = [tool.name for tool in members]
    categories = _dedupe([tool.category for tool in members])

    return ThemeCandidate(
        id=f"{tag}-tools",
        name=candidate_name(tag),
        description=f"Tools focused on {tag} capabilities and workflows",
        tools=tool_names,
        keywords=keywords,
        categories=categories,
        confidence=calculate_confidence(tool_names, keywords, categories),
    )


def discover_themes(tools: Sequence[ToolRecord], config: DiscoveryConfig | None = None) -> list[ThemeCandidate]:
    """
    Discover theme candidates from tool tag co-occurrence.

    Every tag carried by at least `config.min_tools_per_theme` tools seeds one
    cluster made of the tools carrying it. Clusters are returned most popular
    seed tag first; no confidence filtering is applied here.

    Args:
        tools: Tool records of the catalog
        config: Discovery parameters (defaults when None)

    Returns:
        List of ThemeCandidate, one per popular tag
    """
    cfg = config or DiscoveryConfig()
    tool_tags = [(tool, set(normalize_tags(tool.tags))) for tool in tools]
    popular = rank_tags(compute_tag_stats(tools), cfg.min_tools_per_theme)

    candidates: list[ThemeCandidate] = []
    for tag, _count in popular:
        members = [tool for tool, tags in tool_tags if tag in tags]
        candidates.append(build_candidate(tag, members, cfg.max_related_keywords))

    logger.debug("Discovered %d theme candidates from %d tools", len(candidates), len(tool_tags))
    return candidates


def partition_candidates(
    candidates: Sequence[ThemeCandidate], threshold: float
) -> tuple[list[ThemeCandidate], list[ThemeCandidate]]:
    """Split candidates into (confidence >= threshold, confidence < threshold)."""
    high = [c for c in candidates if c.confidence >= threshold]
    low = [c for c in candidates if c.confidence < threshold]
    return high, low
