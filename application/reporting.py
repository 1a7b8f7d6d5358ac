"""Theme-analysis report assembly and summary logging."""

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timezone

import pandas as pd

from application.constants import (
    COUNT_COL,
    SUMMARY_MAX_HIGH_CONFIDENCE,
    SUMMARY_MAX_KEYWORDS,
    SUMMARY_MAX_LOW_CONFIDENCE,
    SUMMARY_TOOLS_PREVIEW,
    TAG_COL,
)
from domain.schemas import (
    AnalysisReport,
    Category,
    ExistingThemeSummary,
    TagCount,
    Theme,
    ThemeCandidate,
    ToolRecord,
)
from domain.taxonomy import compute_tag_stats
from domain.themes import discover_themes, partition_candidates
from domain.tools import get_tools_without_themes
from infrastructure.config.models import DiscoveryConfig, ReportConfig

logger = logging.getLogger(__name__)


def tag_frequency_table(tag_stats: Counter[str], top_n: int | None = None) -> pd.DataFrame:
    """
    Tag usage as a DataFrame with columns (tag, count).

    Rows are sorted by count descending, then tag ascending; truncated to
    `top_n` rows when given.
    """
    df = pd.DataFrame(list(tag_stats.items()), columns=[TAG_COL, COUNT_COL])
    if df.empty:
        return df
    df = df.sort_values([COUNT_COL, TAG_COL], ascending=[False, True], kind="mergesort")
    if top_n is not None:
        df = df.head(top_n)
    return df.reset_index(drop=True)


def generate_recommendations(
    existing_themes: Sequence[Theme],
    high_confidence: Sequence[ThemeCandidate],
    tools: Sequence[ToolRecord],
    min_theme_tool_count: int = 3,
) -> list[str]:
    """Human-readable follow-ups derived from the analysis."""
    recommendations: list[str] = []

    if any(t.metadata.tool_count < min_theme_tool_count for t in existing_themes):
        recommendations.append(
            f"Some existing themes have fewer than {min_theme_tool_count} tools - consider review"
        )

    if high_confidence:
        recommendations.append(f"{len(high_confidence)} high-confidence theme candidates discovered")

    without_themes = get_tools_without_themes(tools)
    if without_themes:
        recommendations.append(f"{len(without_themes)} tools need theme assignment")

    return recommendations


def assemble_report(
    tools: Sequence[ToolRecord],
    categories: Sequence[Category],
    existing_themes: Sequence[Theme],
    report_cfg: ReportConfig,
    discovery_cfg: DiscoveryConfig | None = None,
    generated_at: datetime | None = None,
) -> AnalysisReport:
    """
    Compose the analysis report from in-memory state. Performs no I/O.

    Args:
        tools: Tool records of the catalog
        categories: Category registry entries
        existing_themes: Themes to list as existing (usually the active ones)
        report_cfg: Report thresholds (confidence cutoff, table size)
        discovery_cfg: Theme discovery parameters
        generated_at: Timestamp to stamp on the report (defaults to now, UTC)

    Returns:
        AnalysisReport
    """
    candidates = discover_themes(tools, discovery_cfg)
    high, low = partition_candidates(candidates, report_cfg.confidence_threshold)

    table = tag_frequency_table(compute_tag_stats(tools), report_cfg.top_tags)
    tag_statistics = [TagCount(tag=str(tag), count=int(count)) for tag, count in table.itertuples(index=False)]

    stamp = generated_at or datetime.now(timezone.utc)

    return AnalysisReport(
        generated_at=stamp.isoformat(),
        total_tools=len(tools),
        total_categories=len(categories),
        confidence_threshold=report_cfg.confidence_threshold,
        existing_themes=[
            ExistingThemeSummary(
                id=t.id,
                name=t.name,
                tool_count=t.metadata.tool_count,
                keywords=list(t.keywords),
                categories=list(t.categories),
            )
            for t in existing_themes
        ],
        discovered_themes=high,
        low_confidence_themes=low,
        tag_statistics=tag_statistics,
        recommendations=generate_recommendations(
            existing_themes, high, tools, report_cfg.min_theme_tool_count
        ),
    )


def _tools_preview(tools: Sequence[str]) -> str:
    if len(tools) > SUMMARY_TOOLS_PREVIEW:
        return ", ".join(tools[:SUMMARY_TOOLS_PREVIEW]) + ", ..."
    return ", ".join(tools)


def log_report_summary(report: AnalysisReport) -> None:
    """Log a concise, human-readable summary of the report."""
    logger.info("=== Theme Analysis ===")
    logger.info("Found %d tools across %d categories", report.total_tools, report.total_categories)

    logger.info("--- Existing themes ---")
    for theme in report.existing_themes:
        logger.info("%s (%d tools)", theme.name, theme.tool_count)
        logger.info("  Keywords: %s", ", ".join(theme.keywords[:SUMMARY_MAX_KEYWORDS]))
        logger.info("  Categories: %s", ", ".join(theme.categories))

    logger.info("--- Discovered high-confidence themes (>= %.2f) ---", report.confidence_threshold)
    for cand in report.discovered_themes[:SUMMARY_MAX_HIGH_CONFIDENCE]:
        logger.info("%s (confidence: %.2f)", cand.name, cand.confidence)
        logger.info("  %d tools: %s", len(cand.tools), _tools_preview(cand.tools))
        logger.info("  Keywords: %s", ", ".join(cand.keywords))
        logger.info("  Categories: %s", ", ".join(cand.categories))

    if report.low_confidence_themes:
        logger.info("--- Low confidence themes (not recommended) ---")
        for cand in report.low_confidence_themes[:SUMMARY_MAX_LOW_CONFIDENCE]:
            logger.info('"%s" (%d tools, confidence: %.2f)', cand.name, len(cand.tools), cand.confidence)

    logger.info("--- Top %d tags ---", len(report.tag_statistics))
    for row in report.tag_statistics:
        logger.info("%s: %d tools", row.tag, row.count)

    logger.info("%d high-confidence themes discovered.", len(report.discovered_themes))
    if report.recommendations:
        logger.info("--- Recommendations ---")
        for rec in report.recommendations:
            logger.info("- %s", rec)
