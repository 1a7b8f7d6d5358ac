"""Regenerate one markdown page per theme from the registry and the tool index."""

import logging
import os
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from application.constants import EMPTY_THEME_NOTICE, THEME_PAGE_FOOTER, THEME_PAGE_SUFFIX
from domain.schemas import Theme, ThemesConfig, ToolRecord
from domain.tools import get_related_themes, get_tools_for_theme
from infrastructure.io.fs import atomic_write_text

logger = logging.getLogger(__name__)


def _relative_link(target: Path, from_dir: Path) -> str:
    return Path(os.path.relpath(target, from_dir)).as_posix()


def render_theme_page(
    theme: Theme,
    tools: Sequence[ToolRecord],
    related: Sequence[Theme],
    *,
    today: date,
    tool_link_base: str = "..",
    registry_link: str = "../../data/themes.json",
) -> str:
    """
    Render the markdown page of one theme.

    Args:
        theme: Theme to render
        tools: Member tools (already sorted)
        related: Related themes
        today: Date written to `last_updated`
        tool_link_base: Relative path from the page directory to the documents root
        registry_link: Relative link to the theme registry file

    Returns:
        Page content, header block included
    """
    lines = [
        "---",
        f"theme_id: {theme.id}",
        f"status: {theme.status.value}",
        f"tool_count: {len(tools)}",
        f"last_updated: {today.isoformat()}",
        "---",
        "",
        f"# {theme.name}",
        "",
        theme.description,
        "",
    ]

    if tools:
        lines += [f"## Tools ({len(tools)})", ""]
        for tool in tools:
            lines.append(f"- [{tool.name}]({tool_link_base}/{tool.source_file}) - {tool.description}")
    else:
        lines += ["## Tools", "", EMPTY_THEME_NOTICE]
    lines.append("")

    if theme.keywords:
        lines += ["## Keywords", "", ", ".join(f"`{k}`" for k in theme.keywords), ""]

    if related:
        lines += ["## Related Themes", ""]
        lines += [f"- [{r.name}]({r.id}{THEME_PAGE_SUFFIX})" for r in related]
        lines.append("")

    lines += ["---", "", THEME_PAGE_FOOTER.format(registry_link=registry_link)]
    return "\n".join(lines)


def generate_all_theme_pages(
    config: ThemesConfig,
    tools: Sequence[ToolRecord],
    *,
    out_dir: Path,
    docs_dir: Path,
    registry_path: Path,
    today: date | None = None,
) -> dict[str, int]:
    """
    Write a page for every active or under-review theme into `out_dir`.

    Returns:
        Counts of pages {"created": n, "updated": n, "total": n}
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    stamp = today or date.today()
    themes = list(config.themes)
    tool_link_base = _relative_link(docs_dir, out_dir)
    registry_link = _relative_link(registry_path, out_dir)

    logger.info("Generating pages for %d themes from %d tools", len(themes), len(tools))

    created = updated = 0
    for theme in themes:
        page_path = out_dir / f"{theme.id}{THEME_PAGE_SUFFIX}"
        existed = page_path.exists()

        members = get_tools_for_theme(theme.id, tools)
        related = get_related_themes(theme, themes, tools)
        content = render_theme_page(
            theme,
            members,
            related,
            today=stamp,
            tool_link_base=tool_link_base,
            registry_link=registry_link,
        )
        atomic_write_text(page_path, content)

        if existed:
            updated += 1
            logger.info("Updated: %s (%d tools)", theme.name, len(members))
        else:
            created += 1
            logger.info("Created: %s (%d tools)", theme.name, len(members))

    logger.info("Theme pages: created=%d, updated=%d, total=%d", created, updated, len(themes))
    return {"created": created, "updated": updated, "total": len(themes)}
