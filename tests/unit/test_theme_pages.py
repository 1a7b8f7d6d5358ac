from datetime import date
from pathlib import Path

from application import generate_all_theme_pages, render_theme_page
from application.constants import EMPTY_THEME_NOTICE
from domain.header import parse_header
from domain.schemas import Theme, ToolRecord
from domain.taxonomy import parse_themes_config

TODAY = date(2024, 6, 1)


def test_generate_pages_creates_then_updates(
    tmp_path: Path, themes_data: dict, tools: list[ToolRecord]
) -> None:
    config = parse_themes_config(themes_data)
    out_dir = tmp_path / "docs" / "themes"
    kwargs = dict(out_dir=out_dir, docs_dir=tmp_path / "docs", registry_path=tmp_path / "data" / "themes.json")

    first = generate_all_theme_pages(config, tools, today=TODAY, **kwargs)
    second = generate_all_theme_pages(config, tools, today=TODAY, **kwargs)

    assert first == {"created": 2, "updated": 0, "total": 2}
    assert second == {"created": 0, "updated": 2, "total": 2}
    assert sorted(p.name for p in out_dir.iterdir()) == ["ai-assistants.md", "developer-experience.md"]


def test_generated_page_content(tmp_path: Path, themes_data: dict, tools: list[ToolRecord]) -> None:
    config = parse_themes_config(themes_data)
    out_dir = tmp_path / "docs" / "themes"

    generate_all_theme_pages(
        config,
        tools,
        out_dir=out_dir,
        docs_dir=tmp_path / "docs",
        registry_path=tmp_path / "data" / "themes.json",
        today=TODAY,
    )
    text = (out_dir / "developer-experience.md").read_text(encoding="utf-8")

    assert parse_header(text) == {
        "theme_id": "developer-experience",
        "status": "active",
        "tool_count": "2",
        "last_updated": "2024-06-01",
    }
    assert "## Tools (2)" in text
    assert "- [Pytest Helper](../testing/pytest-helper.md) - Fixtures and reporters for pytest suites" in text
    assert "- [Ruff Lint](../linting/ruff-lint.md) - Fast Python linter." in text
    assert "`cli`, `testing`" in text
    assert "(../../data/themes.json)" in text
    assert "## Related Themes" not in text


def test_render_lists_related_themes_and_empty_notice() -> None:
    theme = Theme(id="empty", name="Empty", description="Nothing yet", categories=["devops"])
    related = [Theme(id="ai-assistants", name="AI Assistants")]

    page = render_theme_page(theme, [], related, today=TODAY)

    assert "## Tools\n\n" + EMPTY_THEME_NOTICE in page
    assert "- [AI Assistants](ai-assistants.md)" in page
    assert "tool_count: 0" in page
    assert "## Keywords" not in page
