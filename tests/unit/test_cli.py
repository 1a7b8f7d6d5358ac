import json
from pathlib import Path

import pytest

import main


@pytest.fixture
def config_file(tmp_path: Path, docs_dir: Path, themes_file: Path, categories_file: Path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    for key in ("CATALOG_DOCS_DIR", "CATALOG_THEMES_FILE", "CATALOG_CATEGORIES_FILE", "CATALOG_REPORT_FILE"):
        monkeypatch.delenv(key, raising=False)

    path = tmp_path / "catalog.yaml"
    path.write_text(
        f"root_dir: {tmp_path}\n"
        "docs_dir: docs\n"
        "theme_pages_dir: docs/themes\n"
        "themes_file: data/themes.json\n"
        "categories_file: data/categories.json\n"
        "report:\n"
        "  output_file: reports/theme-analysis.json\n",
        encoding="utf-8",
    )
    return path


def _run(config_file: Path, *args: str) -> int:
    return main.main(["--config", str(config_file), "--log-file", "", *args])


def test_report_writes_analysis(config_file: Path, tmp_path: Path) -> None:
    assert _run(config_file, "report") == 0

    data = json.loads((tmp_path / "reports" / "theme-analysis.json").read_text(encoding="utf-8"))
    assert data["total_tools"] == 5
    assert [t["id"] for t in data["discovered_themes"]] == ["cli-tools", "testing-tools"]


def test_report_output_flag_and_recount(config_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "custom.json"

    assert _run(config_file, "report", "--output", str(out), "--recount") == 0
    assert out.exists()

    registry = json.loads((tmp_path / "data" / "themes.json").read_text(encoding="utf-8"))
    counts = {t["id"]: t["metadata"]["tool_count"] for t in registry["themes"]}
    assert counts == {"developer-experience": 2, "ai-assistants": 1}


def test_activate_and_add_tag(config_file: Path, tmp_path: Path) -> None:
    assert _run(config_file, "activate", "ai-assistants", "--approved-by", "reviewer") == 0
    assert _run(config_file, "add-tag", "Rust") == 0

    registry = json.loads((tmp_path / "data" / "themes.json").read_text(encoding="utf-8"))
    assert all(t["status"] == "active" for t in registry["themes"])
    assert "rust" in registry["suggested_tags"]


def test_validate_tags_exit_status(config_file: Path) -> None:
    assert _run(config_file, "validate-tags", "javascrip", "python") == 0
    assert _run(config_file, "validate-tags", "!!!") == 1


def test_pages_command(config_file: Path, tmp_path: Path) -> None:
    assert _run(config_file, "pages") == 0

    assert (tmp_path / "docs" / "themes" / "ai-assistants.md").exists()


def test_missing_registry_is_fatal(config_file: Path, tmp_path: Path) -> None:
    (tmp_path / "data" / "themes.json").unlink()

    assert _run(config_file, "increment", "ai-assistants") == 1


def test_propose_theme_registers_slug_id(config_file: Path, tmp_path: Path) -> None:
    assert _run(config_file, "propose-theme", "--id", "observability", "--name", "Observability") == 0

    registry = json.loads((tmp_path / "data" / "themes.json").read_text(encoding="utf-8"))
    assert "observability" in [t["id"] for t in registry["themes"]]


def test_propose_theme_rejects_non_slug_id(config_file: Path, tmp_path: Path) -> None:
    themes_path = tmp_path / "data" / "themes.json"
    before = themes_path.read_bytes()

    assert _run(config_file, "propose-theme", "--id", "My Theme!", "--name", "Mine") == 1
    assert themes_path.read_bytes() == before
