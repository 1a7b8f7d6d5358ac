import copy
import json
from pathlib import Path

import pytest

from domain.schemas import ToolRecord

TOOL_DOCS = {
    "testing/pytest-helper.md": (
        "---\n"
        "tool_name: Pytest Helper\n"
        "repository: https://github.com/example/pytest-helper\n"
        "category: testing\n"
        "tags: [testing, python, cli]\n"
        "themes: [developer-experience]\n"
        "submitted_date: 2024-03-01\n"
        "---\n"
        "# Pytest Helper\n"
        "\n"
        "**Description:** Fixtures and reporters for pytest suites\n"
    ),
    "testing/jest-runner.md": (
        "---\n"
        "tool_name: Jest Runner\n"
        "tags: [testing, javascript, cli]\n"
        "---\n"
        "# Jest Runner\n"
        "\n"
        "Parallel runner for jest projects.\n"
    ),
    "linting/ruff-lint.md": (
        "---\n"
        'tool_name: "Ruff Lint"\n'
        "tags: [code-quality, python, cli]\n"
        "themes:\n"
        "  - developer-experience\n"
        "---\n"
        "# Ruff Lint\n"
        "\n"
        "Fast Python linter.\n"
    ),
    "linting/eslint-plus.md": (
        "---\n"
        "tool_name: ESLint Plus\n"
        "tags: [code-quality, javascript]\n"
        "---\n"
        "# ESLint Plus\n"
    ),
    "devops/ci-bot.md": (
        "---\n"
        "tool_name: CI Bot\n"
        "tags:\n"
        "  - automation\n"
        "  - testing\n"
        "  - cli\n"
        "themes: [ai-assistants]\n"
        "---\n"
        "# CI Bot\n"
        "\n"
        "Automates pipeline chores.\n"
    ),
    # Skipped: no header block, placeholder file, generated theme page
    "devops/notes.md": "# Notes\n\nJust notes.\n",
    "README.md": "---\ntool_name: Not A Tool\n---\n",
    "themes/developer-experience.md": "---\ntheme_id: developer-experience\n---\n# Developer Experience\n",
}

THEMES_REGISTRY = {
    "version": "1.0",
    "themes": [
        {
            "id": "developer-experience",
            "name": "Developer Experience",
            "description": "Tools that make day-to-day development smoother",
            "keywords": ["cli", "testing"],
            "categories": ["testing", "linting"],
            "status": "active",
            "metadata": {"tool_count": 2, "approved_by": "maintainer"},
        },
        {
            "id": "ai-assistants",
            "name": "AI Assistants",
            "description": "Assistants that automate engineering chores",
            "keywords": ["automation"],
            "categories": ["devops"],
            "status": "under_review",
            "icon": "robot",
            "metadata": {"tool_count": 1, "auto_discovered": True, "created_date": "2024-02-10"},
        },
    ],
    "suggested_tags": ["cli", "javascript", "python", "testing"],
    "seed_themes": ["developer-experience"],
}

CATEGORIES_REGISTRY = {
    "categories": [
        {"slug": "testing", "title": "Testing", "description": "Test runners and helpers"},
        {"slug": "linting", "title": "Linting", "description": "Static analysis"},
        {"slug": "devops", "title": "DevOps", "description": "Automation and CI"},
    ]
}


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    root = tmp_path / "docs"
    for rel, content in TOOL_DOCS.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def themes_data() -> dict:
    return copy.deepcopy(THEMES_REGISTRY)


@pytest.fixture
def themes_file(tmp_path: Path) -> Path:
    path = tmp_path / "data" / "themes.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(THEMES_REGISTRY, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def categories_file(tmp_path: Path) -> Path:
    path = tmp_path / "data" / "categories.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(CATEGORIES_REGISTRY, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def tools() -> list[ToolRecord]:
    """The sample documents as already-decoded records."""
    return [
        ToolRecord(
            name="Pytest Helper",
            category="testing",
            tags=["testing", "python", "cli"],
            themes=["developer-experience"],
            source_file="testing/pytest-helper.md",
            description="Fixtures and reporters for pytest suites",
        ),
        ToolRecord(
            name="Jest Runner",
            category="testing",
            tags=["testing", "javascript", "cli"],
            source_file="testing/jest-runner.md",
            description="Parallel runner for jest projects.",
        ),
        ToolRecord(
            name="Ruff Lint",
            category="linting",
            tags=["code-quality", "python", "cli"],
            themes=["developer-experience"],
            source_file="linting/ruff-lint.md",
            description="Fast Python linter.",
        ),
        ToolRecord(
            name="ESLint Plus",
            category="linting",
            tags=["code-quality", "javascript"],
            source_file="linting/eslint-plus.md",
        ),
        ToolRecord(
            name="CI Bot",
            category="devops",
            tags=["automation", "testing", "cli"],
            themes=["ai-assistants"],
            source_file="devops/ci-bot.md",
            description="Automates pipeline chores.",
        ),
    ]
