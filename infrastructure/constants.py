from pathlib import Path

# Repo-root conventional directories/files (overrideable via catalog.yaml or environment)
CONFIG_DIR = Path("configs")
CATALOG_CONFIG_FILE = CONFIG_DIR / "catalog.yaml"

DOCS_DIR = Path("docs")
THEME_PAGES_DIR = DOCS_DIR / "themes"

DATA_DIR = Path("data")
THEMES_FILE = DATA_DIR / "themes.json"
CATEGORIES_FILE = DATA_DIR / "categories.json"

REPORT_FILE = Path("reports") / "theme-analysis.json"

# Environment variables that override the configured paths
ENV_DOCS_DIR = "CATALOG_DOCS_DIR"
ENV_THEMES_FILE = "CATALOG_THEMES_FILE"
ENV_CATEGORIES_FILE = "CATALOG_CATEGORIES_FILE"
ENV_REPORT_FILE = "CATALOG_REPORT_FILE"
