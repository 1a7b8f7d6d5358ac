"""Configuration models (Pydantic classes)."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from infrastructure.constants import (
    CATEGORIES_FILE,
    DOCS_DIR,
    REPORT_FILE,
    THEME_PAGES_DIR,
    THEMES_FILE,
)


class DiscoveryConfig(BaseModel):
    """
    Parameters of theme discovery.
    """

    min_tools_per_theme: int = Field(
        default=3,
        ge=1,
        description="A tag must be carried by at least this many tools to seed a theme candidate.",
    )
    max_related_keywords: int = Field(
        default=4,
        ge=0,
        description="Number of co-occurring tags added to the seed tag as candidate keywords.",
    )


class ReportConfig(BaseModel):
    """Parameters of the theme-analysis report."""

    confidence_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Candidates scoring at or above this value are reported as high confidence.",
    )
    top_tags: int = Field(default=10, ge=0, description="Number of rows in the tag frequency table.")
    min_theme_tool_count: int = Field(
        default=3,
        ge=0,
        description="Existing themes with fewer tools than this are flagged for review.",
    )
    output_file: Path = Field(default_factory=lambda: REPORT_FILE)


class CatalogConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from catalog.yaml (optional)
    - Paths resolved against root_dir by the configuration loader
    - Environment overrides applied by the loader
    """

    root_dir: Path = Field(default_factory=Path.cwd, description="Directory relative paths resolve against.")
    docs_dir: Path = Field(default_factory=lambda: DOCS_DIR, description="Tree of tool documents.")
    themes_file: Path = Field(default_factory=lambda: THEMES_FILE, description="Theme registry JSON.")
    categories_file: Path = Field(default_factory=lambda: CATEGORIES_FILE, description="Category registry JSON.")
    theme_pages_dir: Path = Field(
        default_factory=lambda: THEME_PAGES_DIR,
        description="Output directory of generated theme pages; never scanned for tools.",
    )

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @model_validator(mode="after")
    def _validate(self) -> "CatalogConfig":
        if self.docs_dir == self.theme_pages_dir:
            raise ValueError("theme_pages_dir must differ from docs_dir (theme pages are not tools)")
        if self.themes_file == self.categories_file:
            raise ValueError("themes_file and categories_file must be different files")
        return self
