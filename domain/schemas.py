"""Pydantic models for catalog tools, themes, categories and analysis output."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ThemeStatus(str, Enum):
    """Lifecycle stage of a theme entry."""

    UNDER_REVIEW = "under_review"
    ACTIVE = "active"


class ToolThemes(BaseModel):
    """Structured theme assignment: one primary theme plus secondary themes."""

    primary: str = ""
    secondary: list[str] = Field(default_factory=list)


class ToolRecord(BaseModel):
    """Metadata of one documented tool, snapshotted from its markdown file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Tool name (header `tool_name`, else the file stem).")
    repository_url: str = Field(default="", description="Repository URL (header `repository`).")
    category: str = Field(default="uncategorized", description="Category slug.")
    themes: list[str] | ToolThemes = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    submitted_date: str | None = None
    source_file: str = Field(default="", description="Path of the source document.")
    description: str = ""

    @property
    def theme_ids(self) -> list[str]:
        """Theme ids referenced by this tool, whatever shape `themes` has."""
        if isinstance(self.themes, ToolThemes):
            ids = [self.themes.primary] if self.themes.primary else []
            return ids + [t for t in self.themes.secondary if t]
        return [t for t in self.themes if t]


class ThemeMetadata(BaseModel):
    """Bookkeeping attached to a theme. `tool_count` is a cached, eventually-consistent value."""

    model_config = ConfigDict(extra="allow")

    tool_count: int = 0
    approved_by: str | None = None
    auto_discovered: bool = False
    created_date: str | None = None
    review_date: str | None = None
    review_issue: str | None = None


class Theme(BaseModel):
    """A theme entry owned by the theme registry."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: str = ""
    keywords: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    status: ThemeStatus = ThemeStatus.UNDER_REVIEW
    metadata: ThemeMetadata = Field(default_factory=ThemeMetadata)


class ThemesConfig(BaseModel):
    """Theme registry document (themes.json)."""

    model_config = ConfigDict(extra="allow")

    themes: list[Theme] = Field(default_factory=list)
    suggested_tags: list[str] = Field(default_factory=list)
    seed_themes: list[str] = Field(default_factory=list)


class Category(BaseModel):
    """A catalog category."""

    slug: str
    title: str = ""
    description: str = ""


class CategoriesConfig(BaseModel):
    """Category registry document (categories.json)."""

    categories: list[Category] = Field(default_factory=list)


class ThemeCandidate(BaseModel):
    """A cluster of tools proposed as a theme. Never persisted."""

    id: str
    name: str
    description: str = ""
    tools: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class TagValidationResult(BaseModel):
    """Outcome of validating one free-text tag against the controlled vocabulary."""

    valid: bool
    normalized: str
    suggestion: str | None = None


class TagCount(BaseModel):
    tag: str
    count: int


class ExistingThemeSummary(BaseModel):
    id: str
    name: str
    tool_count: int
    keywords: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)


class AnalysisReport(BaseModel):
    """Summary artifact of one theme-analysis run."""

    generated_at: str
    total_tools: int
    total_categories: int
    confidence_threshold: float
    existing_themes: list[ExistingThemeSummary] = Field(default_factory=list)
    discovered_themes: list[ThemeCandidate] = Field(default_factory=list)
    low_confidence_themes: list[ThemeCandidate] = Field(default_factory=list)
    tag_statistics: list[TagCount] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
