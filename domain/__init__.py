"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for tools, themes, categories and reports
- header: Structured-header parsing of markdown documents
- taxonomy: Tag normalization, fuzzy validation and statistics
- tools: Typed decode of tool records and tool/theme queries
- themes: Theme discovery, confidence scoring and lifecycle
"""

from domain.schemas import (
    AnalysisReport,
    Category,
    TagValidationResult,
    Theme,
    ThemeCandidate,
    ThemesConfig,
    ThemeStatus,
    ToolRecord,
)

__all__ = [
    "ToolRecord",
    "Theme",
    "ThemeStatus",
    "ThemesConfig",
    "Category",
    "ThemeCandidate",
    "TagValidationResult",
    "AnalysisReport",
]
