"""Registries persisted as JSON: themes (read-write) and categories (read-only)."""

from infrastructure.registry.categories import get_category_by_slug, load_categories
from infrastructure.registry.themes import ThemeRegistry

__all__ = [
    "ThemeRegistry",
    "load_categories",
    "get_category_by_slug",
]
