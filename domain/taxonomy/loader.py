"""Parse theme and category registries from pre-loaded JSON dicts."""

from typing import Any

from pydantic import ValidationError

from domain.errors import RegistryFormatError
from domain.schemas import CategoriesConfig, ThemesConfig


def parse_themes_config(data: Any, source: str = "themes registry") -> ThemesConfig:
    """
    Parse a pre-loaded JSON value into a ThemesConfig.

    This is a pure function - it does NOT perform file I/O.
    The JSON loading happens in infrastructure.io.json_store.

    Args:
        data: Value returned by json.load()
        source: Label used in error messages (usually the file path)

    Returns:
        ThemesConfig with typed themes

    Raises:
        RegistryFormatError: If the document is not a mapping or has wrong types
    """
    if not isinstance(data, dict):
        raise RegistryFormatError(f"Expected a JSON object in {source}, got {type(data).__name__}")
    if not isinstance(data.get("themes", []), list):
        raise RegistryFormatError(f"'themes' must be a list in {source}")
    if not isinstance(data.get("suggested_tags", []), list):
        raise RegistryFormatError(f"'suggested_tags' must be a list in {source}")

    try:
        return ThemesConfig.model_validate(data)
    except ValidationError as e:
        raise RegistryFormatError(f"Invalid themes registry {source}: {e}") from e


def parse_categories_config(data: Any, source: str = "categories registry") -> CategoriesConfig:
    """Parse a pre-loaded JSON value into a CategoriesConfig (pure, no I/O)."""
    if not isinstance(data, dict):
        raise RegistryFormatError(f"Expected a JSON object in {source}, got {type(data).__name__}")
    if not isinstance(data.get("categories", []), list):
        raise RegistryFormatError(f"'categories' must be a list in {source}")

    try:
        return CategoriesConfig.model_validate(data)
    except ValidationError as e:
        raise RegistryFormatError(f"Invalid categories registry {source}: {e}") from e
