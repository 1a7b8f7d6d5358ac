"""Read-only category registry (categories.json)."""

import json
from pathlib import Path

from domain.errors import MissingFileError, RegistryFormatError
from domain.schemas import Category
from domain.taxonomy import parse_categories_config
from infrastructure.io.json_store import read_json


def load_categories(path: Path) -> list[Category]:
    """
    Load the category list.

    Raises:
        MissingFileError: If the registry file does not exist
        RegistryFormatError: If it is not valid JSON of the expected shape
    """
    if not path.exists():
        raise MissingFileError(f"Category registry not found: {path}")
    try:
        data = read_json(path)
    except json.JSONDecodeError as e:
        raise RegistryFormatError(f"Category registry {path} is not valid JSON: {e}") from e
    return parse_categories_config(data, source=str(path)).categories


def get_category_by_slug(categories: list[Category], slug: str) -> Category | None:
    return next((c for c in categories if c.slug == slug), None)
