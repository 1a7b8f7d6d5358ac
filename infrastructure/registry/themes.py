"""Persisted theme registry: single-writer read-modify-write over themes.json."""

import json
import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import date
from pathlib import Path
from typing import TypeVar

from domain.errors import RegistryFormatError, RegistryNotFoundError
from domain.schemas import Theme, ThemesConfig, ToolRecord
from domain.taxonomy import parse_themes_config
from domain.themes import lifecycle
from infrastructure.io.json_store import read_json, write_json

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ThemeRegistry:
    """
    File-backed theme registry.

    Each mutating call loads the whole registry, applies its batch in memory
    and flushes once, atomically, only if something changed. An exception
    raised mid-batch leaves the file untouched. There is no cross-process
    locking: concurrent runs must be serialized externally.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> ThemesConfig:
        """
        Raises:
            RegistryNotFoundError: If the registry file does not exist
            RegistryFormatError: If it is not valid JSON of the expected shape
        """
        if not self.path.exists():
            raise RegistryNotFoundError(f"Theme registry not found: {self.path}")
        try:
            data = read_json(self.path)
        except json.JSONDecodeError as e:
            raise RegistryFormatError(f"Theme registry {self.path} is not valid JSON: {e}") from e
        return parse_themes_config(data, source=str(self.path))

    def save(self, config: ThemesConfig) -> None:
        write_json(self.path, config.model_dump(mode="json", exclude_none=True))
        logger.debug("Wrote theme registry %s (%d themes)", self.path, len(config.themes))

    def _mutate(self, apply: Callable[[ThemesConfig], tuple[T, bool]], what: str) -> T:
        config = self.load()
        result, changed = apply(config)
        if changed:
            self.save(config)
            logger.info("Theme registry updated: %s", what)
        else:
            logger.info("Theme registry unchanged: %s was a no-op", what)
        return result

    # ---- Queries ----

    def get(self, theme_id: str) -> Theme | None:
        return lifecycle.get_theme_by_id(self.load(), theme_id)

    def active_themes(self) -> list[Theme]:
        return lifecycle.get_active_themes(self.load())

    def themes_under_review(self) -> list[Theme]:
        return lifecycle.get_themes_under_review(self.load())

    def themes_by_category(self, category_slug: str) -> list[Theme]:
        return lifecycle.get_themes_by_category(self.load(), category_slug)

    def suggested_tags(self) -> list[str]:
        return list(self.load().suggested_tags)

    # ---- Mutations ----

    def activate(self, theme_ids: Iterable[str], approved_by: str = lifecycle.DEFAULT_APPROVER) -> list[str]:
        """Approve themes under review; returns the ids that transitioned."""
        ids = list(theme_ids)

        def apply(config: ThemesConfig) -> tuple[list[str], bool]:
            activated = lifecycle.activate_themes(config, ids, approved_by)
            return activated, bool(activated)

        return self._mutate(apply, f"activate {ids}")

    def increment_tool_counts(self, theme_ids: Iterable[str]) -> bool:
        ids = list(theme_ids)

        def apply(config: ThemesConfig) -> tuple[bool, bool]:
            changed = lifecycle.increment_theme_tool_counts(config, ids)
            return changed, changed

        return self._mutate(apply, f"increment tool counts {ids}")

    def recount_tool_counts(self, tools: Sequence[ToolRecord]) -> bool:
        def apply(config: ThemesConfig) -> tuple[bool, bool]:
            changed = lifecycle.recount_theme_tool_counts(config, tools)
            return changed, changed

        return self._mutate(apply, f"recount tool counts over {len(tools)} tools")

    def add(self, theme: Theme, requires_approval: bool = True) -> Theme:
        def apply(config: ThemesConfig) -> tuple[Theme, bool]:
            return lifecycle.add_theme(config, theme, requires_approval), True

        return self._mutate(apply, f"add theme {theme.id}")

    def add_or_get(
        self,
        *,
        theme_id: str,
        name: str,
        description: str,
        keywords: list[str] | None = None,
        categories: list[str] | None = None,
        today: date | None = None,
    ) -> str:
        def apply(config: ThemesConfig) -> tuple[str, bool]:
            return lifecycle.add_or_get_theme(
                config,
                theme_id=theme_id,
                name=name,
                description=description,
                keywords=keywords,
                categories=categories,
                today=today,
            )

        return self._mutate(apply, f"add or get theme {theme_id}")

    def add_suggested_tag(self, tag: str) -> bool:
        def apply(config: ThemesConfig) -> tuple[bool, bool]:
            changed = lifecycle.add_suggested_tag(config, tag)
            return changed, changed

        return self._mutate(apply, f"add suggested tag {tag!r}")
