"""
Theme lifecycle operations on an in-memory theme registry.

Status machine: under_review -> active (manual approval). Active is terminal.

Every mutating function returns True when the registry changed, so callers
can skip the write for no-op batches. Persistence is the caller's concern
(see infrastructure.registry.themes).
"""

from collections.abc import Iterable, Sequence
from datetime import date

from domain.errors import DuplicateThemeError, InvalidThemeIdError, ThemeNotFoundError
from domain.schemas import Theme, ThemeMetadata, ThemesConfig, ThemeStatus, ToolRecord
from domain.taxonomy.normalizer import normalize_tag

DEFAULT_APPROVER = "manual"


def get_theme_by_id(config: ThemesConfig, theme_id: str) -> Theme | None:
    return next((t for t in config.themes if t.id == theme_id), None)


def require_theme(config: ThemesConfig, theme_id: str) -> Theme:
    theme = get_theme_by_id(config, theme_id)
    if theme is None:
        raise ThemeNotFoundError(f'Theme with id "{theme_id}" not found')
    return theme


def require_slug_id(theme_id: str) -> str:
    """Theme ids must already be in normalized tag form (`"code-quality-tools"`)."""
    if not theme_id or normalize_tag(theme_id) != theme_id:
        raise InvalidThemeIdError(f'Theme id "{theme_id}" is not a slug (expected "{normalize_tag(theme_id)}")')
    return theme_id


def get_active_themes(config: ThemesConfig) -> list[Theme]:
    return [t for t in config.themes if t.status is ThemeStatus.ACTIVE]


def get_themes_under_review(config: ThemesConfig) -> list[Theme]:
    return [t for t in config.themes if t.status is ThemeStatus.UNDER_REVIEW]


def get_themes_by_category(config: ThemesConfig, category_slug: str) -> list[Theme]:
    """Active themes that cover `category_slug`."""
    return [t for t in get_active_themes(config) if category_slug in t.categories]


def activate_themes(config: ThemesConfig, theme_ids: Iterable[str], approved_by: str = DEFAULT_APPROVER) -> list[str]:
    """
    Move themes from under_review to active and record the approver.

    Unknown ids and themes that are not under review are left untouched.

    Returns:
        Ids of the themes that transitioned (empty when nothing changed)
    """
    activated: list[str] = []
    for theme_id in theme_ids:
        theme = get_theme_by_id(config, theme_id)
        if theme is None or theme.status is not ThemeStatus.UNDER_REVIEW:
            continue
        theme.status = ThemeStatus.ACTIVE
        theme.metadata.approved_by = approved_by
        activated.append(theme_id)
    return activated


def increment_theme_tool_counts(config: ThemesConfig, theme_ids: Iterable[str]) -> bool:
    """
    Add 1 to `metadata.tool_count` for each listed theme id.

    Purely additive bookkeeping: membership is not recounted. An id listed
    twice is incremented twice; unknown ids are ignored.
    """
    modified = False
    for theme_id in theme_ids:
        theme = get_theme_by_id(config, theme_id)
        if theme is not None:
            theme.metadata.tool_count += 1
            modified = True
    return modified


def recount_theme_tool_counts(config: ThemesConfig, tools: Sequence[ToolRecord]) -> bool:
    """Set every theme's tool_count to the number of tools referencing its id."""
    counts: dict[str, int] = {}
    for tool in tools:
        for theme_id in set(tool.theme_ids):
            counts[theme_id] = counts.get(theme_id, 0) + 1

    modified = False
    for theme in config.themes:
        new_count = counts.get(theme.id, 0)
        if theme.metadata.tool_count != new_count:
            theme.metadata.tool_count = new_count
            modified = True
    return modified


def add_theme(config: ThemesConfig, theme: Theme, requires_approval: bool = True) -> Theme:
    """
    Append a new theme to the registry.

    Auto-discovered themes that require approval always enter as under_review.

    Raises:
        InvalidThemeIdError: If the id is not a slug
        DuplicateThemeError: If a theme with the same id already exists
    """
    require_slug_id(theme.id)
    if get_theme_by_id(config, theme.id) is not None:
        raise DuplicateThemeError(f'Theme with id "{theme.id}" already exists')

    if requires_approval and theme.metadata.auto_discovered:
        theme.status = ThemeStatus.UNDER_REVIEW

    config.themes.append(theme)
    return theme


def add_or_get_theme(
    config: ThemesConfig,
    *,
    theme_id: str,
    name: str,
    description: str,
    keywords: list[str] | None = None,
    categories: list[str] | None = None,
    today: date | None = None,
) -> tuple[str, bool]:
    """
    Return the id of an existing theme, or register a new auto-discovered one.

    New themes start under_review with a tool_count of 1 (the submitting tool).

    Returns:
        (theme_id, created)

    Raises:
        InvalidThemeIdError: If `theme_id` is not a slug
    """
    require_slug_id(theme_id)
    existing = get_theme_by_id(config, theme_id)
    if existing is not None:
        return existing.id, False

    created_on = today or date.today()
    theme = Theme(
        id=theme_id,
        name=name,
        description=description,
        keywords=list(keywords or []),
        categories=list(categories or []),
        status=ThemeStatus.UNDER_REVIEW,
        metadata=ThemeMetadata(
            auto_discovered=True,
            tool_count=1,
            created_date=created_on.isoformat(),
            approved_by=None,
        ),
    )
    config.themes.append(theme)
    return theme.id, True


def add_suggested_tag(config: ThemesConfig, tag: str) -> bool:
    """Add a tag to the controlled vocabulary (normalized, kept sorted)."""
    normalized = normalize_tag(tag)
    if not normalized or normalized in config.suggested_tags:
        return False
    config.suggested_tags = sorted([*config.suggested_tags, normalized])
    return True
