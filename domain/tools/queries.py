"""Relationship queries between tools and themes."""

from collections.abc import Sequence

from domain.schemas import Theme, ToolRecord


def get_tools_for_theme(theme_id: str, tools: Sequence[ToolRecord]) -> list[ToolRecord]:
    """Tools that reference `theme_id`, sorted by name (case-insensitive)."""
    members = [tool for tool in tools if theme_id in tool.theme_ids]
    return sorted(members, key=lambda t: (t.name.lower(), t.name))


def get_related_themes(theme: Theme, all_themes: Sequence[Theme], tools: Sequence[ToolRecord]) -> list[Theme]:
    """
    Themes related to `theme`.

    A theme is related when it shares at least one tool with `theme` or
    covers at least one of its categories. Registry order is preserved.
    """
    related_ids: set[str] = set()
    for tool in get_tools_for_theme(theme.id, tools):
        related_ids.update(t for t in tool.theme_ids if t != theme.id)

    own_categories = set(theme.categories)
    for other in all_themes:
        if other.id != theme.id and own_categories.intersection(other.categories):
            related_ids.add(other.id)

    return [t for t in all_themes if t.id in related_ids]


def get_tools_without_themes(tools: Sequence[ToolRecord]) -> list[ToolRecord]:
    return [tool for tool in tools if not tool.theme_ids]
