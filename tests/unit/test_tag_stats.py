from domain.schemas import ToolRecord
from domain.taxonomy import compute_tag_stats, get_all_used_tags, get_popular_tags, get_related_tools, rank_tags


def test_compute_tag_stats_counts_each_tool_once(tools: list[ToolRecord]) -> None:
    doubled = ToolRecord(name="Dup", tags=["CLI", "cli", "c_l_i"])

    stats = compute_tag_stats([*tools, doubled])

    assert stats["cli"] == 5
    assert stats["c-l-i"] == 1
    assert stats["testing"] == 3
    assert stats["automation"] == 1


def test_rank_tags_orders_by_count_then_name(tools: list[ToolRecord]) -> None:
    ranked = rank_tags(compute_tag_stats(tools), min_count=2)

    assert ranked == [("cli", 4), ("testing", 3), ("code-quality", 2), ("javascript", 2), ("python", 2)]


def test_popular_tags_use_threshold(tools: list[ToolRecord]) -> None:
    assert get_popular_tags(tools) == ["cli", "testing"]
    assert get_popular_tags(tools, min_count=5) == []


def test_all_used_tags_sorted(tools: list[ToolRecord]) -> None:
    assert get_all_used_tags(tools) == ["automation", "cli", "code-quality", "javascript", "python", "testing"]


def test_related_tools_share_a_tag(tools: list[ToolRecord]) -> None:
    related = get_related_tools(["Automation"], tools)

    assert [t.name for t in related] == ["CI Bot"]
    assert get_related_tools(["!!!"], tools) == []
