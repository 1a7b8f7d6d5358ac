from domain.header import extract_header_block, parse_header, parse_inline_array, split_document, strip_quotes


def test_parse_header_reads_scalars_quoted_scalars_and_arrays() -> None:
    text = (
        "---\n"
        "tool_name: Example\n"
        'description: "Runs checks: fast"\n'
        "tags: [cli, 'testing', \"python\"]\n"
        "themes:\n"
        "  - developer-experience\n"
        "  - ai-assistants\n"
        "---\n"
        "# Example\n"
    )

    assert parse_header(text) == {
        "tool_name": "Example",
        "description": "Runs checks: fast",
        "tags": ["cli", "testing", "python"],
        "themes": ["developer-experience", "ai-assistants"],
    }


def test_block_array_without_items_is_empty_list() -> None:
    assert parse_header("---\nthemes:\n---\n") == {"themes": []}


def test_block_array_ends_at_next_field() -> None:
    fields = parse_header("---\ntags:\n  - a\n\n  - b\ncategory: testing\n---\n")

    assert fields == {"tags": ["a", "b"], "category": "testing"}


def test_document_without_header_yields_empty_mapping() -> None:
    assert parse_header("# Just a title\n\ntool_name: nope\n") == {}
    assert extract_header_block("no header") is None


def test_unterminated_header_is_treated_as_missing() -> None:
    assert parse_header("---\ntool_name: Example\n# body\n") == {}


def test_crlf_line_endings_are_accepted() -> None:
    text = "---\r\ntool_name: Example\r\ntags: [a, b]\r\n---\r\nbody\r\n"

    assert parse_header(text) == {"tool_name": "Example", "tags": ["a", "b"]}


def test_comment_lines_are_skipped() -> None:
    text = "---\n# tool_name: Hidden\ntags:\n  # not an item\n  - a\n---\n"

    assert parse_header(text) == {"tags": ["a"]}


def test_continuation_lines_become_multiline_scalar() -> None:
    fields = parse_header("---\nnotes:\n  first line\n\n  second line\nname: x\n---\n")

    assert fields["notes"] == "  first line\n\n  second line"
    assert fields["name"] == "x"


def test_split_document_returns_block_and_body() -> None:
    block, body = split_document("---\na: 1\n---\n# Title\ntext")

    assert block == ["a: 1"]
    assert body == "# Title\ntext"


def test_inline_array_edge_cases() -> None:
    assert parse_inline_array("[]") == []
    assert parse_inline_array("[  ]") == []
    assert parse_inline_array("[a, b") == []
    assert parse_inline_array('[" spaced ", b]') == [" spaced ", "b"]


def test_strip_quotes_requires_matching_pair() -> None:
    assert strip_quotes('"quoted"') == "quoted"
    assert strip_quotes("'quoted'") == "quoted"
    assert strip_quotes("\"mixed'") == "\"mixed'"
    assert strip_quotes('"') == '"'


def test_empty_header_block_is_treated_as_missing() -> None:
    assert extract_header_block("---\n---\n# Title\n") is None
    assert parse_header("---\n---\n# Title\n") == {}


def test_blank_header_block_is_still_a_header() -> None:
    assert extract_header_block("---\n\n---\n# Title\n") == [""]
