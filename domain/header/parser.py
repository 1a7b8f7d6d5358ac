"""
Structured-header parser for catalog documents.

A document may open with a header block bounded by `---` lines:

    ---
    tool_name: Example
    description: "Runs checks: fast"
    tags: [cli, testing]
    themes:
      - developer-experience
    ---

Only this constrained subset is understood (scalars, quoted scalars, inline
arrays, block arrays). It is not a YAML parser.

Parsing is a small state machine over the block lines with three states:
Idle (no field pending), ScalarPending (collecting a multi-line scalar) and
ArrayPending (collecting `- item` lines).
"""

import re
from dataclasses import dataclass, field
from enum import Enum

HEADER_DELIMITER = "---"

HeaderValue = str | list[str]

_FIELD_RE = re.compile(r"^(\w+):\s*(.*)$")
_INLINE_ARRAY_RE = re.compile(r"\[(.*)\]")
_QUOTES = ("'", '"')


class ParserState(str, Enum):
    IDLE = "idle"
    SCALAR_PENDING = "scalar_pending"
    ARRAY_PENDING = "array_pending"


@dataclass
class _Machine:
    """Mutable parse state threaded through `_step`."""

    fields: dict[str, HeaderValue] = field(default_factory=dict)
    state: ParserState = ParserState.IDLE
    key: str = ""
    buffer: list[str] = field(default_factory=list)

    def flush(self) -> None:
        if self.state is ParserState.ARRAY_PENDING:
            self.fields[self.key] = list(self.buffer)
        elif self.state is ParserState.SCALAR_PENDING:
            self.fields[self.key] = "\n".join(self.buffer)
        self.state = ParserState.IDLE
        self.key = ""
        self.buffer = []


def strip_quotes(value: str) -> str:
    """Strip one layer of matching surrounding quotes."""
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_inline_array(value: str) -> list[str]:
    """
    Parse an inline array such as `[a, "b", 'c']`.

    Returns an empty list for `[]` and for an unterminated bracket.
    """
    match = _INLINE_ARRAY_RE.search(value)
    if match is None:
        return []
    inner = match.group(1)
    if not inner.strip():
        return []
    return [strip_quotes(item.strip()) for item in inner.split(",")]


def _is_comment(line: str) -> bool:
    return line.strip().startswith("#")


def _start_field(m: _Machine, key: str, remainder: str) -> None:
    m.flush()
    if remainder.startswith("["):
        m.fields[key] = parse_inline_array(remainder)
    elif remainder:
        m.fields[key] = strip_quotes(remainder)
    else:
        m.state = ParserState.ARRAY_PENDING
        m.key = key


def _step(m: _Machine, line: str) -> None:
    """Apply one block line to the machine."""
    if _is_comment(line):
        return

    field_match = _FIELD_RE.match(line)
    if field_match is not None:
        _start_field(m, field_match.group(1), field_match.group(2).strip())
        return

    if m.state is ParserState.ARRAY_PENDING:
        trimmed = line.strip()
        if trimmed.startswith("- "):
            m.buffer.append(trimmed[2:].strip())
        elif trimmed:
            # anything else turns the pending field into a multi-line scalar
            m.state = ParserState.SCALAR_PENDING
            m.buffer.append(line)
    elif m.state is ParserState.SCALAR_PENDING:
        m.buffer.append(line)


def split_document(text: str) -> tuple[list[str] | None, str]:
    """
    Split a document into header block lines and body.

    Returns:
        (block_lines, body). block_lines is None when the document has no
        header block; body is then the whole text.
    """
    lines = text.replace("\r\n", "\n").split("\n")
    if not lines or lines[0].rstrip() != HEADER_DELIMITER:
        return None, text
    # the closing delimiter cannot directly follow the opening one
    for idx in range(2, len(lines)):
        if lines[idx].rstrip() == HEADER_DELIMITER:
            return lines[1:idx], "\n".join(lines[idx + 1 :])
    return None, text


def extract_header_block(text: str) -> list[str] | None:
    """Return the lines between the opening and closing delimiters, or None."""
    block, _ = split_document(text)
    return block


def parse_header_lines(lines: list[str]) -> dict[str, HeaderValue]:
    """Run the state machine over already-extracted block lines."""
    m = _Machine()
    for line in lines:
        _step(m, line)
    m.flush()
    return m.fields


def parse_header(text: str) -> dict[str, HeaderValue]:
    """
    Parse the header block of a document.

    Examples:
        >>> parse_header("---\\ntitle: Demo\\ntags: [a, b]\\n---\\nbody")
        {'title': 'Demo', 'tags': ['a', 'b']}
        >>> parse_header("no header here")
        {}

    Args:
        text: Full document text

    Returns:
        Mapping of field name to scalar string or list of strings; empty when
        the document has no header block.
    """
    block = extract_header_block(text)
    if block is None:
        return {}
    return parse_header_lines(block)
