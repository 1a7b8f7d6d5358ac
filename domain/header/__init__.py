"""
Structured-header parsing for markdown catalog documents.

All functions in this module are pure (no file I/O).
"""

from domain.header.parser import (
    HeaderValue,
    ParserState,
    extract_header_block,
    parse_header,
    parse_header_lines,
    parse_inline_array,
    split_document,
    strip_quotes,
)

__all__ = [
    "HeaderValue",
    "ParserState",
    "parse_header",
    "parse_header_lines",
    "parse_inline_array",
    "extract_header_block",
    "split_document",
    "strip_quotes",
]
