"""I/O utilities: filesystem operations, JSON documents and the document loader."""

from infrastructure.io.documents import iter_document_paths, load_tool_record, load_tool_records
from infrastructure.io.fs import atomic_write_text, ensure_exists, read_text
from infrastructure.io.json_store import read_json, write_json

__all__ = [
    "ensure_exists",
    "read_text",
    "atomic_write_text",
    "read_json",
    "write_json",
    "iter_document_paths",
    "load_tool_record",
    "load_tool_records",
]
