"""I/O utilities: filesystem operations and JSON documents."""

from infrastructure.io.fs import list_files, list_subdirs, read_json, read_text, write_json

__all__ = [
    "read_text",
    "read_json",
    "write_json",
    "list_files",
    "list_subdirs",
]
