"""Filesystem utility functions."""

import json
from pathlib import Path
from typing import Any


def read_text(path: Path, *, errors: str = "strict") -> str:
    """
    Read text file with UTF-8 encoding.

    Args:
        path: Path to text file
        errors: Codec error handler; "replace" never raises UnicodeDecodeError

    Returns:
        File contents, unmodified
    """
    return path.read_text(encoding="utf-8", errors=errors)


def read_json(path: Path) -> Any:
    """
    Read and parse a UTF-8 JSON document.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the content is not valid JSON
    """
    return json.loads(read_text(path))


def write_json(path: Path, payload: Any, *, indent: int | None = 2) -> int:
    """
    Write payload as UTF-8 JSON and return the number of bytes written.

    indent=None produces the compact form (no whitespace between tokens).
    """
    if indent is None:
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    else:
        text = json.dumps(payload, ensure_ascii=False, indent=indent)
    data = text.encode("utf-8")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return len(data)


def list_files(directory: Path, suffix: str) -> list[str]:
    """
    Return the sorted names of regular files in `directory` ending with `suffix` (non-recursive).

    Sorting makes processing order independent of the host filesystem's listing order.

    Raises:
        OSError: If the directory cannot be listed
    """
    return sorted(entry.name for entry in directory.iterdir() if entry.name.endswith(suffix) and entry.is_file())


def list_subdirs(directory: Path) -> list[str]:
    """
    Return the sorted names of immediate subdirectories.

    Raises:
        OSError: If the directory cannot be listed
    """
    return sorted(entry.name for entry in directory.iterdir() if entry.is_dir())
