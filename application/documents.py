"""Shared document-loading helpers that record failures in the report."""

import logging
from collections.abc import Iterable
from concurrent.futures import Executor
from dataclasses import dataclass
from json import JSONDecodeError
from pathlib import Path
from typing import Any

from domain.report import ValidationReport
from infrastructure.io import read_json, read_text
from infrastructure.schema import SchemaValidator

logger = logging.getLogger(__name__)

# Failures that are data problems (reported), not programming errors (raised)
READ_ERRORS = (OSError, UnicodeDecodeError, JSONDecodeError)


@dataclass(frozen=True)
class Loaded:
    """Outcome of reading one file: either `value` or `error` is set."""

    path: Path
    value: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _read_json_safe(path: Path) -> Loaded:
    try:
        return Loaded(path=path, value=read_json(path))
    except READ_ERRORS as e:
        return Loaded(path=path, error=e)


# Undecodable bytes become U+FFFD; only OSError fails the read
def _read_text_safe(path: Path) -> Loaded:
    try:
        return Loaded(path=path, value=read_text(path, errors="replace"))
    except OSError as e:
        return Loaded(path=path, error=e)


def read_json_documents(paths: Iterable[Path], executor: Executor) -> list[Loaded]:
    """Read JSON files concurrently; results come back in input order."""
    return list(executor.map(_read_json_safe, paths))


def read_text_files(paths: Iterable[Path], executor: Executor) -> list[Loaded]:
    """Read text files concurrently; results come back in input order."""
    return list(executor.map(_read_text_safe, paths))


def load_json_document(path: Path) -> Loaded:
    return _read_json_safe(path)


def load_schema(path: Path, what: str, report: ValidationReport) -> SchemaValidator | None:
    """
    Load and compile a JSON-schema document.

    Returns None (and records "Failed to load <what>: <path>") if the file is
    missing, unparseable or not a valid schema.
    """
    loaded = _read_json_safe(path)
    if not loaded.ok:
        logger.debug("Could not read %s at %s: %s", what, path, loaded.error)
        report.add_error(f"Failed to load {what}: {path}")
        return None

    if not isinstance(loaded.value, dict):
        logger.debug("%s at %s is not a JSON object", what, path)
        report.add_error(f"Failed to load {what}: {path}")
        return None

    try:
        return SchemaValidator(loaded.value)
    except ValueError as e:
        logger.debug("%s at %s is not a valid JSON schema: %s", what, path, e)
        report.add_error(f"Failed to load {what}: {path}")
        return None
