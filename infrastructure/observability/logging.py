"""
Logging for registry runs.

Every record is tagged with the short run tag, the registry being checked and
the current stage (taxonomy/metadata/assets/build), taken from contextvars so
callers never pass them around. Console output is always on; a rotating log
file is added when a path is given.
"""

import contextvars
import hashlib
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_registry = contextvars.ContextVar("registry", default="-")
cv_stage = contextvars.ContextVar("stage", default="-")

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] r=%(run)s s=%(stage)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s reg=%(registry)s s=%(stage)s | %(message)s"


def make_run_tag(run_id: str, length: int = 8) -> str:
    """Short, stable tag for a run id (BLAKE2s digest prefix)."""
    return hashlib.blake2s(run_id.encode("utf-8"), digest_size=8).hexdigest()[:length]


class RunContextFilter(logging.Filter):
    """Copy the run/registry/stage contextvars onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get()
        record.registry = cv_registry.get()
        record.stage = cv_stage.get()
        return True


def set_run_context(run_id: str, *, root: Path | str | None = None) -> str:
    """
    Start a new run: derive its tag and remember which registry it checks.

    Returns:
        The short run tag now attached to log records
    """
    run_tag = make_run_tag(run_id)
    cv_run_tag.set(run_tag)
    if root is not None:
        cv_registry.set(Path(root).resolve().name or str(root))
    return run_tag


@contextmanager
def log_stage(name: str) -> Iterator[None]:
    """Tag log records emitted inside the block with a stage name."""
    token = cv_stage.set(name)
    try:
        yield
    finally:
        cv_stage.reset(token)


def _handler(handler: logging.Handler, level: int, fmt: str, datefmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(RunContextFilter())
    return handler


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> None:
    """
    Install console (stderr) and optional rotating-file handlers on the root logger.

    Calling it again replaces the previous handlers.

    Args:
        log_file: Rotating log file; None for console only
        console_level: Minimum level printed to stderr
        file_level: Minimum level written to log_file
        max_bytes: Size at which log_file rotates
        backup_count: Rotated files kept
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
        if isinstance(existing, RotatingFileHandler):
            existing.close()
    root.setLevel(logging.DEBUG)

    root.addHandler(_handler(logging.StreamHandler(), console_level, CONSOLE_FORMAT, "%H:%M:%S"))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        root.addHandler(_handler(file_handler, file_level, FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))

    logging.getLogger(__name__).debug(
        "Logging configured (console=%s, file=%s)", logging.getLevelName(console_level), log_file
    )
