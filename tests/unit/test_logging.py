import logging

from infrastructure.observability import configure_logging, log_stage, make_run_tag, set_run_context
from infrastructure.observability.logging import RunContextFilter


def _record() -> logging.LogRecord:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    RunContextFilter().filter(record)
    return record


def test_run_tag_is_stable_and_short() -> None:
    assert make_run_tag("20260101_000000_validate") == make_run_tag("20260101_000000_validate")
    assert len(make_run_tag("x")) == 8


def test_stage_is_scoped_to_block(tmp_path) -> None:
    tag = set_run_context("run-1", root=tmp_path / "registry")

    with log_stage("metadata"):
        inside = _record()
    outside = _record()

    assert (inside.run, inside.registry, inside.stage) == (tag, "registry", "metadata")
    assert outside.stage == "-"


def test_file_handler_receives_tagged_lines(tmp_path) -> None:
    log_file = tmp_path / "logs" / "registry.log"
    configure_logging(log_file=log_file, console_level=logging.CRITICAL)
    set_run_context("run-2")

    with log_stage("build"):
        logging.getLogger("icon.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    assert f"r={make_run_tag('run-2')}" in line
    assert "s=build | hello" in line
    configure_logging(console_level=logging.CRITICAL)
