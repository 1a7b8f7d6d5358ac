import logging
from pathlib import Path

from infrastructure.observability import configure_logging, get_log_context, make_run_tag, set_log_context
from infrastructure.observability.logging import ContextInjectFilter


def test_run_tag_is_stable_and_short() -> None:
    tag = make_run_tag("20240101_120000_report")

    assert tag == make_run_tag("20240101_120000_report")
    assert len(tag) == 8
    assert tag != make_run_tag("20240101_120000_pages")


def test_context_is_injected_into_records() -> None:
    set_log_context(run_id_full="run-1", command="report")
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

    assert ContextInjectFilter().filter(record) is True
    assert record.run == make_run_tag("run-1")
    assert record.cmd == "report"
    assert get_log_context() == {"run_tag": make_run_tag("run-1"), "run_id_full": "run-1", "command": "report"}


def test_file_handler_writes_context(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "catalog.log"
    configure_logging(log_file=log_file, console_level=logging.WARNING)
    set_log_context(run_id_full="run-2", command="pages")

    logging.getLogger("catalog.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "c=pages | hello" in text
    assert f"r={make_run_tag('run-2')}" in text
