import io
import json
import logging

from benford_engine.utils.logging import ContextFilter, JSONFormatter, configure_logging, get_logger


def test_json_formatter_includes_context_fields():
    record = logging.LogRecord("benford", logging.INFO, __file__, 1, "analysis done", None, None)
    record.component = "pipeline"
    record.total_count = 250
    record.ignored = "not serialized"
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "analysis done"
    assert payload["level"] == "INFO"
    assert payload["component"] == "pipeline"
    assert payload["total_count"] == 250
    assert "ignored" not in payload
    assert payload["timestamp"].endswith("Z")


def test_get_logger_attaches_single_context_filter():
    logger = get_logger("benford.test.context", component="unit")
    get_logger("benford.test.context", component="unit")
    assert sum(isinstance(f, ContextFilter) for f in logger.filters) == 1


def test_configure_logging_writes_json_lines():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    stream = io.StringIO()
    try:
        configure_logging(run_id="run-1", component="cli", stream=stream)
        logging.getLogger("benford.test.configure").info("hello")
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
    line = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert line["message"] == "hello"
    assert line["run_id"] == "run-1"
    assert line["component"] == "cli"
