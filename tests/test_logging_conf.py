from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

from demo_server.logging_conf import JsonFormatter


def _record(msg, **extra) -> logging.LogRecord:
    logger = logging.getLogger("test.json")
    return logger.makeRecord("test.json", logging.INFO, __file__, 1, msg, (), None, extra=extra)


def test_json_line_with_extras():
    line = JsonFormatter().format(_record("request.end", status_code=200, path=Path("/x")))
    data = json.loads(line)
    assert data["level"] == "INFO"
    assert data["logger"] == "test.json"
    assert data["message"] == "request.end"
    assert data["status_code"] == 200
    assert data["path"] == "/x"
    assert "lineno" not in data
    assert "\n" not in line


def test_dict_message_is_merged():
    data = json.loads(JsonFormatter().format(_record({"event": "summary", "checks": 3})))
    assert data["event"] == "summary"
    assert data["checks"] == 3
    assert "message" not in data


def test_exception_info_included():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.getLogger("t").makeRecord(
            "t", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )
    data = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in data["exc_info"]
