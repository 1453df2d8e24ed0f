from __future__ import annotations

import json
import logging

from beastql.utils.logging import _json_formatter, configure_logging, get_logger

EXPECTED_BEAST_ID = 6
EXPECTED_BEASTS = 5


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.beast_id = EXPECTED_BEAST_ID
    record.beast_name = "Jackalope"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["beast_id"] == EXPECTED_BEAST_ID
    assert payload["beast_name"] == "Jackalope"
    assert "pathname" not in payload


def test_json_formatter_merges_nested_extra_dict() -> None:
    record = _record()
    record.extra = {"beasts": EXPECTED_BEASTS}

    payload = json.loads(_json_formatter(record))

    assert payload["beasts"] == EXPECTED_BEASTS
    assert "extra" not in payload


def test_json_formatter_renders_non_json_values_as_strings(tmp_path) -> None:
    record = _record()
    record.seed_path = tmp_path

    payload = json.loads(_json_formatter(record))

    assert payload["seed_path"] == str(tmp_path)


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="warning", json_logs=True)

    root = get_logger()
    assert root.level == logging.WARNING
    assert root.handlers

    configure_logging(level="INFO")
