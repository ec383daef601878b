"""Tests for the sqlgen logging utilities."""

import logging
from collections.abc import Generator

import pytest

from sqlgen import builder
from sqlgen.utils.logging import (
    CorrelationIDFilter,
    get_correlation_id,
    get_logger,
    log_with_context,
    set_correlation_id,
)


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture
def captured() -> Generator[_ListHandler, None, None]:
    logger = logging.getLogger("sqlgen")
    handler = _ListHandler()
    level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(level)
    set_correlation_id(None)


def test_get_logger_namespaces_names() -> None:
    assert get_logger().name == "sqlgen"
    assert get_logger("render").name == "sqlgen.render"
    assert get_logger("sqlgen.builder").name == "sqlgen.builder"
    assert get_logger("sqlgenerator").name == "sqlgen.sqlgenerator"


def test_get_logger_adds_single_filter() -> None:
    logger = get_logger("filters")
    get_logger("filters")

    assert sum(isinstance(f, CorrelationIDFilter) for f in logger.filters) == 1


def test_correlation_id_roundtrip() -> None:
    set_correlation_id("abc")
    assert get_correlation_id() == "abc"
    set_correlation_id(None)
    assert get_correlation_id() is None


def test_correlation_id_attached_to_records(captured: _ListHandler) -> None:
    set_correlation_id("req-7")

    get_logger("tagged").info("hello")

    assert captured.records[-1].correlation_id == "req-7"  # type: ignore[attr-defined]


def test_log_with_context(captured: _ListHandler) -> None:
    log_with_context(get_logger("context"), logging.INFO, "rendered", query_type="UPDATE")

    record = captured.records[-1]
    assert record.getMessage() == "rendered"
    assert record.extra_fields == {"query_type": "UPDATE"}  # type: ignore[attr-defined]


def test_log_with_context_respects_level(captured: _ListHandler) -> None:
    logging.getLogger("sqlgen").setLevel(logging.WARNING)

    log_with_context(get_logger("quiet"), logging.DEBUG, "dropped")

    assert captured.records == []


def test_build_logs_structured_fields(captured: _ListHandler) -> None:
    builder().update("t").set("a = 1").build()

    record = next(r for r in captured.records if r.name == "sqlgen.builder")
    assert record.levelno == logging.DEBUG
    assert record.getMessage() == "Built UPDATE statement from 2 fragment(s)"
    assert record.extra_fields == {"query_type": "UPDATE", "fragment_count": 2}  # type: ignore[attr-defined]
