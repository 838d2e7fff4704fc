"""
Unit tests for the Result wrapper.
"""

import logging

import pytest

from utils.errors import StoreError
from utils.result import Result


def test_success_unwraps():
    result = Result.success([1, 2])
    assert result.ok
    assert result.unwrap() == [1, 2]
    assert result.unwrap_or([]) == [1, 2]


def test_success_with_none_value():
    result = Result.success(None)
    assert result.ok
    assert result.unwrap_or("default") is None


def test_failure_collapses_to_default():
    result = Result.failure(StoreError("timeout", operation="query"))
    assert not result.ok
    assert result.unwrap_or([]) == []


def test_failure_unwrap_raises():
    error = StoreError("timeout", operation="query")
    with pytest.raises(StoreError) as exc:
        Result.failure(error).unwrap()
    assert exc.value is error
    assert str(exc.value) == "query: timeout"


def test_failure_logs_error_with_cause(caplog):
    cause = ValueError("socket closed")
    error = StoreError("timeout", operation="query")
    error.__cause__ = cause

    with caplog.at_level(logging.ERROR, logger="utils.result"):
        Result.failure(error).unwrap_or(None)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.exc_info[1] is error
    assert "socket closed" in caplog.text
