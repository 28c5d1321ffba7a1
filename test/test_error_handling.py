"""
Tests for structured errors, collection dispatch and logging setup
"""

import io
import logging

import pytest
from error_handling import (
  ParliamentError,
  UnsupportedCollectionError,
  VectorConstructionError,
  format_collection_error,
  generate_suggestions,
  make_collection_error,
)
from logger import setup_logger
from utilities import (
  LAZY,
  PERSISTENT,
  SEQUENCE,
  collection_kind,
  dispatch_by_kind,
  positional_arity,
  range_length,
  to_key,
)
from vector import Vector


class TestErrorRecords:
  """Error dictionaries and their formatting"""

  def test_format_includes_all_parts(self):
    error = make_collection_error(
      message="Unsupported collection type.",
      operation="take",
      got="int",
      expected=["Sequence", "Lazy"],
      suggestions=["Try a list"]
    )
    text = format_collection_error(error)

    assert text.startswith("take: Unsupported collection type.")
    assert "Expected: Sequence, Lazy" in text
    assert "Got: int" in text
    assert "- Try a list" in text

  def test_suggestions(self):
    assert any("Dict" in s for s in generate_suggestions({}))
    assert any("order" in s for s in generate_suggestions(len))
    assert generate_suggestions(5) == []

  def test_hierarchy(self):
    assert issubclass(VectorConstructionError, ParliamentError)
    assert issubclass(VectorConstructionError, TypeError)
    assert issubclass(UnsupportedCollectionError, TypeError)

  def test_unsupported_collection_attributes(self):
    err = UnsupportedCollectionError("uniq", 3.5, expected=[SEQUENCE])
    assert err.operation == "uniq"
    assert err.value == 3.5
    assert err.expected == [SEQUENCE]
    assert "Got: float" in str(err)


class TestDispatch:
  """Collection kinds"""

  def test_collection_kind(self):
    assert collection_kind([1]) == SEQUENCE
    assert collection_kind((1,)) == SEQUENCE
    assert collection_kind(Vector()) == PERSISTENT
    assert collection_kind(iter([])) == LAZY
    assert collection_kind(range(3)) == LAZY

  def test_collection_kind_rejects_scalars(self):
    with pytest.raises(UnsupportedCollectionError):
      collection_kind(None)

  def test_dispatch_by_kind(self):
    assert dispatch_by_kind("size", [1, 2], {SEQUENCE: len}) == 2
    with pytest.raises(UnsupportedCollectionError) as excinfo:
      dispatch_by_kind("size", iter([]), {SEQUENCE: len})
    assert excinfo.value.expected == [SEQUENCE]


class TestHelpers:
  """Key coercion and arity inspection"""

  def test_to_key(self):
    assert to_key(1) == "1"
    assert to_key("1") == "1"

  def test_positional_arity(self):
    assert positional_arity(lambda a, b: a) == 2
    assert positional_arity(lambda a, *, b: a) == 1
    assert positional_arity(lambda a, b=1: a) == 1

  def test_range_length(self):
    assert range_length(2, 10, 2) == 4
    assert range_length(0, 5, -1) == 0
    assert range_length(5, 0, -2) == 3
    with pytest.raises(ValueError):
      range_length(0, 5, 0)


class TestLogger:
  """Logger configuration"""

  def test_setup_logger_level(self):
    log = setup_logger("parliament.test_debug", level="DEBUG")
    assert log.level == logging.DEBUG
    assert len(log.handlers) == 1

  def test_setup_logger_is_idempotent(self):
    first = setup_logger("parliament.test_once", level="INFO")
    second = setup_logger("parliament.test_once", level="DEBUG")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO

  def test_level_from_environment(self, monkeypatch):
    monkeypatch.setenv("PARLIAMENT_LOG_LEVEL", "ERROR")
    log = setup_logger("parliament.test_env")
    assert log.level == logging.ERROR

  def test_package_logger_is_silent_by_default(self):
    handlers = logging.getLogger("parliament").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)

  def test_writes_to_given_stream(self):
    out = io.StringIO()
    log = setup_logger("parliament.test_stream", level="INFO", stream=out)
    log.info("forked")
    assert "forked" in out.getvalue()
    assert "parliament.test_stream" in out.getvalue()
