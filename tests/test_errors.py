"""Tests for structured errors."""

import duckdb
import pytest

from yawmak.errors import (
    HINTS,
    AlreadyExistsError,
    ErrorKind,
    InUseError,
    InvalidInputError,
    NotFoundError,
    YawmakError,
    classify,
    translate_errors,
)


def test_every_kind_has_a_hint():
    assert set(HINTS) == set(ErrorKind)


@pytest.mark.parametrize(
    "error_cls, kind",
    [
        (NotFoundError, ErrorKind.NOT_FOUND),
        (AlreadyExistsError, ErrorKind.ALREADY_EXISTS),
        (InUseError, ErrorKind.IN_USE),
        (InvalidInputError, ErrorKind.INVALID_INPUT),
    ],
)
def test_subclass_kinds(error_cls, kind):
    error = error_cls("boom")
    assert error.kind is kind
    assert error.hint == HINTS[kind]
    assert str(error) == "boom"


@pytest.mark.parametrize(
    "error, kind",
    [
        (duckdb.ConstraintException("dup"), ErrorKind.ALREADY_EXISTS),
        (duckdb.IOException("io"), ErrorKind.IO),
        (FileNotFoundError("gone"), ErrorKind.IO),
        (duckdb.InvalidInputException("bad"), ErrorKind.INVALID_INPUT),
        (duckdb.CatalogException("no table"), ErrorKind.DATABASE),
        (InUseError("used"), ErrorKind.IN_USE),
    ],
)
def test_classify(error, kind):
    assert classify(error) is kind


class TestTranslateErrors:
    def test_wraps_duckdb_error(self):
        with pytest.raises(YawmakError, match="Failed to list: no table") as exc_info:
            with translate_errors("Failed to list"):
                raise duckdb.CatalogException("no table")
        assert exc_info.value.kind is ErrorKind.DATABASE
        assert isinstance(exc_info.value.__cause__, duckdb.CatalogException)

    def test_keeps_yawmak_error(self):
        original = NotFoundError("Task not found: 1")
        with pytest.raises(NotFoundError) as exc_info:
            with translate_errors("Failed"):
                raise original
        assert exc_info.value is original

    def test_other_exceptions_propagate(self):
        with pytest.raises(KeyError):
            with translate_errors("Failed"):
                raise KeyError("x")
