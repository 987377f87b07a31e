"""Tests for shared error classes."""
from __future__ import annotations

from src.shared.errors import (
    AppError,
    MalformedFragmentError,
    ParsingError,
    SchemaError,
)


class TestAppError:
    """Tests for the base AppError exception."""

    def test_default_status_code(self):
        err = AppError(detail="something broke")
        assert err.status_code == 500
        assert err.detail == "something broke"

    def test_custom_status_code(self):
        err = AppError(detail="bad request", status_code=400)
        assert err.status_code == 400

    def test_str_is_detail(self):
        err = AppError(detail="human readable")
        assert str(err) == "human readable"


class TestParsingError:
    def test_default_detail(self):
        err = ParsingError()
        assert err.status_code == 400
        assert err.detail == "Parsing error"

    def test_inherits_from_app_error(self):
        assert issubclass(ParsingError, AppError)


class TestSchemaError:
    def test_default_detail(self):
        err = SchemaError()
        assert err.status_code == 422
        assert err.detail == "Schema error"


class TestMalformedFragmentError:
    def test_detail_includes_pointer(self):
        err = MalformedFragmentError(detail="'message' is not an object", pointer="/op/message")
        assert err.pointer == "/op/message"
        assert err.detail == "'message' is not an object (at '/op/message')"
        assert err.status_code == 422

    def test_without_pointer(self):
        err = MalformedFragmentError()
        assert err.detail == "Malformed fragment"
        assert err.pointer == ""

    def test_is_schema_error(self):
        assert issubclass(MalformedFragmentError, SchemaError)
