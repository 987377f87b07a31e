"""Tests for shared constants."""
from __future__ import annotations

from src.shared.constants import (
    ACTION_PUBLISH,
    ACTION_SUBSCRIBE,
    EXTENSION_PREFIX,
    OPERATION_ACTIONS,
    SUPPORTED_ASYNCAPI_MAJORS,
)


def test_operation_actions_order():
    assert OPERATION_ACTIONS == (ACTION_PUBLISH, ACTION_SUBSCRIBE)
    assert OPERATION_ACTIONS == ("publish", "subscribe")


def test_supported_majors():
    assert SUPPORTED_ASYNCAPI_MAJORS == frozenset({"2"})


def test_extension_prefix():
    assert EXTENSION_PREFIX == "x-"
