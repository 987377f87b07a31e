"""Shared test fixtures for the asyncapi-model test suite."""
from __future__ import annotations

from typing import Any

import pytest

from src.asyncapi_model.document import AsyncAPIDocument
from src.asyncapi_model.loader import load_document
from tests.fixtures import load_user_events


@pytest.fixture
def operation_fragment() -> dict[str, Any]:
    """Provide an empty operation fragment shared between channels."""
    return {}


@pytest.fixture
def two_server_document(operation_fragment: dict[str, Any]) -> dict[str, Any]:
    """Provide a document with two servers and one unrestricted channel."""
    return {
        "asyncapi": "2.6.0",
        "servers": {"production": {}, "development": {}},
        "channels": {"user/signup": {"publish": operation_fragment}},
    }


@pytest.fixture
def user_events() -> AsyncAPIDocument:
    """Provide the sample user-events document."""
    return load_document(load_user_events(), strict=False)
