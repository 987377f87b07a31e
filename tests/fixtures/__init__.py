"""Test fixtures for document-level tests.

Provides realistic sample documents:
- user_events.yaml: AsyncAPI 2.6 document with shared operations, oneOf
  messages, traits, restricted channels and bindings
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from src.asyncapi_model.base import DetailedAsyncAPI, ModelMeta

FIXTURES_DIR = Path(__file__).parent


def fixture_path(name: str) -> Path:
    """Return the absolute path to a named fixture file."""
    path = FIXTURES_DIR / name
    if not path.exists():
        raise FileNotFoundError(f"Fixture not found: {path}")
    return path


def load_user_events() -> str:
    """Load the sample AsyncAPI document as a string."""
    return fixture_path("user_events.yaml").read_text(encoding="utf-8")


def make_meta(
    parsed: dict[str, Any] | None,
    *,
    id: str = "operation",
    action: str = "publish",
    pointer: str = "",
    strict: bool = False,
) -> ModelMeta:
    """Build an operation creation context over *parsed*."""
    asyncapi = None if parsed is None else DetailedAsyncAPI(parsed=parsed)
    return ModelMeta(asyncapi=asyncapi, pointer=pointer, id=id, action=action, strict=strict)  # type: ignore[arg-type]
