"""Wrap a parsed AsyncAPI 2.x document (dict or YAML/JSON text) in the model.

The loader does not dereference ``$ref`` pointers and does not validate the
document against the AsyncAPI schema; it only checks enough structure to
make navigation meaningful.

Example usage::

    >>> from src.asyncapi_model.loader import load_document
    >>> doc = load_document(open("asyncapi.yaml").read())  # doctest: +SKIP
    >>> [op.id() for op in doc.operations()]  # doctest: +SKIP
    ['onUserSignup']
"""

from __future__ import annotations

import logging
from typing import Any

import yaml

from src.asyncapi_model.document import AsyncAPIDocument
from src.shared.config import get_settings
from src.shared.constants import SUPPORTED_ASYNCAPI_MAJORS
from src.shared.errors import ParsingError, SchemaError

logger = logging.getLogger(__name__)


def _decode(source: str | bytes) -> Any:
    try:
        return yaml.safe_load(source)
    except yaml.YAMLError as exc:
        raise ParsingError(detail=f"Invalid YAML/JSON document: {exc}") from exc


def _check_version(parsed: dict[str, Any]) -> str:
    version = parsed.get("asyncapi")
    if not version:
        raise SchemaError(
            detail="AsyncAPI document is missing the required 'asyncapi' version field."
        )
    version_str = str(version)
    major = version_str.split(".")[0]
    if major not in SUPPORTED_ASYNCAPI_MAJORS:
        supported = ", ".join(sorted(SUPPORTED_ASYNCAPI_MAJORS))
        raise SchemaError(
            detail=(
                f"Unsupported AsyncAPI version '{version_str}'. "
                f"Supported major versions: {supported}."
            )
        )
    return version_str


def load_document(
    source: dict[str, Any] | str | bytes,
    *,
    strict: bool | None = None,
) -> AsyncAPIDocument:
    """Build an :class:`AsyncAPIDocument` from *source*.

    Args:
        source: An already-parsed document dict, or YAML/JSON text.
        strict: Raise :class:`~src.shared.errors.MalformedFragmentError` on
                malformed fragments during navigation.  ``None`` takes the
                value of ``ASYNCAPI_MODEL_STRICT``.

    Returns:
        The document entity.  The input dict is wrapped, not copied.

    Raises:
        ParsingError: If text cannot be decoded or does not hold a mapping.
        SchemaError:  If the ``asyncapi`` field is missing or not 2.x.
    """
    if isinstance(source, (str, bytes)):
        parsed = _decode(source)
    else:
        parsed = source

    if not isinstance(parsed, dict):
        raise ParsingError(
            detail=f"AsyncAPI document must be a mapping, got {type(parsed).__name__}."
        )

    version = _check_version(parsed)
    if strict is None:
        strict = get_settings().strict_mode

    channels = parsed.get("channels")
    logger.debug(
        "Loaded AsyncAPI %s document with %d channel(s).",
        version,
        len(channels) if isinstance(channels, dict) else 0,
    )
    return AsyncAPIDocument.from_parsed(parsed, source=source, strict=strict)
