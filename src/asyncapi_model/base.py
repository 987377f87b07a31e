"""Entity base class and creation context for the AsyncAPI document model.

Every entity is a thin, read-only view over one fragment of an
already-parsed AsyncAPI document.  Entities carry a :class:`ModelMeta`
describing where the fragment sits (its JSON pointer), a synthetic
identifier supplied by whoever created it, and an optional reference to
the whole document so that views spanning several document sections can
be computed on demand.

Nothing here caches or mutates; entities are cheap to build and are
rebuilt on every view call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Literal

from src.shared.errors import MalformedFragmentError

logger = logging.getLogger(__name__)

Action = Literal["publish", "subscribe"]


# ---------------------------------------------------------------------------
# Creation context
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DetailedAsyncAPI:
    """The parsed document together with what it was parsed from.

    Attributes:
        parsed: The normalized document tree (``servers``, ``channels``, ...).
        source: The original input (dict or YAML/JSON text), if known.
        semver: The ``asyncapi`` version string of the document, if known.
    """

    parsed: dict[str, Any] = field(default_factory=dict)
    source: Any = None
    semver: str | None = None


@dataclass(frozen=True)
class ModelMeta:
    """Creation context handed to every entity.

    Attributes:
        asyncapi: The whole document, or ``None`` for standalone entities.
        pointer:  JSON pointer of the fragment inside the document.  Used for
                  identity and diagnostics only, never for traversal.
        id:       Synthetic identifier used when the fragment has none.
        action:   ``"publish"`` or ``"subscribe"`` for operations.
        strict:   Raise on malformed fragments instead of degrading.
    """

    asyncapi: DetailedAsyncAPI | None = None
    pointer: str = ""
    id: str = ""
    action: Action | None = None
    strict: bool = False


# ---------------------------------------------------------------------------
# JSON pointer helpers
# ---------------------------------------------------------------------------


def escape_pointer_token(token: str) -> str:
    """Escape one JSON pointer reference token (``~`` -> ``~0``, ``/`` -> ``~1``)."""
    return str(token).replace("~", "~0").replace("/", "~1")


def join_pointer(pointer: str, *tokens: str | int) -> str:
    """Append escaped *tokens* to *pointer*."""
    return pointer + "".join(f"/{escape_pointer_token(str(t))}" for t in tokens)


def report_malformed(detail: str, pointer: str, strict: bool) -> None:
    """Raise in strict mode, otherwise log and let the caller degrade."""
    if strict:
        raise MalformedFragmentError(detail=detail, pointer=pointer)
    logger.warning("%s at '%s'; treating it as absent.", detail, pointer or "/")


# ---------------------------------------------------------------------------
# Entity base
# ---------------------------------------------------------------------------


class BaseEntity:
    """Read-only view over a document fragment."""

    def __init__(self, fragment: Any, meta: ModelMeta | None = None) -> None:
        self._json = fragment
        self._meta = meta if meta is not None else ModelMeta()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id()!r}, pointer={self._meta.pointer!r})"

    def id(self) -> str:
        return self._meta.id

    def json(self, key: str | None = None) -> Any:
        """Return the raw fragment, or one of its fields when *key* is given."""
        if key is None:
            return self._json
        if not isinstance(self._json, dict):
            return None
        return self._json.get(key)

    def meta(self) -> ModelMeta:
        return self._meta

    def pointer(self) -> str:
        return self._meta.pointer

    # ------------------------------------------------------------------
    # helpers for subclasses
    # ------------------------------------------------------------------

    def _parsed_document(self) -> dict[str, Any] | None:
        asyncapi = self._meta.asyncapi
        if asyncapi is None or not isinstance(asyncapi.parsed, dict):
            return None
        return asyncapi.parsed

    def _child_meta(
        self,
        pointer: str,
        id: str = "",
        action: Action | None = None,
    ) -> ModelMeta:
        return replace(self._meta, pointer=pointer, id=id, action=action)

    def _malformed(self, detail: str, pointer: str | None = None) -> None:
        report_malformed(
            detail,
            self._meta.pointer if pointer is None else pointer,
            self._meta.strict,
        )
