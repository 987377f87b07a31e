"""Value entities returned by the capability mixins."""

from __future__ import annotations

from typing import Any

from src.asyncapi_model.base import BaseEntity
from src.asyncapi_model.collection import Collection
from src.asyncapi_model.mixins import (
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
)
from src.shared.constants import BINDING_VERSION_KEY, DEFAULT_BINDING_VERSION


class Extension(BaseEntity):
    """A single ``x-`` field; ``id()`` is the field name."""

    def value(self) -> Any:
        return self._json


class Extensions(Collection[Extension]):
    pass


class ExternalDocumentation(DescriptionMixin, ExtensionsMixin):
    def url(self) -> str | None:
        return self.json("url")


class Tag(DescriptionMixin, ExtensionsMixin, ExternalDocumentationMixin):
    def name(self) -> str:
        return str(self.json("name") or "")


class Tags(Collection[Tag]):
    pass


class Binding(ExtensionsMixin):
    """Protocol-specific binding payload, exposed without interpretation."""

    def protocol(self) -> str:
        return self.id()

    def version(self) -> str:
        return str(self.json(BINDING_VERSION_KEY) or DEFAULT_BINDING_VERSION)

    def value(self) -> dict[str, Any]:
        if not isinstance(self._json, dict):
            return {}
        return {k: v for k, v in self._json.items() if k != BINDING_VERSION_KEY}


class Bindings(Collection[Binding]):
    pass
