"""Message entity: one alternative an operation can carry."""

from __future__ import annotations

from typing import Any

from src.asyncapi_model.collection import PositionalCollection
from src.asyncapi_model.mixins import (
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
    extension_value,
)

# Name the upstream parser stamps on anonymous component messages
PARSER_MESSAGE_NAME_EXTENSION = "x-parser-message-name"


class Message(
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
):
    def id(self) -> str:
        return (
            self.message_id()
            or self._meta.id
            or str(extension_value(self, PARSER_MESSAGE_NAME_EXTENSION, ""))
        )

    def has_message_id(self) -> bool:
        return bool(self.message_id())

    def message_id(self) -> str | None:
        value = self.json("messageId")
        return str(value) if value else None

    def has_name(self) -> bool:
        return bool(self.name())

    def name(self) -> str | None:
        return self.json("name")

    def title(self) -> str | None:
        return self.json("title")

    def summary(self) -> str | None:
        return self.json("summary")

    def content_type(self) -> str | None:
        """``contentType``, falling back to the document's ``defaultContentType``."""
        value = self.json("contentType")
        if value:
            return str(value)
        parsed = self._parsed_document()
        if parsed is not None and parsed.get("defaultContentType"):
            return str(parsed["defaultContentType"])
        return None

    def has_payload(self) -> bool:
        return self.payload() is not None

    def payload(self) -> dict[str, Any] | None:
        value = self.json("payload")
        return value if isinstance(value, dict) else None

    def headers(self) -> dict[str, Any] | None:
        value = self.json("headers")
        return value if isinstance(value, dict) else None


class Messages(PositionalCollection[Message]):
    """Messages keyed by position; equal ``messageId`` values do not collapse."""
