"""Root entity of an AsyncAPI 2.x document."""

from __future__ import annotations

import logging
from typing import Any

from src.asyncapi_model.base import DetailedAsyncAPI, ModelMeta, join_pointer
from src.asyncapi_model.channel import Channel, Channels
from src.asyncapi_model.message import Messages
from src.asyncapi_model.mixins import (
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
)
from src.asyncapi_model.operation import Operations
from src.asyncapi_model.server import Server, Servers
from src.asyncapi_model.traversal import channels_section, servers_section

logger = logging.getLogger(__name__)


class Info(DescriptionMixin, ExtensionsMixin):
    def title(self) -> str | None:
        return self.json("title")

    def version(self) -> str | None:
        value = self.json("version")
        return None if value is None else str(value)


class AsyncAPIDocument(ExtensionsMixin, ExternalDocumentationMixin, TagsMixin):
    """Entry point for navigating a parsed document."""

    @classmethod
    def from_parsed(
        cls,
        parsed: dict[str, Any],
        source: Any = None,
        strict: bool = False,
    ) -> AsyncAPIDocument:
        version = parsed.get("asyncapi")
        detailed = DetailedAsyncAPI(
            parsed=parsed,
            source=source,
            semver=None if version is None else str(version),
        )
        return cls(parsed, ModelMeta(asyncapi=detailed, strict=strict))

    def id(self) -> str:
        return str(self.json("id") or self._meta.id)

    def version(self) -> str | None:
        value = self.json("asyncapi")
        return None if value is None else str(value)

    def info(self) -> Info:
        value = self.json("info")
        pointer = join_pointer(self.pointer(), "info")
        if value is not None and not isinstance(value, dict):
            self._malformed("'info' is not an object", pointer)
            value = None
        return Info(value if value is not None else {}, self._child_meta(pointer))

    def has_default_content_type(self) -> bool:
        return bool(self.default_content_type())

    def default_content_type(self) -> str | None:
        return self.json("defaultContentType")

    def servers(self) -> Servers:
        section = servers_section(self._parsed_document(), self._meta.strict)
        return Servers(
            Server(fragment, self._child_meta(join_pointer("", "servers", name), id=str(name)))
            for name, fragment in section.items()
        )

    def channels(self) -> Channels:
        section = channels_section(self._parsed_document(), self._meta.strict)
        return Channels(
            Channel(fragment, self._child_meta(join_pointer("", "channels", address), id=str(address)))
            for address, fragment in section.items()
        )

    def operations(self) -> Operations:
        """Every channel operation, in channel order with publish before subscribe."""
        operations = Operations()
        for channel in self.channels():
            for operation in channel.operations():
                operations.add(operation)
        logger.debug("Document exposes %d operation(s).", len(operations))
        return operations

    def messages(self) -> Messages:
        messages = Messages()
        for operation in self.operations():
            for message in operation.messages():
                messages.add(message)
        return messages

