"""Server entity: one entry of the document's ``servers`` section."""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.asyncapi_model.base import join_pointer
from src.asyncapi_model.collection import Collection
from src.asyncapi_model.mixins import (
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
)
from src.asyncapi_model.traversal import server_channels

if TYPE_CHECKING:
    from src.asyncapi_model.channel import Channels
    from src.asyncapi_model.message import Messages
    from src.asyncapi_model.operation import Operations


class Server(
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
):
    """A server, identified by its key under ``servers``."""

    def url(self) -> str | None:
        return self.json("url")

    def protocol(self) -> str | None:
        return self.json("protocol")

    def has_protocol_version(self) -> bool:
        return self.protocol_version() is not None

    def protocol_version(self) -> str | None:
        value = self.json("protocolVersion")
        return None if value is None else str(value)

    def channels(self) -> Channels:
        """Channels that can be served from this server."""
        from src.asyncapi_model.channel import Channel, Channels

        pairs = server_channels(self._parsed_document(), self.id(), self._meta.strict)
        return Channels(
            Channel(fragment, self._child_meta(join_pointer("", "channels", address), id=address))
            for address, fragment in pairs
        )

    def operations(self) -> Operations:
        from src.asyncapi_model.operation import Operations

        operations = Operations()
        for channel in self.channels():
            for operation in channel.operations():
                operations.add(operation)
        return operations

    def messages(self) -> Messages:
        from src.asyncapi_model.message import Messages

        messages = Messages()
        for operation in self.operations():
            for message in operation.messages():
                messages.add(message)
        return messages


class Servers(Collection[Server]):
    def filter_by_send(self) -> list[Server]:
        return self.filter_by(lambda server: bool(server.operations().filter_by_send()))

    def filter_by_receive(self) -> list[Server]:
        return self.filter_by(lambda server: bool(server.operations().filter_by_receive()))
