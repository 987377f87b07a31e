"""Channel entity: one entry of the document's ``channels`` section."""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.asyncapi_model.base import join_pointer
from src.asyncapi_model.collection import Collection
from src.asyncapi_model.message import Messages
from src.asyncapi_model.mixins import (
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
)
from src.asyncapi_model.server import Server, Servers
from src.asyncapi_model.traversal import channel_operations, reachable_servers

if TYPE_CHECKING:
    from src.asyncapi_model.operation import Operations


class Channel(
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
):
    """A channel, identified by its address (the key under ``channels``)."""

    def address(self) -> str:
        return self.id()

    def servers(self) -> Servers:
        """Servers this channel is available on (all of them when unrestricted)."""
        pairs = reachable_servers(
            self._parsed_document(), self.address(), self._json, self._meta.strict
        )
        return Servers(
            Server(fragment, self._child_meta(join_pointer("", "servers", name), id=name))
            for name, fragment in pairs
        )

    def operations(self) -> Operations:
        from src.asyncapi_model.operation import Operation, Operations

        return Operations(
            Operation(
                fragment,
                self._child_meta(
                    join_pointer(self.pointer(), action),
                    id=f"{self.address()}_{action}",
                    action=action,  # type: ignore[arg-type]
                ),
            )
            for action, fragment in channel_operations(self._json)
        )

    def messages(self) -> Messages:
        messages = Messages()
        for operation in self.operations():
            for message in operation.messages():
                messages.add(message)
        return messages


class Channels(Collection[Channel]):
    def filter_by_send(self) -> list[Channel]:
        return self.filter_by(lambda channel: bool(channel.operations().filter_by_send()))

    def filter_by_receive(self) -> list[Channel]:
        return self.filter_by(lambda channel: bool(channel.operations().filter_by_receive()))
