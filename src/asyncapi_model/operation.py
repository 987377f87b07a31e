"""Operation entity and its derived views.

An :class:`Operation` wraps one ``publish`` or ``subscribe`` fragment of a
channel.  It owns nothing: channels, servers, messages and traits are
recomputed from the document on every call.

Example usage::

    >>> op = Operation(fragment, ModelMeta(asyncapi=doc, id="signup", action="publish"))
    >>> [channel.address() for channel in op.channels()]  # doctest: +SKIP
    ['user/signup']
    >>> [server.id() for server in op.servers()]  # doctest: +SKIP
    ['production', 'development']
"""

from __future__ import annotations

import logging

from src.asyncapi_model.base import Action, join_pointer
from src.asyncapi_model.channel import Channel, Channels
from src.asyncapi_model.collection import Collection
from src.asyncapi_model.message import Message, Messages
from src.asyncapi_model.mixins import (
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
)
from src.asyncapi_model.operation_trait import OperationTrait, OperationTraits
from src.asyncapi_model.server import Server, Servers
from src.asyncapi_model.traversal import (
    associated_channels,
    flatten_messages,
    operation_servers,
    operation_traits,
)
from src.shared.constants import ACTION_PUBLISH, ACTION_SUBSCRIBE

logger = logging.getLogger(__name__)


class Operation(
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
):
    """A publish or subscribe operation of one or more channels."""

    def id(self) -> str:
        """Return ``operationId`` when set, otherwise the synthetic id."""
        return self.operation_id() or self._meta.id

    def action(self) -> Action | None:
        return self._meta.action

    def is_send(self) -> bool:
        """True when the application sends (consumers ``subscribe``)."""
        return self._meta.action == ACTION_SUBSCRIBE

    def is_receive(self) -> bool:
        """True when the application receives (clients ``publish``)."""
        return self._meta.action == ACTION_PUBLISH

    def has_operation_id(self) -> bool:
        return bool(self.operation_id())

    def operation_id(self) -> str | None:
        value = self.json("operationId")
        return str(value) if value else None

    def has_summary(self) -> bool:
        return bool(self.summary())

    def summary(self) -> str | None:
        return self.json("summary")

    # ------------------------------------------------------------------
    # derived views
    # ------------------------------------------------------------------

    def channels(self) -> Channels:
        """Channels whose ``publish`` or ``subscribe`` is this very fragment.

        Channels keep their ``channels`` declaration order and appear once
        even when both of their operations point at this fragment.  Without
        a document (or without a ``channels`` section) the result is empty.
        """
        pairs = associated_channels(self._parsed_document(), self._json, self._meta.strict)
        logger.debug("Operation %s is attached to %d channel(s).", self.id(), len(pairs))
        return Channels(
            Channel(fragment, self._child_meta(join_pointer("", "channels", address), id=address))
            for address, fragment in pairs
        )

    def servers(self) -> Servers:
        """Servers reachable through any of :meth:`channels`.

        A channel with no ``servers`` list reaches every server.  The union
        over all channels is ordered by first reachability and each server
        appears once.
        """
        pairs = operation_servers(self._parsed_document(), self._json, self._meta.strict)
        return Servers(
            Server(fragment, self._child_meta(join_pointer("", "servers", name), id=name))
            for name, fragment in pairs
        )

    def messages(self) -> Messages:
        """Messages this operation can carry, ``oneOf`` alternatives flattened.

        Each list position yields its own :class:`Message`; structurally
        equal alternatives are not merged.
        """
        pairs = flatten_messages(self._json, self.pointer(), self._meta.strict)
        return Messages(
            Message(fragment, self._child_meta(pointer, id=f"{self.id()}_message_{index}"))
            for index, (pointer, fragment) in enumerate(pairs)
        )

    def traits(self) -> OperationTraits:
        """Traits declared on this operation, in list order and unmerged."""
        pairs = operation_traits(self._json, self.pointer(), self._meta.strict)
        return OperationTraits(
            OperationTrait(
                fragment,
                self._child_meta(pointer, id=f"{self.id()}_trait_{index}", action=self._meta.action),
            )
            for index, (pointer, fragment) in enumerate(pairs)
        )


class Operations(Collection[Operation]):
    def filter_by_send(self) -> list[Operation]:
        return self.filter_by(lambda operation: operation.is_send())

    def filter_by_receive(self) -> list[Operation]:
        return self.filter_by(lambda operation: operation.is_receive())
