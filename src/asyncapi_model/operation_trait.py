"""Operation trait entity.

Traits are exposed as they are declared.  Applying them to the operation
is left to the consumer.
"""

from __future__ import annotations

from src.asyncapi_model.base import Action
from src.asyncapi_model.collection import PositionalCollection
from src.asyncapi_model.mixins import (
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
)


class OperationTrait(
    BindingsMixin,
    DescriptionMixin,
    ExtensionsMixin,
    ExternalDocumentationMixin,
    TagsMixin,
):
    def id(self) -> str:
        return self.operation_id() or self._meta.id

    def action(self) -> Action | None:
        """Action of the operation the trait is attached to."""
        return self._meta.action

    def has_operation_id(self) -> bool:
        return bool(self.operation_id())

    def operation_id(self) -> str | None:
        value = self.json("operationId")
        return str(value) if value else None

    def has_summary(self) -> bool:
        return bool(self.summary())

    def summary(self) -> str | None:
        return self.json("summary")


class OperationTraits(PositionalCollection[OperationTrait]):
    pass
