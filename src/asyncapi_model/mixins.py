"""Capability mixins shared by every entity kind.

Each mixin reads one reserved field of ``self.json()`` and returns either
its typed value or a well-defined empty representation when the field is
missing.  They hold no state and know nothing about the entity they are
mixed into beyond :class:`~src.asyncapi_model.base.BaseEntity`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from src.asyncapi_model.base import BaseEntity, join_pointer
from src.shared.constants import EXTENSION_PREFIX

if TYPE_CHECKING:
    from src.asyncapi_model.common import (
        Bindings,
        Extension,
        Extensions,
        ExternalDocumentation,
        Tags,
    )


class DescriptionMixin(BaseEntity):
    def has_description(self) -> bool:
        return bool(self.description())

    def description(self) -> str | None:
        value = self.json("description")
        return value if isinstance(value, str) else None


class ExtensionsMixin(BaseEntity):
    def extensions(self) -> Extensions:
        """Return every ``x-`` prefixed field in declaration order."""
        from src.asyncapi_model.common import Extension, Extensions

        extensions = Extensions()
        if not isinstance(self._json, dict):
            return extensions
        for key, value in self._json.items():
            if isinstance(key, str) and key.startswith(EXTENSION_PREFIX):
                extensions.add(
                    Extension(value, self._child_meta(join_pointer(self.pointer(), key), id=key))
                )
        return extensions

    def has_extension(self, name: str) -> bool:
        return self.extensions().has(name)

    def extension(self, name: str) -> Extension | None:
        return self.extensions().get(name)


class ExternalDocumentationMixin(BaseEntity):
    def has_external_docs(self) -> bool:
        return self.external_docs() is not None

    def external_docs(self) -> ExternalDocumentation | None:
        from src.asyncapi_model.common import ExternalDocumentation

        value = self.json("externalDocs")
        if value is None:
            return None
        pointer = join_pointer(self.pointer(), "externalDocs")
        if not isinstance(value, dict):
            self._malformed("'externalDocs' is not an object", pointer)
            return None
        return ExternalDocumentation(value, self._child_meta(pointer))


class TagsMixin(BaseEntity):
    def has_tags(self) -> bool:
        return not self.tags().is_empty()

    def tags(self) -> Tags:
        from src.asyncapi_model.common import Tag, Tags

        value = self.json("tags")
        if value is None:
            return Tags()
        pointer = join_pointer(self.pointer(), "tags")
        if not isinstance(value, list) or not all(isinstance(t, dict) for t in value):
            self._malformed("'tags' is not a list of objects", pointer)
            return Tags()
        # Unnamed tags fall back to their pointer so they never collapse.
        return Tags(
            Tag(
                tag,
                self._child_meta(
                    join_pointer(pointer, index),
                    id=str(tag.get("name") or join_pointer(pointer, index)),
                ),
            )
            for index, tag in enumerate(value)
        )


class BindingsMixin(BaseEntity):
    def has_bindings(self) -> bool:
        return not self.bindings().is_empty()

    def bindings(self) -> Bindings:
        """Return one :class:`Binding` per protocol key, uninterpreted."""
        from src.asyncapi_model.common import Binding, Bindings

        value = self.json("bindings")
        if value is None:
            return Bindings()
        pointer = join_pointer(self.pointer(), "bindings")
        if not isinstance(value, dict):
            self._malformed("'bindings' is not an object", pointer)
            return Bindings()
        return Bindings(
            Binding(payload, self._child_meta(join_pointer(pointer, protocol), id=str(protocol)))
            for protocol, payload in value.items()
        )


def extension_value(entity: ExtensionsMixin, name: str, default: Any = None) -> Any:
    """Shortcut for the raw value of one extension field."""
    extension = entity.extension(name)
    return default if extension is None else extension.value()
