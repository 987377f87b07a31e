"""Ordered, de-duplicating container for model entities."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

from src.asyncapi_model.base import BaseEntity

T = TypeVar("T", bound=BaseEntity)


class Collection(Generic[T]):
    """Insertion-ordered set of entities keyed by their identity.

    ``add`` is idempotent: an entity whose identity key is already present
    is ignored, so the first occurrence keeps its position.  Collections
    are built once per view call and never shrink.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: dict[str, T] = {}
        for item in items or ():
            self.add(item)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.all()!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return self.has(item)
        if isinstance(item, BaseEntity):
            return self._key(item) in self._items  # type: ignore[arg-type]
        return False

    def _key(self, item: T) -> str:
        return item.id()

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def add(self, item: T) -> None:
        key = self._key(item)
        if key not in self._items:
            self._items[key] = item

    def all(self) -> list[T]:
        return list(self._items.values())

    def length(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def first(self) -> T | None:
        return next(iter(self._items.values()), None)

    def get(self, id: str) -> T | None:
        """Return the first entity whose ``id()`` equals *id*."""
        for item in self._items.values():
            if item.id() == id:
                return item
        return None

    def has(self, id: str) -> bool:
        return self.get(id) is not None

    def filter_by(self, predicate: Callable[[T], bool]) -> list[T]:
        return [item for item in self._items.values() if predicate(item)]


class PositionalCollection(Collection[T]):
    """Collection keyed by JSON pointer instead of ``id()``.

    Used where every list position is a distinct entity even when two
    fragments share an identifier (messages, traits).
    """

    def _key(self, item: T) -> str:
        return item.pointer()
