from __future__ import annotations

from dataclasses import replace
from threading import Lock
from typing import Generic, MutableMapping, Protocol, TypeVar

EntityT = TypeVar("EntityT")


class Repository(Protocol[EntityT]):
    """Storage contract shared by the customer and ticket stores."""

    def save(self, entity: EntityT) -> None:
        ...

    def find_by_id(self, entity_id: str) -> EntityT | None:
        ...

    def find_all(self) -> list[EntityT]:
        ...


class InMemoryRepository(Generic[EntityT]):
    """Dictionary backed store keyed by the entity ``id`` attribute.

    Entities are copied on the way in and out so callers never share state
    with the store; ``find_all`` yields entities in ascending id order.
    """

    def __init__(self) -> None:
        self._items: MutableMapping[str, EntityT] = {}
        self._lock = Lock()

    def save(self, entity: EntityT) -> None:
        stored = self._copy(entity)
        with self._lock:
            self._items[stored.id] = stored  # type: ignore[attr-defined]

    def find_by_id(self, entity_id: str) -> EntityT | None:
        with self._lock:
            entity = self._items.get(entity_id)
        if entity is None:
            return None
        return self._copy(entity)

    def find_all(self) -> list[EntityT]:
        with self._lock:
            entities = [self._items[key] for key in sorted(self._items)]
        return [self._copy(entity) for entity in entities]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _copy(self, entity: EntityT) -> EntityT:
        return replace(entity)  # type: ignore[type-var]
