"""Base repository class for in-memory data access."""

from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class MemoryRepository(Generic[T]):
    """Base class for list-backed repositories.

    Provides standard CRUD operations over an ordered in-memory collection.
    Items keep their insertion order; nothing is persisted.

    Override _get_id() for models where the identifier isn't item.id.
    """

    def __init__(self):
        self._items: list[T] = []

    def _get_id(self, item: T):
        """Get the identifier for an item. Override for non-standard IDs."""
        return item.id

    def _index_of(self, item_id) -> Optional[int]:
        for position, item in enumerate(self._items):
            if self._get_id(item) == item_id:
                return position
        return None

    def list_all(self) -> list[T]:
        """Get all items in insertion order."""
        return list(self._items)

    def get_by_id(self, item_id) -> Optional[T]:
        """Get an item by ID."""
        position = self._index_of(item_id)
        if position is None:
            return None
        return self._items[position]

    def save(self, item: T) -> None:
        """Insert or replace an item, keeping its position when replaced."""
        position = self._index_of(self._get_id(item))
        if position is None:
            self._items.append(item)
        else:
            self._items[position] = item

    def delete(self, item_id) -> bool:
        """Delete an item by ID."""
        position = self._index_of(item_id)
        if position is None:
            return False
        del self._items[position]
        return True

    def count(self) -> int:
        """Number of stored items."""
        return len(self._items)
