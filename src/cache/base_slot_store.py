# src/cache/base_slot_store.py - v1
"""Abstract append-only slot store interface.

A slot store keeps every appended item in storage of its own, so the object
handed out for index ``k`` is the same object for the lifetime of the store,
whatever is appended afterwards. Stores never remove, reorder or replace a
slot.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any


class BaseSlotStore(ABC):
    """Unified interface for stable-address storage backends."""

    backend: str = "base"

    @abstractmethod
    def append(self, item: Any) -> Any:
        """Store ``item`` in a new slot and return the stored object."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored items."""

    @abstractmethod
    def get(self, index: int, default: Any = None) -> Any:
        """Return the item at ``index``, or ``default`` if ``index >= count()``."""

    def __len__(self) -> int:
        return self.count()

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < self.count():
            raise IndexError(f"slot index out of range: {index}")
        return self.get(index)

    def __iter__(self) -> Iterator[Any]:
        for i in range(self.count()):
            yield self.get(i)

    def addresses(self) -> list[int]:
        """Identity of every stored object, in slot order."""
        return [id(item) for item in self]
