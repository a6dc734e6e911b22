# src/cache/boxed_store.py - v1
"""Slot store with one independent box per element (default STORE_BACKEND=boxed).

The growable index only holds ``Slot`` handles; growing it moves the handles,
never the boxes or the values inside them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from reiterator.cache.base_slot_store import BaseSlotStore


@dataclass(frozen=True, slots=True)
class Slot:
    """Individually allocated, write-once holder for a single value."""

    value: Any


class BoxedSlotStore(BaseSlotStore):
    """Append-only store keeping each element in its own ``Slot``."""

    backend = "boxed"

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def append(self, item: Any) -> Any:
        """Box ``item`` and append the box."""
        slot = Slot(item)
        self._slots.append(slot)
        return slot.value

    def count(self) -> int:
        return len(self._slots)

    def get(self, index: int, default: Any = None) -> Any:
        if 0 <= index < len(self._slots):
            return self._slots[index].value
        return default

    def slot(self, index: int) -> Slot:
        """Return the box holding ``index``; raises IndexError if absent."""
        if not 0 <= index < len(self._slots):
            raise IndexError(f"slot index out of range: {index}")
        return self._slots[index]
