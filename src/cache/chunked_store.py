# src/cache/chunked_store.py - v1
"""Slot store backed by fixed-capacity chunks (STORE_BACKEND=chunked).

Each chunk is allocated at full size when it is created and is never resized;
only whole chunks are appended to the chunk index. This amortizes allocation
over ``chunk_size`` elements.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from reiterator.cache.base_slot_store import BaseSlotStore


class _Vacant(Enum):
    SLOT = None


class ChunkedSlotStore(BaseSlotStore):
    """Append-only store writing elements into preallocated chunks."""

    backend = "chunked"

    def __init__(self, chunk_size: int = 64) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be > 0, got {chunk_size}")
        self._chunk_size = chunk_size
        self._chunks: list[list[Any]] = []
        self._count = 0

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def chunk_count(self) -> int:
        """Number of allocated chunks."""
        return len(self._chunks)

    def append(self, item: Any) -> Any:
        """Write ``item`` into the next vacant position, opening a chunk if full."""
        chunk_index, offset = divmod(self._count, self._chunk_size)
        if chunk_index == len(self._chunks):
            self._chunks.append([_Vacant.SLOT] * self._chunk_size)
        self._chunks[chunk_index][offset] = item
        self._count += 1
        return item

    def count(self) -> int:
        return self._count

    def get(self, index: int, default: Any = None) -> Any:
        if not 0 <= index < self._count:
            return default
        chunk_index, offset = divmod(index, self._chunk_size)
        return self._chunks[chunk_index][offset]
