# src/cache/store_factory.py - v1
"""Factory for slot store instantiation."""

from __future__ import annotations

from reiterator.cache.base_slot_store import BaseSlotStore
from reiterator.config.settings import Settings


def create_slot_store(settings: Settings | None = None) -> BaseSlotStore:
    """Instantiate the configured slot store backend.

    Args:
        settings: Library settings. Defaults to the boxed backend.

    Returns:
        Empty BaseSlotStore implementation.
    """
    backend = "boxed" if settings is None else settings.store_backend

    if backend == "boxed":
        from reiterator.cache.boxed_store import BoxedSlotStore
        return BoxedSlotStore()

    if backend == "chunked":
        from reiterator.cache.chunked_store import ChunkedSlotStore
        chunk_size = 64 if settings is None else settings.chunk_size
        return ChunkedSlotStore(chunk_size=chunk_size)

    raise ValueError(f"Unsupported store backend: {backend!r}")
