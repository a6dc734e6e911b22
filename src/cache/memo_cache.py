# src/cache/memo_cache.py - v1
"""Memoizing cache over a one-shot, pull-based source.

Items are pulled lazily, strictly in order, and only as far as the highest
index requested so far. Each pulled item is committed to a slot store and
handed out as the same object on every later lookup. Once the source raises
StopIteration it is released and never called again.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from reiterator.cache.base_slot_store import BaseSlotStore
from reiterator.cache.models import CacheInfo
from reiterator.cache.store_factory import create_slot_store
from reiterator.config.settings import Settings
from reiterator.logging.context import cache_context
from reiterator.logging.logger import get_logger

logger = get_logger("cache")

T = TypeVar("T")

_MISSING: Any = object()


class AddressStabilityError(RuntimeError):
    """Raised when a stored slot no longer holds the object first stored there."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Element #{index} corrupt: slot no longer holds its original object")
        self.index = index


def _check_index(index: int) -> int:
    index = operator.index(index)
    if index < 0:
        raise IndexError("negative indexes are not supported")
    return index


class Cache(Generic[T]):
    """Cache that only ever pulls each element of its source once.

    Not safe for concurrent use: callers sharing a cache between threads must
    serialize every lookup themselves.
    """

    def __init__(
        self,
        source: Iterable[T],
        *,
        store: BaseSlotStore | None = None,
        settings: Settings | None = None,
        name: str | None = None,
    ) -> None:
        self._source: Iterator[T] | None = iter(source)
        self._store = store if store is not None else create_slot_store(settings)
        if self._store.count():
            raise ValueError("Cache requires an empty slot store")
        self._name = name
        self._source_calls = 0
        self._pulls = 0
        # Identity of every stored object, kept only when verification is on.
        verify = False if settings is None else settings.verify_addresses
        self._record: list[int] | None = [] if verify else None

    @classmethod
    def from_producer(cls, producer: Callable[[], T | None], **kwargs: Any) -> Cache[T]:
        """Build a cache over a callable that returns the next item, or None when done."""
        return cls(iter(producer, None), **kwargs)

    # --- Lookup ---

    def get(self, index: int, default: Any = None) -> T | Any:
        """Return the item at ``index``, pulling from the source as needed.

        Returns ``default`` if the source is exhausted before ``index``.
        Absence is final: once a lookup misses, every larger index misses too.
        """
        index = _check_index(index)
        if index >= self._store.count() and not self._materialize(index):
            return default
        return self._store.get(index, default)

    def __getitem__(self, index: int) -> T:
        item = self.get(index, _MISSING)
        if item is _MISSING:
            raise IndexError(f"cache index out of range: {index}")
        return item

    def __iter__(self) -> Iterator[T]:
        """Iterate from the first item, sharing materialized items with other iterators."""
        position = 0
        while True:
            item = self.get(position, _MISSING)
            if item is _MISSING:
                return
            yield item
            position += 1

    def _materialize(self, index: int) -> bool:
        """Pull until ``index`` is stored. False if the source ran out first."""
        if self._source is None:
            return False

        start = self._store.count()
        with cache_context(self._name, "materialize"):
            while self._store.count() <= index:
                self._source_calls += 1
                try:
                    item = next(self._source)
                except StopIteration:
                    self._source = None
                    logger.debug(
                        "Source exhausted after %d item(s)",
                        self._store.count(),
                        extra={"data": {"requested_index": index}},
                    )
                    return False
                self._store.append(item)
                self._pulls += 1
                if self._record is not None:
                    self._verify_addresses(item)

            logger.debug(
                "Materialized %d item(s) up to index %d",
                self._store.count() - start,
                index,
            )
        return True

    def _verify_addresses(self, item: Any) -> None:
        """Record the new slot and check that no earlier slot changed."""
        record = self._record
        if record is None:
            return
        record.append(id(item))
        if len(record) != self._store.count():
            raise AddressStabilityError(len(record) - 1)
        for i, address in enumerate(self._store.addresses()):
            if address != record[i]:
                logger.error("Slot %d changed identity", i, extra={"data": {"index": i}})
                raise AddressStabilityError(i)

    # --- Introspection ---

    def is_empty(self) -> bool:
        """Whether nothing has been materialized yet."""
        return self._store.count() == 0

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def store(self) -> BaseSlotStore:
        return self._store

    @property
    def materialized_count(self) -> int:
        """Number of items pulled and stored so far."""
        return self._store.count()

    @property
    def exhausted(self) -> bool:
        """True once the source has reported its end."""
        return self._source is None

    @property
    def pulls(self) -> int:
        """Source calls that produced an item. Never exceeds one per stored element."""
        return self._pulls

    @property
    def source_calls(self) -> int:
        """Every source call, counting the one that ended it and any that raised."""
        return self._source_calls

    def length_hint(self) -> int:
        """Estimated total length without pulling anything."""
        if self._source is None:
            return self._store.count()
        return self._store.count() + operator.length_hint(self._source, 0)

    def cache_info(self) -> CacheInfo:
        return CacheInfo(
            name=self._name,
            backend=self._store.backend,
            materialized=self._store.count(),
            pulls=self._pulls,
            source_calls=self._source_calls,
            exhausted=self.exhausted,
        )

    def __repr__(self) -> str:
        state = "exhausted" if self.exhausted else "live"
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"materialized={self._store.count()}, {state})"
        )


def cached(iterable: Iterable[T], **kwargs: Any) -> Cache[T]:
    """Create a ``Cache`` from anything that can be turned into an iterator."""
    return Cache(iterable, **kwargs)
