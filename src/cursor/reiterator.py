# src/cursor/reiterator.py - v1
"""Indexed cursor over a memoizing cache.

The cursor position is pure bookkeeping: moving it never pulls from the
source. Only lookups (``current``, ``peek_at``, ``step`` and iteration)
materialize items, and they reuse whatever the cache already holds, so a
restarted cursor hands out the very same objects as the first pass.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from reiterator.cache.base_slot_store import BaseSlotStore
from reiterator.cache.memo_cache import Cache
from reiterator.config.settings import Settings
from reiterator.cursor.indexed import Indexed

T = TypeVar("T")

_ABSENT: Any = object()


class Reiterator(Generic[T]):
    """Caching, restartable iterator that only computes each element once.

    The source is assumed to be worth calling only once per element: a
    revisited index returns the stored object and the source's side effects
    for it do not happen again.
    """

    def __init__(self, cache: Cache[T], *, settings: Settings | None = None) -> None:
        self._cache = cache
        self._max_index = sys.maxsize if settings is None else settings.max_index
        self._index = 0

    @property
    def cache(self) -> Cache[T]:
        return self._cache

    @property
    def max_index(self) -> int:
        return self._max_index

    @property
    def index(self) -> int:
        """Position the next ``step`` acts on. Not tied to what is materialized."""
        return self._index

    @index.setter
    def index(self, position: int) -> None:
        position = operator.index(position)
        if not 0 <= position <= self._max_index:
            raise ValueError(
                f"index must be between 0 and {self._max_index}, got {position}"
            )
        self._index = position

    def seek(self, position: int) -> None:
        """Move to ``position`` without computing anything."""
        self.index = position

    def restart(self) -> None:
        """Set the index to zero. The cache is kept."""
        self._index = 0

    def peek_at(self, position: int) -> Indexed | None:
        """Return the element at ``position``, computing it if needed. Does not move."""
        item = self._cache.get(position, _ABSENT)
        if item is _ABSENT:
            return None
        return Indexed(index=position, value=item)

    def current(self) -> Indexed | None:
        """Return the element at the current index.

        Can be called any number of times in a row to get the exact same
        item; the cursor only moves on ``advance_position``/``step``.
        """
        return self.peek_at(self._index)

    def advance_position(self) -> int | None:
        """Advance the index without computing the corresponding value.

        Returns the new index, or None (index unchanged) at ``max_index``.
        """
        if self._index >= self._max_index:
            return None
        self._index += 1
        return self._index

    def step(self) -> Indexed | None:
        """Return the element at the current index, then move one past it."""
        position = self._index
        if self.advance_position() is None:
            return None
        return self.peek_at(position)

    def __iter__(self) -> Reiterator[T]:
        return self

    def __next__(self) -> Indexed:
        indexed = self.step()
        if indexed is None:
            raise StopIteration
        return indexed

    def __length_hint__(self) -> int:
        return max(0, self._cache.length_hint() - self._index)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(index={self._index}, cache={self._cache!r})"


def reiterate(
    iterable: Iterable[T],
    *,
    store: BaseSlotStore | None = None,
    settings: Settings | None = None,
    name: str | None = None,
) -> Reiterator[T]:
    """Create a ``Reiterator`` from anything that can be turned into an iterator."""
    cache = Cache(iterable, store=store, settings=settings, name=name)
    return Reiterator(cache, settings=settings)
