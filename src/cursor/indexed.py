# src/cursor/indexed.py - v1
"""Indexed pair yielded by a Reiterator, plus map-friendly extractors.

The extractors take an ``Indexed`` and return one part of it, so they can be
passed straight to ``map``:

    >>> from reiterator import reiterate, value
    >>> list(map(value, reiterate("abc")))
    ['a', 'b', 'c']
"""

from __future__ import annotations

import copy
from typing import Any

from pydantic import BaseModel, ConfigDict


class Indexed(BaseModel):
    """A cached value and how many items the source produced before it.

    ``value`` is the cached object itself, never a copy.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    index: int
    value: Any


def index(indexed: Indexed) -> int:
    """Return the index from an ``Indexed`` item."""
    return indexed.index


def value(indexed: Indexed) -> Any:
    """Return the cached value (same object) from an ``Indexed`` item."""
    return indexed.value


def clone_value(indexed: Indexed) -> Any:
    """Return a deep copy of the value, independent of the cache."""
    return copy.deepcopy(indexed.value)


def copy_value(indexed: Indexed) -> Any:
    """Return a shallow copy of the value."""
    return copy.copy(indexed.value)


def index_of(indexed: Indexed | None) -> int | None:
    """Index of an optional ``Indexed``, or None."""
    return None if indexed is None else indexed.index


def value_of(indexed: Indexed | None) -> Any:
    """Value of an optional ``Indexed``, or None."""
    return None if indexed is None else indexed.value
