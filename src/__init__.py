# src/__init__.py - v1
"""reiterator: memoize a one-shot iterator so every element is computed once.

Each element pulled from the source is stored in a slot of its own and handed
out as the very same object on every later lookup, however far the cache
grows afterwards.

    >>> from reiterator import reiterate
    >>> it = reiterate(["a", "b", "c"])
    >>> it.current()
    Indexed(index=0, value='a')
    >>> it.peek_at(2).value
    'c'
"""

from __future__ import annotations

from reiterator.cache.memo_cache import AddressStabilityError, Cache, cached
from reiterator.cache.models import CacheInfo
from reiterator.config.settings import ConfigurationError, Settings, load_settings
from reiterator.cursor.indexed import (
    Indexed,
    clone_value,
    copy_value,
    index,
    index_of,
    value,
    value_of,
)
from reiterator.cursor.reiterator import Reiterator, reiterate
from reiterator.version import __version__

__all__ = [
    "__version__",
    "AddressStabilityError",
    "Cache",
    "CacheInfo",
    "ConfigurationError",
    "Indexed",
    "Reiterator",
    "Settings",
    "cached",
    "clone_value",
    "copy_value",
    "index",
    "index_of",
    "load_settings",
    "reiterate",
    "value",
    "value_of",
]

