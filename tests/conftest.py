# tests/conftest.py - v1
"""Shared test fixtures for all unit and integration tests.

Provides a call-counting source, fresh settings and log-context cleanup.
No external dependencies: every source is in-memory.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

import pytest

from reiterator.config.settings import Settings
from reiterator.logging.context import clear_context


class CountingSource:
    """One-shot iterator that records every call and refuses calls past its end."""

    def __init__(self, items: Iterable[Any]) -> None:
        self._items = iter(items)
        self.calls = 0
        self.produced: list[Any] = []
        self.finished = False

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if self.finished:
            raise AssertionError("source polled after exhaustion")
        self.calls += 1
        try:
            item = next(self._items)
        except StopIteration:
            self.finished = True
            raise
        self.produced.append(item)
        return item


class Box:
    """Mutable, unhashable-by-value payload whose identity is what matters."""

    def __init__(self, n: int) -> None:
        self.n = n

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Box) and other.n == self.n

    __hash__ = None  # type: ignore[assignment]


# === FIXTURES: Sources ===


@pytest.fixture
def abc_source() -> CountingSource:
    """Three-letter source used by the cursor walk-through scenario."""
    return CountingSource(["a", "b", "c"])


@pytest.fixture
def box_source() -> CountingSource:
    """Source of freshly allocated objects, so identity checks are meaningful."""
    return CountingSource(Box(i) for i in range(100))


@pytest.fixture
def make_source() -> type[CountingSource]:
    """Build CountingSource instances over arbitrary iterables."""
    return CountingSource


@pytest.fixture
def make_box() -> type[Box]:
    """Build identity-checked payloads."""
    return Box


# === FIXTURES: Settings ===


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def chunked_settings() -> Settings:
    """Chunked backend with a tiny chunk size to force many chunks."""
    return Settings(_env_file=None, store_backend="chunked", chunk_size=4)


@pytest.fixture
def verifying_settings() -> Settings:
    """Settings with address verification on."""
    return Settings(_env_file=None, verify_addresses=True)


@pytest.fixture(autouse=True)
def _clean_log_context():
    clear_context()
    yield
    clear_context()
