# tests/integration/conftest.py - v1
"""Shared fixtures for integration tests.

Every source is in-memory; no services are started.
"""

from __future__ import annotations

import logging

import pytest


# -- Pytest markers --------------------------------------------------

def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests that materialize very long sources")


@pytest.fixture
def debug_cache_logs(caplog):
    """Capture reiterator DEBUG records for the duration of a test."""
    with caplog.at_level(logging.DEBUG, logger="reiterator"):
        yield caplog
