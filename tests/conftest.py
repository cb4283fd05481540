"""
Shared test fixtures for the uripattern test suite.
"""

import os

import pytest

from uripattern.cache import set_global_cache


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Strip URIPATTERN_* settings and reset the global cache around each test."""
    for key in list(os.environ):
        if key.startswith("URIPATTERN_"):
            monkeypatch.delenv(key)
    set_global_cache(None)
    yield
    set_global_cache(None)
