"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from fakes import MemorySink


@pytest.fixture
def sink() -> MemorySink:
    """Provide an in-memory sink."""

    return MemorySink()
