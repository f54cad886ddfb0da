"""
Shared pytest fixtures and configuration for relayconn tests.

Provides the sample node sequences used across unit and integration tests
and a runner to drive async resolvers from synchronous tests.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import pytest

T = TypeVar("T")


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests of a single component")
    config.addinivalue_line("markers", "integration: End-to-end resolver tests")


@pytest.fixture
def run() -> Callable[[Awaitable[T]], T]:
    """
    Returns a function that runs a coroutine to completion.

    Each call uses a fresh event loop, so resolvers can be awaited from
    plain synchronous tests.
    """

    def _run(awaitable: Awaitable[T]) -> T:
        async def _await() -> T:
            return await awaitable

        return asyncio.run(_await())

    return _run


@pytest.fixture
def things() -> list[dict[str, Any]]:
    """Three nodes, A, B and C, with default cursors "0", "1" and "2"."""
    return [
        {"id": "1", "value": "A"},
        {"id": "2", "value": "B"},
        {"id": "3", "value": "C"},
    ]


@pytest.fixture
def many_things() -> list[dict[str, Any]]:
    """Ten nodes with ids "0" through "9" and values "A" through "J"."""
    return [{"id": str(i), "value": chr(ord("A") + i)} for i in range(10)]


@pytest.fixture
def root() -> dict[str, str]:
    return {"type": "Query"}
