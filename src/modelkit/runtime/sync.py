"""Run persistence awaitables from synchronous code.

Usage:
    user = run_sync(User(name="ann").save())
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

T = TypeVar("T")


async def _wait(awaitable: Awaitable[T]) -> T:
    return await awaitable


def run_sync(awaitable: Awaitable[T]) -> T:
    """Wait for a persistence call from synchronous code (wrapper for `await`).

    For simple scripts. Prefer awaiting directly in async contexts; this runs
    a fresh event loop in the calling thread, so listeners fire on that thread.
    Middleware errors are re-raised here.

    Raises:
        RuntimeError: If called while an event loop is running in this thread.
    """
    return asyncio.run(_wait(awaitable))
