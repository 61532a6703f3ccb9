"""
Task deferred container
=======================

Primitives over asyncio.Task. Tasks are eager: they are scheduled on the
running loop at creation and can be awaited any number of times.
All functions here require a running event loop.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable, Coroutine


def _schedule[T](fn: Callable[[], Coroutine[typing.Any, typing.Any, T]]) -> asyncio.Task[T]:
    """Create a task on the running loop. Raises RuntimeError without one."""
    loop = asyncio.get_running_loop()
    return loop.create_task(fn())


def pure_task[T](value: T) -> asyncio.Task[T]:
    """Schedule a task that resolves to value."""

    async def run() -> T:
        return value

    return _schedule(run)


def run_inside_task[T, U](x: asyncio.Task[T], f: Callable[[T], U], /) -> asyncio.Task[U]:
    """
    Schedule f as a continuation of x.

    Exceptions from x or f surface when the returned task is awaited.
    """

    async def run() -> U:
        return f(await x)

    return _schedule(run)


def flatten_task[T](nested: asyncio.Task[asyncio.Task[T]]) -> asyncio.Task[T]:
    """Collapse Task[Task[T]] by awaiting outer, then inner."""

    async def run() -> T:
        inner = await nested
        return await inner

    return _schedule(run)


__all__ = (
    "pure_task",
    "run_inside_task",
    "flatten_task",
)
