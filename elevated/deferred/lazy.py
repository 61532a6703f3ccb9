"""
Lazy deferred container
=======================

Primitives over kungfu LazyCoroResult. Nothing runs until the result is
awaited, and every await re-runs the whole chain.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never, assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import LCR


def pure_lazy[T](value: T) -> LCR[T, Never]:
    """Lift a plain value into an always-succeeding LazyCoroResult."""
    return LazyCoroResult.pure(value)


def run_inside_lazy[T, U, E](x: LCR[T, E], f: Callable[[T], U], /) -> LCR[U, E]:
    """
    Schedule f as a continuation of x.

    f sees the value only after x completes. Error short-circuits, f is not called.
    """

    async def run() -> Result[U, E]:
        result = await x
        return result.map(f)

    return LazyCoroResult(run)


def flatten_lazy[T, E](nested: LCR[LCR[T, E], E]) -> LCR[T, E]:
    """Collapse LazyCoroResult[LazyCoroResult[T]] by awaiting outer, then inner."""

    async def run() -> Result[T, E]:
        outer = await nested
        match outer:
            case Ok(inner):
                return await inner
            case Error(err):
                return Error(err)
            case _ as unreachable:
                assert_never(unreachable)

    return LazyCoroResult(run)


__all__ = (
    "pure_lazy",
    "run_inside_lazy",
    "flatten_lazy",
)
