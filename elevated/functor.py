"""
Functor combinators
===================

map с run_inside паттерном: generic mapM плюс sugar для каждого контейнера.

Laws:
- map(identity) == identity
- map(compose(g, f)) == compose(map(g), map(f))
"""

from __future__ import annotations

import asyncio

from ._types import LCR, Lifted, RunInside, Unary
from .deferred import run_inside_lazy, run_inside_task
from .toxic import Toxic, run_inside


# ============================================================================
# Generic combinators
# ============================================================================


def mapM[M, N, A, B](
    f: Unary[A, B],
    *,
    run_inside: RunInside[M, A, B, N],
) -> Lifted[M, N]:
    """
    Generic map combinator.

    Lift a plain A -> B function into a container-to-container function,
    using the container's own run_inside primitive.
    """

    def lifted(x: M) -> N:
        return run_inside(x, f)

    return lifted


# ============================================================================
# Sugar for Toxic
# ============================================================================


def map[A, B](f: Unary[A, B]) -> Lifted[Toxic[A], Toxic[B]]:  # noqa: A001
    """
    map :: (a -> b) -> (Toxic a -> Toxic b)

    Example:
        increment = map(lambda x: x + 1)
        increment(pure(2))  # Toxic(3)
    """
    return mapM(f, run_inside=run_inside)


# ============================================================================
# Sugar for deferred containers
# ============================================================================


def map_lazy[A, B, E](f: Unary[A, B]) -> Lifted[LCR[A, E], LCR[B, E]]:
    """map over LazyCoroResult. Nothing runs until awaited."""
    return mapM(f, run_inside=run_inside_lazy)


def map_task[A, B](f: Unary[A, B]) -> Lifted[asyncio.Task[A], asyncio.Task[B]]:
    """map over asyncio.Task. Needs a running loop when the lifted function is called."""
    return mapM(f, run_inside=run_inside_task)


__all__ = ("map", "map_lazy", "map_task", "mapM")
