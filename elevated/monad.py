"""
Monad combinators
=================

bind с run_inside + flatten паттерном: run inside, then flatten the nested result.

Laws:
- bind(pure) == identity
- bind(f)(pure(x)) == f(x)
- bind(g)(bind(f)(m)) == bind(lambda x: bind(g)(f(x)))(m)
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from ._types import LCR, Flatten, Lifted, RunInside
from .deferred import flatten_lazy, flatten_task, run_inside_lazy, run_inside_task
from .toxic import Toxic, flatten, run_inside


# ============================================================================
# Generic combinators
# ============================================================================


def bindM[M, MM, N, A](
    f: Callable[[A], N],
    *,
    run_inside: RunInside[M, A, N, MM],
    flatten: Flatten[MM, N],
) -> Lifted[M, N]:
    """
    Generic bind combinator.

    Running an A -> M[B] function inside M[A] yields M[M[B]];
    flatten collapses it back to M[B].
    """

    def lifted(x: M) -> N:
        return flatten(run_inside(x, f))

    return lifted


# ============================================================================
# Sugar for Toxic
# ============================================================================


def bind[A, B](f: Callable[[A], Toxic[B]]) -> Lifted[Toxic[A], Toxic[B]]:
    """
    bind :: (a -> Toxic b) -> (Toxic a -> Toxic b)

    Example:
        toxic_increment = lambda x: pure(x + 1)
        bind(toxic_increment)(pure(2))  # Toxic(3)
    """
    return bindM(f, run_inside=run_inside, flatten=flatten)


# ============================================================================
# Sugar for deferred containers
# ============================================================================


def bind_lazy[A, B, E](f: Callable[[A], LCR[B, E]]) -> Lifted[LCR[A, E], LCR[B, E]]:
    """bind over LazyCoroResult. Error from either step short-circuits."""
    return bindM(f, run_inside=run_inside_lazy, flatten=flatten_lazy)


def bind_task[A, B](
    f: Callable[[A], asyncio.Task[B]],
) -> Lifted[asyncio.Task[A], asyncio.Task[B]]:
    """bind over asyncio.Task."""
    return bindM(f, run_inside=run_inside_task, flatten=flatten_task)


__all__ = ("bind", "bind_lazy", "bind_task", "bindM")
