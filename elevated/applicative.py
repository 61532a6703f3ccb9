"""
Applicative combinators
=======================

apply threads two independently elevated things, a wrapped function and a
wrapped argument, without ever taking a raw value out of its container.

lift2/lift3 package the curry -> map -> apply technique: an n-argument
plain function becomes an n-argument container function.

Law:
- apply(pure(f))(pure(x)) == pure(f(x))
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Callable

from ._types import LCR, Binary, Flatten, Lifted, RunInside, Ternary
from .curry import curry, curry3
from .deferred import flatten_lazy, flatten_task, run_inside_lazy, run_inside_task
from .functor import mapM
from .toxic import Toxic, flatten, run_inside


# ============================================================================
# Generic combinators
# ============================================================================


def applyM[M, N](
    wrapped_fn: typing.Any,
    *,
    run_inside: RunInside[typing.Any, typing.Any, typing.Any, typing.Any],
    flatten: Flatten[typing.Any, N],
) -> Lifted[M, N]:
    """
    Generic apply combinator.

    For the value inside x, run inside wrapped_fn and call the held function
    on it. That yields M[M[B]], which flatten collapses to M[B].
    """

    def lifted(x: M) -> N:
        def call_held(x_value: typing.Any) -> typing.Any:
            return run_inside(wrapped_fn, lambda fn: fn(x_value))

        return flatten(run_inside(x, call_held))

    return lifted


def lift2M[M, N, A, B, C](
    f: Binary[A, B, C],
    *,
    run_inside: RunInside[typing.Any, typing.Any, typing.Any, typing.Any],
    flatten: Flatten[typing.Any, typing.Any],
) -> Callable[[M, M], N]:
    """
    Generic lift2: curry f, map it over the first container,
    then apply the resulting wrapped function to the second.
    """

    def lifted(x: M, y: M) -> N:
        partially_applied = mapM(curry(f), run_inside=run_inside)(x)
        return applyM(partially_applied, run_inside=run_inside, flatten=flatten)(y)

    return lifted


def lift3M[M, N, A, B, C, D](
    f: Ternary[A, B, C, D],
    *,
    run_inside: RunInside[typing.Any, typing.Any, typing.Any, typing.Any],
    flatten: Flatten[typing.Any, typing.Any],
) -> Callable[[M, M, M], N]:
    """Generic lift3: curry3 -> map -> apply -> apply."""

    def lifted(x: M, y: M, z: M) -> N:
        wrapped = mapM(curry3(f), run_inside=run_inside)(x)
        wrapped = applyM(wrapped, run_inside=run_inside, flatten=flatten)(y)
        return applyM(wrapped, run_inside=run_inside, flatten=flatten)(z)

    return lifted


# ============================================================================
# Sugar for Toxic
# ============================================================================


def apply[A, B](wrapped_fn: Toxic[Callable[[A], B]]) -> Lifted[Toxic[A], Toxic[B]]:
    """
    apply :: Toxic (a -> b) -> (Toxic a -> Toxic b)

    Example:
        wrapped_increment = pure(lambda x: x + 1)
        apply(wrapped_increment)(pure(2))  # Toxic(3)
    """
    return applyM(wrapped_fn, run_inside=run_inside, flatten=flatten)


def lift2[A, B, C](f: Binary[A, B, C]) -> Callable[[Toxic[A], Toxic[B]], Toxic[C]]:
    """
    Lift a two-argument function over two Toxic arguments.

    Example:
        add = lift2(lambda x, y: x + y)
        add(pure(2), pure(3))  # Toxic(5)
    """
    return lift2M(f, run_inside=run_inside, flatten=flatten)


def lift3[A, B, C, D](
    f: Ternary[A, B, C, D],
) -> Callable[[Toxic[A], Toxic[B], Toxic[C]], Toxic[D]]:
    """Lift a three-argument function over three Toxic arguments."""
    return lift3M(f, run_inside=run_inside, flatten=flatten)


# ============================================================================
# Sugar for deferred containers
# ============================================================================


def apply_lazy[A, B, E](
    wrapped_fn: LCR[Callable[[A], B], E],
) -> Lifted[LCR[A, E], LCR[B, E]]:
    """apply over LazyCoroResult."""
    return applyM(wrapped_fn, run_inside=run_inside_lazy, flatten=flatten_lazy)


def apply_task[A, B](
    wrapped_fn: asyncio.Task[Callable[[A], B]],
) -> Lifted[asyncio.Task[A], asyncio.Task[B]]:
    """apply over asyncio.Task."""
    return applyM(wrapped_fn, run_inside=run_inside_task, flatten=flatten_task)


def lift2_lazy[A, B, C, E](
    f: Binary[A, B, C],
) -> Callable[[LCR[A, E], LCR[B, E]], LCR[C, E]]:
    """lift2 over LazyCoroResult."""
    return lift2M(f, run_inside=run_inside_lazy, flatten=flatten_lazy)


def lift2_task[A, B, C](
    f: Binary[A, B, C],
) -> Callable[[asyncio.Task[A], asyncio.Task[B]], asyncio.Task[C]]:
    """lift2 over asyncio.Task."""
    return lift2M(f, run_inside=run_inside_task, flatten=flatten_task)


def lift3_lazy[A, B, C, D, E](
    f: Ternary[A, B, C, D],
) -> Callable[[LCR[A, E], LCR[B, E], LCR[C, E]], LCR[D, E]]:
    """lift3 over LazyCoroResult."""
    return lift3M(f, run_inside=run_inside_lazy, flatten=flatten_lazy)


def lift3_task[A, B, C, D](
    f: Ternary[A, B, C, D],
) -> Callable[[asyncio.Task[A], asyncio.Task[B], asyncio.Task[C]], asyncio.Task[D]]:
    """lift3 over asyncio.Task."""
    return lift3M(f, run_inside=run_inside_task, flatten=flatten_task)


__all__ = (
    # Toxic
    "apply",
    "lift2",
    "lift3",
    # Deferred
    "apply_lazy",
    "apply_task",
    "lift2_lazy",
    "lift2_task",
    "lift3_lazy",
    "lift3_task",
    # Generic
    "applyM",
    "lift2M",
    "lift3M",
)
