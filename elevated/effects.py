"""Side effects combinators

Effects execute for observation only (logging, debugging)
and don't change the container or the value it holds."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ._types import LCR, Effect, Lifted, RunInside
from .deferred import run_inside_lazy, run_inside_task
from .functor import mapM
from .toxic import Toxic, run_inside

_logger = logging.getLogger("elevated")

# Generic combinators
def tapM[M, T](
    effect: Effect[T],
    *,
    run_inside: RunInside[M, T, T, M],
) -> Lifted[M, M]:
    """Generic tap combinator: run effect inside, keep the value."""

    def observe(value: T) -> T:
        effect(value)
        return value

    return mapM(observe, run_inside=run_inside)

def log_effect(
    label: str,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Effect[object]:
    """
    Build an effect that logs "<label>: <value!r>".

    Usage:
        tap_lazy(log_effect("fetched", level=logging.INFO))
    """
    target = logger if logger is not None else _logger

    def effect(value: object) -> None:
        target.log(level, "%s: %r", label, value)

    return effect

# Sugar for Toxic
def tap[T](effect: Effect[T]) -> Lifted[Toxic[T], Toxic[T]]:
    """Execute sync side effect on the held value, return an equal container."""
    return tapM(effect, run_inside=run_inside)

def traced[T](
    label: str,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.DEBUG,
) -> Lifted[Toxic[T], Toxic[T]]:
    """tap that logs the held value under label."""
    return tap(log_effect(label, logger=logger, level=level))

# Sugar for deferred containers
def tap_lazy[T, E](effect: Callable[[T], object]) -> Lifted[LCR[T, E], LCR[T, E]]:
    """Execute side effect on Ok value once awaited. Error passes through silently."""
    return tapM(effect, run_inside=run_inside_lazy)

def tap_task[T](effect: Callable[[T], object]) -> Lifted[asyncio.Task[T], asyncio.Task[T]]:
    """Execute side effect when the task completes."""
    return tapM(effect, run_inside=run_inside_task)

__all__ = (
    "log_effect",
    "tap",
    "traced",
    "tap_lazy",
    "tap_task",
    "tapM",
)
