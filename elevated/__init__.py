"""
Elevated functions: map, bind, apply and curry over container types.

A value trapped in a container (Toxic, LazyCoroResult, asyncio.Task) is
never taken back out. Plain functions are lifted to work on containers instead.

Architecture:
- Generic combinators (*M functions) work with any container via run_inside + flatten
- Sugar functions for Toxic (no suffix)
- Sugar functions for kungfu LazyCoroResult (*_lazy suffix)
- Sugar functions for asyncio.Task (*_task suffix)
"""

# Core types
from ._types import LCR, Binary, Curried, Effect, Flatten, Lifted, RunInside, Ternary, Unary

# Internal helpers (for custom containers)
from . import _helpers
from ._helpers import compose, identity

# Container
from .toxic import Toxic, flatten, pure, run_inside

# Deferred containers
from . import deferred
from .deferred import (
    flatten_lazy,
    flatten_task,
    pure_lazy,
    pure_task,
    run_inside_lazy,
    run_inside_task,
)

# Curry
from .curry import curry, curry3, uncurry

# Functor
from .functor import map, map_lazy, map_task, mapM  # noqa: A004

# Monad
from .monad import bind, bind_lazy, bind_task, bindM

# Applicative
from .applicative import (
    # Toxic
    apply,
    lift2,
    lift3,
    # Deferred
    apply_lazy,
    apply_task,
    lift2_lazy,
    lift2_task,
    lift3_lazy,
    lift3_task,
    # Generic
    applyM,
    lift2M,
    lift3M,
)

# Effects
from .effects import log_effect, tap, tap_lazy, tap_task, tapM, traced

# Errors
from ._errors import NotNestedError

__all__ = (
    # Types
    "LCR",
    "Binary",
    "Curried",
    "Effect",
    "Flatten",
    "Lifted",
    "RunInside",
    "Ternary",
    "Unary",
    # Internal helpers (for custom containers)
    "_helpers",
    "compose",
    "identity",
    # Container
    "Toxic",
    "pure",
    "run_inside",
    "flatten",
    # Deferred
    "deferred",
    "pure_lazy",
    "run_inside_lazy",
    "flatten_lazy",
    "pure_task",
    "run_inside_task",
    "flatten_task",
    # Curry
    "curry",
    "curry3",
    "uncurry",
    # Functor
    "map",
    "map_lazy",
    "map_task",
    "mapM",
    # Monad
    "bind",
    "bind_lazy",
    "bind_task",
    "bindM",
    # Applicative - Toxic
    "apply",
    "lift2",
    "lift3",
    # Applicative - Deferred
    "apply_lazy",
    "apply_task",
    "lift2_lazy",
    "lift2_task",
    "lift3_lazy",
    "lift3_task",
    # Applicative - Generic
    "applyM",
    "lift2M",
    "lift3M",
    # Effects
    "log_effect",
    "tap",
    "traced",
    "tap_lazy",
    "tap_task",
    "tapM",
    # Errors
    "NotNestedError",
)
