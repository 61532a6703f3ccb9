"""
Core type definitions for elevated functions.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import LazyCoroResult

# ============================================================================
# Function shapes
# ============================================================================

# Unary = plain value-to-value function
type Unary[A, B] = Callable[[A], B]

# Binary = two-argument function, the input of curry()
type Binary[A, B, C] = Callable[[A, B], C]

# Ternary = three-argument function, the input of curry3()
type Ternary[A, B, C, D] = Callable[[A, B, C], D]

# Curried = binary function after curry(): A -> (B -> C)
type Curried[A, B, C] = Callable[[A], Callable[[B], C]]

# Effect = observation-only callback, return value ignored
type Effect[T] = Callable[[T], object]

# ============================================================================
# Lifted shapes
# ============================================================================

# Lifted = container-to-container function produced by map/bind/apply
type Lifted[M, N] = Callable[[M], N]

# RunInside = how a container runs a transformation against its value
type RunInside[M, A, B, N] = Callable[[M, Callable[[A], B]], N]

# Flatten = how a container collapses one level of nesting
type Flatten[MM, M] = Callable[[MM], M]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    # Function shapes
    "Unary",
    "Binary",
    "Ternary",
    "Curried",
    "Effect",
    # Lifted shapes
    "Lifted",
    "RunInside",
    "Flatten",
    # Concrete shortcuts
    "LCR",
)
