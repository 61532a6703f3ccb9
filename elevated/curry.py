"""
Curry combinators
=================

Pure syntactic transforms, no container involved. They adapt multi-argument
functions so map/apply can thread one container at a time.
"""

from __future__ import annotations

from collections.abc import Callable

from ._types import Binary, Curried, Ternary


def curry[A, B, C](f: Binary[A, B, C]) -> Curried[A, B, C]:
    """
    (A, B) -> C  into  A -> (B -> C).

    Example:
        add = lambda x, y: x + y
        curry(add)(2)(3)  # 5
    """
    return lambda x: lambda y: f(x, y)


def curry3[A, B, C, D](f: Ternary[A, B, C, D]) -> Callable[[A], Callable[[B], Callable[[C], D]]]:
    """(A, B, C) -> D  into  A -> (B -> (C -> D))."""
    return lambda x: lambda y: lambda z: f(x, y, z)


def uncurry[A, B, C](f: Curried[A, B, C]) -> Binary[A, B, C]:
    """Inverse of curry: uncurry(curry(f))(x, y) == f(x, y)."""
    return lambda x, y: f(x)(y)


__all__ = ("curry", "curry3", "uncurry")
