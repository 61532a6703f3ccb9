"""Internal helpers for elevated functions.

Plain function plumbing shared across the combinator modules.
These are not part of the public API but can be used for custom containers."""

from __future__ import annotations

import typing
from collections.abc import Callable

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

def compose(*fns: Callable[[typing.Any], typing.Any]) -> Callable[[typing.Any], typing.Any]:
    """
    Right-to-left composition: compose(g, f)(x) == g(f(x)).

    With no functions returns identity, so compose() is the unit of composition.

    Usage:
        inc_then_double = compose(lambda x: x * 2, lambda x: x + 1)
        inc_then_double(2)  # 6
    """
    if not fns:
        return identity

    def composed(x: typing.Any) -> typing.Any:
        for fn in reversed(fns):
            x = fn(x)
        return x

    return composed

__all__ = (
    "identity",
    "compose",
)
