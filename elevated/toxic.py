"""
Toxic - изолирующий контейнер
=============================

A value trapped in Toxic never leaves it: the only way to work with it is
to run a transformation inside the container and get a new container back.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ._errors import NotNestedError


@dataclass(frozen=True, repr=False, match_args=False)
class Toxic[T]:
    """
    Single-value immutable container.

    There is no way to read the value back out. Equality and
    hashing compare held values, so two containers can be compared without
    unwrapping either of them.

    Functor/monad laws hold for map/bind over Toxic:
    - Identity: x.run_inside(identity) == x
    - Left identity: Toxic(a).run_inside(f).unwrap() == f(a)
    - Right identity: x.run_inside(Toxic).unwrap() == x
    """

    _value: T

    @staticmethod
    def from_value[V](value: V) -> Toxic[V]:
        """Trap a value into the container."""
        return Toxic(value)

    def run_inside[U](self, f: Callable[[T], U], /) -> Toxic[U]:
        """
        Run f against the held value and trap the result.

        Exceptions raised by f propagate to the caller.
        """
        return Toxic(f(self._value))

    def unwrap[U](self: Toxic[Toxic[U]]) -> Toxic[U]:
        """
        Flatten one level of nesting: Toxic[Toxic[U]] -> Toxic[U].

        Raises NotNestedError if the held value is not itself a Toxic.
        """
        inner = self._value
        if not isinstance(inner, Toxic):
            raise NotNestedError(type(inner))
        return inner

    def __str__(self) -> str:
        return f"[Toxic {self._value}]"

    def __repr__(self) -> str:
        return f"Toxic({self._value!r})"


def pure[T](value: T) -> Toxic[T]:
    """
    Lift a plain value into Toxic.

    Short alias for Toxic.from_value(), the classic FP term for
    "lift value into computational context".
    """
    return Toxic.from_value(value)


def run_inside[T, U](toxic: Toxic[T], f: Callable[[T], U], /) -> Toxic[U]:
    """Function form of Toxic.run_inside, for the generic *M combinators."""
    return toxic.run_inside(f)


def flatten[T](nested: Toxic[Toxic[T]]) -> Toxic[T]:
    """Function form of Toxic.unwrap, for the generic *M combinators."""
    return nested.unwrap()


__all__ = (
    "Toxic",
    "pure",
    "run_inside",
    "flatten",
)
