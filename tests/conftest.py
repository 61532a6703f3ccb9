from __future__ import annotations

from collections.abc import Callable

import pytest
from hypothesis import strategies as st
from kungfu import Error, LazyCoroResult, Result


def increment(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def negate(x: int) -> int:
    return -x


def add(x: int, y: int) -> int:
    return x + y


INT_FUNCTIONS: list[Callable[[int], int]] = [increment, double, negate, abs, lambda x: x % 7]

ints = st.integers(min_value=-10_000, max_value=10_000)
int_functions = st.sampled_from(INT_FUNCTIONS)
values = st.one_of(st.integers(), st.text(max_size=20), st.booleans(), st.none())


def failing_lazy[E](error: E) -> LazyCoroResult[int, E]:
    async def run() -> Result[int, E]:
        return Error(error)

    return LazyCoroResult(run)


class Boom(Exception):
    """Raised by test callbacks to check propagation."""


@pytest.fixture
def calls() -> list[object]:
    return []
