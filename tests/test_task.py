"""Tests for the asyncio.Task variant."""

import asyncio

import pytest

from elevated import (
    apply_task,
    bind_task,
    curry,
    flatten_task,
    lift2_task,
    lift3_task,
    map_task,
    pure_task,
    run_inside_task,
)

from .conftest import Boom, add, increment


class TestPrimitives:
    async def test_pure(self):
        assert await pure_task(2) == 2

    async def test_run_inside(self):
        assert await run_inside_task(pure_task(2), increment) == 3

    async def test_flatten(self):
        assert await flatten_task(pure_task(pure_task("v"))) == "v"

    async def test_returns_tasks(self):
        assert isinstance(map_task(increment)(pure_task(2)), asyncio.Task)

    async def test_can_be_awaited_twice(self):
        task = map_task(increment)(pure_task(2))

        assert await task == 3
        assert await task == 3

    def test_requires_running_loop(self):
        with pytest.raises(RuntimeError):
            pure_task(1)


class TestCombinators:
    async def test_map(self):
        assert await map_task(increment)(pure_task(2)) == 3

    async def test_bind(self):
        def task_increment(x: int) -> asyncio.Task[int]:
            return pure_task(x + 1)

        assert await bind_task(task_increment)(pure_task(2)) == 3

    async def test_apply(self):
        assert await apply_task(pure_task(increment))(pure_task(2)) == 3

    async def test_curry_map_apply(self):
        partially_applied = map_task(curry(add))(pure_task(2))

        assert await apply_task(partially_applied)(pure_task(3)) == 5

    async def test_lift2(self):
        assert await lift2_task(add)(pure_task(2), pure_task(3)) == 5

    async def test_lift3(self):
        lifted = lift3_task(lambda x, y, z: x * y * z)

        assert await lifted(pure_task(2), pure_task(3), pure_task(4)) == 24


class TestOrdering:
    async def test_continuation_waits_for_dependency(self, calls):
        gate = asyncio.Event()

        async def slow() -> int:
            await gate.wait()
            calls.append("source")
            return 2

        source = asyncio.ensure_future(slow())
        mapped = run_inside_task(source, lambda x: calls.append("continuation") or x + 1)

        await asyncio.sleep(0)
        assert calls == []
        assert not mapped.done()

        gate.set()

        assert await mapped == 3
        assert calls == ["source", "continuation"]

    async def test_exception_surfaces_on_await(self):
        def explode(_: int) -> int:
            raise Boom("task")

        task = map_task(explode)(pure_task(1))

        with pytest.raises(Boom, match="task"):
            await task
