from __future__ import annotations

import asyncio

from _infra import add, banner, increment, run

from elevated import apply_task, bind_task, lift2_task, map_task, pure_task


async def slow(value: int, delay: float) -> int:
    await asyncio.sleep(delay)
    return value


async def main() -> None:
    banner("03_task: the same combinators over asyncio.Task")

    a = asyncio.ensure_future(slow(2, 0.02))
    b = asyncio.ensure_future(slow(3, 0.01))

    print("map:", await map_task(increment)(a))
    print("bind:", await bind_task(lambda x: pure_task(x + 1))(a))
    print("apply:", await apply_task(pure_task(increment))(a))
    print("lift2:", await lift2_task(add)(a, b))


if __name__ == "__main__":
    run(main)
