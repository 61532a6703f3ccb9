from __future__ import annotations

from _infra import add, banner, increment, run

from elevated import apply_lazy, bind_lazy, lift2_lazy, map_lazy, pure_lazy, tap_lazy
from kungfu import Error, Ok


async def main() -> None:
    banner("02_lazy: the same combinators over LazyCoroResult")

    a = pure_lazy(2)
    b = pure_lazy(3)

    pipelines = {
        "map": map_lazy(increment)(a),
        "bind": bind_lazy(lambda x: pure_lazy(x + 1))(a),
        "apply": apply_lazy(pure_lazy(increment))(a),
        "lift2": tap_lazy(lambda v: print(f"  computed {v}"))(lift2_lazy(add)(a, b)),
    }

    # Nothing has run yet: every pipeline starts on await.
    for name, pipeline in pipelines.items():
        match await pipeline:
            case Ok(value):
                print(f"{name}: {value}")
            case Error(err):
                print(f"{name}: error {err!r}")


if __name__ == "__main__":
    run(main)
