from __future__ import annotations

from _infra import add, banner, increment

from elevated import apply, bind, curry, lift2, map, pure, traced


def main() -> None:
    banner("01_toxic: map + bind + apply + curry")

    # Values go in and never come out.
    a = pure(2)
    b = pure(3)

    def toxic_increment(x: int):
        return pure(x + 1)

    wrapped_increment = pure(increment)

    # Single parameter: three ways in.
    print(map(increment)(a))
    print(bind(toxic_increment)(a))
    print(apply(wrapped_increment)(a))

    # Two parameters: curry -> map -> apply.
    partially_applied = map(curry(add))(a)
    print(apply(partially_applied)(b))

    # Same thing, packaged.
    print(traced("lift2")(lift2(add)(a, b)))


if __name__ == "__main__":
    main()
