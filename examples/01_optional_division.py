from __future__ import annotations

from _infra import banner, divide, parse_int, run

from monadic import option_monad, to_optional


def parse_and_divide(a: str, b: str):
    # Any Nothing() along the way short-circuits the rest of the chain.
    return option_monad.flat_map(
        parse_int(a),
        lambda dividend: option_monad.flat_map(parse_int(b), lambda divisor: divide(dividend, divisor)),
    )


async def main() -> None:
    banner("01_optional_division: parse -> parse -> divide")

    for a, b in [("6", "2"), ("6", "0"), ("six", "2"), ("6", "two")]:
        print(f"{a!r} / {b!r} -> {to_optional(parse_and_divide(a, b))}")


if __name__ == "__main__":
    run(main)
