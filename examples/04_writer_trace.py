from __future__ import annotations

from _infra import banner, run

from monadic import fold, writer_monad, written


def collatz_step(n: int):
    if n % 2 == 0:
        return written(n // 2, f"{n} is even, halve")
    return written(3 * n + 1, f"{n} is odd, 3n + 1")


async def main() -> None:
    banner("04_writer_trace: log accumulated alongside the value")

    traced = writer_monad.chain(written(6, "start at 6"), collatz_step, collatz_step, collatz_step)
    print(f"value: {traced.value}")
    for entry in traced.log:
        print(f"  {entry}")

    banner("04_writer_trace: fold with a running log")

    total = fold(writer_monad, [3, 4, 5], lambda acc, n: written(acc + n, f"{acc} + {n}"), initial=0)
    print(f"total: {total.value}, steps: {list(total.log)}")


if __name__ == "__main__":
    run(main)
