from __future__ import annotations

from _infra import FakeTrafficApi, banner, run

from kungfu import Error, Ok

from monadic import gather, lift


async def main() -> None:
    banner("03_deferred_chain: sequential `.then` vs explicit gather")

    api = FakeTrafficApi(traffic={"a.example": 120, "b.example": 30, "c.example": 7})

    # Each step is only built once the previous host's traffic is known.
    sequential = (
        lift.call(api.fetch_traffic, "a.example")
        .then(lambda a: lift.call(api.fetch_traffic, "b.example").map(lambda b: a + b))
        .then(lambda ab: lift.call(api.fetch_traffic, "c.example").map(lambda c: ab + c))
    )

    match await sequential:
        case Ok(total):
            print(f"sequential total: {total}")
        case Error(err):
            print(f"sequential error: {err}")

    concurrent = gather([
        lift.call(api.fetch_traffic, host)
        for host in ("a.example", "missing.example", "c.example")
    ]).map(sum)

    match await concurrent:
        case Ok(total):
            print(f"concurrent total: {total}")
        case Error(err):
            print(f"concurrent error: {err}")


if __name__ == "__main__":
    run(main)
