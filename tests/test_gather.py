from __future__ import annotations

import asyncio

import pytest
from kungfu import Error, Ok, Result

from helpers import settle
from monadic import Deferred, gather, gather2, gather3, lift


def waiting_for(event: asyncio.Event, value: int) -> Deferred[int, str]:
    async def run() -> Result[int, str]:
        await event.wait()
        return Ok(value)

    return Deferred(run)


def releasing(event: asyncio.Event, value: int) -> Deferred[int, str]:
    async def run() -> Result[int, str]:
        event.set()
        return Ok(value)

    return Deferred(run)


def failing_after(delay: float, error: str) -> Deferred[int, str]:
    async def run() -> Result[int, str]:
        await asyncio.sleep(delay)
        return Error(error)

    return Deferred(run)


@pytest.mark.asyncio
async def test_gather2_runs_concurrently() -> None:
    event = asyncio.Event()
    # The first deferred can only finish once the second one has started.
    pair = gather2(waiting_for(event, 1), releasing(event, 2))

    assert await asyncio.wait_for(settle(pair), timeout=1) == ("ok", (1, 2))


@pytest.mark.asyncio
async def test_gather3_keeps_argument_order() -> None:
    triple = gather3(lift.pure("a"), lift.pure(2), lift.pure(3.0))
    assert await settle(triple) == ("ok", ("a", 2, 3.0))


@pytest.mark.asyncio
async def test_gather_collects_all() -> None:
    values = gather([lift.pure(n) for n in range(5)])
    assert await settle(values) == ("ok", (0, 1, 2, 3, 4))


@pytest.mark.asyncio
async def test_gather_empty() -> None:
    assert await settle(gather([])) == ("ok", ())


@pytest.mark.asyncio
async def test_first_failure_in_argument_order_wins() -> None:
    values = gather([lift.pure(0), failing_after(0.02, "slow"), failing_after(0.0, "fast")])
    assert await settle(values) == ("error", "slow")


@pytest.mark.asyncio
async def test_gather3_failure() -> None:
    triple = gather3(lift.pure(1), lift.pure(2), lift.fail("third"))
    assert await settle(triple) == ("error", "third")
