"""
Gather combinators
==================

Concurrent evaluation of independent deferred values. This is the only
place where deferreds run side by side: flat_map chains stay sequential.

The first failure in argument order wins, regardless of which computation
failed first in time.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence

from kungfu import Error, Ok, Result

from .value import Deferred

logger = logging.getLogger(__name__)


def gather[T, E](deferreds: Sequence[Deferred[T, E]]) -> Deferred[tuple[T, ...], E]:
    """Run all concurrently, collect values in argument order."""

    async def run() -> Result[tuple[T, ...], E]:
        logger.debug("gathering %d deferred values", len(deferreds))
        outcomes = await asyncio.gather(*(d() for d in deferreds))
        values: list[T] = []
        for outcome in outcomes:
            match outcome:
                case Ok(value):
                    values.append(value)
                case Error(e):
                    return Error(e)
        return Ok(tuple(values))

    return Deferred(run)


def gather2[A, B, E](
    a: Deferred[A, E],
    b: Deferred[B, E],
) -> Deferred[tuple[A, B], E]:
    """Run two concurrently, preserve heterogeneous types."""

    async def run() -> Result[tuple[A, B], E]:
        result_a, result_b = await asyncio.gather(a(), b())

        match result_a:
            case Error(e):
                return Error(e)
            case Ok(val_a):
                pass

        match result_b:
            case Error(e):
                return Error(e)
            case Ok(val_b):
                pass

        return Ok((val_a, val_b))

    return Deferred(run)


def gather3[A, B, C, E](
    a: Deferred[A, E],
    b: Deferred[B, E],
    c: Deferred[C, E],
) -> Deferred[tuple[A, B, C], E]:
    """Run three concurrently, preserve heterogeneous types."""

    async def run() -> Result[tuple[A, B, C], E]:
        outcome = await gather2(gather2(a, b), c)
        return outcome.map(lambda pair: (*pair[0], pair[1]))

    return Deferred(run)


__all__ = ("gather", "gather2", "gather3")
