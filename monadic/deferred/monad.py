"""Deferred-value monad

flat_map waits for the input to settle, then (and only then) constructs the
next deferred from the resolved value and waits for it. A chain built from
flat_map therefore runs strictly sequentially. Failed inputs short-circuit."""

from __future__ import annotations

from collections.abc import Callable
from typing import Never, assert_never

from kungfu import Error, Ok, Result

from ..monad import Monad
from .value import Deferred


def _pure[A](value: A) -> Deferred[A, Never]:
    async def run() -> Result[A, Never]:
        return Ok(value)

    return Deferred(run)


def _flat_map[A, B, E](
    container: Deferred[A, E],
    func: Callable[[A], Deferred[B, E]],
) -> Deferred[B, E]:
    async def run() -> Result[B, E]:
        match await container:
            case Ok(value):
                return await func(value)
            case Error(err):
                return Error(err)
            case _ as unreachable:
                assert_never(unreachable)

    return Deferred(run)


deferred_monad: Monad[Deferred[object, object]] = Monad(name="deferred", pure=_pure, flat_map=_flat_map)


__all__ = ("deferred_monad",)
