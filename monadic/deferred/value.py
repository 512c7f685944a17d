"""Deferred value container

A value of type T that becomes available at some later point, or fails
with E. Built on top of kungfu Result: the settled outcome is always
Ok(value) or Error(error).

Lazy: nothing runs until the deferred is awaited. Memoized: the underlying
computation runs at most once, every later await reuses the outcome."""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable, Coroutine
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import DeferredPendingError
from .._types import NoError, Thunk
from .state import DeferredState, Failed, Pending, Resolved

logger = logging.getLogger(__name__)


class Deferred[T, E]:
    """Eventually-available value with a one-way state machine.

    States: Pending (initial) -> Resolved(value) | Failed(error).
    Continuations registered through `then` run only after Resolved;
    Failed propagates without invoking them.
    """

    __slots__ = ("_thunk", "_task", "_outcome")

    def __init__(self, thunk: Thunk[Result[T, E]], /) -> None:
        """Create Deferred from a fn returning coroutine of Result."""
        self._thunk = thunk
        self._task: asyncio.Future[Result[T, E]] | None = None
        self._outcome: Result[T, E] | None = None

    @staticmethod
    def from_lazy_coro_result[V, Err](lazy: LazyCoroResult[V, Err]) -> Deferred[V, Err]:
        """Convert kungfu LazyCoroResult into Deferred."""

        async def run() -> Result[V, Err]:
            return await lazy

        return Deferred(run)

    # State inspection

    @property
    def state(self) -> DeferredState[T, E]:
        """Current state, without waiting."""
        match self._outcome:
            case None:
                return Pending()
            case Ok(value):
                return Resolved(value)
            case Error(err):
                return Failed(err)
            case _ as unreachable:
                assert_never(unreachable)

    @property
    def settled(self) -> bool:
        return self._outcome is not None

    @property
    def outcome(self) -> Result[T, E]:
        """Settled Result. Raises DeferredPendingError while pending."""
        if self._outcome is None:
            raise DeferredPendingError()
        return self._outcome

    # Functor / monad sugar (delegates to the `deferred_monad` typeclass value)

    def map[U](self, f: Callable[[T], U], /) -> Deferred[U, E]:
        """Functor fmap, derived from flat_map + pure."""
        from .monad import deferred_monad
        return deferred_monad.map(self, f)

    def then[U](self, f: Callable[[T], Deferred[U, E]], /) -> Deferred[U, E]:
        """
        Monadic bind (>>=).

        - On Resolved: constructs and awaits f(value)
        - On Failed: short-circuit, f is never called
        """
        from .monad import deferred_monad
        return deferred_monad.flat_map(self, f)

    def map_err[F](self, f: Callable[[E], F], /) -> Deferred[T, F]:
        """Map over error type."""

        async def run() -> Result[T, F]:
            return (await self).map_err(f)

        return Deferred(run)

    def recover(self, default: T, /) -> Deferred[T, NoError]:
        """Replace any failure with `default`."""

        async def run() -> Result[T, NoError]:
            match await self:
                case Ok(value):
                    return Ok(value)
                case Error(_):
                    return Ok(default)
                case _ as unreachable:
                    assert_never(unreachable)

        return Deferred(run)

    def recover_with(self, handler: Callable[[E], T], /) -> Deferred[T, NoError]:
        """Compute a replacement value from the error."""

        async def run() -> Result[T, NoError]:
            match await self:
                case Ok(value):
                    return Ok(value)
                case Error(err):
                    return Ok(handler(err))
                case _ as unreachable:
                    assert_never(unreachable)

        return Deferred(run)

    def to_lazy_coro_result(self) -> LazyCoroResult[T, E]:
        """Convert to kungfu LazyCoroResult (shares the memoized outcome)."""
        return LazyCoroResult(self._settle)

    # Protocol methods

    async def _settle(self) -> Result[T, E]:
        if self._outcome is not None:
            return self._outcome
        if self._task is None:
            self._task = asyncio.ensure_future(self._thunk())
        # NOTE: Exceptions raised by the thunk are bugs, not failures:
        #       they propagate to every awaiter and the state stays Pending.
        #       Cancelling one awaiter must not cancel the shared task.
        outcome = await asyncio.shield(self._task)
        if self._outcome is None:
            self._outcome = outcome
            match outcome:
                case Ok(_):
                    logger.debug("deferred %#x resolved", id(self))
                case Error(err):
                    logger.debug("deferred %#x failed: %r", id(self), err)
        return outcome

    def __call__(self) -> Coroutine[typing.Any, typing.Any, Result[T, E]]:
        """Settle the deferred, returning coroutine of its Result."""
        return self._settle()

    def __await__(self) -> typing.Generator[typing.Any, None, Result[T, E]]:
        """Allow direct await on the deferred."""
        return self._settle().__await__()

    def __repr__(self) -> str:
        return f"Deferred({self.state!r})"


__all__ = ("Deferred",)
