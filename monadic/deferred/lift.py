"""
Lifting values and functions into Deferred.

Functions for turning plain values, Result, Optional and exception-based
code into the Deferred context.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Never

from kungfu import Error, Ok, Result

from .monad import deferred_monad
from .value import Deferred


def pure[T](value: T) -> Deferred[T, Never]:
    """
    Lift pure value into an always-resolving Deferred.

    Alias for `deferred_monad.pure`. The value is still only available after
    awaiting, never synchronously.

    Example:
        user = pure(User(id=42))
        result = await user  # Ok(User(id=42))
    """
    return deferred_monad.pure(value)


def fail[E](error: E) -> Deferred[Never, E]:
    """
    Create always-failing Deferred. Dual of pure().

    NOTE: Return type Deferred[Never, E] means "never produces a value".
    """
    async def run() -> Result[Never, E]:
        return Error(error)

    return Deferred(run)


def from_result[T, E](value: Result[T, E]) -> Deferred[T, E]:
    """
    Lift already-computed Result into Deferred.

    NOTE: This is NOT lazy: the result is already computed.
    """
    async def run() -> Result[T, E]:
        return value

    return Deferred(run)


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Deferred[T, E]:
    """
    Convert Optional to Deferred. None becomes a failure with error().

    NOTE: error is a thunk so the error is only built when value is None.
    """
    async def run() -> Result[T, E]:
        if value is None:
            return Error(error())
        return Ok(value)

    return Deferred(run)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Deferred[T, E]:
    """
    Run sync thunk when awaited, convert raised exceptions into a failure.

    Example:
        def parse_json(raw: str) -> Deferred[dict, ParseError]:
            return catching(
                lambda: json.loads(raw),
                on_error=lambda e: ParseError(str(e)),
            )
    """
    async def run() -> Result[T, E]:
        try:
            return Ok(thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return Deferred(run)


def catching_async[T, E](
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], E],
) -> Deferred[T, E]:
    """Async version of catching() for awaitables that raise instead of returning Result."""
    async def run() -> Result[T, E]:
        try:
            return Ok(await thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return Deferred(run)


def call[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Deferred[T, E]:
    """
    Call async function returning Result with arguments, lifted into Deferred.

    The function is not invoked until the deferred is awaited.

    Example:
        async def fetch_traffic(host: str) -> Result[int, FetchError]: ...

        traffic = call(fetch_traffic, "example.com")
    """
    async def run() -> Result[T, E]:
        return await func(*args, **kwargs)

    return Deferred(run)


def lifted[T, E, **P](
    func: Callable[P, Awaitable[Result[T, E]]],
) -> Callable[P, Deferred[T, E]]:
    """
    Decorator making an async Result-returning function return Deferred.

    Example:
        @lifted
        async def fetch_traffic(host: str) -> Result[int, FetchError]: ...

        total = fetch_traffic("a.example").then(...)
    """
    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Deferred[T, E]:
        return call(func, *args, **kwargs)

    return wrapper


__all__ = (
    "pure",
    "fail",
    "from_result",
    "optional",
    "catching",
    "catching_async",
    "call",
    "lifted",
)
