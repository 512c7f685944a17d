"""
Monad laws as data.

Each builder returns a LawCase holding both sides of one law for concrete
inputs. Synchronous containers are compared with `check`; deferred ones are
settled first with `check_async`.

Example:
    case = left_identity(option_monad, 3, lambda n: Some(n + 1))
    case.check(observe=to_optional)
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ._errors import LawViolationError
from ._helpers import identity
from ._types import Observe
from .monad import Monad


@dataclass(frozen=True, slots=True)
class LawCase[F]:
    name: str
    lhs: F
    rhs: F

    def check(self, *, observe: Observe[F] = identity) -> None:
        """Raise LawViolationError unless observe(lhs) == observe(rhs)."""
        lhs, rhs = observe(self.lhs), observe(self.rhs)
        if lhs != rhs:
            raise LawViolationError(self.name, lhs, rhs)

    async def check_async(
        self,
        *,
        observe: Callable[[F], Awaitable[typing.Any]],
    ) -> None:
        """Settle both sides (lhs first), then compare."""
        lhs = await observe(self.lhs)
        rhs = await observe(self.rhs)
        if lhs != rhs:
            raise LawViolationError(self.name, lhs, rhs)


def left_identity[F](
    monad: Monad[F],
    value: typing.Any,
    f: Callable[[typing.Any], F],
) -> LawCase[F]:
    """flat_map(pure(a), f) ≡ f(a)"""
    return LawCase("left identity", monad.flat_map(monad.pure(value), f), f(value))


def right_identity[F](monad: Monad[F], container: F) -> LawCase[F]:
    """flat_map(m, pure) ≡ m"""
    return LawCase("right identity", monad.flat_map(container, monad.pure), container)


def associativity[F](
    monad: Monad[F],
    container: F,
    f: Callable[[typing.Any], F],
    g: Callable[[typing.Any], F],
) -> LawCase[F]:
    """flat_map(flat_map(m, f), g) ≡ flat_map(m, x => flat_map(f(x), g))"""
    flat_map = monad.flat_map
    return LawCase(
        "associativity",
        flat_map(flat_map(container, f), g),
        flat_map(container, lambda x: flat_map(f(x), g)),
    )


def map_derivation[F](
    monad: Monad[F],
    container: F,
    h: Callable[[typing.Any], typing.Any],
) -> LawCase[F]:
    """map(m, h) ≡ flat_map(m, x => pure(h(x)))"""
    pure = monad.pure
    return LawCase(
        "map derivation",
        monad.map(container, h),
        monad.flat_map(container, lambda x: pure(h(x))),
    )


def all_laws[F](
    monad: Monad[F],
    value: typing.Any,
    container: F,
    f: Callable[[typing.Any], F],
    g: Callable[[typing.Any], F],
    h: Callable[[typing.Any], typing.Any],
) -> tuple[LawCase[F], ...]:
    """Every law instantiated with the same inputs."""
    return (
        left_identity(monad, value, f),
        right_identity(monad, container),
        associativity(monad, container, f, g),
        map_derivation(monad, container, h),
    )


__all__ = (
    "LawCase",
    "left_identity",
    "right_identity",
    "associativity",
    "map_derivation",
    "all_laws",
)
