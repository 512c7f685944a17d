"""
Generic Monad typeclass.

Architecture:
- Monad[F] - typeclass value holding `pure` + `flat_map` for one container type F
- every other operation (map, followed_by, flatten, compose, ap, map2, chain) is
  derived here once, against those two fields only
- instances (option, sequence, deferred, writer) are standalone values,
  not subclasses of a common container

Python can not abstract over a type constructor, so F stands for the whole
container type (Option[A], tuple[A, ...], Deferred[A, E], ...) and element
types are erased to typing.Any at this level.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from ._helpers import const, identity
from ._types import Kleisli


@dataclass(frozen=True, slots=True)
class Monad[F]:
    """
    Typeclass for sequencing effectful computations in container F.

    Implementations provide two functions:
    - pure: A -> F[A]
    - flat_map: (F[A], A -> F[B]) -> F[B]

    Monadic laws:
    - Left identity: flat_map(pure(a), f) ≡ f(a)
    - Right identity: flat_map(m, pure) ≡ m
    - Associativity: flat_map(flat_map(m, f), g) ≡ flat_map(m, x => flat_map(f(x), g))
    """

    name: str
    pure: Callable[[typing.Any], F]
    flat_map: Callable[[F, Callable[[typing.Any], F]], F]

    # Functor operations

    def map(self, container: F, func: Callable[[typing.Any], typing.Any], /) -> F:
        """
        Functor fmap derived from the monad: flat_map(m, x => pure(func(x))).

        There is no per-instance override, so every instance satisfies the
        map derivation by construction.
        """
        pure = self.pure
        return self.flat_map(container, lambda value: pure(func(value)))

    def replace(self, container: F, value: typing.Any, /) -> F:
        """Keep the effect of `container`, replace every value with `value`."""
        return self.map(container, const(value))

    # Monad operations

    def followed_by(self, container: F, following: F, /) -> F:
        """Sequence two containers, keeping the effect of both and the value of the second."""
        return self.flat_map(container, const(following))

    def flatten(self, nested: F, /) -> F:
        """Collapse one level of nesting: F[F[A]] -> F[A]."""
        return self.flat_map(nested, identity)

    def compose(
        self,
        first: Kleisli[typing.Any, F],
        second: Kleisli[typing.Any, F],
        /,
    ) -> Kleisli[typing.Any, F]:
        """
        Kleisli composition (>=>).

        Example:
            parse_then_invert = option_monad.compose(parse_int, invert)
            parse_then_invert("4")  # Some(0.25)
        """
        flat_map = self.flat_map
        return lambda value: flat_map(first(value), second)

    def chain(self, container: F, /, *funcs: Kleisli[typing.Any, F]) -> F:
        """Left-to-right flat_map through every function in `funcs`."""
        result = container
        for func in funcs:
            result = self.flat_map(result, func)
        return result

    # Applicative operations (via bind)

    def ap(self, funcs: F, container: F, /) -> F:
        """Apply wrapped functions to wrapped values, functions' effect first."""
        flat_map = self.flat_map
        pure = self.pure
        return flat_map(funcs, lambda func: flat_map(container, lambda value: pure(func(value))))

    def map2(
        self,
        first: F,
        second: F,
        func: Callable[[typing.Any, typing.Any], typing.Any],
        /,
    ) -> F:
        """Combine two containers with a binary function, first container's effect first."""
        flat_map = self.flat_map
        pure = self.pure
        return flat_map(first, lambda a: flat_map(second, lambda b: pure(func(a, b))))

    def __repr__(self) -> str:
        return f"Monad({self.name!r})"


__all__ = ("Monad",)
