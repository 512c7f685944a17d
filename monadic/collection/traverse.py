"""Traverse combinators

Generic traverse over any Monad. Each step is only constructed after the
previous one produced its value, so effects run in item order."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._helpers import identity, snoc
from ..monad import Monad


def traverse[F, A](
    monad: Monad[F],
    items: Iterable[A],
    handler: Callable[[A], F],
) -> F:
    """
    Monadic map: apply handler to every item, collect values into a tuple.

    - option: Nothing() as soon as one handler returns Nothing()
    - sequence: every combination, row-major
    - deferred: sequential, first failure wins
    - writer: logs concatenated in item order
    """
    acc = monad.pure(())
    for item in items:
        acc = monad.flat_map(acc, _step(monad, handler, item))
    return acc


def _step[F, A](
    monad: Monad[F],
    handler: Callable[[A], F],
    item: A,
) -> Callable[[tuple[typing.Any, ...]], F]:
    def run(done: tuple[typing.Any, ...]) -> F:
        return monad.map(handler(item), lambda value: snoc(done, value))
    return run


def sequence_all[F](monad: Monad[F], containers: Iterable[F]) -> F:
    """
    Flip structure: [F[A]] -> F[tuple[A, ...]].

    Implemented as traverse(identity).
    """
    return traverse(monad, containers, identity)


__all__ = ("traverse", "sequence_all")
