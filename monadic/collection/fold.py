"""
Fold combinators
================

Effectful left fold over any Monad.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from ..monad import Monad


def fold[F, A, T](
    monad: Monad[F],
    items: Iterable[A],
    handler: Callable[[T, A], F],
    *,
    initial: T,
) -> F:
    """Effectful fold: build up state through sequential effects."""
    acc = monad.pure(initial)
    for item in items:
        acc = monad.flat_map(acc, _step(handler, item))
    return acc


def _step[F, A, T](handler: Callable[[T, A], F], item: A) -> Callable[[typing.Any], F]:
    def run(state: T) -> F:
        return handler(state, item)
    return run


__all__ = ("fold",)
