"""
Optional-value monad over kungfu.Option.

Effect: absence. Some(value) carries a value, Nothing() carries none.
Any Nothing() reached in a chain propagates to the end (fail-fast).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from kungfu import Nothing, Option, Some

from .monad import Monad


def _pure[A](value: A) -> Option[A]:
    return Some(value)


def _flat_map[A, B](container: Option[A], func: Callable[[A], Option[B]]) -> Option[B]:
    match container:
        case Some(value):
            return func(value)
        case Nothing():
            return Nothing()
        case _ as unreachable:
            assert_never(unreachable)


option_monad: Monad[Option[object]] = Monad(name="option", pure=_pure, flat_map=_flat_map)


def from_optional[A](value: A | None) -> Option[A]:
    """
    Convert a plain Optional into Option. None becomes Nothing().

    **When to use:** dict lookups, regex matches, ORM queries returning None.
    """
    if value is None:
        return Nothing()
    return Some(value)


def to_optional[A](container: Option[A]) -> A | None:
    """
    Convert Option back into a plain Optional.

    NOTE: Some(None) and Nothing() both become None.
    """
    match container:
        case Some(value):
            return value
        case Nothing():
            return None
        case _ as unreachable:
            assert_never(unreachable)


def is_present(container: Option[object]) -> bool:
    """True for Some(...), False for Nothing()."""
    match container:
        case Some(_):
            return True
        case _:
            return False


def unwrap_or[A](container: Option[A], default: A) -> A:
    """Value inside Some, or `default` for Nothing()."""
    match container:
        case Some(value):
            return value
        case _:
            return default


__all__ = (
    "option_monad",
    "from_optional",
    "to_optional",
    "is_present",
    "unwrap_or",
)
