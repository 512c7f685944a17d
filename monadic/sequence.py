"""
Ordered-sequence monad over immutable tuples.

Effect: multiplicity. flat_map applies the function to every element in
order and concatenates the produced tuples, so chaining an outer tuple of
size m with an inner one of size n enumerates up to m * n results in
row-major order (outer first, then inner). The empty tuple is the
"no result" case and short-circuits the rest of the chain.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .monad import Monad


def _pure[A](value: A) -> tuple[A, ...]:
    return (value,)


def _flat_map[A, B](
    container: tuple[A, ...],
    func: Callable[[A], tuple[B, ...]],
) -> tuple[B, ...]:
    return tuple(item for value in container for item in func(value))


sequence_monad: Monad[tuple[object, ...]] = Monad(name="sequence", pure=_pure, flat_map=_flat_map)


def of[A](*items: A) -> tuple[A, ...]:
    """Build a sequence container from positional items."""
    return items


def from_iterable[A](items: Iterable[A]) -> tuple[A, ...]:
    """Materialize any iterable into a sequence container, preserving order."""
    return tuple(items)


def guard(condition: bool) -> tuple[None, ...]:
    """
    Keep the current branch only when `condition` holds.

    Example:
        sequence_monad.flat_map(
            of(1, 2, 3, 4),
            lambda n: sequence_monad.followed_by(guard(n % 2 == 0), (n,)),
        )  # (2, 4)
    """
    return (None,) if condition else ()


__all__ = ("sequence_monad", "of", "from_iterable", "guard")
