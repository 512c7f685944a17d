"""Internal helpers for monadic.

Small functions shared by the derived operations and collection combinators.
Not part of the public API."""

from __future__ import annotations

from collections.abc import Callable


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def const[T](value: T) -> Callable[..., T]:
    """Function ignoring its arguments and returning `value`."""
    def inner(*_: object) -> T:
        return value
    return inner


def snoc[T](items: tuple[T, ...], item: T) -> tuple[T, ...]:
    """Append `item` to an immutable tuple."""
    return (*items, item)


__all__ = ("identity", "const", "snoc")
