"""
Log - monoidal accumulator for the writer monad
===============================================
"""

from __future__ import annotations


class Log[A](tuple[A, ...]):
    """
    Immutable log accumulator.

    A tuple with monoid operations:
    - empty: Log()
    - combine: concatenation

    Monoid laws hold:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: (x.combine(y)).combine(z) == x.combine(y.combine(z))
    """

    __slots__ = ()

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log(items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """
        Combine two logs (monoidal append).

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(('a', 'b', 'c'))
        """
        return Log((*self, *other))

    def tell(self, item: A, /) -> Log[A]:
        """Append single item. Equivalent to self.combine(Log.of(item))."""
        return Log((*self, item))

    def __repr__(self) -> str:
        return f"Log({tuple(self)!r})"


__all__ = ("Log",)
