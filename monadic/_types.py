"""
Core type definitions for monadic.

Type aliases shared by the typeclass, the instances and the combinators.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine

# ============================================================================
# Type aliases
# ============================================================================

# Kleisli = function producing the next container from a plain value
type Kleisli[A, FB] = Callable[[A], FB]

# Thunk = zero-arg callable producing a coroutine (lazy async step)
type Thunk[R] = Callable[[], Coroutine[typing.Any, typing.Any, R]]

# Observe = projection of a container onto a comparable value
type Observe[F] = Callable[[F], typing.Any]

# NoError = "never fails"
# NOTE: Never (bottom type) instead of None: the error can not be constructed.
type NoError = typing.Never

__all__ = (
    "Kleisli",
    "Thunk",
    "Observe",
    "NoError",
)
