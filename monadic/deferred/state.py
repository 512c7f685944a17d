"""
Deferred state machine
======================

pending -> resolved(value)
pending -> failed(error)

Both transitions are one-way; resolved and failed are terminal.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Pending:
    """Value not available yet."""


@dataclass(frozen=True, slots=True)
class Resolved[T]:
    """Value available."""

    value: T


@dataclass(frozen=True, slots=True)
class Failed[E]:
    """Computation settled with an error; continuations are skipped."""

    error: E


type DeferredState[T, E] = Pending | Resolved[T] | Failed[E]


__all__ = ("Pending", "Resolved", "Failed", "DeferredState")
