from __future__ import annotations

import typing


class LawViolationError(AssertionError):
    """Both sides of a monad law disagree."""

    law: str
    lhs: typing.Any
    rhs: typing.Any

    def __init__(self, law: str, lhs: typing.Any, rhs: typing.Any) -> None:
        self.law = law
        self.lhs = lhs
        self.rhs = rhs
        super().__init__(f"{law} violated: {lhs!r} != {rhs!r}")


class DeferredPendingError(Exception):
    """Outcome requested before the deferred value settled."""

    def __init__(self) -> None:
        super().__init__("Deferred value has not settled yet")


__all__ = ("DeferredPendingError", "LawViolationError")
