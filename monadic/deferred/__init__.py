"""
Deferred Monad
==============

Deferred[T, E] - eventually-available value:
- Lazy (nothing runs until awaited)
- Coro (asynchronous)
- Result[T, E] (resolved / failed)
- Memoized (settles at most once)

Built on top of kungfu Result.
"""

from . import lift
from .gather import gather, gather2, gather3
from .monad import deferred_monad
from .state import DeferredState, Failed, Pending, Resolved
from .value import Deferred

__all__ = (
    "Deferred",
    "DeferredState",
    "Pending",
    "Resolved",
    "Failed",
    "deferred_monad",
    "gather",
    "gather2",
    "gather3",
    "lift",
)
