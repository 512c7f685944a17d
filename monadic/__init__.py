"""
Monad abstraction with law-checked instances.

One generic typeclass value (Monad) carrying `pure` + `flat_map`, with
`map` and the other derived operations written once against it.

Architecture:
- Monad[F] - typeclass, derived operations live here
- Instances: option_monad (kungfu Option), sequence_monad (tuple),
  deferred_monad (Deferred), writer_monad (Written); their modules stay
  importable as namespaces (monadic.sequence.guard, monadic.deferred.lift)
- Generic combinators (traverse, sequence_all, fold) take the instance as first argument
- laws - builders for the monad laws, usable from any test suite
"""

# Core types
from ._errors import DeferredPendingError, LawViolationError
from ._types import Kleisli, NoError, Observe, Thunk

# Typeclass
from .monad import Monad

# Instances
from . import deferred, option, sequence, writer
from .option import from_optional, is_present, option_monad, to_optional, unwrap_or
from .sequence import sequence_monad
from .deferred import (
    Deferred,
    DeferredState,
    Failed,
    Pending,
    Resolved,
    deferred_monad,
    gather,
    gather2,
    gather3,
    lift,
)

from .writer import Log, Written, censor, listen, tell, writer_monad, written

# Generic combinators
from .collection import fold, sequence_all, traverse

# Laws
from . import laws

__all__ = (
    # Core types
    "Kleisli",
    "NoError",
    "Observe",
    "Thunk",
    "DeferredPendingError",
    "LawViolationError",
    # Typeclass
    "Monad",
    # Option
    "option",
    "option_monad",
    "from_optional",
    "to_optional",
    "is_present",
    "unwrap_or",
    # Sequence
    "sequence",
    "sequence_monad",
    # Deferred
    "deferred",
    "deferred_monad",
    "Deferred",
    "DeferredState",
    "Pending",
    "Resolved",
    "Failed",
    "gather",
    "gather2",
    "gather3",
    "lift",
    # Writer
    "writer",
    "writer_monad",
    "Log",
    "Written",
    "tell",
    "written",
    "listen",
    "censor",
    # Combinators
    "traverse",
    "sequence_all",
    "fold",
    # Laws
    "laws",
)
