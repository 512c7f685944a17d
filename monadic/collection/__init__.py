"""
Collection combinators
======================

Operations over collections of items, generic in the Monad.
"""

from .fold import fold
from .traverse import sequence_all, traverse

__all__ = ("fold", "sequence_all", "traverse")
