"""
Writer Monad
============

Written[A, W] - value paired with an accumulated Log[W].
"""

from .log import Log
from .monad import censor, listen, tell, writer_monad, written
from .written import Written

__all__ = (
    "Log",
    "Written",
    "writer_monad",
    "tell",
    "written",
    "listen",
    "censor",
)
