"""
Written - value with accumulated log
====================================
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .log import Log


@dataclass(frozen=True, slots=True)
class Written[A, W]:
    """
    Writer container: a value plus the log produced while computing it.

    Equality is by value and log, so two chains are equal when they yield
    the same value having recorded the same entries in the same order.
    """

    value: A
    log: Log[W] = field(default_factory=Log)


__all__ = ("Written",)
