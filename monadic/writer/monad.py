"""Writer monad

pure(a) carries an empty log; flat_map runs the continuation on the value
and appends its log after the current one. Never short-circuits."""

from __future__ import annotations

from collections.abc import Callable

from ..monad import Monad
from .log import Log
from .written import Written


def _pure[A](value: A) -> Written[A, object]:
    return Written(value, Log())


def _flat_map[A, B, W](
    container: Written[A, W],
    func: Callable[[A], Written[B, W]],
) -> Written[B, W]:
    following = func(container.value)
    return Written(following.value, container.log.combine(following.log))


writer_monad: Monad[Written[object, object]] = Monad(name="writer", pure=_pure, flat_map=_flat_map)


def tell[W](*entries: W) -> Written[None, W]:
    """Write entries to the log without producing a value."""
    return Written(None, Log.of(*entries))


def written[A, W](value: A, *entries: W) -> Written[A, W]:
    """Create Written with value and log entries."""
    return Written(value, Log.of(*entries))


def listen[A, W](container: Written[A, W]) -> Written[tuple[A, Log[W]], W]:
    """Expose the log along with the value."""
    return Written((container.value, container.log), container.log)


def censor[A, W](
    container: Written[A, W],
    f: Callable[[Log[W]], Log[W]],
) -> Written[A, W]:
    """Rewrite the log, keeping the value."""
    return Written(container.value, f(container.log))


__all__ = ("writer_monad", "tell", "written", "listen", "censor")
