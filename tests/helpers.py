"""Shared observers and Hypothesis strategies for the test-suite.

Observers project containers onto plain comparable values, so tests never
depend on how kungfu implements equality for Option and Result.
"""

from __future__ import annotations

from hypothesis import strategies as st
from kungfu import Error, Nothing, Ok, Some

from monadic import Deferred, lift, written


def observe_option(container):
    match container:
        case Some(value):
            return ("some", value)
        case Nothing():
            return ("nothing",)
    raise TypeError(f"not an Option: {container!r}")


async def settle(container: Deferred):
    match await container:
        case Ok(value):
            return ("ok", value)
        case Error(err):
            return ("error", err)
    raise TypeError(f"not a Result: {container!r}")


# Kleisli arrows -------------------------------------------------------------

option_arrows = st.builds(
    lambda k, m: (lambda n: Nothing() if n % m == 0 else Some(n * k)),
    st.integers(-5, 5),
    st.integers(2, 7),
)

sequence_arrows = st.builds(
    lambda width, k: (lambda n: tuple(n * k + i for i in range(width))),
    st.integers(0, 3),
    st.integers(-3, 3),
)

deferred_arrows = st.builds(
    lambda k, m: (lambda n: lift.fail(f"rejected {n}") if n % m == 0 else lift.pure(n + k)),
    st.integers(-5, 5),
    st.integers(2, 7),
)

writer_arrows = st.builds(
    lambda k, tag: (lambda n: written(n + k, f"{tag}:{n}")),
    st.integers(-5, 5),
    st.text(min_size=1, max_size=3),
)

plain_functions = st.sampled_from([
    lambda n: n + 1,
    lambda n: n * 2,
    lambda n: -n,
    str,
])

options = st.one_of(st.integers().map(Some), st.just(Nothing()))
sequences = st.lists(st.integers(-100, 100), max_size=5).map(tuple)
