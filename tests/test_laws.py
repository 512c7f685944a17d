from __future__ import annotations

import asyncio

import pytest
from kungfu import Nothing, Some

from helpers import observe_option, settle
from monadic import LawViolationError, Monad, deferred_monad, laws, lift, option_monad, sequence_monad, writer_monad, written


# pure duplicates its value: breaks right identity and left identity.
stuttering = Monad(
    name="stuttering",
    pure=lambda a: (a, a),
    flat_map=lambda m, f: tuple(item for value in m for item in f(value)),
)


def test_violation_carries_both_sides() -> None:
    case = laws.right_identity(stuttering, (1,))

    with pytest.raises(LawViolationError) as info:
        case.check()

    assert info.value.law == "right identity"
    assert info.value.lhs == (1, 1)
    assert info.value.rhs == (1,)


def test_violation_is_an_assertion_error() -> None:
    with pytest.raises(AssertionError):
        laws.left_identity(stuttering, 1, lambda n: (n,)).check()


def test_all_laws_hold_for_sequence() -> None:
    for case in laws.all_laws(sequence_monad, 3, (1, 2), lambda n: (n, -n), lambda n: (n + 1,), str):
        case.check()


def test_all_laws_hold_for_option() -> None:
    def f(n: int):
        return Some(n + 1) if n > 0 else Nothing()

    for container in (Some(2), Nothing()):
        for case in laws.all_laws(option_monad, 0, container, f, f, abs):
            case.check(observe=observe_option)


def test_all_laws_hold_for_writer() -> None:
    def f(n: int):
        return written(n * 2, "f")

    def g(n: int):
        return written(n - 1, "g")

    for case in laws.all_laws(writer_monad, 1, written(5, "m"), f, g, str):
        case.check()


def test_all_laws_hold_for_deferred() -> None:
    def f(n: int):
        return lift.pure(n + 1)

    def g(n: int):
        return lift.fail("odd") if n % 2 else lift.pure(n)

    async def check_all() -> None:
        for container in (lift.pure(4), lift.fail("absent")):
            for case in laws.all_laws(deferred_monad, 1, container, f, g, str):
                await case.check_async(observe=settle)

    asyncio.run(check_all())


def test_law_names() -> None:
    names = [case.name for case in laws.all_laws(sequence_monad, 0, (), lambda n: (n,), lambda n: (n,), str)]
    assert names == ["left identity", "right identity", "associativity", "map derivation"]
