from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st
from kungfu import Nothing, Some

from helpers import observe_option, option_arrows, options, plain_functions
from monadic import from_optional, is_present, laws, option_monad, to_optional, unwrap_or


def parse_int(text: str):
    return Some(int(text)) if text.lstrip("-").isdigit() else Nothing()


def divide(dividend: int, divisor: int):
    return Nothing() if divisor == 0 else Some(dividend // divisor)


def parse_and_divide(a: str, b: str):
    return option_monad.flat_map(
        parse_int(a),
        lambda x: option_monad.flat_map(parse_int(b), lambda y: divide(x, y)),
    )


def test_pure_wraps_value() -> None:
    assert observe_option(option_monad.pure(5)) == ("some", 5)


def test_pure_keeps_none_as_present_value() -> None:
    assert is_present(option_monad.pure(None))


def test_flat_map_skips_function_on_absent(calls: list[str]) -> None:
    def step(value: int):
        calls.append(f"step {value}")
        return Some(value)

    result = option_monad.flat_map(Nothing(), step)

    assert observe_option(result) == ("nothing",)
    assert calls == []


def test_absent_in_middle_of_chain_propagates(calls: list[str]) -> None:
    def first(value: int):
        calls.append("first")
        return Some(value + 1)

    def second(value: int):
        calls.append("second")
        return Nothing()

    def third(value: int):
        calls.append("third")
        return Some(value * 100)

    result = option_monad.chain(option_monad.pure(1), first, second, third)

    assert observe_option(result) == ("nothing",)
    assert calls == ["first", "second"]


def test_parse_and_divide() -> None:
    assert observe_option(parse_and_divide("6", "2")) == ("some", 3)


def test_parse_and_divide_by_zero_is_absent() -> None:
    assert observe_option(parse_and_divide("6", "0")) == ("nothing",)


def test_parse_and_divide_non_numeric_is_absent() -> None:
    assert observe_option(parse_and_divide("six", "2")) == ("nothing",)
    assert observe_option(parse_and_divide("6", "two")) == ("nothing",)


def test_map_transforms_present_value() -> None:
    assert observe_option(option_monad.map(Some(20), lambda n: n + 1)) == ("some", 21)
    assert observe_option(option_monad.map(Nothing(), lambda n: n + 1)) == ("nothing",)


def test_from_optional_and_back() -> None:
    assert observe_option(from_optional(7)) == ("some", 7)
    assert observe_option(from_optional(None)) == ("nothing",)
    assert to_optional(Some("x")) == "x"
    assert to_optional(Nothing()) is None


def test_from_optional_keeps_falsy_values() -> None:
    assert observe_option(from_optional(0)) == ("some", 0)
    assert observe_option(from_optional("")) == ("some", "")


def test_unwrap_or() -> None:
    assert unwrap_or(Some(1), 9) == 1
    assert unwrap_or(Nothing(), 9) == 9


@given(value=st.integers(), f=option_arrows)
def test_left_identity(value: int, f) -> None:
    laws.left_identity(option_monad, value, f).check(observe=observe_option)


@given(container=options)
def test_right_identity(container) -> None:
    laws.right_identity(option_monad, container).check(observe=observe_option)


@given(container=options, f=option_arrows, g=option_arrows)
def test_associativity(container, f, g) -> None:
    laws.associativity(option_monad, container, f, g).check(observe=observe_option)


@given(container=options, h=plain_functions)
def test_map_derivation(container, h) -> None:
    laws.map_derivation(option_monad, container, h).check(observe=observe_option)
