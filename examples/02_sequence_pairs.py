from __future__ import annotations

from _infra import banner, run

from monadic import sequence_monad
from monadic.sequence import guard


async def main() -> None:
    banner("02_sequence_pairs: every combination, row-major")

    suits = ("♠", "♥", "♦")
    ranks = ("A", "K")
    cards = sequence_monad.flat_map(suits, lambda s: sequence_monad.map(ranks, lambda r: f"{r}{s}"))
    print(cards)

    banner("02_sequence_pairs: pythagorean triples with guard")

    sides = range(1, 21)
    triples = sequence_monad.flat_map(
        tuple(sides),
        lambda a: sequence_monad.flat_map(
            tuple(range(a, 21)),
            lambda b: sequence_monad.flat_map(
                tuple(range(b, 21)),
                lambda c: sequence_monad.followed_by(guard(a * a + b * b == c * c), ((a, b, c),)),
            ),
        ),
    )
    print(triples)


if __name__ == "__main__":
    run(main)
