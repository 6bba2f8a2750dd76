"""
Random source for palette generation.
Every generator takes an optional rng (anything with .random() -> float in [0, 1)).
None means the shared crypto-quality source; tests pass a seeded random.Random.
"""
import secrets
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float: ...


_SYSTEM_RANDOM = secrets.SystemRandom()


def resolve_rng(rng: RandomSource | None) -> RandomSource:
    """Return rng, or the default source when rng is None."""
    return rng if rng is not None else _SYSTEM_RANDOM


def jitter(rng: RandomSource, amount: float) -> float:
    """Uniform offset in [-amount, amount)."""
    return rng.random() * amount * 2 - amount
