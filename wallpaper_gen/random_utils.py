"""
Seeded random for layout and palette generation.
Lehmer / Park-Miller LCG so a seed reproduces the exact same wallpaper anywhere.
Uses secrets module only to pick a fresh seed when the caller gives none.
"""
import math
import secrets
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

RandomFn = Callable[[], float]

LCG_MODULUS = 2147483647  # 2^31 - 1
LCG_MULTIPLIER = 16807


def new_seed() -> int:
    """Fresh seed in [1, LCG_MODULUS - 1] from system entropy."""
    return secrets.randbelow(LCG_MODULUS - 1) + 1


def create_seeded_random(seed: int | None = None) -> RandomFn:
    """
    Return a generator: each call advances the state and returns a float in [0, 1).
    seed=None picks a fresh seed; seed=0 is a real seed, not "no seed".
    """
    state = new_seed() if seed is None else int(seed) % LCG_MODULUS
    if state == 0:
        # 0 is a fixed point of the LCG; seed 0 collides with seed M-1
        state = LCG_MODULUS - 1

    def random() -> float:
        nonlocal state
        state = (state * LCG_MULTIPLIER) % LCG_MODULUS
        return (state - 1) / (LCG_MODULUS - 1)

    return random


def random_range(random: RandomFn, min_value: float, max_value: float) -> float:
    """Map random() linearly into [min_value, max_value)."""
    return min_value + random() * (max_value - min_value)


def random_int(random: RandomFn, min_value: int, max_value: int) -> int:
    """Random integer in [min_value, max_value], both ends inclusive."""
    return math.floor(random_range(random, min_value, max_value + 1))


def shuffle_array(random: RandomFn, items: Sequence[T]) -> list[T]:
    """Fisher-Yates from the end. Returns a new list; input is left alone."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = int(random() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result


def pick_random(random: RandomFn, items: Sequence[T]) -> T:
    return items[int(random() * len(items))]
