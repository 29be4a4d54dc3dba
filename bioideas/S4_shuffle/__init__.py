"""Step 4: Shuffle headlines for variety between requests."""

import random
from typing import Sequence, TypeVar

T = TypeVar("T")

__all__ = ["shuffle"]


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Return a uniformly random permutation of `items` (Fisher-Yates).

    The input is left untouched. Pass a seeded `random.Random` for a
    reproducible order; there is no ordering guarantee otherwise.
    """
    rng = rng or random.Random()
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
