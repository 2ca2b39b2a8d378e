"""Bounded random helpers.

All randomness flows through an explicit ``random.Random`` so sessions can be
replayed from ``State.seed``.
"""

import random


def rand_range(rng: random.Random, start: int, end: int) -> int:
    """Return a uniform integer in the *inclusive* range ``[start, end]``."""
    if end < start:
        raise ValueError(f"Empty range [{start}, {end}]")
    return rng.randint(start, end)
