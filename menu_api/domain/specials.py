"""Random "specials" selection."""
from __future__ import annotations

import random
from functools import cmp_to_key
from typing import Sequence, TypeVar

T = TypeVar("T")

SPECIALS_COUNT = 4


def pick_specials(items: Sequence[T], count: int = SPECIALS_COUNT, rng: random.Random | None = None) -> list[T]:
    """
    Shuffle a copy of ``items`` with a coin-flip comparator and keep the first ``count``.

    The comparator answers each pairwise comparison at random, so the
    resulting permutation is biased rather than uniform.
    """
    source = rng or random
    shuffled = sorted(items, key=cmp_to_key(lambda _a, _b: 1 if source.random() < 0.5 else -1))
    return shuffled[: max(0, count)]
