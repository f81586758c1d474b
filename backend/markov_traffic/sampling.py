from __future__ import annotations
import random
from typing import Optional, Protocol, Sequence


class WeightedSampler(Protocol):
    def choose_index(self, weights: Sequence[int]) -> int:
        ...

    def fork(self) -> "WeightedSampler":
        ...


class RandomSampler:
    """Weighted index draws backed by a private `random.Random`."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def choose_index(self, weights: Sequence[int]) -> int:
        if not weights:
            raise ValueError("cannot choose from an empty weight list")
        if sum(weights) <= 0:
            raise ValueError("total weight must be positive")
        return self._rng.choices(range(len(weights)), weights=weights, k=1)[0]

    def fork(self) -> "RandomSampler":
        # Child seed is drawn from this stream.
        return RandomSampler(self._rng.getrandbits(64))
