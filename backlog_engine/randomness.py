"""Injectable random sources and the draw helpers built on them."""

from __future__ import annotations

import math
from typing import Optional, Protocol, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything producing uniform floats in ``[0, 1)``."""

    def next(self) -> float:
        ...


class NumpyRandomSource:
    """Random source backed by numpy's PCG64 generator.

    Without a seed the generator draws entropy from the OS; with a seed two
    instances yield identical sequences.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)

    def next(self) -> float:
        return float(self._rng.random())


def rand_int(source: RandomSource, low: int, high: int) -> int:
    """Uniform integer in ``[low, high]`` (both inclusive)."""

    return low + math.floor(source.next() * (high - low + 1))


def pick(source: RandomSource, items: Sequence[T]) -> T:
    """Uniformly pick one element; ``items`` must be non-empty."""

    return items[math.floor(source.next() * len(items))]


def chance(source: RandomSource, probability: float) -> bool:
    return source.next() < probability


def weighted_choice(source: RandomSource, weights: dict[str, float]) -> str:
    """Pick a key with probability proportional to its weight, in dict order."""

    total = sum(weights.values())
    roll = source.next() * total
    cumulative = 0.0
    last = None
    for key, weight in weights.items():
        if weight <= 0:
            continue
        cumulative += weight
        last = key
        if roll < cumulative:
            return key
    return last
