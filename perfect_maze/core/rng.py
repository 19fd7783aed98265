import random
from abc import ABC, abstractmethod
from typing import Iterable, Optional


class RandomSource(ABC):
    """
    The only randomness a generator may use.
    Inject a seeded or scripted source to make generation replayable.
    """

    @abstractmethod
    def next_in_range(self, n: int) -> int:
        """Returns an integer in [0, n)."""
        pass

    @staticmethod
    def _check_range(n: int):
        if n <= 0:
            raise ValueError(f"next_in_range needs n >= 1, got {n}")


class SeededRandom(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_in_range(self, n: int) -> int:
        self._check_range(n)
        return self._rng.randrange(n)


class SequenceRandom(RandomSource):
    """
    Replays a fixed script of integers, each reduced modulo n.
    Cycles back to the start when the script runs out.
    """

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        if not self.values:
            raise ValueError("SequenceRandom needs at least one value")
        self.position = 0
        self.calls = 0

    def next_in_range(self, n: int) -> int:
        self._check_range(n)
        value = self.values[self.position]
        self.position = (self.position + 1) % len(self.values)
        self.calls += 1
        return value % n


def make_random_source(seed=None) -> RandomSource:
    if isinstance(seed, RandomSource):
        return seed
    return SeededRandom(seed)
