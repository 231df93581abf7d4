import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Random draws used by the games"""

    def next_uniform(self) -> float:
        """Float in [0, 1)"""
        ...

    def next_int_in_range(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi], both ends included"""
        ...


class SystemRandomSource:
    """RandomSource backed by its own random.Random instance"""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def next_uniform(self) -> float:
        return self._random.random()

    def next_int_in_range(self, lo: int, hi: int) -> int:
        return self._random.randint(lo, hi)
