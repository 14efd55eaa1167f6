"""
Randomness sources for key generation.

The engine only needs `choices(population, k)`. Production code uses the
operating system CSPRNG; tests and demos can swap in a seeded source.
"""

import logging
import random
import secrets
from typing import Protocol, Sequence, List

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def choices(self, population: Sequence, k: int) -> List:
        ...


class SecureRandomSource:
    """Uniform choices from secrets.SystemRandom (os.urandom underneath)."""

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def choices(self, population: Sequence, k: int) -> List:
        return [self._rng.choice(population) for _ in range(k)]

    def __repr__(self):
        return "SecureRandomSource()"


class SeededRandomSource:
    """
    Deterministic source for reproducible tests and demos.
    NOT cryptographically secure. Never use it for real keys.
    """

    def __init__(self, seed):
        self._seed = seed
        self._rng  = random.Random(seed)
        logger.warning("SeededRandomSource(seed=%r) is not suitable for real keys", seed)

    def choices(self, population: Sequence, k: int) -> List:
        return self._rng.choices(population, k=k)

    def __repr__(self):
        return f"SeededRandomSource(seed={self._seed!r})"
