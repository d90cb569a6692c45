"""Random sampling capability consumed by the simulator.

The engine only needs two draws: a normal sample and a Bernoulli trial.
Both go through the RandomSource protocol so tests can substitute a
scripted source and assert exact sequences of outcomes.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for the simulator's random draws."""

    @abstractmethod
    def normal(self, mean: float, stddev: float) -> float:
        """Sample a normal distribution. Results may be negative."""
        ...

    @abstractmethod
    def bernoulli(self, p: float) -> bool:
        """Return True with probability ``p``."""
        ...


class NumpyRandomSource:
    """RandomSource backed by ``numpy.random.Generator``.

    Args:
        seed: Seed for reproducible runs. None draws fresh OS entropy.
    """

    def __init__(self, seed: int | None = None):
        if seed is not None and seed < 0:
            raise ValueError(f"seed must be >= 0 or None, got {seed}")
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def normal(self, mean: float, stddev: float) -> float:
        return float(self._rng.normal(mean, stddev))

    def bernoulli(self, p: float) -> bool:
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"p must be between 0 and 1, got {p}")
        # random() is in [0, 1): p=0 never fires and p=1 always does.
        return bool(self._rng.random() < p)
