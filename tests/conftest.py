"""
Shared pytest fixtures for collapse-simulator tests.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

import pytest


class ScriptedRandomSource:
    """RandomSource that replays scripted draws.

    Normal draws come from ``normals`` in order; once the script runs out,
    ``normal`` returns the requested mean. Bernoulli draws come from
    ``bernoullis``; once that runs out, only p >= 1 succeeds.
    Every call is recorded for assertions.
    """

    def __init__(self, normals: Iterable[float] = (), bernoullis: Iterable[bool] = ()):
        self._normals = deque(normals)
        self._bernoullis = deque(bernoullis)
        self.normal_calls: list[tuple[float, float]] = []
        self.bernoulli_calls: list[float] = []

    def normal(self, mean: float, stddev: float) -> float:
        self.normal_calls.append((mean, stddev))
        if self._normals:
            return self._normals.popleft()
        return mean

    def bernoulli(self, p: float) -> bool:
        self.bernoulli_calls.append(p)
        if self._bernoullis:
            return self._bernoullis.popleft()
        return p >= 1.0

    @property
    def exhausted(self) -> bool:
        return not self._normals and not self._bernoullis


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandomSource.

    Example usage:
        def test_tick(scripted_random):
            random = scripted_random(normals=[1.0, 2.0], bernoullis=[True])
            sim = Simulation(config, random=random)
    """
    return ScriptedRandomSource


@pytest.fixture(autouse=True)
def reset_collapsesimulator_logging():
    """Reset the package logger before and after each test.

    Leaves only a NullHandler and resets the level to NOTSET so that a test
    enabling logging does not leak handlers into the next one.
    """
    logger = logging.getLogger("collapsesimulator")

    def reset() -> None:
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            if not isinstance(handler, logging.NullHandler):
                handler.close()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.NOTSET)

    reset()
    yield
    reset()
