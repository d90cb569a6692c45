"""Request processing latency.

Latencies follow a normal distribution with the configured mean and a
standard deviation of a quarter of the mean. The normal distribution can go
negative, so draws are floored at zero ticks.

When a latency spike is simulated, the first requests sampled in the run
are ten times slower. The window lives on the SimulationState as
``spike_requests_remaining`` and counts requests, not ticks: under heavy
arrival rates it is used up in far fewer ticks than its size.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from collapsesimulator.config import SPIKE_LATENCY_MULTIPLIER

if TYPE_CHECKING:
    from collapsesimulator.core.state import SimulationState
    from collapsesimulator.distributions.random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LatencySample:
    """One sampled latency, floored at zero and truncated to whole ticks."""

    ticks: int
    spiked: bool


class LatencySampler:
    """Samples per-request work in ticks, applying the spike window.

    Args:
        mean_latency: Mean processing time in ticks. Must be > 0.
        random: Source of normal draws.
    """

    def __init__(self, mean_latency: float, random: RandomSource):
        if not mean_latency > 0:
            raise ValueError(f"mean_latency must be > 0, got {mean_latency}")

        self._mean_latency = mean_latency
        self._stddev = mean_latency / 4.0
        self._random = random

    @property
    def mean_latency(self) -> float:
        return self._mean_latency

    def sample(self, state: SimulationState) -> LatencySample:
        """Sample the work for the next created request."""
        execution_time = max(0.0, self._random.normal(self._mean_latency, self._stddev))

        spiked = False
        if state.spike_requests_remaining > 0:
            state.spike_requests_remaining -= 1
            execution_time *= SPIKE_LATENCY_MULTIPLIER
            spiked = True
            if state.spike_requests_remaining == 0:
                logger.debug("Latency spike window exhausted at tick %d", state.tick)

        return LatencySample(ticks=int(execution_time), spiked=spiked)
