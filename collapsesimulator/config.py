"""Run configuration for the collapse simulator.

SimulationConfig holds the documented simulation parameters plus the
optional seed. Validation happens once, at construction, so that an invalid
configuration never reaches the engine.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

DEFAULT_WORKERS = 10
DEFAULT_TIMEOUT_TICKS = 1000
DEFAULT_MEAN_LATENCY = 50.0
DEFAULT_SIMULATION_TICKS = 1_000_000
DEFAULT_QUEUE_SIZE = 1000
DEFAULT_RETRY_PROBABILITY = 0.5
DEFAULT_PROGRESS_INTERVAL = 100_000

# Spike window is sized from ticks but consumed per created request.
SPIKE_WINDOW_DIVISOR = 1000
SPIKE_LATENCY_MULTIPLIER = 10.0


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters of one simulation run.

    Attributes:
        arrival_rate: Mean number of new requests per tick. Must be > 0.
        workers: Size of the worker pool.
        timeout: Ticks a request may live before it counts as timed out.
        mean_latency: Mean request processing time in ticks. Must be > 0.
        simulation_ticks: Number of ticks to run.
        queue_size: Capacity of the waiting queue.
        lifo: Serve the queue newest-first instead of oldest-first.
        simulate_spike: Multiply the latency of the first
            ``simulation_ticks // 1000`` requests by 10.
        retry_probability: Chance that a failed request is resubmitted.
        seed: Seed for the default random source (None = unseeded).
        progress_interval: Ticks between DEBUG progress log lines.

    Raises:
        ValueError: If any parameter is out of range.
    """

    arrival_rate: float
    workers: int = DEFAULT_WORKERS
    timeout: int = DEFAULT_TIMEOUT_TICKS
    mean_latency: float = DEFAULT_MEAN_LATENCY
    simulation_ticks: int = DEFAULT_SIMULATION_TICKS
    queue_size: int = DEFAULT_QUEUE_SIZE
    lifo: bool = False
    simulate_spike: bool = False
    retry_probability: float = DEFAULT_RETRY_PROBABILITY
    seed: int | None = None
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL

    def __post_init__(self) -> None:
        if not self.arrival_rate > 0:
            raise ValueError(f"arrival_rate must be > 0, got {self.arrival_rate}")
        if not self.mean_latency > 0:
            raise ValueError(f"mean_latency must be > 0, got {self.mean_latency}")
        if not 0.0 <= self.retry_probability <= 1.0:
            raise ValueError(
                f"retry_probability must be between 0 and 1, got {self.retry_probability}"
            )
        for name in ("workers", "timeout", "simulation_ticks", "queue_size"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.progress_interval < 1:
            raise ValueError(f"progress_interval must be >= 1, got {self.progress_interval}")

    @property
    def spike_window(self) -> int:
        """Number of requests (by creation order) that receive the spike multiplier."""
        if not self.simulate_spike:
            return 0
        return self.simulation_ticks // SPIKE_WINDOW_DIVISOR

    def replace(self, **changes) -> SimulationConfig:
        """Return a validated copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)
