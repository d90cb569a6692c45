"""collapsesimulator: tick-based simulation of congestion collapse.

A bounded request queue served by a fixed worker pool, with request
timeouts and probabilistic retries, advanced one tick at a time.

    from collapsesimulator import Simulation, SimulationConfig

    summary = Simulation(SimulationConfig(arrival_rate=0.19, seed=7)).run()
    print(summary.failure_rate_line())
"""

import logging

from collapsesimulator.analysis import expand_grid, run_sweep
from collapsesimulator.config import SimulationConfig
from collapsesimulator.core import (
    Busy,
    Idle,
    QueueDiscipline,
    Request,
    RequestQueue,
    Simulation,
    SimulationState,
    Worker,
)
from collapsesimulator.distributions import LatencySampler, NumpyRandomSource, RandomSource
from collapsesimulator.instrumentation import SimulationSummary, TickRecorder, TickSample
from collapsesimulator.load import ArrivalProcess
from collapsesimulator.logging_config import configure_from_env, enable_console_logging

# Silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArrivalProcess",
    "Busy",
    "Idle",
    "LatencySampler",
    "NumpyRandomSource",
    "QueueDiscipline",
    "RandomSource",
    "Request",
    "RequestQueue",
    "Simulation",
    "SimulationConfig",
    "SimulationState",
    "SimulationSummary",
    "TickRecorder",
    "TickSample",
    "Worker",
    "configure_from_env",
    "enable_console_logging",
    "expand_grid",
    "run_sweep",
]
