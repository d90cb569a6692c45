"""Run summaries and per-tick traces."""

from collapsesimulator.instrumentation.recorder import TickRecorder, TickSample
from collapsesimulator.instrumentation.summary import SimulationSummary

__all__ = [
    "SimulationSummary",
    "TickRecorder",
    "TickSample",
]
