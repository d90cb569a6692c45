"""Random draws and latency sampling."""

from collapsesimulator.distributions.latency import LatencySample, LatencySampler
from collapsesimulator.distributions.random_source import NumpyRandomSource, RandomSource

__all__ = [
    "LatencySample",
    "LatencySampler",
    "NumpyRandomSource",
    "RandomSource",
]
