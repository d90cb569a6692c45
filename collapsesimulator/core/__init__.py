"""Simulation core: requests, workers, the bounded queue and the tick engine."""

from collapsesimulator.core.queue import QueueDiscipline, RequestQueue, RequestQueueStats
from collapsesimulator.core.request import Request
from collapsesimulator.core.simulation import Simulation
from collapsesimulator.core.state import SimulationState
from collapsesimulator.core.worker import IDLE, Busy, Idle, Worker, WorkerState

__all__ = [
    "IDLE",
    "Busy",
    "Idle",
    "QueueDiscipline",
    "Request",
    "RequestQueue",
    "RequestQueueStats",
    "Simulation",
    "SimulationState",
    "Worker",
    "WorkerState",
]
