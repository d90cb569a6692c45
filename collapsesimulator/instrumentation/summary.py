"""Simulation summary generated after a run completes.

SimulationSummary is returned by Simulation.run(). Its
``failure_rate_line`` is the single line the command-line tool prints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NO_REQUESTS = "N/A (no requests)"


@dataclass(frozen=True)
class SimulationSummary:
    """Final counters of a simulation run.

    ``failure_rate`` is None when the run created no requests at all.
    """

    ticks: int
    total_requests: int
    failed_requests: int
    rejected_requests: int
    timed_out_requests: int
    completed_requests: int
    retried_requests: int
    peak_queue_depth: int
    final_queue_depth: int
    busy_workers: int
    discipline: str
    wall_clock_seconds: float = 0.0

    @property
    def failure_rate(self) -> float | None:
        if self.total_requests == 0:
            return None
        return self.failed_requests / self.total_requests * 100.0

    def failure_rate_line(self) -> str:
        rate = self.failure_rate
        if rate is None:
            return f"Failure rate: {NO_REQUESTS}"
        return f"Failure rate: {rate:.2f}%"

    def __str__(self) -> str:
        lines = [
            "Simulation Summary",
            f"  Ticks: {self.ticks} ({self.wall_clock_seconds:.3f}s wall, {self.discipline} queue)",
            f"  Requests: {self.total_requests} total, {self.completed_requests} completed",
            f"  Failures: {self.failed_requests} "
            f"(rejected={self.rejected_requests}, timed out={self.timed_out_requests})",
            f"  Retries: {self.retried_requests}",
            f"  Queue: peak={self.peak_queue_depth}, final={self.final_queue_depth}",
            f"  Busy workers at end: {self.busy_workers}",
        ]
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ticks": self.ticks,
            "total_requests": self.total_requests,
            "failed_requests": self.failed_requests,
            "rejected_requests": self.rejected_requests,
            "timed_out_requests": self.timed_out_requests,
            "completed_requests": self.completed_requests,
            "retried_requests": self.retried_requests,
            "peak_queue_depth": self.peak_queue_depth,
            "final_queue_depth": self.final_queue_depth,
            "busy_workers": self.busy_workers,
            "discipline": self.discipline,
            "failure_rate": self.failure_rate,
            "wall_clock_seconds": self.wall_clock_seconds,
        }
