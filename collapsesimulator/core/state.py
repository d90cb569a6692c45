"""Mutable per-run state threaded through every tick step.

Keeping the counters on an explicit object (instead of module globals)
lets several simulations run side by side in one process and lets a single
tick be driven and inspected in tests.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SimulationState:
    """Counters and accumulators of one simulation run.

    Attributes:
        tick: Number of ticks completed so far.
        total_requests: Requests created, retries included.
        failed_requests: Rejections plus timeouts at completion.
        rejected_requests: Requests refused because workers and queue were full.
        timed_out_requests: Requests that finished after their deadline.
        completed_requests: Requests that finished work, timed out or not.
        retried_requests: Failures that were resubmitted.
        incoming_requests: Fractional arrival accumulator.
        spike_requests_remaining: Requests still inside the latency spike window.
        deferred_retries: Rejection retries held back until the next tick.
        next_request_id: Id assigned to the next created request.
    """

    tick: int = 0
    total_requests: int = 0
    failed_requests: int = 0
    rejected_requests: int = 0
    timed_out_requests: int = 0
    completed_requests: int = 0
    retried_requests: int = 0
    incoming_requests: float = 0.0
    spike_requests_remaining: int = 0
    deferred_retries: int = 0
    next_request_id: int = 0

    @property
    def failure_rate(self) -> float | None:
        """Failed share of all requests in percent, or None before any request exists."""
        if self.total_requests == 0:
            return None
        return self.failed_requests / self.total_requests * 100.0
