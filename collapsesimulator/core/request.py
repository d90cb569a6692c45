"""Request: the unit of work flowing through the simulator.

A request carries two countdowns measured in ticks: the work still needed
to finish it and the time left before its client gives up. Both counters
saturate at zero and never increase.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Request:
    """A single request in flight.

    Attributes:
        remaining_work_ticks: Processing ticks left until completion.
        remaining_timeout_ticks: Ticks left until the client deadline.
        request_id: Creation order within the run, starting at 0.
        spiked: Whether the latency spike multiplier was applied.
    """

    remaining_work_ticks: int
    remaining_timeout_ticks: int
    request_id: int = 0
    spiked: bool = False

    def __post_init__(self) -> None:
        if self.remaining_work_ticks < 0:
            raise ValueError(f"remaining_work_ticks must be >= 0, got {self.remaining_work_ticks}")
        if self.remaining_timeout_ticks < 0:
            raise ValueError(
                f"remaining_timeout_ticks must be >= 0, got {self.remaining_timeout_ticks}"
            )

    def waiting_tick(self) -> None:
        """One tick spent in the queue: closer to timeout, no progress."""
        if self.remaining_timeout_ticks:
            self.remaining_timeout_ticks -= 1

    def working_tick(self) -> None:
        """One tick spent on a worker: closer to both timeout and completion."""
        if self.remaining_timeout_ticks:
            self.remaining_timeout_ticks -= 1
        if self.remaining_work_ticks:
            self.remaining_work_ticks -= 1

    @property
    def is_done(self) -> bool:
        return self.remaining_work_ticks == 0

    @property
    def is_timed_out(self) -> bool:
        return self.remaining_timeout_ticks == 0
