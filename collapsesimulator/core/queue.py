"""Bounded request queue with FIFO or LIFO service order.

Requests are always pushed at the back. FIFO serves from the front, so the
oldest waiter goes first; LIFO serves from the back, so the newest waiter
goes first. Under congestion LIFO keeps serving requests that can still meet
their deadline, while FIFO spreads the queueing delay over everyone.

Example:
    queue = RequestQueue(capacity=100, discipline=QueueDiscipline.LIFO)
    queue.push(request)
    next_request = queue.pop()
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from collapsesimulator.core.request import Request


class QueueDiscipline(Enum):
    FIFO = "FIFO"
    LIFO = "LIFO"


@dataclass(frozen=True)
class RequestQueueStats:
    """Statistics tracked by RequestQueue."""

    enqueued: int = 0
    dequeued: int = 0
    capacity_rejected: int = 0
    peak_depth: int = 0


class RequestQueue:
    """Bounded double-ended buffer of waiting requests.

    Attributes:
        capacity: Maximum number of waiting requests (0 disables queueing).
        discipline: Which end ``pop`` serves from.
    """

    def __init__(self, capacity: int, discipline: QueueDiscipline = QueueDiscipline.FIFO):
        """Initialize the queue.

        Args:
            capacity: Maximum queue length, >= 0.
            discipline: FIFO or LIFO service order.

        Raises:
            ValueError: If capacity is negative.
        """
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")

        self._capacity = capacity
        self._discipline = discipline
        self._queue: deque[Request] = deque()

        self._enqueued = 0
        self._dequeued = 0
        self._capacity_rejected = 0
        self._peak_depth = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def discipline(self) -> QueueDiscipline:
        return self._discipline

    @property
    def stats(self) -> RequestQueueStats:
        """Return a frozen snapshot of queue statistics."""
        return RequestQueueStats(
            enqueued=self._enqueued,
            dequeued=self._dequeued,
            capacity_rejected=self._capacity_rejected,
            peak_depth=self._peak_depth,
        )

    def has_capacity(self) -> bool:
        return len(self._queue) < self._capacity

    def push(self, request: Request) -> bool:
        """Append a request at the back.

        Returns:
            True if accepted, False if the queue is full.
        """
        if not self.has_capacity():
            self._capacity_rejected += 1
            return False

        self._queue.append(request)
        self._enqueued += 1
        self._peak_depth = max(self._peak_depth, len(self._queue))
        return True

    def pop(self) -> Request | None:
        """Remove and return the next request to serve, or None if empty."""
        if not self._queue:
            return None

        self._dequeued += 1
        if self._discipline is QueueDiscipline.LIFO:
            return self._queue.pop()
        return self._queue.popleft()

    def age(self) -> None:
        """Advance every waiting request by one waiting tick."""
        for request in self._queue:
            request.waiting_tick()

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Request]:
        return iter(self._queue)
