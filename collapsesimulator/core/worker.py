"""Worker: one unit of serving capacity.

A worker is either Idle or Busy with exactly one request. Each tick a busy
worker performs one working tick on its request; an idle worker instead
pulls the next request from the queue without working on it, so the pulled
request starts accruing work on the following tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collapsesimulator.core.queue import RequestQueue
    from collapsesimulator.core.request import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    """Worker holds no request."""


@dataclass(frozen=True)
class Busy:
    """Worker holds ``request`` and works on it every tick."""

    request: Request


WorkerState = Idle | Busy

IDLE = Idle()


class Worker:
    """Holds at most one in-flight request.

    Attributes:
        index: Position in the pool; the engine scans workers in index order.
        state: Idle or Busy(request).
        completed: Requests this worker has finished.
    """

    __slots__ = ("index", "state", "completed")

    def __init__(self, index: int = 0) -> None:
        self.index = index
        self.state: WorkerState = IDLE
        self.completed = 0

    @property
    def is_free(self) -> bool:
        return isinstance(self.state, Idle)

    @property
    def current_request(self) -> Request | None:
        if isinstance(self.state, Busy):
            return self.state.request
        return None

    def take(self, request: Request) -> None:
        """Assign a request to this idle worker.

        Raises:
            RuntimeError: If the worker is already busy.
        """
        if isinstance(self.state, Busy):
            raise RuntimeError(f"worker {self.index} is already busy")
        self.state = Busy(request)

    def tick(self, queue: RequestQueue) -> Request | None:
        """Spend one tick.

        A busy worker works on its request; an idle worker pulls from the
        queue. A request finished on this tick is not replaced until the
        next tick.

        Returns:
            The request that finished on this tick, or None.
        """
        if isinstance(self.state, Busy):
            request = self.state.request
            request.working_tick()
            if request.is_done:
                self.state = IDLE
                self.completed += 1
                return request
            return None

        # The pulled request already aged while it waited in the queue.
        next_request = queue.pop()
        if next_request is not None:
            self.state = Busy(next_request)
            logger.debug("Worker %d picked up request %d", self.index, next_request.request_id)
        return None

    def __repr__(self) -> str:
        return f"Worker(index={self.index}, state={self.state!r})"
