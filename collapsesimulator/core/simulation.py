"""Tick-driven simulation engine.

One tick runs four steps in a fixed order:

1. Queue aging: every waiting request loses one tick of its deadline.
2. Arrival admission: the arrival accumulator is topped up and drained.
   Each new request goes to the first idle worker, else into the queue,
   else it is rejected.
3. Worker advance: workers are scanned in index order. Busy workers work
   one tick; a request that finishes after its deadline is a timeout
   failure. Idle workers pull from the queue without working this tick.
4. Retry bookkeeping: every failure rolls a Bernoulli trial and, on
   success, adds one unit to the arrival accumulator.

Every retry is drained on the next tick. Rejection retries are held back
until the admission pass that rejected them has finished; timeout retries
are raised after admission has already run.

Example::

    config = SimulationConfig(arrival_rate=0.19, simulate_spike=True)
    summary = Simulation(config).run()
    print(summary.failure_rate_line())
"""

from __future__ import annotations

import logging
import time

from collapsesimulator.config import SimulationConfig
from collapsesimulator.core.queue import QueueDiscipline, RequestQueue
from collapsesimulator.core.request import Request
from collapsesimulator.core.state import SimulationState
from collapsesimulator.core.worker import Worker
from collapsesimulator.distributions.latency import LatencySampler
from collapsesimulator.distributions.random_source import NumpyRandomSource, RandomSource
from collapsesimulator.instrumentation.recorder import TickRecorder, TickSample
from collapsesimulator.instrumentation.summary import SimulationSummary
from collapsesimulator.load.arrival import ArrivalProcess

logger = logging.getLogger(__name__)


class Simulation:
    """Bounded queue served by a fixed worker pool, advanced tick by tick.

    Args:
        config: Validated run parameters.
        random: Source of normal and Bernoulli draws. Defaults to a
            NumpyRandomSource seeded with ``config.seed``.
        recorder: Optional per-tick trace collector.
    """

    def __init__(
        self,
        config: SimulationConfig,
        random: RandomSource | None = None,
        recorder: TickRecorder | None = None,
    ):
        self._config = config
        self._random = random if random is not None else NumpyRandomSource(config.seed)
        self._recorder = recorder

        self._arrivals = ArrivalProcess(config.arrival_rate, self._random)
        self._latency = LatencySampler(config.mean_latency, self._random)
        discipline = QueueDiscipline.LIFO if config.lifo else QueueDiscipline.FIFO
        self._queue = RequestQueue(config.queue_size, discipline)
        self._workers = [Worker(index) for index in range(config.workers)]
        self._state = SimulationState(spike_requests_remaining=config.spike_window)

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def queue(self) -> RequestQueue:
        return self._queue

    @property
    def workers(self) -> list[Worker]:
        return self._workers

    @property
    def busy_workers(self) -> int:
        return sum(1 for worker in self._workers if not worker.is_free)

    @property
    def is_finished(self) -> bool:
        return self._state.tick >= self._config.simulation_ticks

    # -------------------- tick steps --------------------

    def tick(self) -> None:
        """Advance the simulation by exactly one tick."""
        state = self._state
        if self._recorder is not None:
            before = (
                state.total_requests,
                state.completed_requests,
                state.rejected_requests,
                state.timed_out_requests,
                state.retried_requests,
            )

        self._queue.age()
        self._admit_arrivals()
        self._advance_workers()

        if self._recorder is not None:
            self._recorder.record(
                TickSample(
                    tick=state.tick,
                    arrivals=state.total_requests - before[0],
                    completions=state.completed_requests - before[1],
                    rejections=state.rejected_requests - before[2],
                    timeouts=state.timed_out_requests - before[3],
                    retries=state.retried_requests - before[4],
                    queue_depth=len(self._queue),
                    busy_workers=self.busy_workers,
                    incoming_requests=state.incoming_requests,
                )
            )
        state.tick += 1

    def _admit_arrivals(self) -> None:
        state = self._state
        self._arrivals.accumulate(state)
        while self._arrivals.take(state):
            self._admit(self._create_request())

        if state.deferred_retries:
            state.incoming_requests += state.deferred_retries
            state.deferred_retries = 0

    def _create_request(self) -> Request:
        state = self._state
        latency = self._latency.sample(state)
        request = Request(
            remaining_work_ticks=latency.ticks,
            remaining_timeout_ticks=self._config.timeout,
            request_id=state.next_request_id,
            spiked=latency.spiked,
        )
        state.next_request_id += 1
        state.total_requests += 1
        return request

    def _admit(self, request: Request) -> bool:
        """Place a new request on an idle worker or in the queue.

        Returns:
            False if the request was rejected.
        """
        worker = self._find_idle_worker()
        if worker is not None:
            worker.take(request)
            return True

        if self._queue.push(request):
            return True

        # Queue is full and every worker is busy.
        self._state.failed_requests += 1
        self._state.rejected_requests += 1
        self._maybe_retry(from_admission=True)
        return False

    def _find_idle_worker(self) -> Worker | None:
        for worker in self._workers:
            if worker.is_free:
                return worker
        return None

    def _advance_workers(self) -> None:
        state = self._state
        for worker in self._workers:
            finished = worker.tick(self._queue)
            if finished is None:
                continue

            state.completed_requests += 1
            if finished.is_timed_out:
                # The client already gave up while the server kept working on it.
                state.failed_requests += 1
                state.timed_out_requests += 1
                self._maybe_retry(from_admission=False)

    def _maybe_retry(self, *, from_admission: bool) -> None:
        if not self._random.bernoulli(self._config.retry_probability):
            return

        self._state.retried_requests += 1
        if from_admission:
            # Drained on the next tick, never by the pass that rejected it.
            self._state.deferred_retries += 1
        else:
            self._arrivals.inject(self._state)

    # -------------------- run loop --------------------

    def run(self) -> SimulationSummary:
        """Run the remaining ticks and return the final summary."""
        config = self._config
        logger.info(
            "Simulation started: arrival_rate=%s workers=%d queue_size=%d %s ticks=%d "
            "timeout=%d retry_probability=%s spike=%s",
            config.arrival_rate,
            config.workers,
            config.queue_size,
            self._queue.discipline.value,
            config.simulation_ticks,
            config.timeout,
            config.retry_probability,
            config.simulate_spike,
        )

        wall_start = time.perf_counter()
        interval = config.progress_interval
        while not self.is_finished:
            self.tick()
            if self._state.tick % interval == 0:
                logger.debug(
                    "Tick %d: total=%d failed=%d queue_depth=%d busy_workers=%d",
                    self._state.tick,
                    self._state.total_requests,
                    self._state.failed_requests,
                    len(self._queue),
                    self.busy_workers,
                )

        summary = self.summarize(wall_clock_seconds=time.perf_counter() - wall_start)
        if summary.total_requests == 0:
            logger.warning("Simulation finished without creating any request")
        logger.info(
            "Simulation finished: %s (total=%d failed=%d)",
            summary.failure_rate_line(),
            summary.total_requests,
            summary.failed_requests,
        )
        return summary

    def summarize(self, wall_clock_seconds: float = 0.0) -> SimulationSummary:
        """Snapshot the current counters as a SimulationSummary."""
        state = self._state
        return SimulationSummary(
            ticks=state.tick,
            total_requests=state.total_requests,
            failed_requests=state.failed_requests,
            rejected_requests=state.rejected_requests,
            timed_out_requests=state.timed_out_requests,
            completed_requests=state.completed_requests,
            retried_requests=state.retried_requests,
            peak_queue_depth=self._queue.stats.peak_depth,
            final_queue_depth=len(self._queue),
            busy_workers=self.busy_workers,
            discipline=self._queue.discipline.value,
            wall_clock_seconds=wall_clock_seconds,
        )
