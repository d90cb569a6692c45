"""Per-tick trace of a simulation run.

TickRecorder collects one TickSample per tick when passed to a Simulation.
Samples stay in memory; ``to_dataframe`` and ``bucket`` turn them into
pandas frames for analysis of how a collapse unfolds over time.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields

import pandas as pd


@dataclass(frozen=True)
class TickSample:
    """What happened during one tick.

    Attributes:
        tick: Tick number, starting at 0.
        arrivals: Requests created this tick, retries included.
        completions: Requests that finished work this tick.
        rejections: Requests refused at admission.
        timeouts: Requests that finished after their deadline.
        retries: Failures resubmitted this tick.
        queue_depth: Queue length at the end of the tick.
        busy_workers: Busy workers at the end of the tick.
        incoming_requests: Arrival accumulator at the end of the tick.
    """

    tick: int
    arrivals: int
    completions: int
    rejections: int
    timeouts: int
    retries: int
    queue_depth: int
    busy_workers: int
    incoming_requests: float

    @property
    def failures(self) -> int:
        return self.rejections + self.timeouts


COLUMNS = [f.name for f in fields(TickSample)]

# Columns summed per bucket; the remaining gauges are averaged.
_COUNTER_COLUMNS = ["arrivals", "completions", "rejections", "timeouts", "retries"]
_GAUGE_COLUMNS = ["queue_depth", "busy_workers", "incoming_requests"]


class TickRecorder:
    """In-memory collector of TickSample records.

    Args:
        every: Keep one sample out of every ``every`` ticks (1 keeps all).
    """

    def __init__(self, every: int = 1) -> None:
        if every < 1:
            raise ValueError(f"every must be >= 1, got {every}")
        self._every = every
        self._samples: list[TickSample] = []

    def record(self, sample: TickSample) -> None:
        if sample.tick % self._every == 0:
            self._samples.append(sample)

    @property
    def samples(self) -> list[TickSample]:
        return self._samples

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per recorded tick, indexed by tick."""
        frame = pd.DataFrame([astuple(s) for s in self._samples], columns=COLUMNS)
        frame["failures"] = frame["rejections"] + frame["timeouts"]
        return frame.set_index("tick")

    def bucket(self, window_ticks: int) -> pd.DataFrame:
        """Aggregate samples into fixed windows of ``window_ticks`` ticks.

        Counters are summed and gauges averaged. The index is the first tick
        of each window.
        """
        if window_ticks < 1:
            raise ValueError(f"window_ticks must be >= 1, got {window_ticks}")

        frame = self.to_dataframe()
        if frame.empty:
            return frame

        window_start = (frame.index // window_ticks) * window_ticks
        grouped = frame.groupby(window_start)
        result = grouped[_COUNTER_COLUMNS + ["failures"]].sum()
        result[_GAUGE_COLUMNS] = grouped[_GAUGE_COLUMNS].mean()
        result.index.name = "window_start"
        return result
