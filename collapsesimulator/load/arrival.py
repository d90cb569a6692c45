"""Compounding arrival process.

Each tick one normal draw with mean ``rate`` and standard deviation
``rate / 4`` is added to a fractional accumulator. Whole requests are then
drained from the accumulator one unit at a time while it stays positive, so
fractional rates are preserved across ticks instead of being rounded away.

The raw draw is added even when negative; a negative accumulator simply
suppresses arrivals until later draws bring it back above zero.

Retries re-enter through the same accumulator: ``inject`` adds exactly one
unit, which the next drain turns into a fresh request.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collapsesimulator.core.state import SimulationState
    from collapsesimulator.distributions.random_source import RandomSource

logger = logging.getLogger(__name__)


class ArrivalProcess:
    """Converts a continuous arrival rate into whole requests per tick.

    The accumulator lives on the SimulationState so that one tick can be
    inspected or replayed in isolation.

    Args:
        rate: Mean arrivals per tick. Must be > 0.
        random: Source of normal draws.
    """

    def __init__(self, rate: float, random: RandomSource):
        if not rate > 0:
            raise ValueError(f"rate must be > 0, got {rate}")
        self._rate = rate
        self._stddev = rate / 4.0
        self._random = random

    @property
    def rate(self) -> float:
        return self._rate

    def accumulate(self, state: SimulationState) -> float:
        """Add this tick's draw to the accumulator and return the draw."""
        draw = self._random.normal(self._rate, self._stddev)
        state.incoming_requests += draw
        return draw

    @staticmethod
    def take(state: SimulationState) -> bool:
        """Consume one whole request from the accumulator if one is pending."""
        if state.incoming_requests > 0.0:
            state.incoming_requests -= 1.0
            return True
        return False

    @staticmethod
    def inject(state: SimulationState) -> None:
        """Re-inject one retried request."""
        state.incoming_requests += 1.0
