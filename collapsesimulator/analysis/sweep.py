"""Parameter sweeps over independent simulation runs.

Every combination of the grid values becomes one SimulationConfig derived
from a base configuration. Runs share nothing but the base config, so a
sweep is just a loop of independent simulations in one process.

Example::

    base = SimulationConfig(arrival_rate=0.19, simulation_ticks=100_000, seed=1)
    frame = run_sweep(base, {"lifo": [False, True], "retry_probability": [0.0, 0.5, 1.0]})
    print(frame[["lifo", "retry_probability", "failure_rate"]])
"""

from __future__ import annotations

import dataclasses
import itertools
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import pandas as pd

from collapsesimulator.config import SimulationConfig
from collapsesimulator.core.simulation import Simulation
from collapsesimulator.distributions.random_source import RandomSource

logger = logging.getLogger(__name__)


def expand_grid(base: SimulationConfig, grid: Mapping[str, Iterable[Any]]) -> list[SimulationConfig]:
    """Build one validated config per combination of grid values.

    Raises:
        ValueError: If a grid key is not a SimulationConfig field or a
            combination is invalid.
    """
    names = list(grid)
    known = {f.name for f in dataclasses.fields(base)}
    unknown = [name for name in names if name not in known]
    if unknown:
        raise ValueError(f"unknown sweep parameters: {', '.join(unknown)}")

    values = [list(grid[name]) for name in names]
    return [base.replace(**dict(zip(names, combo))) for combo in itertools.product(*values)]


def run_sweep(
    base: SimulationConfig,
    grid: Mapping[str, Iterable[Any]],
    *,
    repeats: int = 1,
    random_factory: Callable[[SimulationConfig], RandomSource] | None = None,
) -> pd.DataFrame:
    """Run every grid combination ``repeats`` times.

    With a seeded base config, repeat ``i`` uses ``seed + i`` so repeats
    differ while the whole sweep stays reproducible.

    Args:
        base: Configuration the grid values are applied to.
        grid: Parameter name to the values to try.
        repeats: Runs per combination.
        random_factory: Builds the random source for each run. Defaults to
            the simulation's own NumpyRandomSource.

    Returns:
        One row per run: the swept parameters, ``repeat`` and the summary
        fields (``failure_rate`` included).
    """
    if repeats < 1:
        raise ValueError(f"repeats must be >= 1, got {repeats}")

    configs = expand_grid(base, grid)
    logger.info("Running sweep: %d combinations x %d repeats", len(configs), repeats)

    rows: list[dict[str, Any]] = []
    for config in configs:
        for repeat in range(repeats):
            run_config = config
            if config.seed is not None:
                run_config = config.replace(seed=config.seed + repeat)
            random = random_factory(run_config) if random_factory is not None else None

            summary = Simulation(run_config, random=random).run()

            row = {name: getattr(run_config, name) for name in grid}
            row["repeat"] = repeat
            row.update(summary.to_dict())
            rows.append(row)

    return pd.DataFrame(rows)
