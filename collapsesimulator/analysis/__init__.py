"""Post-run analysis helpers."""

from collapsesimulator.analysis.sweep import expand_grid, run_sweep

__all__ = ["expand_grid", "run_sweep"]
