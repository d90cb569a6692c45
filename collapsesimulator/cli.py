"""Command-line entry point.

    collapse-simulator --arrival_rate 0.19 --simulate_spike
    python -m collapsesimulator -r 0.19 --lifo --retry_probability 0.9

Prints a single ``Failure rate: X.XX%`` line. Invalid parameters terminate
the process before any simulation state is built.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from collapsesimulator import logging_config
from collapsesimulator.config import (
    DEFAULT_MEAN_LATENCY,
    DEFAULT_QUEUE_SIZE,
    DEFAULT_RETRY_PROBABILITY,
    DEFAULT_SIMULATION_TICKS,
    DEFAULT_TIMEOUT_TICKS,
    DEFAULT_WORKERS,
    SimulationConfig,
)
from collapsesimulator.core.simulation import Simulation

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="collapse-simulator",
        description="Queueing simulator: bounded queue, worker pool, timeouts and retries.",
    )
    parser.add_argument(
        "-r", "--arrival_rate", type=float, required=True,
        help="Rate at which new requests arrive per tick, must be > 0",
    )
    parser.add_argument(
        "-w", "--workers", type=int, default=DEFAULT_WORKERS,
        help="Number of workers to simulate",
    )
    parser.add_argument(
        "-t", "--timeout", type=int, default=DEFAULT_TIMEOUT_TICKS,
        help="Ticks before a request is considered timed out and failed; "
        "should exceed the mean latency for a meaningful simulation",
    )
    parser.add_argument(
        "--mean_latency", type=float, default=DEFAULT_MEAN_LATENCY,
        help="Mean request processing latency in ticks, must be > 0",
    )
    parser.add_argument(
        "--simulation_time", type=int, default=DEFAULT_SIMULATION_TICKS,
        help="Number of ticks to run the simulation",
    )
    parser.add_argument(
        "-q", "--queue_size", type=int, default=DEFAULT_QUEUE_SIZE,
        help="Size of the request queue",
    )
    parser.add_argument("--lifo", action="store_true", help="Serve the queue LIFO instead of FIFO")
    parser.add_argument(
        "--simulate_spike", action="store_true",
        help="Simulate a temporary 10x spike in request processing latency",
    )
    parser.add_argument(
        "--retry_probability", type=float, default=DEFAULT_RETRY_PROBABILITY,
        help="Probability a failed request is retried, between 0 and 1 inclusive",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: unseeded)")
    parser.add_argument(
        "--summary", action="store_true", help="Print the detailed run summary after the failure rate"
    )
    parser.add_argument(
        "--log-level", default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Enable console logging at this level (overrides CS_LOGGING)",
    )
    return parser


def parse_config(parser: argparse.ArgumentParser, args: argparse.Namespace) -> SimulationConfig:
    """Turn parsed arguments into a SimulationConfig, exiting on invalid values."""
    try:
        return SimulationConfig(
            arrival_rate=args.arrival_rate,
            workers=args.workers,
            timeout=args.timeout,
            mean_latency=args.mean_latency,
            simulation_ticks=args.simulation_time,
            queue_size=args.queue_size,
            lifo=args.lifo,
            simulate_spike=args.simulate_spike,
            retry_probability=args.retry_probability,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.seed is not None and args.seed < 0:
        parser.error(f"seed must be >= 0, got {args.seed}")

    if args.log_level is not None:
        logging_config.enable_console_logging(level=args.log_level)
    else:
        logging_config.configure_from_env()

    config = parse_config(parser, args)
    summary = Simulation(config).run()

    print(summary.failure_rate_line())
    if args.summary:
        print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
