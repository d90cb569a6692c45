"""FIFO vs LIFO queueing under increasing load, with and without retries.

FIFO spreads the queueing penalty over every request, so once the queue
is long enough every served request misses its deadline. LIFO concentrates
the penalty on the requests stuck at the bottom of the stack and keeps
serving fresh requests on time.

https://dzone.com/articles/fifo-vs-lifo-queueing-improving-service-availabili
"""

from __future__ import annotations

from collapsesimulator import SimulationConfig, run_sweep

if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="FIFO vs LIFO failure rates across arrival rates")
    parser.add_argument("--ticks", type=int, default=50_000, help="Simulation length in ticks")
    parser.add_argument("--repeats", type=int, default=3, help="Runs per combination")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (-1 for random)")
    args = parser.parse_args()

    seed = None if args.seed == -1 else args.seed
    base = SimulationConfig(arrival_rate=0.1, simulation_ticks=args.ticks, seed=seed)

    frame = run_sweep(
        base,
        {
            "arrival_rate": [0.15, 0.19, 0.21, 0.25],
            "lifo": [False, True],
            "retry_probability": [0.0, 0.5],
        },
        repeats=args.repeats,
    )

    table = frame.pivot_table(
        index=["arrival_rate", "retry_probability"],
        columns="discipline",
        values="failure_rate",
        aggfunc="mean",
    )
    print("Mean failure rate (%) by discipline")
    print(table.round(2).to_string())
