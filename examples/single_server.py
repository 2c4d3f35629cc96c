"""
Single server example.

Demonstrates:
- Mixing singleton, periodic and stochastic arrival processes
- Replaying the merged stream in SimPy
- First-come first-served service on a simpy.Resource
- Start and wait times kept in a TimingTable
- Variance statistic for waiting times

Run with --seed N for a reproducible run.
"""

from __future__ import annotations

import argparse

import simpy

from simevents import (
    Event,
    PeriodicProcess,
    SingletonProcess,
    StochasticProcess,
    TimingTable,
    Variance,
    generate_all,
    start_replay,
)


def run_simulation(seed: int | None = None) -> None:
    processes = [
        SingletonProcess("backup", 40, 0),
        PeriodicProcess("cron", 3, 50, 10, 20),
        StochasticProcess("web", 4.0, 6.0, 0, 1000, seed=seed),
    ]
    events = generate_all(processes)

    env = simpy.Environment()
    server = simpy.Resource(env, capacity=1)
    table = TimingTable()

    def serve(event: Event):
        with server.request() as req:
            yield req
            table.record(event, env.now)
            yield env.timeout(event.duration)

    start_replay(env, events, lambda e: env.process(serve(e)))
    env.run()

    waits: dict[str, Variance] = {}
    for event, timing in table:
        waits.setdefault(event.process_name, Variance()).set_value(timing.wait_time)

    print(f"Total number of events {len(events)}")
    print(f"Simulation finished at {env.now}")
    for name, stat in waits.items():
        print(f"{name:8s} events={stat.number_of_samples:4d} mean wait={stat.mean:8.3f} max wait={stat.max:6.0f}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Single server fed by generated arrivals")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()
    run_simulation(args.seed)


if __name__ == "__main__":
    main()
