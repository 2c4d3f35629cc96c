"""
simevents - arrival event generation for discrete-event simulation.

Processes produce lists of (process name, arrival time, duration) events
under deterministic single-shot, periodic and stochastic renewal models.
"""

from simevents.errors import ConfigError, InvalidParameterError
from simevents.event import Event, EventTiming, TimingTable
from simevents.merge import generate_all, merge_events
from simevents.process import PeriodicProcess, Process, SingletonProcess, StochasticProcess
from simevents.random import ExponentialStream, RandomStream, Sampler, reset_prng_cache, seed_pair, seed_pairs
from simevents.replay import replay, start_replay
from simevents.stats import Mean, Variance
from simevents.summary import StreamSummary, summarize

__version__ = "0.1.0"
__all__ = [
    # Events
    "Event",
    "EventTiming",
    "TimingTable",
    # Processes
    "Process",
    "SingletonProcess",
    "PeriodicProcess",
    "StochasticProcess",
    "generate_all",
    "merge_events",
    # Random
    "RandomStream",
    "ExponentialStream",
    "Sampler",
    "seed_pair",
    "seed_pairs",
    "reset_prng_cache",
    # Replay
    "replay",
    "start_replay",
    # Statistics
    "Mean",
    "Variance",
    "StreamSummary",
    "summarize",
    # Errors
    "InvalidParameterError",
    "ConfigError",
]
