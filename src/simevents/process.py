"""
Arrival processes - the event generators.

Each process has a name and a single operation, ``generate_events()``, which
returns a freshly built list of ``Event`` records for that name. The set of
arrival models is closed:

1. **SingletonProcess**: one event at a fixed time.

2. **PeriodicProcess**: a fixed number of events at a fixed cadence.

3. **StochasticProcess**: a renewal process with exponential inter-arrival
   times and exponential durations, cut off at a horizon. Continuous samples
   are truncated to integers, so zero durations and zero gaps can occur.

Parameters are checked once, in the constructor, and rejected with
``InvalidParameterError``. A process that was constructed never raises from
``generate_events()``.

Sampler lifetime
----------------
A ``StochasticProcess`` builds its two samplers when it is constructed and
keeps them. Every call to ``generate_events()`` continues drawing from them,
so repeated calls on one instance give different streams, while two instances
created with the same ``seed`` give identical streams. The two samplers of
one process are seeded separately, and no sampler is shared between
instances.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from simevents.errors import InvalidParameterError
from simevents.event import Event
from simevents.random import ExponentialStream, Sampler, seed_pairs

logger = logging.getLogger(__name__)


def _check_name(name: object) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidParameterError(f"name must be a non-empty string (got {name!r})")
    return name


def _check_count(label: str, value: object) -> int:
    """Non-negative integer check; bools are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{label} must be an integer (got {value!r})")
    if value < 0:
        raise InvalidParameterError(f"{label} must be >= 0 (got {value})")
    return value


def _check_mean(label: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{label} must be a number (got {value!r})")
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(f"{label} must be positive and finite (got {value!r})")
    return float(value)


class Process(ABC):
    """
    A named source of events.

    Subclasses implement ``generate_events()``. Every event they return
    carries this process's name, and the returned list belongs to the caller.
    """

    def __init__(self, name: str) -> None:
        self._name = _check_name(name)

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def generate_events(self) -> list[Event]:
        """Build and return this process's events in emission order."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class SingletonProcess(Process):
    """Exactly one event at ``arrival``."""

    def __init__(self, name: str, duration: int, arrival: int) -> None:
        super().__init__(name)
        self._duration = _check_count("duration", duration)
        self._arrival = _check_count("arrival", arrival)

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def arrival(self) -> int:
        return self._arrival

    def generate_events(self) -> list[Event]:
        return [Event(self._name, self._arrival, self._duration)]


class PeriodicProcess(Process):
    """
    ``num_repetitions`` events spaced ``interarrival_time`` apart.

    Event ``i`` arrives at ``first_arrival + i * interarrival_time``; all
    events share the same duration.
    """

    def __init__(
        self,
        name: str,
        duration: int,
        interarrival_time: int,
        first_arrival: int,
        num_repetitions: int,
    ) -> None:
        super().__init__(name)
        self._duration = _check_count("duration", duration)
        self._interarrival_time = _check_count("interarrival_time", interarrival_time)
        self._first_arrival = _check_count("first_arrival", first_arrival)
        self._num_repetitions = _check_count("num_repetitions", num_repetitions)

    @property
    def duration(self) -> int:
        return self._duration

    @property
    def interarrival_time(self) -> int:
        return self._interarrival_time

    @property
    def first_arrival(self) -> int:
        return self._first_arrival

    @property
    def num_repetitions(self) -> int:
        return self._num_repetitions

    def generate_events(self) -> list[Event]:
        return [
            Event(self._name, self._first_arrival + i * self._interarrival_time, self._duration)
            for i in range(self._num_repetitions)
        ]


class StochasticProcess(Process):
    """
    Renewal process with exponential gaps and durations.

    Arrivals start at ``first_arrival`` and continue while the arrival time is
    strictly below ``end_time``. The horizon bounds arrivals only: the last
    event may run past ``end_time``.

    Args:
        name: process name copied into every event.
        mean_duration: mean of the exponential duration distribution.
        mean_interarrival_time: mean of the exponential gap distribution.
        first_arrival: arrival time of the first event.
        end_time: exclusive upper bound on arrival times.
        seed: seeds the default streams, each with its own seed pair;
            ``None`` uses OS entropy. Only the streams that are not
            injected use it, so with both samplers injected it has no effect.
        duration_sampler: replaces the default duration stream.
        interarrival_sampler: replaces the default gap stream.

    Injected samplers must return non-negative values. There is no cap on
    the number of events; a sampler that keeps returning values below 1
    keeps the loop running.
    """

    def __init__(
        self,
        name: str,
        mean_duration: float,
        mean_interarrival_time: float,
        first_arrival: int,
        end_time: int,
        *,
        seed: int | None = None,
        duration_sampler: Sampler | None = None,
        interarrival_sampler: Sampler | None = None,
    ) -> None:
        super().__init__(name)
        self._mean_duration = _check_mean("mean_duration", mean_duration)
        self._mean_interarrival_time = _check_mean("mean_interarrival_time", mean_interarrival_time)
        self._first_arrival = _check_count("first_arrival", first_arrival)
        self._end_time = _check_count("end_time", end_time)

        if duration_sampler is None or interarrival_sampler is None:
            (duration_mg, duration_lcg), (gap_mg, gap_lcg) = seed_pairs(seed, 2)
            if duration_sampler is None:
                duration_sampler = ExponentialStream(self._mean_duration, 0, duration_mg, duration_lcg)
            if interarrival_sampler is None:
                interarrival_sampler = ExponentialStream(self._mean_interarrival_time, 0, gap_mg, gap_lcg)
        self._duration_sampler = duration_sampler
        self._interarrival_sampler = interarrival_sampler

    @property
    def mean_duration(self) -> float:
        return self._mean_duration

    @property
    def mean_interarrival_time(self) -> float:
        return self._mean_interarrival_time

    @property
    def first_arrival(self) -> int:
        return self._first_arrival

    @property
    def end_time(self) -> int:
        return self._end_time

    @property
    def duration_sampler(self) -> Sampler:
        return self._duration_sampler

    @property
    def interarrival_sampler(self) -> Sampler:
        return self._interarrival_sampler

    def generate_events(self) -> list[Event]:
        events: list[Event] = []
        arrival_time = self._first_arrival

        while arrival_time < self._end_time:
            duration = int(self._duration_sampler())
            events.append(Event(self._name, arrival_time, duration))
            arrival_time += int(self._interarrival_sampler())

        logger.debug(
            "%s: %d events in [%d, %d)", self._name, len(events), self._first_arrival, self._end_time
        )
        return events
