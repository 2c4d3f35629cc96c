"""
Replaying a generated stream inside a SimPy environment.

``replay`` is a SimPy process body: it holds until the arrival time of each
event and then hands the event to a callback. What the callback does with it
(queueing, resource requests, bookkeeping in a ``TimingTable``) is up to the
caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Generator, Iterable

import simpy

from simevents.errors import InvalidParameterError
from simevents.event import Event

if TYPE_CHECKING:
    from simpy import Environment

logger = logging.getLogger(__name__)

Handler = Callable[[Event], None]


def replay(env: Environment, events: Iterable[Event], handler: Handler) -> Generator[simpy.Event, None, int]:
    """
    Deliver ``events`` to ``handler`` at their arrival times.

    Events must be ordered by arrival time (as returned by ``merge_events``
    or by any single process). Returns the number of events delivered.
    """
    delivered = 0
    for event in events:
        delay = event.arrival_time - env.now
        if delay < 0:
            raise InvalidParameterError(
                f"event {event} arrives at {event.arrival_time}, before current time {env.now}"
            )
        if delay > 0:
            yield env.timeout(delay)
        logger.debug("t=%s deliver %s", env.now, event)
        handler(event)
        delivered += 1
    return delivered


def start_replay(env: Environment, events: Iterable[Event], handler: Handler) -> simpy.Process:
    """Register ``replay`` with ``env`` and return the SimPy process."""
    return env.process(replay(env, events, handler))
