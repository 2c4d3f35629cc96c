"""
Merging the output of several processes into a single stream.

The merged stream is ordered by arrival time. Events with equal arrival
times keep the order of their inputs, and within one input their emission
order.
"""

from __future__ import annotations

import logging
from itertools import chain
from operator import attrgetter
from typing import Iterable, Sequence

from simevents.event import Event
from simevents.process import Process

logger = logging.getLogger(__name__)

_by_arrival = attrgetter("arrival_time")


def merge_events(*streams: Sequence[Event]) -> list[Event]:
    """Stable merge of already generated event lists."""
    return sorted(chain.from_iterable(streams), key=_by_arrival)


def generate_all(processes: Iterable[Process]) -> list[Event]:
    """Generate every process once and merge the results."""
    streams = []
    for process in processes:
        events = process.generate_events()
        logger.debug("%r generated %d events", process, len(events))
        streams.append(events)
    return merge_events(*streams)
