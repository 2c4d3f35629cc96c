"""
Event records and the timing annotations a scheduler attaches to them.

``Event`` is a frozen value. Start and wait times are decided later by
whatever consumes the stream, so they are kept apart from the event in a
``TimingTable`` owned by that consumer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Event:
    """One arrival of a process, lasting ``duration`` time units."""

    process_name: str
    arrival_time: int
    duration: int


@dataclass
class EventTiming:
    """Scheduling outcome for one event."""

    start_time: int = 0
    wait_time: int = 0


class TimingTable:
    """
    Start/wait annotations keyed by event identity.

    Equal events (same name, arrival and duration) are still tracked
    separately; the table keeps a reference to every event it has seen.
    """

    def __init__(self) -> None:
        self._entries: dict[int, tuple[Event, EventTiming]] = {}

    def timing(self, event: Event) -> EventTiming:
        """Timing record for ``event``, created as (0, 0) on first access."""
        entry = self._entries.get(id(event))
        if entry is None:
            entry = (event, EventTiming())
            self._entries[id(event)] = entry
        return entry[1]

    def record(self, event: Event, start_time: int) -> EventTiming:
        """Set the start time of ``event`` and derive its wait time."""
        timing = self.timing(event)
        timing.start_time = start_time
        timing.wait_time = start_time - event.arrival_time
        return timing

    def __contains__(self, event: object) -> bool:
        entry = self._entries.get(id(event))
        return entry is not None and entry[0] is event

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Event, EventTiming]]:
        return iter(list(self._entries.values()))
