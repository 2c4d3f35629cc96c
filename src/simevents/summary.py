"""Per-process statistics of a generated event stream."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from simevents.event import Event
from simevents.stats import Variance


@dataclass
class StreamSummary:
    """Counts and moments for the events of one process."""

    process_name: str
    durations: Variance = field(default_factory=Variance)
    gaps: Variance = field(default_factory=Variance)
    first_arrival: int | None = None
    last_arrival: int | None = None

    @property
    def count(self) -> int:
        return self.durations.number_of_samples

    def add(self, event: Event) -> None:
        """Fold in the next event of this process, in emission order."""
        if self.last_arrival is None:
            self.first_arrival = event.arrival_time
        else:
            self.gaps += event.arrival_time - self.last_arrival
        self.last_arrival = event.arrival_time
        self.durations += event.duration

    def __str__(self) -> str:
        lines = [
            f"Process           : {self.process_name}",
            f"Events            : {self.count}",
            f"First arrival     : {self.first_arrival}",
            f"Last arrival      : {self.last_arrival}",
            f"Mean duration     : {self.durations.mean:.4f}",
            f"Duration std dev  : {self.durations.std_dev:.4f}",
            f"Mean interarrival : {self.gaps.mean:.4f}",
            f"Interarrival var  : {self.gaps.variance:.4f}",
        ]
        return "\n".join(lines)


def summarize(events: Iterable[Event]) -> dict[str, StreamSummary]:
    """
    Summarize a stream by process name.

    Gaps are measured between consecutive events of the same process, so a
    merged stream gives the same result as each process's own list.
    """
    summaries: dict[str, StreamSummary] = {}
    for event in events:
        summary = summaries.get(event.process_name)
        if summary is None:
            summary = summaries[event.process_name] = StreamSummary(event.process_name)
        summary.add(event)
    return summaries
