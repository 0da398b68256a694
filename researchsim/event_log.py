"""Ordered record of everything that happened in a scenario."""

from __future__ import annotations

from typing import Iterator, List

from .schemas import CollectEvent, Event, MoveEvent


class EventLog:
    """Append-only event list with running totals.

    Totals are updated as events arrive:
    - ``entities_collected``: number of CollectEvents
    - ``points_earned``: sum of the collected entities' point values
    - ``tiles_traversed``: sum of the Manhattan length of every MoveEvent
    """

    def __init__(self) -> None:
        self._events: List[Event] = []
        self.entities_collected = 0
        self.points_earned = 0
        self.tiles_traversed = 0

    def append(self, event: Event) -> None:
        if isinstance(event, CollectEvent):
            self.entities_collected += 1
            self.points_earned += event.collected.size.points
        elif isinstance(event, MoveEvent):
            self.tiles_traversed += event.origin.manhattan(event.target)
        self._events.append(event)

    @property
    def events(self) -> List[Event]:
        """Copy of the events in the order they were appended."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def __str__(self) -> str:
        return "\n".join(str(event) for event in self._events)
