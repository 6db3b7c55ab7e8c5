"""Packages, events and the time-ordered event queue that drives the simulation."""

from __future__ import annotations

import heapq
import itertools
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class EventKind(IntEnum):
    """Kinds of events; at equal times, lower values are processed first."""

    PACKAGE_ARRIVES = 0
    START_TRANSPORT = 1


@dataclass
class Package:
    """A package travelling along a precomputed route of warehouses."""

    id: int
    origin: int
    destination: int
    posted_at: int
    route: list[int] = field(default_factory=list)
    route_pos: int = 1


@dataclass
class Event:
    """A scheduled occurrence at a given time.

    For arrivals, ``origin`` is the warehouse the package arrives at and
    ``destination`` is -1. For transports, they are the two ends of the link.
    """

    time: int
    kind: EventKind
    package: Optional[Package] = None
    origin: int = -1
    destination: int = -1

    def sort_key(self) -> tuple[int, int, int, int]:
        """Key that orders events by time, kind, then package id or link ends."""
        if self.kind == EventKind.PACKAGE_ARRIVES:
            package_id = self.package.id if self.package is not None else -1
            return (self.time, int(self.kind), package_id, 0)
        return (self.time, int(self.kind), self.origin, self.destination)


class EventQueue:
    """Bounded min-priority queue of events.

    Events pushed while the queue is full are discarded with a warning on
    standard error.
    """

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._heap: list[tuple[tuple[int, int, int, int], int, Event]] = []
        self._counter = itertools.count()

    def push(self, event: Event) -> bool:
        """Schedule an event; return False if it was dropped for lack of room."""
        if len(self._heap) >= self.capacity:
            print(
                f"ALERTA: Fila de prioridades cheia! Capacidade = {self.capacity}. "
                "Evento descartado.",
                file=sys.stderr,
            )
            return False
        heapq.heappush(self._heap, (event.sort_key(), next(self._counter), event))
        return True

    def pop(self) -> Event:
        """Remove and return the earliest event."""
        if not self._heap:
            raise IndexError("pop from an empty event queue")
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)