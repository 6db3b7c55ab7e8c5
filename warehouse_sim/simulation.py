"""Discrete-event simulation of packages routed between warehouses."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Optional, TextIO

from .events import Event, EventKind, EventQueue, Package
from .warehouse import Warehouse


class SimulationError(RuntimeError):
    """Raised when the simulation input cannot be read or is malformed."""


def find_route(
    adjacency: Sequence[Sequence[int]], origin: int, destination: int
) -> list[int]:
    """Shortest path from ``origin`` to ``destination`` by breadth-first search.

    The path includes both ends. If ``destination`` cannot be reached, the
    result holds only ``destination``.
    """
    count = len(adjacency)
    predecessor: list[Optional[int]] = [None] * count
    visited = [False] * count
    visited[origin] = True
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        if current == destination:
            break
        for neighbour, linked in enumerate(adjacency[current]):
            if linked == 1 and not visited[neighbour]:
                visited[neighbour] = True
                predecessor[neighbour] = current
                queue.append(neighbour)

    path: list[int] = []
    node: Optional[int] = destination
    while node is not None:
        path.append(node)
        node = predecessor[node]
    path.reverse()
    return path


class _Tokens:
    """Whitespace-separated reader over the input text."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise SimulationError("Erro: entrada incompleta.") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise SimulationError(f"Erro: valor invalido '{token}' na entrada.") from None


class Simulation:
    """Reads a scenario and replays package storage, transport and delivery."""

    def __init__(self, text: str, out: Optional[TextIO] = None) -> None:
        self._out = out if out is not None else sys.stdout
        self.capacity = 0
        self.latency = 0
        self.interval = 0
        self.removal_cost = 0
        self.adjacency: list[list[int]] = []
        self.warehouses: list[Warehouse] = []
        self.total_packages = 0
        self.delivered = 0
        self._queue: Optional[EventQueue] = None

        self._read_input(text)

        if self.total_packages > 0 and self._queue:
            first = self._queue.pop()
            self._queue.push(first)
            self._schedule_initial_transports(first.time)

    @classmethod
    def from_file(cls, path, out: Optional[TextIO] = None) -> "Simulation":
        """Build a simulation from the scenario stored at ``path``."""
        try:
            text = Path(path).read_text()
        except OSError:
            raise SimulationError(
                f"Erro: Nao foi possivel abrir o arquivo '{path}'."
            ) from None
        return cls(text, out)

    def _emit(self, line: str) -> None:
        print(line, file=self._out)

    def _read_input(self, text: str) -> None:
        tokens = _Tokens(text)
        self.capacity = tokens.integer()
        self.latency = tokens.integer()
        self.interval = tokens.integer()
        self.removal_cost = tokens.integer()
        count = tokens.integer()
        if count <= 0:
            return

        self.adjacency = [[tokens.integer() for _ in range(count)] for _ in range(count)]
        self.warehouses = [Warehouse(i, count) for i in range(count)]
        self.total_packages = tokens.integer()
        self._queue = EventQueue(self.total_packages * 2 + count * count * 2 + 100)

        for index in range(self.total_packages):
            time = tokens.integer()
            tokens.word()
            tokens.integer()
            tokens.word()
            origin = tokens.integer()
            tokens.word()
            destination = tokens.integer()
            for warehouse in (origin, destination):
                if not 0 <= warehouse < count:
                    raise SimulationError(
                        f"Erro: armazem {warehouse} inexistente no pacote {index}."
                    )
            package = Package(index, origin, destination, time)
            package.route = find_route(self.adjacency, origin, destination)
            self._queue.push(Event(time, EventKind.PACKAGE_ARRIVES, package, origin, -1))

    def _schedule_initial_transports(self, first_arrival: int) -> None:
        assert self._queue is not None
        start = first_arrival + self.interval
        for origin, row in enumerate(self.adjacency):
            for destination, linked in enumerate(row):
                if linked == 1:
                    self._queue.push(
                        Event(start, EventKind.START_TRANSPORT, None, origin, destination)
                    )

    def run(self) -> None:
        """Process events until every package is delivered or discarded."""
        while self.delivered < self.total_packages:
            if not self._queue:
                break
            event = self._queue.pop()
            if event.kind == EventKind.PACKAGE_ARRIVES:
                self._handle_arrival(event)
            else:
                self._handle_transport(event)

    def _handle_arrival(self, event: Event) -> None:
        package = event.package
        assert package is not None
        here = event.origin
        package.posted_at = event.time

        if here == package.destination:
            self._emit(f"{event.time:07d} pacote {package.id:03d} entregue em {here:03d}")
            self.delivered += 1
        elif package.route_pos >= len(package.route):
            # No route exists: the package can never arrive.
            self.total_packages -= 1
        else:
            self._emit(self.warehouses[here].store(package))

    def _handle_transport(self, event: Event) -> None:
        assert self._queue is not None
        origin, destination, now = event.origin, event.destination, event.time
        section = self.warehouses[origin].section(destination)

        if section:
            ranked = sorted(reversed(section), key=lambda p: (p.posted_at, p.id))
            target_count = min(self.capacity, len(ranked))
            targets = {p.id for p in ranked[:target_count]}

            removed: list[Package] = []
            found = 0
            while found < target_count and section:
                package = section.pop()
                removed.append(package)
                if package.id in targets:
                    found += 1

            log_time = now
            to_transport: list[Package] = []
            to_restore: list[Package] = []
            for package in removed:
                log_time += self.removal_cost
                self._emit(
                    f"{log_time:07d} pacote {package.id:03d} removido de {origin:03d} "
                    f"na secao {destination:03d}"
                )
                (to_transport if package.id in targets else to_restore).append(package)

            for package in reversed(to_transport):
                self._emit(
                    f"{log_time:07d} pacote {package.id:03d} em transito de "
                    f"{origin:03d} para {destination:03d}"
                )
                self._queue.push(
                    Event(
                        log_time + self.latency,
                        EventKind.PACKAGE_ARRIVES,
                        package,
                        destination,
                        -1,
                    )
                )

            for package in reversed(to_restore):
                self._emit(
                    f"{log_time:07d} pacote {package.id:03d} rearmazenado em "
                    f"{origin:03d} na secao {destination:03d}"
                )
                section.append(package)

        if self.delivered < self.total_packages:
            self._queue.push(
                Event(
                    now + self.interval,
                    EventKind.START_TRANSPORT,
                    None,
                    origin,
                    destination,
                )
            )