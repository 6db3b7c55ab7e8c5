"""Warehouses that keep packages in one stack per next-hop section."""

from __future__ import annotations

from .events import Package


class Warehouse:
    """A warehouse with a LIFO section for every possible next warehouse."""

    def __init__(self, warehouse_id: int, warehouse_count: int) -> None:
        self.id = warehouse_id
        self._sections: list[list[Package]] = [[] for _ in range(warehouse_count)]

    def store(self, package: Package) -> str:
        """Put the package on the section of its next hop and return the log line."""
        next_hop = package.route[package.route_pos]
        self._sections[next_hop].append(package)
        package.route_pos += 1
        return (
            f"{package.posted_at:07d} pacote {package.id:03d} "
            f"armazenado em {self.id:03d} na secao {next_hop:03d}"
        )

    def section(self, destination: int) -> list[Package]:
        """The stack of packages waiting to go to ``destination``; top is last."""
        return self._sections[destination]

    def is_empty(self) -> bool:
        """True when no section holds a package."""
        return not any(self._sections)