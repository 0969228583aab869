"""
Consumer-owned registry of implementor tables.

The consumer builds a registry first and passes it to the loader, which
submits one table per trait. Nothing here probes process-wide state.
"""

from typing import Iterator

from .channel import PendingChannel
from .table import Table


class ImplementorRegistry:
    """Implementor tables keyed by trait path, in submission order."""

    def __init__(self) -> None:
        self._tables: dict[str, Table] = {}

    def submit(self, trait_path: str, table: Table) -> None:
        """Register the table for a trait, replacing any earlier one."""
        self._tables[trait_path] = table

    def get(self, trait_path: str) -> Table:
        """Raises KeyError if nothing was submitted for the trait."""
        return self._tables[trait_path]

    def traits(self) -> list[str]:
        return list(self._tables)

    def drain(self, channel: PendingChannel, trait_path: str) -> bool:
        """
        Adopt a table parked in a pending channel.

        Returns True if the channel held a table, False if it was empty.
        """
        table = channel.take()
        if table is None:
            return False
        self.submit(trait_path, table)
        return True

    def __contains__(self, trait_path: object) -> bool:
        return trait_path in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)
