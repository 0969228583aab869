"""Single-slot handoff for tables published before any consumer exists."""

from .table import Table


class PendingChannel:
    """
    Queue of capacity 1 with a replace-on-put policy.

    A put never merges with the held table: the newest table wins.
    """

    def __init__(self) -> None:
        self._table: Table | None = None

    def put(self, table: Table) -> None:
        self._table = table

    def peek(self) -> Table | None:
        return self._table

    def take(self) -> Table | None:
        """Return the held table and empty the channel."""
        table, self._table = self._table, None
        return table

    def __bool__(self) -> bool:
        return self._table is not None

    def __repr__(self) -> str:
        state = "empty" if self._table is None else f"{len(self._table)} group(s)"
        return f"PendingChannel({state})"
