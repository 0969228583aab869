"""
Implementor tables.

A table maps a group name (the crate that provides the impls) to the
ordered markup fragments rustdoc rendered for each impl. Fragments are
opaque: they are stored and handed on exactly as given.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Sequence

Fragment = str
Table = Mapping[str, tuple[Fragment, ...]]


def build_table(entries: Iterable[tuple[str, Sequence[Fragment]]]) -> Table:
    """
    Build a read-only table from (group, fragments) pairs.

    Entry order is kept. A group listed twice keeps its first position
    and takes the fragments of its last occurrence.
    """
    table: dict[str, tuple[Fragment, ...]] = {}
    for group, fragments in entries:
        table[group] = tuple(fragments)
    return MappingProxyType(table)


def table_to_dict(table: Table) -> dict[str, list[Fragment]]:
    """Convert a table into plain JSON-ready dicts and lists."""
    return {group: list(fragments) for group, fragments in table.items()}


def count_fragments(table: Table) -> int:
    return sum(len(fragments) for fragments in table.values())
