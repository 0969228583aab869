"""
Publication of implementor tables.

A table is delivered once, at load time:

- If a registration hook is installed, it is called synchronously with
  the complete table.
- Otherwise the table is parked in the slot's pending channel, replacing
  whatever was there, for a consumer to pick up later.

The hook is trusted. Anything it raises propagates to the caller.
"""

from types import ModuleType
from typing import Callable

from .channel import PendingChannel
from .registry import ImplementorRegistry
from .table import Table

RegisterHook = Callable[[Table], object]


class PublicationSlot:
    """An optional registration hook plus the pending channel behind it."""

    def __init__(self, hook: RegisterHook | None = None) -> None:
        self.hook = hook
        self.pending = PendingChannel()


_process_slot = PublicationSlot()


def process_slot() -> PublicationSlot:
    """Get the process-wide publication slot."""
    return _process_slot


def install_hook(hook: RegisterHook, slot: PublicationSlot | None = None) -> None:
    (slot or _process_slot).hook = hook


def remove_hook(slot: PublicationSlot | None = None) -> None:
    (slot or _process_slot).hook = None


def publish(table: Table, slot: PublicationSlot | None = None) -> None:
    """Hand a table to the slot's hook, or park it if no hook is installed."""
    if slot is None:
        slot = _process_slot

    if slot.hook is not None:
        slot.hook(table)
    else:
        slot.pending.put(table)


def load(
    module: ModuleType,
    registry: ImplementorRegistry | None = None,
    slot: PublicationSlot | None = None,
) -> Table:
    """
    Build a generated module's table and deliver it.

    With a registry, the table is submitted under the module's TRAIT_PATH
    and no slot is touched. Without one, it goes through publish().
    """
    table = module.build_table()
    if registry is not None:
        registry.submit(module.TRAIT_PATH, table)
    else:
        publish(table, slot)
    return table
