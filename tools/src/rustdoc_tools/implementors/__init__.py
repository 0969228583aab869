"""
Rustdoc Implementor Tables

This package builds and publishes "implementors of trait X" tables, the
per-trait lists rustdoc renders on each trait page:

- table: Table type and builder
- deref_mut: Generated table for core::ops::deref::DerefMut
- publish: Hook-or-pending publication, and the registry loader
- registry: Consumer-owned registry of tables
- payload: Read/write rustdoc implementors/**/trait.*.js payloads

Tools:
- extract-implementors: Export tables from a rustdoc output tree to JSON
- fetch-implementors: Download one payload and export its table
- show-implementors: Load the generated tables and print them
"""

from . import deref_mut
from .channel import PendingChannel
from .publish import (
    PublicationSlot,
    install_hook,
    load,
    process_slot,
    publish,
    remove_hook,
)
from .registry import ImplementorRegistry
from .table import Table, build_table

# Generated table modules, keyed by trait path
TABLE_MODULES = {
    deref_mut.TRAIT_PATH: deref_mut,
}

__all__ = [
    "TABLE_MODULES",
    "Table",
    "build_table",
    "PendingChannel",
    "PublicationSlot",
    "ImplementorRegistry",
    "install_hook",
    "remove_hook",
    "process_slot",
    "publish",
    "load",
]
