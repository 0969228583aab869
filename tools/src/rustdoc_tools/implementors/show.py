#!/usr/bin/env python3
"""
show-implementors: Load the generated implementor tables and print them.

Usage:
    uv run show-implementors                                   # All traits
    uv run show-implementors --trait core::ops::deref::DerefMut
    uv run show-implementors --json                            # JSON export
    uv run show-implementors --payload                         # rustdoc .js form
"""

import argparse
import json
import sys

from . import TABLE_MODULES
from .export import build_export
from .payload import render_payload
from .publish import load
from .registry import ImplementorRegistry


def load_registry(trait_paths: list[str]) -> ImplementorRegistry:
    """Load the named generated tables into a fresh registry."""
    registry = ImplementorRegistry()
    for trait_path in trait_paths:
        load(TABLE_MODULES[trait_path], registry=registry)
    return registry


def print_registry(registry: ImplementorRegistry) -> None:
    print("=" * 70)
    print("IMPLEMENTOR TABLES")
    print("=" * 70)
    print()

    for trait_path in registry.traits():
        table = registry.get(trait_path)
        print(f"{trait_path}:")
        for group, fragments in table.items():
            print(f"  {group}: {len(fragments)} impl(s)")
        print()


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Load the generated implementor tables and print them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    uv run show-implementors
    uv run show-implementors --trait core::ops::deref::DerefMut --json
    uv run show-implementors --payload
        """,
    )
    parser.add_argument(
        "--trait", "-t",
        type=str,
        choices=sorted(TABLE_MODULES),
        default=None,
        help="Show only one trait (default: all)",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON export instead of a summary",
    )
    output.add_argument(
        "--payload",
        action="store_true",
        help="Print each table in rustdoc payload form",
    )

    args = parser.parse_args()

    trait_paths = [args.trait] if args.trait else list(TABLE_MODULES)
    registry = load_registry(trait_paths)

    if args.json:
        tables = {trait_path: registry.get(trait_path) for trait_path in registry}
        print(json.dumps(build_export(tables, source="generated"), indent=2, ensure_ascii=False))
    elif args.payload:
        for trait_path in registry:
            sys.stdout.write(render_payload(registry.get(trait_path)))
    else:
        print_registry(registry)

    return 0


if __name__ == "__main__":
    sys.exit(main())
