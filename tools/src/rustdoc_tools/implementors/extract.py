#!/usr/bin/env python3
"""
extract-implementors: Export implementor tables from rustdoc output to JSON.

Scans <doc-dir>/implementors/**/trait.*.js, parses each payload and writes
one combined export keyed by trait path.

Usage:
    uv run extract-implementors                          # Default doc dir
    uv run extract-implementors --doc-dir target/doc     # Explicit doc dir
    uv run extract-implementors --force                  # Overwrite output

Output:
    data/implementors/implementors.json
"""

import argparse
import sys
from pathlib import Path

from rustdoc_tools.shared import (
    get_doc_dir,
    get_implementors_export_path,
    get_project_root,
    resolve_path,
    save_json,
    validate_path_in_project,
    PathOutsideProjectError,
)

from .export import build_export, validate_export
from .payload import PayloadFormatError, iter_payload_files, read_payload, trait_path_from_file
from .table import Table, count_fragments


def extract_tables(doc_dir: Path) -> dict[str, Table]:
    """
    Parse every payload under a rustdoc output directory.

    Raises FileNotFoundError if the directory has no implementors/ tree,
    PayloadFormatError (naming the file) for an unreadable payload, and
    ValueError for a payload file that does not name a trait.
    """
    if not (doc_dir / "implementors").exists():
        raise FileNotFoundError(
            f"No implementors/ directory in {doc_dir}\n"
            f"Run 'cargo doc' first, or pass --doc-dir."
        )

    tables = {}
    for js_file in iter_payload_files(doc_dir):
        try:
            table = read_payload(js_file)
        except PayloadFormatError as e:
            raise PayloadFormatError(f"{js_file}: {e}") from e
        tables[trait_path_from_file(js_file, doc_dir)] = table
    return tables


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Export implementor tables from rustdoc output to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    uv run extract-implementors
    uv run extract-implementors --doc-dir target/doc
    uv run extract-implementors --output data/implementors/deref.json --force
        """,
    )
    parser.add_argument(
        "--doc-dir", "-d",
        type=str,
        default=None,
        help="rustdoc output directory (default: cache/doc)",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output JSON file (default: data/implementors/implementors.json)",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite output if it exists",
    )

    args = parser.parse_args()
    root = get_project_root()

    doc_dir = resolve_path(args.doc_dir, root) if args.doc_dir else get_doc_dir(root)
    if args.output:
        try:
            output_path = validate_path_in_project(resolve_path(args.output, root), root)
        except PathOutsideProjectError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
    else:
        output_path = get_implementors_export_path(root)

    if output_path.exists() and not args.force:
        print(f"Output exists: {output_path}")
        print("Use --force to re-extract")
        return 0

    print(f"Scanning {doc_dir}...")
    try:
        tables = extract_tables(doc_dir)
    except (FileNotFoundError, ValueError) as e:
        # PayloadFormatError is a ValueError
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for trait_path, table in tables.items():
        print(f"  {trait_path}: {len(table)} group(s), {count_fragments(table)} impl(s)")

    data = build_export(tables, source=str(doc_dir))
    errors = validate_export(data)
    if errors:
        print("ERROR: Export failed schema validation:", file=sys.stderr)
        for error in errors:
            print(f"  {error}", file=sys.stderr)
        return 1

    save_json(data, output_path)
    print(f"\nSaved: {output_path}")

    print(f"\n{'='*60}")
    print("EXTRACTION COMPLETE")
    print(f"{'='*60}")
    print(f"Traits: {data['total_traits']}")
    print(f"Groups: {data['total_groups']}")
    print(f"Impls:  {sum(count_fragments(t) for t in tables.values())}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
