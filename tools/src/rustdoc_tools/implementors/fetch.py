#!/usr/bin/env python3
"""
fetch-implementors: Download one rustdoc implementors payload and export it.

Usage:
    uv run fetch-implementors --url https://docs.rs/.../implementors/core/ops/deref/trait.DerefMut.js
    uv run fetch-implementors --url URL --output data/implementors/deref_mut.json

The trait path is taken from the URL path, which must end in
implementors/<module path>/trait.<Name>.js.
"""

import argparse
import sys
from pathlib import PurePosixPath
from urllib.parse import urlparse

import httpx

from rustdoc_tools.shared import (
    get_implementors_data_dir,
    get_project_root,
    resolve_path,
    save_json,
    validate_path_in_project,
    PathOutsideProjectError,
)

from .export import build_export, validate_export
from .payload import PayloadFormatError, parse_payload, trait_path_from_file
from .table import Table

REQUEST_TIMEOUT = 30.0


def fetch_payload(url: str, client: httpx.Client | None = None) -> tuple[str, Table]:
    """
    Fetch a payload and parse it.

    Returns (trait_path, table). Raises httpx.HTTPError on transport or
    status errors, PayloadFormatError on unreadable content, and
    ValueError when the URL does not name a trait payload.
    """
    if client is None:
        with httpx.Client(follow_redirects=True, timeout=REQUEST_TIMEOUT) as owned:
            return fetch_payload(url, client=owned)

    trait_path = trait_path_from_file(PurePosixPath(urlparse(url).path))

    response = client.get(url)
    response.raise_for_status()

    return trait_path, parse_payload(response.text)


def default_output_name(trait_path: str) -> str:
    """E.g., core::ops::deref::DerefMut -> core.ops.deref.DerefMut.json"""
    return trait_path.replace("::", ".") + ".json"


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Download one rustdoc implementors payload and export it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    uv run fetch-implementors --url https://example.org/doc/implementors/core/ops/deref/trait.DerefMut.js
        """,
    )
    parser.add_argument(
        "--url", "-u",
        type=str,
        required=True,
        help="URL of a trait.<Name>.js payload",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output JSON file (default: data/implementors/<trait>.json)",
    )

    args = parser.parse_args()
    root = get_project_root()

    print(f"Fetching {args.url}...")
    try:
        trait_path, table = fetch_payload(args.url)
    except httpx.HTTPError as e:
        print(f"ERROR: Request failed: {e}", file=sys.stderr)
        return 1
    except PayloadFormatError as e:
        print(f"ERROR: Unreadable payload: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"ERROR: Bad URL: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            output_path = validate_path_in_project(resolve_path(args.output, root), root)
        except PathOutsideProjectError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
    else:
        output_path = get_implementors_data_dir(root) / default_output_name(trait_path)

    data = build_export({trait_path: table}, source=args.url)
    errors = validate_export(data)
    if errors:
        print("ERROR: Export failed schema validation:", file=sys.stderr)
        for error in errors:
            print(f"  {error}", file=sys.stderr)
        return 1

    save_json(data, output_path)
    print(f"  {trait_path}: {len(table)} group(s)")
    print(f"Saved: {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
