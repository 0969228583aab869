"""
Read and write rustdoc implementor payloads.

rustdoc writes one payload per trait to
`<doc>/implementors/<crate>/<module path>/trait.<Name>.js`:

    (function() {var implementors = {};
    implementors["bytes"] = ["impl <a ...>DerefMut</a> for ...",];
    ...
                if (window.register_implementors) {
                    window.register_implementors(implementors);
                } else {
                    window.pending_implementors = implementors;
                }
    })()

Fragment strings are JSON-compatible string literals. Decoded fragments
are returned as-is; nothing here inspects the markup inside them.
"""

import json
import re
from pathlib import Path
from typing import Iterator

from .table import Table, build_table

PAYLOAD_HEADER = "(function() {var implementors = {};\n"

PAYLOAD_TRAILER = (
    "\n"
    "            if (window.register_implementors) {\n"
    "                window.register_implementors(implementors);\n"
    "            } else {\n"
    "                window.pending_implementors = implementors;\n"
    "            }\n"
    "        \n"
    "})()\n"
)

DECLARATION_PATTERN = re.compile(r'var\s+implementors\s*=\s*\{\s*\}\s*;')

# implementors["group"] = ["fragment", ...,];
ASSIGNMENT_PATTERN = re.compile(
    r'^implementors\[("(?:[^"\\]|\\.)*")\]\s*=\s*\[(.*)\];\s*$'
)

TRAIT_FILE_PATTERN = re.compile(r'^trait\.([A-Za-z_][A-Za-z0-9_]*)\.js$')


class PayloadFormatError(ValueError):
    """Raised when text is not a readable implementors payload."""


def parse_payload(text: str) -> Table:
    """
    Parse payload text into a table.

    Groups keep file order; a group assigned twice takes its last value.
    """
    if not DECLARATION_PATTERN.search(text):
        raise PayloadFormatError("Missing 'var implementors = {};' declaration")

    entries = []
    # Split on "\n" only: fragments may carry U+2028, U+2029 or U+0085.
    for line_num, line in enumerate(text.split("\n"), start=1):
        line = line.strip()
        if not line.startswith("implementors["):
            continue

        match = ASSIGNMENT_PATTERN.match(line)
        if not match:
            raise PayloadFormatError(f"Line {line_num}: malformed assignment: {line[:80]}")

        group_literal, body = match.groups()
        body = body.strip()
        if body.endswith(","):
            body = body[:-1]

        try:
            group = json.loads(group_literal)
            fragments = json.loads(f"[{body}]")
        except json.JSONDecodeError as e:
            raise PayloadFormatError(f"Line {line_num}: {e}") from e

        if not all(isinstance(fragment, str) for fragment in fragments):
            raise PayloadFormatError(f"Line {line_num}: fragments must be strings")

        entries.append((group, fragments))

    return build_table(entries)


def render_payload(table: Table) -> str:
    """Render a table in the rustdoc payload layout."""
    lines = [PAYLOAD_HEADER]
    for group, fragments in table.items():
        items = "".join(
            json.dumps(fragment, ensure_ascii=False) + "," for fragment in fragments
        )
        lines.append(f"implementors[{json.dumps(group, ensure_ascii=False)}] = [{items}];\n")
    lines.append(PAYLOAD_TRAILER)
    return "".join(lines)


def read_payload(path: Path) -> Table:
    """Read and parse a payload file."""
    return parse_payload(path.read_text(encoding="utf-8"))


def trait_path_from_file(path: Path, doc_dir: Path | None = None) -> str:
    """
    Derive the trait path from a payload file location.

    E.g., implementors/core/ops/deref/trait.DerefMut.js
          -> core::ops::deref::DerefMut

    With doc_dir, the path must lie in <doc_dir>/implementors. Without it,
    the first `implementors` component is taken as the payload root, so
    modules that are themselves named `implementors` stay in the path.
    """
    path = Path(path)
    if doc_dir is not None:
        path = path.relative_to(doc_dir)

    parts = list(path.parts)
    if "implementors" not in parts or (doc_dir is not None and parts[0] != "implementors"):
        raise ValueError(f"Not inside an implementors/ directory: {path}")

    base = parts.index("implementors")
    module_parts = parts[base + 1:-1]

    match = TRAIT_FILE_PATTERN.match(parts[-1])
    if not match or not module_parts:
        raise ValueError(f"Not a trait payload file: {path}")

    return "::".join([*module_parts, match.group(1)])


def payload_relpath(trait_path: str) -> Path:
    """Inverse of trait_path_from_file, relative to the doc directory."""
    *module_parts, name = trait_path.split("::")
    if not module_parts:
        raise ValueError(f"Trait path needs a module: {trait_path}")
    return Path("implementors", *module_parts, f"trait.{name}.js")


def iter_payload_files(doc_dir: Path) -> Iterator[Path]:
    """Yield payload files under <doc_dir>/implementors in sorted order."""
    implementors_dir = doc_dir / "implementors"
    if not implementors_dir.exists():
        return
    for js_file in sorted(implementors_dir.rglob("trait.*.js")):
        if TRAIT_FILE_PATTERN.match(js_file.name):
            yield js_file
