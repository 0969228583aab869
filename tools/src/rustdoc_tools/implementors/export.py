"""
JSON export of implementor tables.

Export layout:

    {
      "source": "<doc dir or URL>",
      "extraction_date": "YYYY-MM-DD",
      "total_traits": N,
      "total_groups": N,
      "traits": {
        "core::ops::deref::DerefMut": {"bytes": ["<fragment>", ...], ...}
      }
    }

Exports are validated against EXPORT_SCHEMA before they are written.
"""

from datetime import date
from typing import Any, Mapping

import jsonschema

from .table import Table, table_to_dict

EXPORT_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Rustdoc implementors export",
    "type": "object",
    "required": ["source", "extraction_date", "total_traits", "total_groups", "traits"],
    "properties": {
        "source": {"type": "string"},
        "extraction_date": {"type": "string", "pattern": r"^\d{4}-\d{2}-\d{2}$"},
        "total_traits": {"type": "integer", "minimum": 0},
        "total_groups": {"type": "integer", "minimum": 0},
        "traits": {
            "type": "object",
            "propertyNames": {"pattern": r"^[A-Za-z_][A-Za-z0-9_]*(::[A-Za-z_][A-Za-z0-9_]*)+$"},
            "additionalProperties": {
                "type": "object",
                "additionalProperties": {
                    "type": "array",
                    "items": {"type": "string"},
                },
            },
        },
    },
    "additionalProperties": False,
}


def build_export(tables: Mapping[str, Table], source: str) -> dict[str, Any]:
    """Build the export document for tables keyed by trait path."""
    return {
        "source": source,
        "extraction_date": str(date.today()),
        "total_traits": len(tables),
        "total_groups": sum(len(table) for table in tables.values()),
        "traits": {
            trait_path: table_to_dict(table)
            for trait_path, table in tables.items()
        },
    }


def validate_export(data: Any) -> list[str]:
    """Validate an export document. Returns list of errors."""
    errors = []
    validator = jsonschema.Draft202012Validator(EXPORT_SCHEMA)

    for error in validator.iter_errors(data):
        path = " -> ".join(str(p) for p in error.absolute_path) if error.absolute_path else "root"
        errors.append(f"{path}: {error.message}")

    if isinstance(data, dict) and isinstance(data.get("traits"), dict):
        traits = data["traits"]
        if data.get("total_traits") != len(traits):
            errors.append("total_traits: does not match number of traits")
        groups = sum(len(table) for table in traits.values() if isinstance(table, dict))
        if data.get("total_groups") != groups:
            errors.append("total_groups: does not match number of groups")

    return errors
