"""
Shared utilities for the rustdoc tools.

Modules:
- paths: Project root and common path utilities
- io: JSON I/O utilities
"""

from .paths import (
    ROOT_ENV_VAR,
    get_project_root,
    get_cache_dir,
    get_doc_dir,
    get_data_dir,
    get_implementors_data_dir,
    get_implementors_export_path,
    resolve_path,
    validate_path_in_project,
    PathOutsideProjectError,
)

from .io import (
    save_json,
)

__all__ = [
    # paths
    "ROOT_ENV_VAR",
    "get_project_root",
    "get_cache_dir",
    "get_doc_dir",
    "get_data_dir",
    "get_implementors_data_dir",
    "get_implementors_export_path",
    "resolve_path",
    "validate_path_in_project",
    "PathOutsideProjectError",
    # io
    "save_json",
]
