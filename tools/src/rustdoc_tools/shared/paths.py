"""
Project path utilities.

All tools resolve their inputs and outputs relative to the project root:

- cache/doc/           rustdoc output trees (the `doc/` dir cargo writes)
- data/implementors/   JSON exports of implementor tables

The root is taken from RUSTDOC_TOOLS_ROOT when set, otherwise it is the
nearest ancestor of the working directory holding pyproject.toml.
"""

import os
from pathlib import Path

ROOT_ENV_VAR = "RUSTDOC_TOOLS_ROOT"


class PathOutsideProjectError(ValueError):
    """Raised when a user-supplied path resolves outside the project root."""


def get_project_root(start: Path | None = None) -> Path:
    """Get the project root directory."""
    env_root = os.environ.get(ROOT_ENV_VAR)
    if env_root:
        return Path(env_root).resolve()

    current = (start or Path.cwd()).resolve()
    for candidate in [current, *current.parents]:
        if (candidate / "pyproject.toml").exists():
            return candidate

    return current


def get_cache_dir(root: Path | None = None) -> Path:
    if root is None:
        root = get_project_root()
    return root / "cache"


def get_doc_dir(root: Path | None = None) -> Path:
    """Get the default rustdoc output directory."""
    return get_cache_dir(root) / "doc"


def get_data_dir(root: Path | None = None) -> Path:
    if root is None:
        root = get_project_root()
    return root / "data"


def get_implementors_data_dir(root: Path | None = None) -> Path:
    """Get the directory JSON exports are written to."""
    return get_data_dir(root) / "implementors"


def get_implementors_export_path(root: Path | None = None) -> Path:
    """Get the default path of the combined implementors export."""
    return get_implementors_data_dir(root) / "implementors.json"


def resolve_path(path: str | Path, root: Path | None = None) -> Path:
    """
    Resolve a CLI path argument.

    Relative paths are taken relative to the project root, not the
    working directory, so tools behave the same from any subdirectory.
    """
    if root is None:
        root = get_project_root()
    path = Path(path)
    if not path.is_absolute():
        path = root / path
    return path.resolve()


def validate_path_in_project(path: Path, root: Path | None = None) -> Path:
    """
    Ensure a resolved path lies inside the project root.

    Raises PathOutsideProjectError otherwise.
    """
    if root is None:
        root = get_project_root()
    resolved = path.resolve()
    try:
        resolved.relative_to(root.resolve())
    except ValueError:
        raise PathOutsideProjectError(
            f"Path is outside the project root: {resolved}\n"
            f"Project root: {root}"
        ) from None
    return resolved
