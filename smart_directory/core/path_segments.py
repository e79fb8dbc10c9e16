"""Split filesystem paths into their named components."""

import os
from pathlib import Path, PurePath

# Markers that never name a directory of their own
_SKIPPED_PARTS = frozenset({"", ".", ".."})


def get_path_dirs(path: str | PurePath) -> list[str]:
    """Return the normal components of a path, from root to leaf.

    The anchor (root or drive prefix) and any `.`/`..` markers are dropped, so
    `/` yields an empty list.
    """
    pure = PurePath(path)
    parts = pure.parts[1:] if pure.anchor else pure.parts
    return [part for part in parts if part not in _SKIPPED_PARTS]


def is_empty_path(path: str | PurePath) -> bool:
    """Check whether a path carries no location at all (`""` or `.`)."""
    return str(path) in ("", ".")


def convert_path_sep(path: str) -> str:
    """Swap `/` for the platform separator (a no-op on POSIX)."""
    if os.sep == "/":
        return path
    return path.replace("/", os.sep)


def anchor_of(path: str | PurePath) -> Path:
    """Return the anchor of a path as a concrete Path, defaulting to `/`."""
    return Path(PurePath(path).anchor or "/")
