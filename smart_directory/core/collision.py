"""Detect sibling directories whose shortened names would collide.

Every probe re-reads the parent directory. Sibling sets change between prompt
renders, so nothing here is cached.
"""

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from smart_directory.core.shortener import shorten_dir


class SiblingLister(Protocol):
    """Lists the directories sharing a parent with a given directory."""

    def list_sibling_names(self, directory: Path) -> Sequence[str]:
        """Return sibling directory names, excluding `directory` itself."""
        ...


class FilesystemSiblingLister:
    """SiblingLister backed by a single `os.scandir` of the parent."""

    def list_sibling_names(self, directory: Path) -> Sequence[str]:
        name = directory.name
        parent = directory.parent
        if not name or parent == directory:
            return []

        siblings: list[str] = []
        try:
            with os.scandir(parent) as entries:
                for entry in entries:
                    if entry.name == name:
                        continue
                    try:
                        if entry.is_dir():
                            siblings.append(entry.name)
                    except OSError:
                        continue
        except OSError:
            # Unreadable or vanished parent: report no siblings
            return []

        return siblings


_default_lister = FilesystemSiblingLister()


def get_siblings(directory: str | Path, lister: SiblingLister | None = None) -> list[str]:
    """Return the names of directories next to `directory`."""
    active = lister or _default_lister
    return list(active.list_sibling_names(Path(directory)))


def has_sibling_collision(directory: str | Path, lister: SiblingLister | None = None) -> bool:
    """Check whether shortening `directory` would make it ambiguous.

    True when any sibling directory shortens to the same form as `directory`.
    A directory without a parent, or whose parent cannot be listed, never
    collides.
    """
    path = Path(directory)
    siblings = get_siblings(path, lister)
    if not siblings:
        return False

    shortened = shorten_dir(path.name)
    return any(shorten_dir(sibling) == shortened for sibling in siblings)
