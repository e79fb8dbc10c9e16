"""Shared helpers for smart_directory tests."""

from collections.abc import Sequence
from pathlib import Path


class FakeSiblingLister:
    """In-memory SiblingLister keyed by parent directory."""

    def __init__(self, tree: dict[str, list[str]] | None = None) -> None:
        self.tree = {Path(parent): names for parent, names in (tree or {}).items()}
        self.calls: list[Path] = []

    def list_sibling_names(self, directory: Path) -> Sequence[str]:
        self.calls.append(directory)
        names = self.tree.get(directory.parent, [])
        return [name for name in names if name != directory.name]


def make_dirs(root: Path, *relative: str) -> None:
    """Create each relative directory (and its parents) under root."""
    for rel in relative:
        (root / rel).mkdir(parents=True, exist_ok=True)
