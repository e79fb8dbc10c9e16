"""Models describing one render of the smart directory segment."""

from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, Field


class RenderContext(BaseModel):
    """Inputs gathered from the environment for a single render."""

    current_dir: Path = Field(..., description="Physical working directory")
    logical_dir: Path = Field(..., description="Directory as the shell reports it ($PWD)")
    home: Path
    repo_root: Path | None = Field(None, description="Top of the enclosing working tree")


class PathSegments(BaseModel):
    """The three display regions of a path.

    Outside a repository only `after_root_path` is filled and holds the whole
    compressed path.
    """

    before_root_path: str = ""
    repo_root: str = ""
    after_root_path: str = ""

    @property
    def is_repo(self) -> bool:
        return bool(self.before_root_path or self.repo_root)

    def map(self, func: Callable[[str], str]) -> "PathSegments":
        """Apply `func` to each region."""
        return PathSegments(
            before_root_path=func(self.before_root_path),
            repo_root=func(self.repo_root),
            after_root_path=func(self.after_root_path),
        )
