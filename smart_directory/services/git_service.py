"""Repository root discovery through the git CLI."""

import logging
import os
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_GIT_TIMEOUT = 1.0


class GitService:
    """Answers working tree questions for a directory by shelling out to git."""

    def __init__(self, timeout: float = DEFAULT_GIT_TIMEOUT) -> None:
        """Initialize the GitService."""
        self._timeout = timeout

    def _run_git(self, args: list[str], cwd: Path) -> str:
        """Run a git command and return stdout, or an empty string on failure."""
        try:
            result = subprocess.run(
                ["git", *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except (subprocess.TimeoutExpired, OSError) as e:
            logger.warning(f"Git command failed: {e}")
            return ""

        if result.returncode != 0:
            logger.debug(f"git {' '.join(args)} exited {result.returncode} in {cwd}")
            return ""
        return result.stdout.strip()

    def find_repo_root(self, path: str | Path) -> Path | None:
        """Return the top of the working tree containing `path`, if any."""
        cwd = Path(path)
        if not os.path.isdir(cwd):
            logger.debug(f"Not a directory: {cwd}")
            return None

        toplevel = self._run_git(["rev-parse", "--show-toplevel"], cwd)
        if not toplevel:
            return None

        repo_root = Path(toplevel)
        logger.debug(f"Repository root: {repo_root}")
        return repo_root


def find_repo_root(path: str | Path, timeout: float = DEFAULT_GIT_TIMEOUT) -> Path | None:
    """Locate the working tree root for `path` with a one-off GitService."""
    return GitService(timeout=timeout).find_repo_root(path)
