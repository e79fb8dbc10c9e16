"""Path compression utilities for prompt display.

Intermediate directories are shortened to their first grapheme cluster unless a
sibling directory would shorten to the same thing. The last directory of a
displayed path is always kept whole.
"""

from pathlib import Path

from smart_directory.core.collision import SiblingLister, has_sibling_collision
from smart_directory.core.path_segments import anchor_of, get_path_dirs, is_empty_path
from smart_directory.core.shortener import shorten_dir

DEFAULT_HOME_SYMBOL = "~"


def _compress_dirs(
    path: str | Path,
    keep_last: bool,
    skip: int = 0,
    lister: SiblingLister | None = None,
) -> str:
    """Walk the components of `path`, shortening each one that is safe to shorten.

    The first `skip` components are never probed and stay out of the result.
    Every emitted component is prefixed with `/`.
    """
    dirs = get_path_dirs(path)
    last_index = len(dirs) - 1

    current_dir = anchor_of(path)
    compressed = ""
    for i, dir_name in enumerate(dirs):
        current_dir = current_dir / dir_name

        if i < skip:
            continue

        compressed += "/"

        # The current directory is always shown whole
        if keep_last and i == last_index:
            compressed += dir_name
            break

        if has_sibling_collision(current_dir, lister):
            compressed += dir_name
        else:
            compressed += shorten_dir(dir_name)

    return compressed


def _replace_home(
    compressed: str,
    path: str | Path,
    home: str | Path,
    home_symbol: str,
    lister: SiblingLister | None = None,
) -> str:
    """Swap the compressed form of `home` for `home_symbol` when under home."""
    if is_empty_path(home) or not Path(path).is_relative_to(home):
        return compressed
    return compressed.replace(shorten_path(home, lister), home_symbol, 1)


def shorten_path(path: str | Path, lister: SiblingLister | None = None) -> str:
    """Compress every component of a path, including the last one."""
    if is_empty_path(path):
        return ""

    if not get_path_dirs(path):
        return "/"

    return _compress_dirs(path, keep_last=False, lister=lister)


def truncate(
    path: str | Path,
    home: str | Path,
    home_symbol: str = DEFAULT_HOME_SYMBOL,
    lister: SiblingLister | None = None,
) -> str:
    """Compress a full path for display, keeping the last directory whole.

    Returns `home_symbol` for the home directory itself and replaces a leading
    home prefix with it otherwise. The root directory yields an empty string.
    """
    if is_empty_path(path):
        return ""

    if not is_empty_path(home) and Path(path) == Path(home):
        return home_symbol

    if not get_path_dirs(path):
        return ""

    truncated = _compress_dirs(path, keep_last=True, lister=lister)
    return _replace_home(truncated, path, home, home_symbol, lister)


def truncate_before_root_dir(
    path: str | Path,
    home: str | Path,
    home_symbol: str = DEFAULT_HOME_SYMBOL,
    lister: SiblingLister | None = None,
) -> str:
    """Compress the ancestors of a repository root.

    `path` is the parent of the root, so every component may be shortened. The
    result always ends with `/` so the root name can follow it directly.
    """
    if is_empty_path(path):
        return ""

    before_root = _compress_dirs(path, keep_last=False, lister=lister)
    before_root = _replace_home(before_root, path, home, home_symbol, lister)

    if before_root != "/":
        before_root += "/"

    return before_root


def truncate_after_repo_root(
    path: str | Path,
    repo_root: str | Path,
    lister: SiblingLister | None = None,
) -> str:
    """Compress the part of `path` below `repo_root`, keeping the last directory whole."""
    if Path(path) == Path(repo_root):
        return ""

    repo_root_length = len(get_path_dirs(repo_root))
    return _compress_dirs(path, keep_last=True, skip=repo_root_length, lister=lister)


truncate_full = truncate
truncate_before_root = truncate_before_root_dir
truncate_after_root = truncate_after_repo_root
