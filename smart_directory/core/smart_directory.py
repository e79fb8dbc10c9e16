"""Build and render the smart directory prompt segment."""

import logging

from rich.text import Text

from smart_directory.config import Settings
from smart_directory.core.collision import SiblingLister
from smart_directory.core.formatter import FormatError, StringFormatter
from smart_directory.core.path_segments import convert_path_sep
from smart_directory.core.path_utils import (
    truncate,
    truncate_after_repo_root,
    truncate_before_root_dir,
)
from smart_directory.models.segments import PathSegments, RenderContext
from smart_directory.services.readonly import is_readonly_dir

logger = logging.getLogger(__name__)

MODULE_NAME = "smart_directory"


def build_segments(
    context: RenderContext,
    home_symbol: str,
    use_logical_path: bool = True,
    lister: SiblingLister | None = None,
) -> PathSegments:
    """Compress the display directory into before-root, root and after-root regions.

    Without a usable repository root the whole compressed path lands in
    `after_root_path`.
    """
    display_dir = context.logical_dir if use_logical_path else context.current_dir
    repo_root = context.repo_root

    if repo_root is not None and repo_root.name:
        # git reports physical roots; a symlinked logical path may not sit under it
        if not display_dir.is_relative_to(repo_root):
            display_dir = context.current_dir

        if display_dir.is_relative_to(repo_root):
            return PathSegments(
                before_root_path=truncate_before_root_dir(
                    repo_root.parent, context.home, home_symbol, lister
                ),
                repo_root=repo_root.name,
                after_root_path=truncate_after_repo_root(display_dir, repo_root, lister),
            )

        logger.debug(f"{display_dir} is outside repository root {repo_root}")

    return PathSegments(
        after_root_path=truncate(display_dir, context.home, home_symbol, lister),
    )


def module(
    context: RenderContext,
    settings: Settings,
    lister: SiblingLister | None = None,
) -> Text | None:
    """Render the segment for `context`, or None when disabled or misconfigured."""
    if settings.DISABLED:
        return None

    logger.debug(f"Home dir: {context.home}")
    logger.debug(f"Physical dir: {context.current_dir}")
    logger.debug(f"Logical dir: {context.logical_dir}")

    segments = build_segments(context, settings.HOME_SYMBOL, settings.USE_LOGICAL_PATH, lister)
    if settings.USE_OS_PATH_SEP:
        segments = segments.map(convert_path_sep)

    display_format = settings.REPO_ROOT_FORMAT if segments.is_repo else settings.FORMAT
    styles = {
        "style": settings.STYLE,
        "read_only_style": settings.READ_ONLY_STYLE,
        "before_repo_root_style": settings.before_repo_root_style,
        "repo_root_style": settings.repo_root_style,
        "after_repo_root_style": settings.after_repo_root_style,
    }
    variables: dict[str, str | None] = {
        "path": segments.after_root_path,
        "before_root_path": segments.before_root_path,
        "repo_root": segments.repo_root,
        "after_root_path": segments.after_root_path,
        "read_only": settings.READ_ONLY if is_readonly_dir(context.current_dir) else None,
    }

    try:
        return StringFormatter(display_format).render(variables, styles)
    except FormatError as e:
        logger.warning(f"Error in module `{MODULE_NAME}`:\n{e}")
        return None
