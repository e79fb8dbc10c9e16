"""Read-only directory detection."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def is_readonly_dir(path: str | Path) -> bool:
    """Check whether the current user cannot write to `path`.

    A directory that does not exist is not reported as read-only.
    """
    directory = Path(path)
    if not directory.exists():
        logger.debug(f"Directory does not exist: {directory}")
        return False
    return not os.access(directory, os.W_OK)
