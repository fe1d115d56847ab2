"""Directory preparation and base-path splitting."""

import logging
import ntpath
import os

logger = logging.getLogger(__name__)


def ensure_directories(path: str) -> bool:
    """Create *path* and any missing parents.

    Returns True if the path exists as a directory afterwards (or is empty),
    False if some segment exists but is not a directory.
    """
    if not path:
        return True
    if os.path.exists(path):
        return os.path.isdir(path)

    parent = os.path.dirname(path.rstrip("/\\"))
    if parent and parent != path and not ensure_directories(parent):
        return False

    try:
        os.mkdir(path)
    except FileExistsError:
        # Lost a race with another creator; fine as long as it is a directory.
        return os.path.isdir(path)
    except OSError as e:
        logger.warning("Could not create directory %s: %s", path, e)
        return False
    return True


def split_directory_and_name(path: str) -> tuple[str, str]:
    """Split *path* into (directory, filename).

    Both ``/`` and ``\\`` are separators. A path without a separator has an
    empty directory; a trailing separator yields an empty filename and the
    directory of whatever precedes it.
    """
    if path.endswith(("/", "\\")):
        stripped = path.rstrip("/\\")
        if not stripped:
            return "", ""
        directory, _ = split_directory_and_name(stripped)
        return directory, ""
    return ntpath.split(path)


def join_directory(directory: str, name: str) -> str:
    """Append *name* to *directory*, adding ``/`` only when one is missing."""
    if directory and not directory.endswith(("/", "\\")):
        return f"{directory}/{name}"
    return f"{directory}{name}"
