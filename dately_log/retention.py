"""Count- and age-based retention over the on-disk archive set."""

import logging
import os
from datetime import datetime, timedelta

from dately_log.errors import RetentionDeletionError
from dately_log.naming import decode_archive_time
from dately_log.scanner import list_archives
from dately_log.schedule import local_naive

logger = logging.getLogger(__name__)


def sort_archives(paths) -> list[str]:
    """Oldest first by embedded timestamp; undecodable names come first."""
    return sorted(paths, key=lambda p: (decode_archive_time(p), os.path.basename(p)))


def _delete(path: str) -> bool:
    try:
        os.remove(path)
    except OSError as e:
        err = RetentionDeletionError(path, e.strerror or str(e))
        logger.warning("Retention skipped: %s", err)
        return False
    return True


def enforce_retention(directory: str, max_files: int, max_age: timedelta,
                      time_func=None, exclude=()) -> list[str]:
    """Delete archives beyond *max_files* and older than *max_age*.

    The two rules are applied independently: an archive goes if either one
    selects it. ``max_files == 0`` disables the count rule. Failed deletions
    are logged and skipped. Returns the paths actually deleted.
    """
    now_func = time_func or datetime.now
    archives = sort_archives(list_archives(directory, exclude=exclude))
    deleted = []

    survivors = archives
    if max_files > 0 and len(archives) > max_files:
        excess = len(archives) - max_files
        for path in archives[:excess]:
            if _delete(path):
                deleted.append(path)
        survivors = archives[excess:]

    now = local_naive(now_func())
    for path in survivors:
        if now - decode_archive_time(path) > max_age:
            if _delete(path):
                deleted.append(path)

    if deleted:
        logger.info("Retention removed %d archive(s) from %s", len(deleted), directory or ".")
    return deleted
