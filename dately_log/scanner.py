"""Discovers archive files sitting next to the active log."""

import os

from dately_log.naming import is_archive_name


def list_archives(directory: str, exclude=()) -> list[str]:
    """Return paths of archive files in *directory*, in no particular order.

    An empty *directory* means the working directory; the returned paths are
    then bare names, matching what rotation produces for a bare base path.
    Subdirectories and anything in *exclude* are skipped. A missing or empty
    directory gives ``[]``.
    """
    excluded = {os.path.abspath(p) for p in exclude}
    archives = []
    try:
        entries = os.scandir(directory or ".")
    except (FileNotFoundError, NotADirectoryError):
        return []
    with entries:
        for entry in entries:
            if not is_archive_name(entry.name):
                continue
            try:
                if entry.is_dir():
                    continue
            except OSError:
                continue
            path = os.path.join(directory, entry.name)
            if os.path.abspath(path) in excluded:
                continue
            archives.append(path)
    return archives
