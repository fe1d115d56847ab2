"""Inspector logic: describe archives and run one-off retention sweeps."""

import os
from dataclasses import dataclass
from datetime import datetime, timedelta

from dately_log.naming import EPOCH, decode_archive_time
from dately_log.retention import enforce_retention, sort_archives
from dately_log.scanner import list_archives


@dataclass(frozen=True)
class ArchiveInfo:
    name: str
    size: int
    created: datetime | None  # None when the name does not decode


def describe_archives(log_dir: str, exclude=()) -> list[ArchiveInfo]:
    """Archives in *log_dir*, oldest first."""
    infos = []
    for path in sort_archives(list_archives(log_dir, exclude=exclude)):
        try:
            size = os.path.getsize(path)
        except OSError:
            continue
        created = decode_archive_time(path)
        infos.append(ArchiveInfo(
            name=os.path.basename(path),
            size=size,
            created=None if created == EPOCH else created,
        ))
    return infos


def sweep(log_dir: str, max_files: int, max_age_days: int, exclude=(), time_func=None) -> list[str]:
    """Run a single retention sweep; returns deleted file names."""
    deleted = enforce_retention(log_dir, max_files, timedelta(days=max_age_days),
                                time_func=time_func, exclude=exclude)
    return [os.path.basename(p) for p in deleted]


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
