"""Archive filename codec: ``app_YYYYMMDD_HHMMSS.log``."""

import os
from datetime import datetime

from dately_log.paths import join_directory

ARCHIVE_PREFIX = "app_"
ARCHIVE_SUFFIX = ".log"
ARCHIVE_GLOB = f"{ARCHIVE_PREFIX}*{ARCHIVE_SUFFIX}"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

# Returned for names that do not decode; sorts before every real archive.
EPOCH = datetime(1970, 1, 1)


def encode_archive_name(directory: str, timestamp: datetime) -> str:
    """Build the archive path for *timestamp* inside *directory*."""
    name = (
        f"{ARCHIVE_PREFIX}{timestamp.year:04d}{timestamp.month:02d}{timestamp.day:02d}"
        f"_{timestamp.hour:02d}{timestamp.minute:02d}{timestamp.second:02d}{ARCHIVE_SUFFIX}"
    )
    return join_directory(directory, name)


def is_archive_name(filename: str) -> bool:
    name = os.path.basename(filename)
    return name.startswith(ARCHIVE_PREFIX) and name.endswith(ARCHIVE_SUFFIX)


def decode_archive_time(filename: str) -> datetime:
    """Extract the local timestamp embedded in an archive name.

    Returns EPOCH when the name does not follow the archive pattern.
    """
    name = os.path.basename(filename)
    if not is_archive_name(name):
        return EPOCH
    stamp = name[len(ARCHIVE_PREFIX):-len(ARCHIVE_SUFFIX)]
    try:
        return datetime.strptime(stamp, TIMESTAMP_FORMAT)
    except ValueError:
        return EPOCH
