"""Append-only log writer with daily and size-based rotation plus retention."""

import errno
import logging
import os
import threading
from dataclasses import replace
from datetime import datetime, timedelta

from dately_log.archive_queue import ArchiveQueue
from dately_log.config import (
    DEFAULT_MAX_AGE,
    DEFAULT_MAX_SIZE,
    Config,
    RotationConfig,
    validate_max_age,
    validate_max_files,
    validate_max_size,
    validate_rotation,
)
from dately_log.errors import DirectoryCreationError, ReopenError, RotationRenameError
from dately_log.file_helper import FileEventHandlers, FileHelper
from dately_log.naming import encode_archive_name
from dately_log.paths import ensure_directories, join_directory, split_directory_and_name
from dately_log.retention import enforce_retention, sort_archives
from dately_log.scanner import list_archives
from dately_log.schedule import (
    is_day_boundary,
    local_naive,
    next_rotation_deadline,
    should_rotate,
)

logger = logging.getLogger(__name__)


class NullLock:
    """Lock that does nothing, for callers that already serialize access."""

    def acquire(self, blocking=True, timeout=-1):
        return True

    def release(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class DatelyLogWriter:
    """Writes rendered records to one active file and rotates it into archives.

    The active file is rotated before a write when local midnight has passed
    or when the write would push it past ``max_size``. Rotated files are
    renamed to ``app_YYYYMMDD_HHMMSS.log`` next to the active file, and the
    archive set is pruned by count and by age after each rotation, at
    construction, and when either limit changes.

    Every public method runs on the caller's thread under ``lock``.
    """

    def __init__(self, base_filename: str, max_age: timedelta = DEFAULT_MAX_AGE,
                 max_size: int = DEFAULT_MAX_SIZE, max_files: int = 0,
                 truncate: bool = False, lock=None, time_func=None,
                 encoding: str = "utf-8",
                 event_handlers: FileEventHandlers | None = None):
        self._config = validate_rotation(RotationConfig(
            max_age=max_age, max_size=max_size, max_files=max_files, truncate=truncate,
        ))
        self._lock = lock if lock is not None else threading.Lock()
        self._time_func = time_func or datetime.now
        self._encoding = encoding

        self._base_filename = base_filename
        self._directory, self._base_name = split_directory_and_name(base_filename)
        if not ensure_directories(self._directory):
            raise DirectoryCreationError(f"cannot create log directory {self._directory}")

        self._file = FileHelper(event_handlers)
        self._file.open(self._base_filename, self._config.truncate)
        self._rotation_deadline = next_rotation_deadline(self._now())
        self._current_size = self._file.size()

        self._archives = ArchiveQueue(0)
        if self._config.max_files > 0:
            self._init_archive_queue()

        # Sweep once now; a process that never runs past midnight would otherwise never prune.
        self._clean_old_files()

    @classmethod
    def from_config(cls, config: Config, **kwargs) -> "DatelyLogWriter":
        rotation = config.rotation
        return cls(
            config.base_filename,
            max_age=rotation.max_age,
            max_size=rotation.max_size,
            max_files=rotation.max_files,
            truncate=rotation.truncate,
            **kwargs,
        )

    # -- properties ---------------------------------------------------------

    @property
    def filename(self) -> str:
        """Path of the file currently receiving writes."""
        with self._lock:
            return self._file.filename

    @property
    def directory(self) -> str:
        return self._directory

    @property
    def base_name(self) -> str:
        return self._base_name

    @property
    def config(self) -> RotationConfig:
        return self._config

    @property
    def current_size(self) -> int:
        return self._current_size

    @property
    def rotation_deadline(self) -> datetime:
        return self._rotation_deadline

    @property
    def archives(self) -> list[str]:
        """Archives tracked since startup, oldest first (empty when max_files is 0)."""
        with self._lock:
            return self._archives.to_list()

    # -- writing ------------------------------------------------------------

    def write(self, data, timestamp: datetime | None = None) -> str | None:
        """Append one rendered record. Returns the archive path if a rotation occurred.

        *data* is bytes, or str encoded with the writer's encoding. *timestamp*
        is the record time used for the day-boundary check; defaults to now.
        """
        if isinstance(data, str):
            data = data.encode(self._encoding)
        with self._lock:
            now = local_naive(timestamp) if timestamp else self._now()
            boundary = is_day_boundary(now, self._rotation_deadline)
            new_size = self._current_size + len(data)

            rotated = None
            if should_rotate(now, len(data), self._current_size,
                             self._config.max_size, self._rotation_deadline):
                rotated = self._rotate()
                new_size = self._current_size + len(data)

            self._file.write(data)
            self._current_size = new_size

            if boundary:
                self._rotation_deadline = next_rotation_deadline(max(now, self._now()))
            if rotated is not None:
                self._clean_old_files()
            return rotated

    def flush(self):
        with self._lock:
            self._file.flush()

    def close(self):
        with self._lock:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    # -- reconfiguration ----------------------------------------------------

    def set_max_size(self, max_size: int):
        validate_max_size(max_size)
        with self._lock:
            self._config = replace(self._config, max_size=max_size)

    def set_max_files(self, max_files: int):
        validate_max_files(max_files)
        with self._lock:
            self._config = replace(self._config, max_files=max_files)
            if max_files > 0:
                self._init_archive_queue()
            else:
                self._archives = ArchiveQueue(0)
            self._clean_old_files()

    def set_max_age(self, max_age: timedelta):
        validate_max_age(max_age)
        with self._lock:
            self._config = replace(self._config, max_age=max_age)
            self._clean_old_files()

    def rename_active_file(self, new_name: str):
        """Rename the active file in place and keep writing to it under the new name."""
        with self._lock:
            self._file.close()
            new_path = join_directory(self._directory, new_name)

            if os.path.isfile(self._base_filename):
                try:
                    if os.path.exists(new_path):
                        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), new_path)
                    os.rename(self._base_filename, new_path)
                except OSError as e:
                    logger.error("Rename of %s to %s failed, reopening original: %s",
                                 self._base_filename, new_path, e)
                    self._reopen()
                    self._current_size = self._file.size()
                    raise RotationRenameError(self._base_filename, new_path,
                                              e.strerror or str(e)) from e

            logger.info("Active log renamed %s -> %s", self._base_filename, new_path)
            self._base_filename = new_path
            self._base_name = new_name
            self._reopen()
            self._current_size = self._file.size()

    # -- internals (caller holds the lock) -----------------------------------

    def _now(self) -> datetime:
        """Clock reading as naive local time, whatever the clock's tzinfo."""
        return local_naive(self._time_func())

    def _reopen(self, truncate: bool = False):
        try:
            self._file.open(self._base_filename, truncate)
        except OSError as e:
            raise ReopenError(self._base_filename, e.strerror or str(e)) from e

    def _rotate(self) -> str:
        """Close, rename the active file to an archive, and open a fresh one."""
        self._file.close()
        archive = encode_archive_name(self._directory, self._now())

        if os.path.isfile(self._base_filename):
            try:
                if os.path.exists(archive):
                    raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), archive)
                os.rename(self._base_filename, archive)
            except OSError as e:
                logger.error("Rotation of %s to %s failed, reopening original: %s",
                             self._base_filename, archive, e)
                self._reopen()
                self._current_size = self._file.size()
                raise RotationRenameError(self._base_filename, archive,
                                          e.strerror or str(e)) from e

        self._reopen(self._config.truncate)
        # Not always zero: an after_open hook may have written a header.
        self._current_size = self._file.size()

        if self._config.max_files > 0:
            self._archives.push_back(archive)
        logger.info("Rotated %s -> %s", self._base_filename, archive)
        return archive

    def _init_archive_queue(self):
        """Seed the queue with the newest archives already on disk."""
        max_files = self._config.max_files
        self._archives = ArchiveQueue(max_files)
        existing = sort_archives(list_archives(self._directory, exclude=(self._base_filename,)))
        for path in existing[-max_files:]:
            self._archives.push_back(path)

    def _clean_old_files(self):
        deleted = enforce_retention(
            self._directory,
            self._config.max_files,
            self._config.max_age,
            time_func=self._now,
            exclude=(self._base_filename,),
        )
        if deleted and self._config.max_files > 0:
            self._init_archive_queue()
