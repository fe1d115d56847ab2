"""logging.Handler front end for DatelyLogWriter."""

import logging
from datetime import datetime, timedelta

from dately_log.config import DEFAULT_MAX_AGE, DEFAULT_MAX_SIZE, DEFAULT_PATTERN, Config
from dately_log.file_helper import FileEventHandlers
from dately_log.writer import DatelyLogWriter, NullLock


class DatelyRotatingFileHandler(logging.Handler):
    """Routes log records into a DatelyLogWriter.

    The handler lock serializes every call, so the writer runs with a
    NullLock underneath it.
    """

    terminator = "\n"

    def __init__(self, base_filename: str, max_age: timedelta = DEFAULT_MAX_AGE,
                 max_size: int = DEFAULT_MAX_SIZE, max_files: int = 0,
                 truncate: bool = False, pattern: str | None = None,
                 encoding: str = "utf-8", time_func=None, level=logging.NOTSET,
                 event_handlers: FileEventHandlers | None = None):
        super().__init__(level)
        self.encoding = encoding
        self.setFormatter(logging.Formatter(pattern or DEFAULT_PATTERN))
        self._writer = DatelyLogWriter(
            base_filename,
            max_age=max_age,
            max_size=max_size,
            max_files=max_files,
            truncate=truncate,
            lock=NullLock(),
            time_func=time_func,
            encoding=encoding,
            event_handlers=event_handlers,
        )

    @classmethod
    def from_config(cls, config: Config, **kwargs) -> "DatelyRotatingFileHandler":
        rotation = config.rotation
        return cls(
            config.base_filename,
            max_age=rotation.max_age,
            max_size=rotation.max_size,
            max_files=rotation.max_files,
            truncate=rotation.truncate,
            pattern=config.log_pattern,
            **kwargs,
        )

    @property
    def writer(self) -> DatelyLogWriter:
        return self._writer

    @property
    def filename(self) -> str:
        self.acquire()
        try:
            return self._writer.filename
        finally:
            self.release()

    def emit(self, record: logging.LogRecord):
        try:
            line = self.format(record) + self.terminator
            self._writer.write(line.encode(self.encoding),
                               timestamp=datetime.fromtimestamp(record.created))
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def flush(self):
        self.acquire()
        try:
            self._writer.flush()
        finally:
            self.release()

    def close(self):
        self.acquire()
        try:
            self._writer.close()
        finally:
            self.release()
        super().close()

    def set_max_age(self, max_age: timedelta):
        self.acquire()
        try:
            self._writer.set_max_age(max_age)
        finally:
            self.release()

    def set_max_size(self, max_size: int):
        self.acquire()
        try:
            self._writer.set_max_size(max_size)
        finally:
            self.release()

    def set_max_files(self, max_files: int):
        self.acquire()
        try:
            self._writer.set_max_files(max_files)
        finally:
            self.release()

    def set_filename_pattern(self, pattern: str):
        """Replace the line format; rotation is unaffected."""
        self.acquire()
        try:
            self.setFormatter(logging.Formatter(pattern))
        finally:
            self.release()

    def rename_active_file(self, new_name: str):
        self.acquire()
        try:
            self._writer.rename_active_file(new_name)
        finally:
            self.release()
