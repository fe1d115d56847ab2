"""Thin binary file wrapper: open, append, flush, close, size."""

import os
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class FileEventHandlers:
    """Optional callbacks around every open and close of the active file.

    ``before_open(path)`` and ``after_close(path)`` get the path only;
    ``after_open(path, file)`` and ``before_close(path, file)`` also get the
    open binary file object, e.g. to write a header into each fresh file.
    """

    before_open: Callable[[str], None] | None = None
    after_open: Callable | None = None
    before_close: Callable | None = None
    after_close: Callable[[str], None] | None = None


class FileHelper:
    def __init__(self, event_handlers: FileEventHandlers | None = None):
        self._file = None
        self._filename = ""
        self._events = event_handlers or FileEventHandlers()

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def is_open(self) -> bool:
        return self._file is not None and not self._file.closed

    def open(self, path: str, truncate: bool = False):
        """Open *path* for appending (or truncate it first). Raises OSError."""
        self.close()
        self._filename = path
        if self._events.before_open:
            self._events.before_open(path)
        self._file = open(path, "wb" if truncate else "ab")
        if self._events.after_open:
            self._events.after_open(path, self._file)

    def reopen(self, truncate: bool = False):
        if not self._filename:
            raise OSError("reopen called before open")
        self.open(self._filename, truncate)

    def write(self, data: bytes):
        if not self.is_open:
            raise OSError(f"write to closed file {self._filename}")
        self._file.write(data)

    def flush(self):
        if self.is_open:
            self._file.flush()

    def close(self):
        if self._file is not None:
            if self._events.before_close:
                self._events.before_close(self._filename, self._file)
            try:
                self._file.close()
            finally:
                self._file = None
            if self._events.after_close:
                self._events.after_close(self._filename)

    def size(self) -> int:
        if self.is_open:
            self._file.flush()
            return os.fstat(self._file.fileno()).st_size
        return os.path.getsize(self._filename)
