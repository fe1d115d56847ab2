"""Log file writer with daily and size-based rotation plus count/age retention."""

from dately_log.config import Config, load_config
from dately_log.errors import (
    ConfigError,
    DatelyLogError,
    DirectoryCreationError,
    ReopenError,
    RetentionDeletionError,
    RotationRenameError,
)
from dately_log.file_helper import FileEventHandlers
from dately_log.handler import DatelyRotatingFileHandler
from dately_log.writer import DatelyLogWriter, NullLock

__all__ = [
    "Config",
    "ConfigError",
    "DatelyLogError",
    "DatelyLogWriter",
    "DatelyRotatingFileHandler",
    "DirectoryCreationError",
    "FileEventHandlers",
    "NullLock",
    "ReopenError",
    "RetentionDeletionError",
    "RotationRenameError",
    "load_config",
]
