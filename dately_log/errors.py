"""Exception types raised by the rotating writer."""


class DatelyLogError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(DatelyLogError, ValueError):
    """A rotation setting is out of range. The previous value is kept."""


class DirectoryCreationError(DatelyLogError, OSError):
    """The log directory could not be created (a segment is a file, or mkdir failed)."""


class RotationRenameError(DatelyLogError, OSError):
    """The active file could not be renamed (to an archive or a new name).

    The original active file has been reopened, so writing can continue.
    """

    def __init__(self, src: str, dst: str, reason: str = ""):
        self.src = src
        self.dst = dst
        message = f"failed renaming {src} to {dst}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ReopenError(DatelyLogError, OSError):
    """The active file could not be reopened; no further writes are possible."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"failed reopening {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class RetentionDeletionError(DatelyLogError):
    """An archive could not be deleted during a retention sweep.

    Only logged by the sweep, never raised to writers.
    """

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"failed deleting {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
