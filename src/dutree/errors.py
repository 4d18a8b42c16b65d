"""Error types raised by dutree."""


class DuError(Exception):
    """Base class for all dutree errors."""


class FileSystemError(DuError):
    """A filesystem object could not be inspected or read."""

    def __init__(self, path, reason):
        super().__init__(f"cannot access '{path}': {reason}")
        self.path = path
        self.reason = reason


class NotFound(FileSystemError):
    """The path does not exist."""


class PermissionDenied(FileSystemError):
    """Inspecting or listing the path is not allowed."""


class ReadError(FileSystemError):
    """Any other failure reading the path."""


class BlockSizeProbeFailed(DuError):
    """The filesystem block size could not be determined."""


class ConflictingOptions(DuError):
    """Options that cannot be used together were requested."""


def from_os_error(path, exc):
    """Map an OSError onto the matching FileSystemError.

    Args:
        path: Path the failed operation was applied to.
        exc: The OSError raised by the operation.

    Returns:
        FileSystemError: The error to raise in its place.
    """
    reason = exc.strerror or str(exc)
    if isinstance(exc, (FileNotFoundError, NotADirectoryError)):
        return NotFound(path, reason)
    if isinstance(exc, PermissionError):
        return PermissionDenied(path, reason)
    return ReadError(path, reason)
