"""Error taxonomy for file entity operations."""

from __future__ import annotations

from typing import Optional


class FileError(Exception):
    """Base exception for failures raised by a file entity.

    Attributes:
        operation: Name of the operation that failed.
        path: Path the operation was acting on.
        cause: Underlying OS-level exception, when there was one.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        path: str,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.path = path
        self.cause = cause


class NotFoundError(FileError):
    """Raised when the path does not exist."""


class AlreadyExistsError(FileError):
    """Raised when creating a file at an occupied path."""


class MetadataError(FileError):
    """Raised when size, MIME type or modification time cannot be queried."""


class OpenFailedError(FileError):
    """Raised when the OS refuses to open a handle."""


class ReadFailedError(FileError):
    """Raised when reading file content fails."""


class WriteFailedError(FileError):
    """Raised when writing file content fails."""


class SeekFailedError(FileError):
    """Raised when the handle cannot be positioned."""


class CopyFailedError(FileError):
    """Raised when copying the file fails."""


class MoveFailedError(FileError):
    """Raised when relocating the file fails."""


class DeleteFailedError(FileError):
    """Raised when an existing file cannot be unlinked."""


class NotOpenError(FileError):
    """Raised when closing a file that has no open handle."""


class PathResolutionError(FileError):
    """Raised when a destination path cannot be derived."""


class HashFailedError(FileError):
    """Raised when computing a content digest fails."""


class OwnerLookupError(FileError):
    """Raised when the owning user or group cannot be resolved."""


__all__ = [
    "FileError",
    "NotFoundError",
    "AlreadyExistsError",
    "MetadataError",
    "OpenFailedError",
    "ReadFailedError",
    "WriteFailedError",
    "SeekFailedError",
    "CopyFailedError",
    "MoveFailedError",
    "DeleteFailedError",
    "NotOpenError",
    "PathResolutionError",
    "HashFailedError",
    "OwnerLookupError",
]
