"""Open modes for file handles."""

from __future__ import annotations

import os
from enum import Enum


class OpenMode(Enum):
    """Modes a file entity can acquire its handle in.

    Every mode opens the file in binary. ``CREATE_OR_OPEN`` creates the file
    when missing and never truncates it.
    """

    READ = "read"
    READ_WRITE = "read_write"
    WRITE_TRUNCATE = "write_truncate"
    APPEND = "append"
    CREATE_OR_OPEN = "create_or_open"

    @property
    def os_flags(self) -> int:
        """Return the ``os.open`` flags for this mode."""
        return _OS_FLAGS[self]

    @property
    def file_mode(self) -> str:
        """Return the ``os.fdopen`` mode string for this mode."""
        return _FILE_MODES[self]


_OS_FLAGS = {
    OpenMode.READ: os.O_RDONLY,
    OpenMode.READ_WRITE: os.O_RDWR,
    OpenMode.WRITE_TRUNCATE: os.O_RDWR | os.O_CREAT | os.O_TRUNC,
    OpenMode.APPEND: os.O_RDWR | os.O_CREAT | os.O_APPEND,
    OpenMode.CREATE_OR_OPEN: os.O_RDWR | os.O_CREAT,
}

_FILE_MODES = {
    OpenMode.READ: "rb",
    OpenMode.READ_WRITE: "r+b",
    OpenMode.WRITE_TRUNCATE: "w+b",
    OpenMode.APPEND: "a+b",
    OpenMode.CREATE_OR_OPEN: "r+b",
}


__all__ = ["OpenMode"]
