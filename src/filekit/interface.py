"""Abstract contract implemented by file entities."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from .matching import MatchFlag
from .models import FileOwner
from .modes import OpenMode


class FileInterface(ABC):
    """Public surface of an entity bound to a single filesystem path."""

    @classmethod
    @abstractmethod
    def create(cls, path: str, content: bytes | str = b"") -> "FileInterface":
        """Create a new file at ``path`` and return an entity for it."""

    @classmethod
    @abstractmethod
    def create_temp(cls, prefix: str | None = None, content: bytes | str = b"") -> "FileInterface":
        """Create a uniquely named temporary file."""

    @staticmethod
    @abstractmethod
    def match(pattern: str, text: str, flags: MatchFlag | int = MatchFlag.NONE) -> bool:
        """Match ``text`` against a shell wildcard pattern."""

    @abstractmethod
    def open(self, mode: OpenMode = OpenMode.APPEND) -> "FileInterface":
        """Acquire a handle in ``mode``."""

    @abstractmethod
    def close(self, forgive_if_not_open: bool = True) -> "FileInterface":
        """Release the handle."""

    @abstractmethod
    def exists(self) -> bool:
        """Return whether the path currently exists."""

    @abstractmethod
    def get_content(self, position: int = 0, length: int | None = None) -> bytes:
        """Read the file, or a slice of it."""

    @abstractmethod
    def put_content(self, content: bytes | str, append: bool = False) -> int:
        """Replace or extend the file contents."""

    @abstractmethod
    def copy(self, target_path: str) -> "FileInterface":
        """Copy the file and return an entity for the copy."""

    @abstractmethod
    def move(self, new_path: str) -> bool:
        """Relocate the file."""

    @abstractmethod
    def delete(self, forgive: bool = True) -> bool:
        """Unlink the file."""

    @abstractmethod
    def truncate(self, size: int = 0) -> bool:
        """Truncate the file to ``size`` bytes."""

    @abstractmethod
    def get_path(self) -> str: ...

    @abstractmethod
    def get_extension(self) -> str: ...

    @abstractmethod
    def get_filename(self) -> str: ...

    @abstractmethod
    def get_filename_without_extension(self) -> str: ...

    @abstractmethod
    def get_directory(self) -> str: ...

    @abstractmethod
    def get_size(self) -> int: ...

    @abstractmethod
    def get_length(self) -> int: ...

    @abstractmethod
    def get_mime_type(self) -> str: ...

    @abstractmethod
    def get_last_modified_time(self) -> datetime: ...

    @abstractmethod
    def is_readable(self) -> bool: ...

    @abstractmethod
    def is_writable(self) -> bool: ...

    @abstractmethod
    def is_executable(self) -> bool: ...

    @abstractmethod
    def is_link(self) -> bool: ...

    @abstractmethod
    def get_hash(self, algorithm: str | None = None) -> str: ...

    @abstractmethod
    def get_file_owner(self) -> FileOwner: ...

    @abstractmethod
    def is_image(self) -> bool: ...

    @abstractmethod
    def is_video(self) -> bool: ...

    @abstractmethod
    def write_from_position(self, content: bytes | str, position: int) -> int:
        """Overwrite bytes starting at ``position``."""

    @abstractmethod
    def read_from_position(self, position: int = 0, length: int | None = None) -> bytes:
        """Read bytes starting at ``position``."""


__all__ = ["FileInterface"]
