"""File entity wrapping a single path on the local filesystem."""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import tempfile
from datetime import datetime, timezone
from types import TracebackType
from typing import IO, Optional, Type

import magic

from .config.models import FileKitConfig
from .detectors import HashComputer, OwnerLookup, TypeDetector
from .errors import (
    AlreadyExistsError,
    CopyFailedError,
    DeleteFailedError,
    FileError,
    HashFailedError,
    MetadataError,
    MoveFailedError,
    NotFoundError,
    NotOpenError,
    OpenFailedError,
    OwnerLookupError,
    PathResolutionError,
    ReadFailedError,
    SeekFailedError,
    WriteFailedError,
)
from .interface import FileInterface
from .matching import MatchFlag, match
from .models import FileMetadata, FileOwner
from .modes import OpenMode

LOGGER = logging.getLogger(__name__)

_SEPARATORS = (os.sep,) + ((os.altsep,) if os.altsep else ())


def _to_bytes(content: bytes | str) -> bytes:
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def _open_handle(path: str, mode: OpenMode) -> IO[bytes]:
    fd = os.open(path, mode.os_flags, 0o666)
    try:
        return os.fdopen(fd, mode.file_mode)
    except BaseException:
        os.close(fd)
        raise


class File(FileInterface):
    """Entity bound to one filesystem path with a cached metadata view.

    Size, MIME type and modification time are captured on construction and
    re-derived after every mutation performed through the entity. Changes made
    to the file by other means are not observed until the next such mutation.

    At most one handle is owned at a time. ``read_from_position`` and
    ``write_from_position`` open it lazily; ``close`` releases it. A temporary
    entity deletes its file when the handle is closed, and on context-manager
    exit whether or not a handle was ever opened.

    Attributes:
        settings: Configuration used for hashing and temporary files.
        temporary: Whether the file is deleted when the entity is closed.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        open_now: bool = False,
        *,
        settings: Optional[FileKitConfig] = None,
    ) -> None:
        """Bind the entity to ``path`` and capture its metadata.

        Args:
            path: Existing file path.
            open_now: Open a handle in the default mode immediately.
            settings: Configuration; defaults are used when omitted.

        Raises:
            NotFoundError: If the path does not exist.
            MetadataError: If size, MIME type or modification time cannot be read.
        """
        self._path = os.fspath(path)
        self.settings = settings or FileKitConfig()
        self.temporary = False
        self._handle: Optional[IO[bytes]] = None
        self._mode: Optional[OpenMode] = None
        self._present = False
        self._detector = TypeDetector()
        self._hasher = HashComputer(self.settings.hashing.chunk_size)
        self._owners = OwnerLookup()

        if not os.path.exists(self._path):
            raise NotFoundError(
                f"File does not exist: {self._path}", operation="init", path=self._path
            )
        self._metadata = self._read_metadata("init")
        self._present = True

        if open_now:
            self.open()

    # Factories --------------------------------------------------------

    @classmethod
    def create(
        cls,
        path: str | os.PathLike[str],
        content: bytes | str = b"",
        *,
        settings: Optional[FileKitConfig] = None,
    ) -> "File":
        """Create a new file holding ``content`` and return an entity for it.

        The file is opened with exclusive-create semantics, so a concurrent
        creator of the same path makes this call fail instead of overwriting.

        Raises:
            AlreadyExistsError: If the path is already occupied.
            WriteFailedError: If the file cannot be created or written.
        """
        target = os.fspath(path)
        if os.path.exists(target):
            raise AlreadyExistsError(
                f"File already exists: {target}", operation="create", path=target
            )
        try:
            with open(target, "xb") as fh:
                fh.write(_to_bytes(content))
        except FileExistsError as exc:
            raise AlreadyExistsError(
                f"File already exists: {target}", operation="create", path=target, cause=exc
            ) from exc
        except OSError as exc:
            raise WriteFailedError(
                f"Failed to create file: {target}", operation="create", path=target, cause=exc
            ) from exc
        LOGGER.info("Created %s", target)
        return cls(target, settings=settings)

    @classmethod
    def create_temp(
        cls,
        prefix: Optional[str] = None,
        content: bytes | str = b"",
        *,
        settings: Optional[FileKitConfig] = None,
    ) -> "File":
        """Create a uniquely named temporary file and return an entity for it.

        Args:
            prefix: Filename prefix; ``settings.temp.prefix`` when omitted.
            content: Initial content.
            settings: Configuration; ``settings.temp.directory`` selects the
                directory, falling back to the system temporary directory.

        Returns:
            File: Entity flagged as temporary.

        Raises:
            WriteFailedError: If the file cannot be created or written.
        """
        settings = settings or FileKitConfig()
        directory = settings.temp.directory or tempfile.gettempdir()
        try:
            fd, temp_path = tempfile.mkstemp(
                prefix=settings.temp.prefix if prefix is None else prefix,
                dir=directory,
            )
        except OSError as exc:
            raise WriteFailedError(
                f"Can't create temporary file at {directory}",
                operation="create_temp",
                path=directory,
                cause=exc,
            ) from exc

        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(_to_bytes(content))
            entity = cls(temp_path, settings=settings)
        except OSError as exc:
            with contextlib.suppress(OSError):
                os.unlink(temp_path)
            raise WriteFailedError(
                f"Failed to write data to temporary file: {temp_path}",
                operation="create_temp",
                path=temp_path,
                cause=exc,
            ) from exc
        except FileError:
            with contextlib.suppress(OSError):
                os.unlink(temp_path)
            raise

        entity.temporary = True
        LOGGER.debug("Created temporary file %s", temp_path)
        return entity

    @staticmethod
    def match(pattern: str, text: str, flags: MatchFlag | int = MatchFlag.NONE) -> bool:
        """Return whether ``text`` matches the shell wildcard ``pattern``."""
        return match(pattern, text, flags)

    # Handle lifecycle -------------------------------------------------

    @property
    def is_open(self) -> bool:
        """Return whether the entity currently owns a handle."""
        return self._handle is not None

    @property
    def mode(self) -> Optional[OpenMode]:
        """Return the mode of the open handle, if any."""
        return self._mode

    def open(self, mode: OpenMode = OpenMode.APPEND) -> "File":
        """Acquire a handle in ``mode``, releasing any handle already held.

        Raises:
            OpenFailedError: If the OS refuses to open the file.
        """
        if self._handle is not None:
            LOGGER.debug("Reopening %s; releasing %s handle", self._path, self._mode)
            self._release_handle()
        try:
            self._handle = _open_handle(self._path, mode)
        except OSError as exc:
            raise OpenFailedError(
                f"Failed to open file in {mode.value} mode: {self._path}",
                operation="open",
                path=self._path,
                cause=exc,
            ) from exc
        self._mode = mode
        LOGGER.debug("Opened %s in %s mode", self._path, mode.value)
        return self

    def close(self, forgive_if_not_open: bool = True) -> "File":
        """Release the handle; a temporary file is deleted afterwards.

        Args:
            forgive_if_not_open: When False, closing without a handle is an error.

        Raises:
            NotOpenError: If no handle is open and ``forgive_if_not_open`` is False.
            WriteFailedError: If flushing buffered data on release fails.
        """
        if self._handle is None:
            if not forgive_if_not_open:
                raise NotOpenError(
                    f"Can't close, file not opened: {self._path}",
                    operation="close",
                    path=self._path,
                )
            return self

        try:
            self._release_handle()
        finally:
            if self.temporary:
                self.delete(forgive=True)
        return self

    def __enter__(self) -> "File":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        try:
            self.close()
        finally:
            if self.temporary and self._present:
                self.delete(forgive=True)

    # Content ----------------------------------------------------------

    def exists(self) -> bool:
        """Return whether the path exists right now."""
        return os.path.exists(self._path)

    @property
    def is_present(self) -> bool:
        """Return the existence flag; cleared once the entity deletes its file."""
        return self._present

    def get_content(self, position: int = 0, length: Optional[int] = None) -> bytes:
        """Return the whole file, or a slice when a position or length is given.

        Raises:
            ReadFailedError: If the file cannot be read.
        """
        if position > 0 or length is not None:
            return self.read_from_position(position, length)
        try:
            with open(self._path, "rb") as fh:
                return fh.read()
        except OSError as exc:
            raise ReadFailedError(
                f"Failed to read file: {self._path}",
                operation="get_content",
                path=self._path,
                cause=exc,
            ) from exc

    def put_content(self, content: bytes | str, append: bool = False) -> int:
        """Write ``content`` to the file, replacing it unless ``append`` is set.

        Args:
            content: Bytes to write; text is encoded as UTF-8.
            append: Extend the file instead of truncating it.

        Returns:
            int: Number of bytes written.

        Raises:
            WriteFailedError: If the write fails.
            MetadataError: If metadata cannot be re-derived afterwards.
        """
        data = _to_bytes(content)
        try:
            with open(self._path, "ab" if append else "wb") as fh:
                written = fh.write(data)
        except OSError as exc:
            raise WriteFailedError(
                f"Failed to write to file: {self._path}",
                operation="put_content",
                path=self._path,
                cause=exc,
            ) from exc
        self._refresh("put_content")
        return written

    def write_from_position(self, content: bytes | str, position: int) -> int:
        """Overwrite the file starting at byte ``position``.

        Opens a read-write handle when none is held. A held append handle is
        reopened read-write, since appends ignore the seek. If this call
        opened the handle and then fails, the handle is released before the
        error propagates.

        Returns:
            int: Number of bytes written.

        Raises:
            OpenFailedError: If a handle has to be opened and cannot be.
            SeekFailedError: If ``position`` is negative or rejected by the OS.
            WriteFailedError: If the write fails.
            MetadataError: If metadata cannot be re-derived afterwards.
        """
        data = _to_bytes(content)
        if self._mode is OpenMode.APPEND:
            self.open(OpenMode.READ_WRITE)
        opened_here = self._ensure_open(OpenMode.READ_WRITE)
        try:
            handle = self._seek(position, "write_from_position")
            try:
                written = handle.write(data)
                handle.flush()
            except OSError as exc:
                raise WriteFailedError(
                    f"Failed to write to file: {self._path}",
                    operation="write_from_position",
                    path=self._path,
                    cause=exc,
                ) from exc
            self._refresh("write_from_position")
        except FileError:
            if opened_here:
                self._release_handle()
            raise
        return written

    def read_from_position(self, position: int = 0, length: Optional[int] = None) -> bytes:
        """Read ``length`` bytes starting at ``position``.

        Without a length the read runs to the cached end of file, so a
        position at or past the cached size yields ``b""``.

        Raises:
            OpenFailedError: If a handle has to be opened and cannot be.
            SeekFailedError: If ``position`` is negative or rejected by the OS.
            ReadFailedError: If ``length`` is negative or the read fails.
        """
        opened_here = self._ensure_open(OpenMode.READ)
        try:
            handle = self._seek(position, "read_from_position")
            if length is None:
                length = max(self._metadata.size - position, 0)
            elif length < 0:
                raise ReadFailedError(
                    f"Negative read length {length} for file: {self._path}",
                    operation="read_from_position",
                    path=self._path,
                )
            try:
                return handle.read(length)
            except OSError as exc:
                raise ReadFailedError(
                    f"Failed to read from file: {self._path}",
                    operation="read_from_position",
                    path=self._path,
                    cause=exc,
                ) from exc
        except FileError:
            if opened_here:
                self._release_handle()
            raise

    def truncate(self, size: int = 0) -> bool:
        """Truncate the file to ``size`` bytes.

        Uses the open handle when there is one; otherwise a short-lived append
        handle is opened and released within the call.

        Returns:
            bool: False when the OS refuses the truncation.
        """
        try:
            if self._handle is not None:
                self._handle.truncate(size)
                self._handle.flush()
            else:
                with _open_handle(self._path, OpenMode.APPEND) as handle:
                    handle.truncate(size)
        except (OSError, ValueError) as exc:
            LOGGER.warning("Failed to truncate %s to %d bytes: %s", self._path, size, exc)
            return False
        self._refresh("truncate")
        LOGGER.info("Truncated %s to %d bytes", self._path, size)
        return True

    # Location ---------------------------------------------------------

    def move(self, new_path: str | os.PathLike[str]) -> bool:
        """Relocate the file to ``new_path``.

        A destination ending in a path separator is treated as a directory and
        the current filename is appended to it.

        Returns:
            bool: True once the file has been moved.

        Raises:
            PathResolutionError: If the current filename cannot be determined.
            MoveFailedError: If the destination is a directory or the OS
                refuses the move.
        """
        destination = os.fspath(new_path)
        if destination.endswith(_SEPARATORS):
            filename = self.get_filename()
            if not filename:
                raise PathResolutionError(
                    f"Cannot determine current filename of {self._path}",
                    operation="move",
                    path=self._path,
                )
            destination += filename

        if os.path.isdir(destination):
            raise MoveFailedError(
                f"Destination is a directory: {destination}",
                operation="move",
                path=self._path,
            )
        try:
            shutil.move(self._path, destination)
        except OSError as exc:
            raise MoveFailedError(
                f"Failed to move file from {self._path} to {destination}",
                operation="move",
                path=self._path,
                cause=exc,
            ) from exc

        previous, self._path = self._path, destination
        self._refresh("move")
        LOGGER.info("Moved %s to %s", previous, destination)
        return True

    def copy(self, target_path: str | os.PathLike[str]) -> "File":
        """Copy the file's bytes to ``target_path``.

        Returns:
            File: New entity bound to the copy, sharing no state with this one.

        Raises:
            CopyFailedError: If the copy fails.
        """
        target = os.fspath(target_path)
        try:
            shutil.copyfile(self._path, target)
        except OSError as exc:
            raise CopyFailedError(
                f"Failed to copy file from {self._path} to {target}",
                operation="copy",
                path=self._path,
                cause=exc,
            ) from exc
        LOGGER.info("Copied %s to %s", self._path, target)
        return type(self)(target, settings=self.settings)

    def delete(self, forgive: bool = True) -> bool:
        """Unlink the file.

        Args:
            forgive: Report a failed unlink by returning False instead of raising.

        Returns:
            bool: True if the file was unlinked, False for a forgiven failure.

        Raises:
            NotFoundError: If not forgiving and the path is already absent.
            DeleteFailedError: If not forgiving and the unlink fails otherwise.
        """
        try:
            os.unlink(self._path)
        except OSError as exc:
            if not forgive:
                if not os.path.exists(self._path):
                    raise NotFoundError(
                        f"File not exists: {self._path}",
                        operation="delete",
                        path=self._path,
                        cause=exc,
                    ) from exc
                raise DeleteFailedError(
                    f"Unable to delete file: {self._path}",
                    operation="delete",
                    path=self._path,
                    cause=exc,
                ) from exc
            LOGGER.warning("Ignoring failure to delete %s: %s", self._path, exc)
            self._present = os.path.exists(self._path)
            return False

        self._present = False
        LOGGER.info("Deleted %s", self._path)
        return True

    # Accessors --------------------------------------------------------

    @property
    def metadata(self) -> FileMetadata:
        """Return the cached metadata snapshot."""
        return self._metadata

    def get_path(self) -> str:
        return self._path

    def get_directory(self) -> str:
        return os.path.dirname(self._path) or "."

    def get_filename(self) -> str:
        return os.path.basename(self._path)

    def get_filename_without_extension(self) -> str:
        return os.path.splitext(self.get_filename())[0]

    def get_extension(self) -> str:
        """Return the last extension of the filename without its dot."""
        return os.path.splitext(self.get_filename())[1].lstrip(".")

    def get_size(self) -> int:
        return self._metadata.size

    def get_length(self) -> int:
        """Alias of :meth:`get_size`."""
        return self._metadata.size

    def get_mime_type(self) -> str:
        return self._metadata.mime_type

    def get_last_modified_time(self) -> datetime:
        return self._metadata.modified_at

    def is_readable(self) -> bool:
        return os.access(self._path, os.R_OK)

    def is_writable(self) -> bool:
        return os.access(self._path, os.W_OK)

    def is_executable(self) -> bool:
        return os.access(self._path, os.X_OK)

    def is_link(self) -> bool:
        return os.path.islink(self._path)

    def is_image(self) -> bool:
        return self._metadata.mime_type.startswith("image/")

    def is_video(self) -> bool:
        return self._metadata.mime_type.startswith("video/")

    def get_hash(self, algorithm: Optional[str] = None) -> str:
        """Return the hex digest of the current file contents.

        Args:
            algorithm: ``hashlib`` algorithm name; ``settings.hashing.algorithm``
                when omitted.

        Raises:
            HashFailedError: If the algorithm is unknown or the file unreadable.
        """
        algorithm = algorithm or self.settings.hashing.algorithm
        try:
            return self._hasher.compute(self._path, algorithm)
        except (OSError, ValueError, TypeError) as exc:
            raise HashFailedError(
                f"Failed to calculate {algorithm} hash of file: {self._path}",
                operation="get_hash",
                path=self._path,
                cause=exc,
            ) from exc

    def get_file_owner(self) -> FileOwner:
        """Return the user and group owning the file.

        Raises:
            OwnerLookupError: If the file cannot be stat'ed or the ids are unknown.
        """
        try:
            return self._owners.lookup(self._path)
        except (OSError, KeyError) as exc:
            raise OwnerLookupError(
                f"Failed to resolve owner of file: {self._path}",
                operation="get_file_owner",
                path=self._path,
                cause=exc,
            ) from exc

    def __fspath__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self._path!r}, open={self.is_open}, "
            f"temporary={self.temporary})"
        )

    # Internal helpers -------------------------------------------------

    def _read_metadata(self, operation: str) -> FileMetadata:
        try:
            stat = os.stat(self._path)
            mime_type = self._detector.detect(self._path)
        except (OSError, magic.MagicException) as exc:
            raise MetadataError(
                f"Failed to read metadata of file: {self._path}",
                operation=operation,
                path=self._path,
                cause=exc,
            ) from exc
        return FileMetadata(
            size=stat.st_size,
            mime_type=mime_type,
            modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
        )

    def _refresh(self, operation: str) -> None:
        self._metadata = self._read_metadata(operation)
        self._present = True
        LOGGER.debug(
            "Refreshed metadata of %s after %s: %d bytes, %s",
            self._path,
            operation,
            self._metadata.size,
            self._metadata.mime_type,
        )

    def _ensure_open(self, mode: OpenMode) -> bool:
        if self._handle is not None:
            return False
        self.open(mode)
        return True

    def _seek(self, position: int, operation: str) -> IO[bytes]:
        handle = self._handle
        if handle is None:
            raise NotOpenError(
                f"No open handle for file: {self._path}", operation=operation, path=self._path
            )
        if position < 0:
            raise SeekFailedError(
                f"Failed to seek to position {position} in file: {self._path}",
                operation=operation,
                path=self._path,
            )
        try:
            handle.seek(position)
        except (OSError, ValueError) as exc:
            raise SeekFailedError(
                f"Failed to seek to position {position} in file: {self._path}",
                operation=operation,
                path=self._path,
                cause=exc,
            ) from exc
        return handle

    def _release_handle(self) -> None:
        handle, self._handle, self._mode = self._handle, None, None
        if handle is None:
            return
        try:
            handle.close()
        except OSError as exc:
            raise WriteFailedError(
                f"Failed to flush file on close: {self._path}",
                operation="close",
                path=self._path,
                cause=exc,
            ) from exc
        LOGGER.debug("Closed %s", self._path)


__all__ = ["File"]
