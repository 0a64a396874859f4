"""MIME detection, hashing and ownership lookups backed by the OS."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

import magic

from .models import FileOwner

DEFAULT_CHUNK_SIZE = 64 * 1024


class TypeDetector:
    """Identify the MIME type of a file using python-magic."""

    def detect(self, path: str | Path) -> str:
        """Return the MIME type sniffed from the file contents.

        Args:
            path: Path to the file being inspected.

        Returns:
            str: MIME type such as ``image/jpeg``.

        Raises:
            OSError: If the file cannot be read.
            magic.MagicException: If libmagic cannot classify the file.
        """
        return magic.from_file(os.fspath(path), mime=True)


class HashComputer:
    """Compute content digests by streaming the file in chunks."""

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        self.chunk_size = chunk_size

    def compute(self, path: str | Path, algorithm: str = "sha256") -> str:
        """Return a hex digest of the file contents.

        Args:
            path: Path to the file being hashed.
            algorithm: Any algorithm name accepted by ``hashlib.new``.

        Returns:
            str: Hexadecimal digest.

        Raises:
            ValueError: If the algorithm is unknown.
            OSError: If the file cannot be read.
        """
        digest = hashlib.new(algorithm)
        with open(path, "rb") as fh:
            for chunk in iter(lambda: fh.read(self.chunk_size), b""):
                digest.update(chunk)
        return digest.hexdigest()


class OwnerLookup:
    """Resolve the owning user and group of a file."""

    def lookup(self, path: str | Path) -> FileOwner:
        """Return ownership details for the file.

        Raises:
            OSError: If the file cannot be stat'ed.
            KeyError: If the uid or gid has no database entry.
        """
        import grp
        import pwd

        stat = os.stat(path)
        user = pwd.getpwuid(stat.st_uid)
        group = grp.getgrgid(stat.st_gid)
        return FileOwner(
            uid=user.pw_uid,
            gid=group.gr_gid,
            name=user.pw_name,
            group=group.gr_name,
            home=user.pw_dir,
            shell=user.pw_shell,
        )


__all__ = ["TypeDetector", "HashComputer", "OwnerLookup", "DEFAULT_CHUNK_SIZE"]
