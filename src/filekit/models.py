"""Data models describing cached file metadata and ownership."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FileMetadata(BaseModel):
    """Cached view of a file taken after construction or a mutation.

    Attributes:
        size: File size in bytes.
        mime_type: MIME type reported by libmagic.
        modified_at: Last modification time in UTC.
    """

    model_config = ConfigDict(frozen=True)

    size: int
    mime_type: str
    modified_at: datetime


class FileOwner(BaseModel):
    """User and group owning a file.

    Attributes:
        uid: Numeric user id.
        gid: Numeric group id.
        name: Login name of the owning user.
        group: Name of the owning group.
        home: Home directory of the owning user.
        shell: Login shell of the owning user.
    """

    uid: int
    gid: int
    name: str
    group: str
    home: str
    shell: str


__all__ = ["FileMetadata", "FileOwner"]
