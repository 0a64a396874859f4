"""Configuration models describing filekit settings."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FileKitBaseModel(BaseModel):
    """Shared configuration for filekit Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class HashingSettings(FileKitBaseModel):
    """Content digest options.

    Attributes:
        algorithm: Default ``hashlib`` algorithm used by ``File.get_hash``.
        chunk_size: Number of bytes read per chunk while hashing.
    """

    algorithm: str = "sha256"
    chunk_size: int = Field(default=64 * 1024, gt=0)


class TempSettings(FileKitBaseModel):
    """Options for temporary files created through ``File.create_temp``.

    Attributes:
        directory: Directory for temporary files; the system default when unset.
        prefix: Default filename prefix.
    """

    directory: Optional[str] = None
    prefix: str = "filekit-"


class LoggingSettings(FileKitBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
        file: Optional path of a rotating log file.
        max_size_mb: Maximum log size before rotation.
        backup_count: Number of historical log files to retain.
    """

    level: str = "WARNING"
    file: Optional[str] = None
    max_size_mb: int = 10
    backup_count: int = 3


class FileKitConfig(FileKitBaseModel):
    """Top-level configuration struct for filekit.

    Attributes:
        hashing: Content digest settings.
        temp: Temporary file settings.
        logging: Logging configuration.
    """

    hashing: HashingSettings = Field(default_factory=HashingSettings)
    temp: TempSettings = Field(default_factory=TempSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


__all__ = [
    "FileKitBaseModel",
    "HashingSettings",
    "TempSettings",
    "LoggingSettings",
    "FileKitConfig",
]
