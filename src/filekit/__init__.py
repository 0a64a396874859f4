"""Top-level package for filekit."""

from importlib import metadata as _metadata

from .config import ConfigError, ConfigManager, FileKitConfig
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
from .file import File
from .interface import FileInterface
from .logs import configure_logging
from .matching import MatchFlag
from .models import FileMetadata, FileOwner
from .modes import OpenMode

__all__ = [
    "__version__",
    "File",
    "FileInterface",
    "OpenMode",
    "MatchFlag",
    "FileMetadata",
    "FileOwner",
    "ConfigManager",
    "FileKitConfig",
    "ConfigError",
    "configure_logging",
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


def __getattr__(name: str):
    if name == "__version__":
        return _metadata.version("filekit")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return sorted(list(globals().keys()) + ["__version__"])
