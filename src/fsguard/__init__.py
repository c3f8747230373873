"""Filesystem checks that never raise and directory operations that do."""

__version__ = "0.1.0"

from fsguard.filesystem import DEFAULT_PERMISSIONS, FileSystemError, LocalFileSystem
from fsguard.protocols import FileSystem
from fsguard.types import Path, PathInput

__all__ = [
    "__version__",
    "DEFAULT_PERMISSIONS",
    "FileSystem",
    "FileSystemError",
    "LocalFileSystem",
    "Path",
    "PathInput",
]
