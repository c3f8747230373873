"""Protocol definitions for core abstractions.

This module defines the abstract interface (Protocol) for the filesystem
facade. Designing to the interface enables:
- Loose coupling between callers and the host filesystem
- Easy substitution of test doubles

Concrete implementations satisfy the protocol structurally (duck typing).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fsguard.types import PathInput


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Query methods never raise: any failure to determine the answer is
    reported as False. Mutating methods raise FileSystemError on failure.
    """

    def exists(self, path: PathInput) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check. Symlinks are followed.

        Returns:
            True if an entry is present, False otherwise or if undeterminable.
        """
        ...

    def is_file(self, path: PathInput) -> bool:
        """Check if a path resolves to a regular file.

        Args:
            path: Path to check. Symlinks are followed.

        Returns:
            True if path is a regular file, False otherwise.
        """
        ...

    def is_directory(self, path: PathInput) -> bool:
        """Check if a path resolves to a directory.

        Args:
            path: Path to check. Symlinks are followed.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_readable(self, path: PathInput) -> bool:
        """Check if the current process can read a path.

        Args:
            path: Path to check.

        Returns:
            True if readable, False otherwise.
        """
        ...

    def is_writable(self, path: PathInput) -> bool:
        """Check if the current process can write a path.

        Args:
            path: Path to check.

        Returns:
            True if writable, False otherwise.
        """
        ...

    def make_directory(
        self, path: PathInput, permissions: int = 0o777, recursive: bool = False
    ) -> str:
        """Create a directory.

        Args:
            path: Directory to create.
            permissions: Mode bits for the new directory (umask applies).
            recursive: Create missing parent directories.

        Returns:
            Canonical absolute path of the created directory.

        Raises:
            FileSystemError: If the directory could not be created.
        """
        ...

    def remove_directory(self, path: PathInput) -> None:
        """Remove an empty directory.

        Args:
            path: Directory to remove.

        Raises:
            FileSystemError: If the directory could not be removed.
        """
        ...

    def directory(self, path: PathInput, create: bool = False) -> str | None:
        """Get a directory, optionally creating it.

        Args:
            path: Directory path.
            create: Create it (with parents) when missing.

        Returns:
            Canonical absolute path, or None if missing and not created.

        Raises:
            FileSystemError: If creation was requested and failed.
        """
        ...

    def real_path(self, path: PathInput) -> str:
        """Resolve a path to its canonical absolute form.

        Args:
            path: Path to resolve.

        Returns:
            Resolved path, or the input string unchanged if unresolvable.
        """
        ...
