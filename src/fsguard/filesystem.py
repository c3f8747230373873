"""Local filesystem facade.

Wraps os and pathlib primitives. Query methods report any OS failure as
False; mutating methods wrap it in FileSystemError. LocalFileSystem
satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import logging
import os
import pathlib
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from fsguard.types import PathInput

logger = logging.getLogger(__name__)

# Mode bits for new directories, before umask
DEFAULT_PERMISSIONS = 0o777


class FileSystemError(Exception):
    """Error during a mutating filesystem operation.

    Attributes:
        operation: The attempted operation ("create" or "remove").
        path: The path the operation was attempted on.
    """

    def __init__(self, operation: str, path: str) -> None:
        super().__init__(f"Could not {operation} directory: '{path}'")
        self.operation = operation
        self.path = path


class LocalFileSystem:
    """Stateless facade over the host filesystem."""

    @classmethod
    def create(cls) -> LocalFileSystem:
        """Create a filesystem facade for the host filesystem."""
        return cls()

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def exists(self, path: PathInput) -> bool:
        """Check if a path exists, following symlinks."""
        return self._check("exists", path, lambda p: pathlib.Path(p).exists())

    def is_file(self, path: PathInput) -> bool:
        """Check if a path resolves to a regular file."""
        return self._check("is_file", path, lambda p: pathlib.Path(p).is_file())

    def is_directory(self, path: PathInput) -> bool:
        """Check if a path resolves to a directory."""
        return self._check("is_directory", path, lambda p: pathlib.Path(p).is_dir())

    def is_readable(self, path: PathInput) -> bool:
        """Check if the current process can read a path."""
        return self._check("is_readable", path, lambda p: os.access(p, os.R_OK))

    def is_writable(self, path: PathInput) -> bool:
        """Check if the current process can write a path."""
        return self._check("is_writable", path, lambda p: os.access(p, os.W_OK))

    def _check(self, name: str, path: PathInput, predicate: Callable[[str], bool]) -> bool:
        """Run a predicate, reporting any OS failure as False.

        False therefore means either "does not hold" or "could not be
        determined"; callers cannot tell the two apart.
        """
        target = os.fspath(path)
        try:
            return bool(predicate(target))
        except (OSError, ValueError) as e:
            logger.debug("%s check failed for '%s': %s", name, target, e)
            return False

    # ------------------------------------------------------------------
    # Directories
    # ------------------------------------------------------------------

    def make_directory(
        self,
        path: PathInput,
        permissions: int = DEFAULT_PERMISSIONS,
        recursive: bool = False,
    ) -> str:
        """Create a directory.

        An existing directory at path is an error, even when recursive.
        A failed recursive create may leave intermediate directories behind.

        Args:
            path: Directory to create.
            permissions: Mode bits for the new directory (umask applies).
            recursive: Create missing parent directories, each with the
                same permissions.

        Returns:
            Canonical absolute path of the created directory.

        Raises:
            FileSystemError: If the directory could not be created.
        """
        target = os.fspath(path)
        try:
            if recursive:
                self._make_parents(pathlib.Path(target), permissions)
            os.mkdir(target, permissions)
        except (OSError, ValueError) as e:
            logger.debug("mkdir failed for '%s': %s", target, e)
            raise FileSystemError("create", target) from e
        return self.real_path(target)

    def _make_parents(self, directory: pathlib.Path, permissions: int) -> None:
        """Create the missing ancestors of directory, shallowest first.

        Every created ancestor gets the same mode bits as the leaf.
        """
        missing = []
        for ancestor in directory.parents:
            if ancestor.is_dir():
                break
            missing.append(ancestor)
        for ancestor in reversed(missing):
            try:
                os.mkdir(ancestor, permissions)
            except FileExistsError:
                # "x/.." style segments appear once x has been created
                if not ancestor.is_dir():
                    raise

    def remove_directory(self, path: PathInput) -> None:
        """Remove an empty directory.

        Raises:
            FileSystemError: If the directory is missing, non-empty or
                could not be removed.
        """
        target = os.fspath(path)
        try:
            pathlib.Path(target).rmdir()
        except (OSError, ValueError) as e:
            logger.debug("rmdir failed for '%s': %s", target, e)
            raise FileSystemError("remove", target) from e

    def directory(self, path: PathInput, create: bool = False) -> str | None:
        """Get a directory, optionally creating it with its parents.

        The check and the create are separate calls; another process may
        create or remove the directory in between.

        Args:
            path: Directory path.
            create: Create the directory when it is missing.

        Returns:
            Canonical absolute path, or None if missing and not created.

        Raises:
            FileSystemError: If creation was requested and failed.
        """
        if self.is_directory(path):
            return self.real_path(path)
        if create:
            return self.make_directory(path, recursive=True)
        return None

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    def real_path(self, path: PathInput) -> str:
        """Resolve a path to its canonical absolute form.

        Returns the input string unchanged when it cannot be resolved.
        """
        target = os.fspath(path)
        try:
            return os.path.realpath(target, strict=True)
        except (OSError, ValueError) as e:
            logger.debug("realpath failed for '%s': %s", target, e)
            return target
