"""Application context for dependency injection.

Separates object creation from object use so CLI commands can be tested
with a substituted filesystem. The dependency is typed with the FileSystem
protocol rather than a concrete class.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from fsguard.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from fsguard.filesystem import LocalFileSystem
    return LocalFileSystem.create()


@dataclass
class AppContext:
    """Container for application dependencies."""

    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context() -> AppContext:
    """Factory for production dependencies.

    For tests, construct AppContext directly with test doubles.
    """
    return AppContext(filesystem=_default_filesystem())
