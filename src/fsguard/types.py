"""Shared data types for fsguard."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

__all__ = ["Path", "PathInput"]


@dataclass(frozen=True, init=False)
class Path:
    """Immutable filesystem path value.

    Wraps the string a path was constructed from. Nothing is validated:
    the path need not exist, or even be well formed.

    Attributes:
        value: The raw path string.
    """

    value: str

    def __init__(self, value: PathInput) -> None:
        """Store the string form of a str, Path or os.PathLike value.

        Raises:
            TypeError: If value is bytes or a bytes-based os.PathLike.
        """
        if isinstance(value, Path):
            value = value.value
        raw = os.fspath(value)
        if not isinstance(raw, str):
            raise TypeError(f"expected a str path, not {type(raw).__name__}")
        object.__setattr__(self, "value", raw)

    def __str__(self) -> str:
        return self.value

    def __fspath__(self) -> str:
        return self.value


PathInput = Union[str, Path, "os.PathLike[str]"]
