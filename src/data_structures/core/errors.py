"""Exception hierarchy for the data structures package.

Every leaf also derives from the closest built-in exception, so callers
that already catch ``IndexError``, ``LookupError`` or ``TypeError`` keep working.
"""

from __future__ import annotations

from typing import Any


class DataStructureError(Exception):
    """Base exception for all data structure errors."""
    pass


class IndexOutOfRangeError(DataStructureError, IndexError):
    """Raised when an array index falls outside [0, size)."""

    def __init__(self, index: Any, size: int) -> None:
        super().__init__(f"Index out of range: {index!r} (size {size})")
        self.index = index
        self.size = size


class PositionUnreachableError(DataStructureError, LookupError):
    """Raised when a list position does not correspond to an existing node."""

    def __init__(self, position: int, message: str | None = None) -> None:
        super().__init__(message or f"Position {position} is unreachable")
        self.position = position


class EmptyStructureError(PositionUnreachableError):
    """Raised when removing the head of an empty list."""

    def __init__(self) -> None:
        super().__init__(-1, "Cannot delete the head of an empty list")


class InvalidNodeTypeError(DataStructureError, TypeError):
    """Raised when a traversal meets something that is not a tree node."""

    def __init__(self, node: Any) -> None:
        super().__init__(
            f"Expected a BinaryTreeNode or None, got {type(node).__name__}"
        )
        self.node = node


class ConfigError(DataStructureError, ValueError):
    """Raised when configuration values are invalid."""
    pass
