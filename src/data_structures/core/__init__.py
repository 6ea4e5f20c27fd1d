"""Shared errors, configuration and types."""

from .config import StructuresConfig
from .errors import (
    ConfigError,
    DataStructureError,
    EmptyStructureError,
    IndexOutOfRangeError,
    InvalidNodeTypeError,
    PositionUnreachableError,
)
from .types import EMPTY

__all__ = [
    "StructuresConfig",
    "DataStructureError",
    "IndexOutOfRangeError",
    "PositionUnreachableError",
    "EmptyStructureError",
    "InvalidNodeTypeError",
    "ConfigError",
    "EMPTY",
]
