"""Common type definitions shared by all structures."""

from __future__ import annotations

from typing import Final, TypeVar

# Element type held by a structure
T = TypeVar("T")


class _EmptyType:
    """Marker returned by peek/pop/dequeue on an empty structure.

    Distinct from None so that None can be stored as a regular element.
    """

    _instance: _EmptyType | None = None

    def __new__(cls) -> _EmptyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"

    def __reduce__(self) -> str:
        return "EMPTY"


EMPTY: Final = _EmptyType()
