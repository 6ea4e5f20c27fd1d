"""
A dynamic array: contiguous, index-addressable storage that grows on demand.

Time Complexity:
Get/Set: O(1)
Append: O(1) amortized (geometric growth of the backing storage)
Add/Remove: O(n - index), since trailing elements are shifted one slot
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterable, Iterator, List, Optional

from .core.config import StructuresConfig
from .core.errors import IndexOutOfRangeError
from .core.types import T

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """
    DynamicArray keeps elements in a fixed-size backing buffer and a
    separate count of occupied slots. The buffer is replaced by a larger
    one when it fills up; it never shrinks.

    Only indices in [0, size()) are reachable through the public methods,
    whatever the physical capacity of the buffer.
    """

    __slots__ = ("_config", "_slots", "_count")

    def __init__(
        self,
        values: Optional[Iterable[T]] = None,
        config: Optional[StructuresConfig] = None,
    ) -> None:
        self._config = config if config is not None else StructuresConfig()
        self._slots: List[Any] = [None] * self._config.initial_capacity
        self._count = 0

        if values is not None:
            for value in values:
                self.append(value)

    def __repr__(self) -> str:
        return f"DynamicArray({self.to_list()!r})"

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """
        Yields the elements in index order.
        Every call starts a fresh walk over the current contents, checking
        size() at each step. Mutating the array mid-walk is the caller's
        hazard: elements may be skipped or seen twice.
        """
        i = 0
        while i < self.size():
            yield self.get(i)
            i += 1

    def _check_index(self, index: Any) -> None:
        # bool is an int subclass but never a meaningful position
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRangeError(index, self._count)
        if index < 0 or index >= self._count:
            raise IndexOutOfRangeError(index, self._count)

    def _grow(self) -> None:
        old_capacity = len(self._slots)
        new_capacity = self._config.next_capacity(old_capacity)
        slots: List[Any] = [None] * new_capacity
        for i in range(self._count):
            slots[i] = self._slots[i]
        self._slots = slots
        logger.debug(f"Grew backing storage from {old_capacity} to {new_capacity} slots")

    def size(self) -> int:
        """Returns the number of occupied slots, O(1)"""
        return self._count

    def capacity(self) -> int:
        """Returns the number of allocated backing slots (always >= size())"""
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._count == 0

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._slots[index]

    def set(self, index: int, value: T) -> None:
        self._check_index(index)
        self._slots[index] = value

    def append(self, value: T) -> None:
        """
        Places value at position size().
        O(1) amortized: the occasional O(n) copy into a larger buffer is
        spread across the appends that filled it.
        """
        if self._count == len(self._slots):
            self._grow()
        self._slots[self._count] = value
        self._count += 1

    def add(self, index: int, value: T) -> None:
        """
        Inserts value at index, shifting [index, size()) one slot towards
        the tail.
        NOTE: index must already be occupied, so add() cannot target
        size(); use append() to insert at the end.
        """
        self._check_index(index)
        if self._count == len(self._slots):
            self._grow()

        i = self._count
        while i > index:
            self._slots[i] = self._slots[i - 1]
            i -= 1
        self._slots[index] = value
        self._count += 1

    def remove(self, index: int) -> None:
        """
        Deletes the element at index, shifting (index, size()) one slot
        towards the head.
        """
        self._check_index(index)

        for i in range(index + 1, self._count):
            self._slots[i - 1] = self._slots[i]
        self._count -= 1
        # Drop the stale reference left behind in the vacated slot
        self._slots[self._count] = None

    def to_list(self) -> List[T]:
        """Materializes the elements, in index order, into a new list"""
        return list(self)
