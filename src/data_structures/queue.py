"""
A FIFO queue kept in a dynamic array: enqueue at the tail, dequeue at index 0.

Enqueue: O(1) amortized
Dequeue: O(n), since every remaining element shifts one slot
Peek: O(1)
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, Union

from .array import DynamicArray
from .core.config import StructuresConfig
from .core.types import EMPTY, T, _EmptyType


class Queue(Generic[T]):
    """
    Queue wraps a DynamicArray whose index 0 is the front and whose
    highest occupied index is the back. Only enqueue, peek and dequeue
    are exposed, so the array's positional operations cannot break the
    FIFO order.

    peek() and dequeue() on an empty queue return EMPTY instead of raising.
    """

    __slots__ = ("_items",)

    def __init__(self, config: Optional[StructuresConfig] = None) -> None:
        self._items: DynamicArray[T] = DynamicArray(config=config)

    def __repr__(self) -> str:
        return f"Queue({self.to_list()!r})"

    def __len__(self) -> int:
        return self._items.size()

    def __iter__(self) -> Iterator[T]:
        """Yields values from the front of the queue to the back"""
        return iter(self._items)

    def size(self) -> int:
        return self._items.size()

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def to_list(self) -> List[T]:
        return self._items.to_list()

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> Union[T, _EmptyType]:
        if self._items.size() == 0:
            return EMPTY
        value = self._items.get(0)
        self._items.remove(0)
        return value

    def peek(self) -> Union[T, _EmptyType]:
        if self._items.size() > 0:
            return self._items.get(0)
        return EMPTY
