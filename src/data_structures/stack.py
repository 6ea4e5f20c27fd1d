"""
A LIFO stack kept at the head of a singly linked list.

Push/Pop/Peek: O(1), all work happens at the head.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, Union

from .core.types import EMPTY, T, _EmptyType
from .linkedlist import SinglyLinkedList


class Stack(Generic[T]):
    """
    Stack wraps a SinglyLinkedList whose head is the top of the stack.
    Only push, peek and pop are exposed, so the list's positional
    operations cannot break the LIFO order.

    peek() and pop() on an empty stack return EMPTY instead of raising.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: SinglyLinkedList[T] = SinglyLinkedList()

    def __repr__(self) -> str:
        return f"Stack({self.to_list()!r})"

    def __len__(self) -> int:
        return self._items.size()

    def __iter__(self) -> Iterator[T]:
        """Yields values from the top of the stack to the bottom"""
        return self._items.values()

    def size(self) -> int:
        return self._items.size()

    def is_empty(self) -> bool:
        return self._items.is_empty()

    def to_list(self) -> List[T]:
        return self._items.to_list()

    def push(self, value: T) -> None:
        self._items.insert_at_head(value)

    def peek(self) -> Union[T, _EmptyType]:
        head = self._items.head
        if head is None:
            return EMPTY
        return head.value

    def pop(self) -> Union[T, _EmptyType]:
        head = self._items.head
        if head is None:
            return EMPTY
        self._items.delete_at_head()
        return head.value
