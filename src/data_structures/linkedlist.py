"""
A singly linked list addressed only by walking from the head.

Time Complexity:
Find: O(position)
Insert/Delete: O(1) for the splice, but O(position) to find the node
Size: O(n), the list keeps no counter
"""

from __future__ import annotations  # allows forward-referencing without quotes

import logging
from typing import Generic, Iterator, List, Optional

from .core.errors import EmptyStructureError, PositionUnreachableError
from .core.types import T

logger = logging.getLogger(__name__)


class ListNode(Generic[T]):
    """
    A node is a container which holds a value of type T
    and the next node it is linked to.
    """

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional[ListNode[T]] = None) -> None:
        self.value: T = value
        self.next: Optional[ListNode[T]] = next

    def __repr__(self) -> str:
        return f"ListNode(value={self.value!r}, next={getattr(self.next, 'value', None)!r})"


class SinglyLinkedList(Generic[T]):
    """
    SinglyLinkedList holds only the head node. Every positional
    operation is built on find(), a linear walk from the head.

    Positions are zero-based. insert_after/delete_after also accept -1,
    meaning "before the head".
    """

    __slots__ = ("_head",)

    def __init__(self, *values: T) -> None:
        self._head: Optional[ListNode[T]] = None

        tail: Optional[ListNode[T]] = None
        for value in values:
            node = ListNode(value)
            if tail is None:
                self._head = node
            else:
                tail.next = node
            tail = node

    @property
    def head(self) -> Optional[ListNode[T]]:
        return self._head

    def __repr__(self) -> str:
        return f"SinglyLinkedList({self.to_list()!r})"

    def __iter__(self) -> Iterator[ListNode[T]]:
        """Yields the nodes from head to tail, fresh on every call"""
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def __len__(self) -> int:
        return self.size()

    def values(self) -> Iterator[T]:
        """Yields the stored values from head to tail"""
        for node in self:
            yield node.value

    def to_list(self) -> List[T]:
        return list(self.values())

    def size(self) -> int:
        """Returns the number of nodes by walking the whole chain"""
        count = 0
        for _ in self:
            count += 1
        return count

    def is_empty(self) -> bool:
        return self._head is None

    def find(self, position: int) -> Optional[ListNode[T]]:
        """
        Returns the node at the zero-based position.
        Negative positions, positions past the tail, and anything that is
        not an int (bool included) return None rather than raising.
        """
        if isinstance(position, bool) or not isinstance(position, int):
            return None
        if position < 0:
            return None

        for i, node in enumerate(self):
            if i == position:
                return node
        return None

    def insert_after(self, position: int, value: T) -> None:
        """
        Inserts a new node holding value right after the node at position.
        position == -1 inserts before the head, so the new node becomes
        the head.
        Raises PositionUnreachableError if no node exists at position.
        """
        if position == -1:
            self._head = ListNode(value, next=self._head)
            return

        current = self.find(position)
        if current is None:
            logger.debug(f"Insert after position {position} failed: unreachable")
            raise PositionUnreachableError(
                position, f"Cannot insert after position {position!r}: unreachable position"
            )
        current.next = ListNode(value, next=current.next)

    def insert_at_head(self, value: T) -> None:
        self.insert_after(-1, value)

    def delete_after(self, position: int) -> None:
        """
        Removes the node right after the node at position.
        position == -1 removes the head itself and raises
        EmptyStructureError when the list is empty; check is_empty() first.
        Deleting past the tail is a no-op.
        Raises PositionUnreachableError if no node exists at position.
        """
        if position == -1:
            if self._head is None:
                raise EmptyStructureError()
            self._head = self._head.next
            return

        current = self.find(position)
        if current is None:
            logger.debug(f"Delete after position {position} failed: unreachable")
            raise PositionUnreachableError(
                position, f"Cannot delete after position {position!r}: unreachable position"
            )
        if current.next is not None:
            current.next = current.next.next

    def delete_at_head(self) -> None:
        self.delete_after(-1)
