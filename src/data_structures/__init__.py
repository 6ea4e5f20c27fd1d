"""Data Structures - small linear and tree data structures in Python."""

from .array import DynamicArray
from .core.config import StructuresConfig
from .core.errors import (
    ConfigError,
    DataStructureError,
    EmptyStructureError,
    IndexOutOfRangeError,
    InvalidNodeTypeError,
    PositionUnreachableError,
)
from .core.types import EMPTY
from .linkedlist import ListNode, SinglyLinkedList
from .queue import Queue
from .stack import Stack
from .tree import BinaryTree, BinaryTreeNode, inorder, postorder, preorder

__all__ = [
    "DynamicArray",
    "ListNode",
    "SinglyLinkedList",
    "Stack",
    "Queue",
    "BinaryTreeNode",
    "BinaryTree",
    "preorder",
    "inorder",
    "postorder",
    "StructuresConfig",
    "EMPTY",
    "DataStructureError",
    "IndexOutOfRangeError",
    "PositionUnreachableError",
    "EmptyStructureError",
    "InvalidNodeTypeError",
    "ConfigError",
]
