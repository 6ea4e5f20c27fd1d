"""
Binary tree nodes and depth-first traversals.

The traversals are generators driven by an explicit stack rather than
recursion, so a degenerate (linked-list shaped) tree cannot exhaust the
interpreter's recursion limit.

Time Complexity: O(n) for a full traversal, O(1) per yielded value amortized
Space Complexity: O(h) for the explicit stack, where h is the tree height
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Tuple

from .core.errors import InvalidNodeTypeError
from .core.types import T


# -----------------------------
# Binary Tree Node
# -----------------------------
class BinaryTreeNode(Generic[T]):
    """A node in a binary tree: a value plus optional left and right children."""

    __slots__ = ("value", "left", "right")

    def __init__(
        self,
        value: T = 0,  # type: ignore[assignment]
        left: Optional[BinaryTreeNode[T]] = None,
        right: Optional[BinaryTreeNode[T]] = None,
    ) -> None:
        self.value = value
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"


def _check_node(node: Any) -> BinaryTreeNode[Any]:
    if not isinstance(node, BinaryTreeNode):
        raise InvalidNodeTypeError(node)
    return node


# -------------------------------
# Traversals
# -------------------------------
def preorder(node: Optional[BinaryTreeNode[T]]) -> Iterator[T]:
    """Yields the node's value, then its left subtree, then its right subtree."""
    stack: List[Any] = [node]
    while stack:
        current = stack.pop()
        if current is None:
            continue
        current = _check_node(current)
        yield current.value
        # Right goes first so that left is popped first
        stack.append(current.right)
        stack.append(current.left)


def inorder(node: Optional[BinaryTreeNode[T]]) -> Iterator[T]:
    """Yields the left subtree, then the node's value, then the right subtree."""
    stack: List[BinaryTreeNode[T]] = []
    current: Any = node
    while stack or current is not None:
        while current is not None:
            stack.append(_check_node(current))
            current = current.left
        visited = stack.pop()
        yield visited.value
        current = visited.right


def postorder(node: Optional[BinaryTreeNode[T]]) -> Iterator[T]:
    """Yields the left subtree, then the right subtree, then the node's value."""
    stack: List[Tuple[Any, bool]] = [(node, False)]
    while stack:
        current, children_done = stack.pop()
        if current is None:
            continue
        current = _check_node(current)
        if children_done:
            yield current.value
            continue
        stack.append((current, True))
        stack.append((current.right, False))
        stack.append((current.left, False))


_TRAVERSALS: Dict[str, Callable[[Optional[BinaryTreeNode[Any]]], Iterator[Any]]] = {
    "preorder": preorder,
    "inorder": inorder,
    "postorder": postorder,
}


# -----------------------------
# Binary Tree
# -----------------------------
class BinaryTree(Generic[T]):
    """
    Binary tree wrapper around a caller-built node graph.

    The wrapper caches nothing: size, height and traversals are computed
    from the nodes on every call, so the caller is free to reshape the
    tree in between.
    """

    __slots__ = ("_root",)

    def __init__(self, root: Optional[BinaryTreeNode[T]] = None) -> None:
        if root is not None:
            _check_node(root)
        self._root = root

    @property
    def root(self) -> Optional[BinaryTreeNode[T]]:
        return self._root

    def __repr__(self) -> str:
        return f"BinaryTree({self.to_list()!r})"

    def is_empty(self) -> bool:
        return self._root is None

    def preorder(self) -> Iterator[T]:
        return preorder(self._root)

    def inorder(self) -> Iterator[T]:
        return inorder(self._root)

    def postorder(self) -> Iterator[T]:
        return postorder(self._root)

    def to_list(self, order: str = "inorder") -> List[T]:
        """Return all values of the tree as a list, in the given traversal order."""
        try:
            traversal = _TRAVERSALS[order]
        except KeyError:
            raise ValueError(
                f"Unknown traversal order {order!r}; expected one of {sorted(_TRAVERSALS)}"
            ) from None
        return list(traversal(self._root))

    def size(self) -> int:
        """Returns the number of nodes, O(n)"""
        return sum(1 for _ in preorder(self._root))

    def height(self) -> int:
        """
        Returns the number of nodes on the longest root-to-leaf path
        (0 for an empty tree).
        Time Complexity: O(n) since every node is visited
        Space Complexity: O(h) for the explicit stack
        """
        max_height = 0
        stack: List[Tuple[Any, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            if node is None:
                continue
            node = _check_node(node)
            max_height = max(max_height, depth)
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
        return max_height
