"""Linked binary tree nodes and the queries that can be made on them."""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional


class Node:
    """A node of a binary tree holding an integer value.

    Each node knows its parent and its two children.  Creating a node with a
    parent does not attach it to that parent; link it through ``left`` or
    ``right`` or use :meth:`insert_left` and :meth:`insert_right`.
    """

    __slots__ = ("n", "parent", "left", "right")

    def __init__(self, n: int, parent: Optional[Node] = None) -> None:
        self.n = n
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.n!r})"

    # -- structure -------------------------------------------------------

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; the old left child moves below it."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; the old right child moves below it."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Remove this subtree from its tree and unlink every node in it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        for node in list(self._walk()):
            node.left = None
            node.right = None
            node.parent = None

    # -- node properties --------------------------------------------------

    def is_leaf(self) -> bool:
        """Return whether the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return whether the node has no parent."""
        return self.parent is None

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        return parent.left

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    # -- traversals ------------------------------------------------------

    def _walk(self) -> Iterator[Node]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> Iterator[int]:
        """Yield values node first, then left subtree, then right subtree."""
        for node in self._walk():
            yield node.n

    def inorder(self) -> Iterator[int]:
        """Yield values left subtree first, then node, then right subtree."""
        stack: list[Node] = []
        node: Optional[Node] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.n
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values left subtree first, then right subtree, then node."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.n
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    # -- measurements ----------------------------------------------------

    @staticmethod
    def _levels(node: Optional[Node]) -> int:
        """Number of levels below and including ``node``; 0 for no node."""
        if node is None:
            return 0
        levels = 0
        queue = deque([node])
        while queue:
            levels += 1
            for _ in range(len(queue)):
                current = queue.popleft()
                if current.left is not None:
                    queue.append(current.left)
                if current.right is not None:
                    queue.append(current.right)
        return levels

    def height(self) -> int:
        """Return the number of edges on the longest path down to a leaf."""
        return self._levels(self) - 1

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Return the number of nodes in the subtree."""
        return sum(1 for _ in self._walk())

    def leaves(self) -> int:
        """Return the number of nodes without children."""
        return sum(1 for node in self._walk() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Return the number of nodes with at least one child."""
        return sum(1 for node in self._walk() if not node.is_leaf())

    def balance(self) -> int:
        """Return the level count of the left subtree minus that of the right."""
        return self._levels(self.left) - self._levels(self.right)

    def is_full(self) -> bool:
        """Return whether every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self._walk()
        )

    def is_perfect(self) -> bool:
        """Return whether the tree is full with all leaves on one level."""
        if not self.is_full():
            return False
        leaf_level = 0
        node = self
        while not node.is_leaf():
            node = node.left if node.left is not None else node.right
            leaf_level += 1
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if node.is_leaf():
                if level != leaf_level:
                    return False
                continue
            stack.append((node.left, level + 1))
            stack.append((node.right, level + 1))
        return True