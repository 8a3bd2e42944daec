from typing import Any, Callable, Optional

from .tree import BinaryTree, Node


class BinarySearchTree(BinaryTree):
    """A binary search tree ordered by element, or by `key(element)` when a
    key function is given. The tree is not balanced."""

    def __init__(self, key: Callable[[Any], Any] = None):
        super(BinarySearchTree, self).__init__()
        self.key = key

    def compare(self, a: Any, b: Any) -> int:
        """Return a positive number if `a` sorts after `b`, a negative number if
        it sorts before, and 0 if they are equal."""
        if self.key is not None:
            a, b = self.key(a), self.key(b)
        if a > b:
            return 1
        if a < b:
            return -1
        return 0

    def add(self, element: Any) -> "BinarySearchTree":
        """Insert an element. An element that compares equal to one already in
        the tree replaces it."""
        self.check_element_not_null(element)
        if self.root is None:
            self.root = self.create_node(element)
            self._size += 1
            return self

        node = self.root
        while node:
            cmp = self.compare(element, node.element)
            if cmp > 0:
                if not node.right:
                    node.set_right(self.create_node(element, node))
                    break
                node = node.right
            elif cmp < 0:
                if not node.left:
                    node.set_left(self.create_node(element, node))
                    break
                node = node.left
            else:
                node.element = element
                return self
        self._size += 1
        return self

    def get_node(self, element: Any) -> Optional[Node]:
        """Find the node holding `element`. Return None if the element is not
        in the tree."""
        self.check_element_not_null(element)
        node = self.root
        while node:
            cmp = self.compare(element, node.element)
            if cmp > 0:
                node = node.right
            elif cmp < 0:
                node = node.left
            else:
                return node
        return None

    def contains(self, element: Any) -> bool:
        return self.get_node(element) is not None

    def __contains__(self, element: Any) -> bool:
        return element is not None and self.contains(element)

    def remove(self, element: Any) -> bool:
        """Remove `element` from the tree. Returns False if it was not found."""
        node = self.get_node(element)
        if node is None:
            return False
        self.remove_node(node)
        return True

    def remove_node(self, node: Node) -> None:
        """Unlink `node` from the tree.

        A node with two children takes over the element of its successor, and
        the successor node is unlinked in its place."""
        if node.left is not None and node.right is not None:
            after = self.successor(node)
            node.element = after.element
            node = after

        # node has at most one child here
        replacement = node.left if node.left is not None else node.right
        parent = node.parent
        if parent is None:
            self.root = replacement
            if replacement is not None:
                replacement.parent = None
        else:
            parent.set_side(replacement, parent.get_side(node))

        node.parent = node.left = node.right = None
        self._size -= 1

    def min(self) -> Any:
        """The smallest element in the tree"""
        if self.root is None:
            raise ValueError("BinarySearchTree.min: the tree is empty")
        node = self.root
        while node.left is not None:
            node = node.left
        return node.element

    def max(self) -> Any:
        """The largest element in the tree"""
        if self.root is None:
            raise ValueError("BinarySearchTree.max: the tree is empty")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.element
