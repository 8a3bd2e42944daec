from typing import Any, Optional

from .core.tree import LEFT, RIGHT, STOP, BinaryTree, Node


class LinkedTree(BinaryTree):
    """A tree that places elements wherever it is told to.

    Useful for building exact shapes in tests, which an ordered tree like
    #BinarySearchTree cannot always produce."""

    def set_root(self, element: Any) -> Node:
        """Replace the whole tree with a single root node holding `element`"""
        self.check_element_not_null(element)
        self.clear()
        self.root = self.create_node(element)
        self._size = 1
        return self.root

    def attach(self, parent: Node, element: Any, side: str = LEFT) -> Node:
        """Attach a new node holding `element` on the given side of `parent`.

        # Arguments
        parent (Node): A node that belongs to this tree
        element (Any): The element to store in the new node
        side (str): Either LEFT or RIGHT

        # Returns
        (Node): The newly attached node

        # Raises
        ValueError: if the element is None or the side is already taken
        """
        self.check_element_not_null(element)
        if side not in (LEFT, RIGHT):
            raise ValueError(f"LinkedTree.attach: invalid side: {side}")
        current = parent.left if side == LEFT else parent.right
        if current is not None:
            raise ValueError(f"LinkedTree.attach: {parent} already has a {side} child")
        node = self.create_node(element, parent)
        parent.set_side(node, side)
        self._size += 1
        return node

    def find(self, element: Any) -> Optional[Node]:
        """Find the first node (preorder) holding `element`, or None"""
        result: Optional[Node] = None
        if self.root is None:
            return result

        def visit_fn(node, depth, data):
            nonlocal result
            if node.element == element:
                result = node
                return STOP

        self.root.visit_preorder(visit_fn)
        return result


def build_tree(shape: Any) -> LinkedTree:
    """Build a #LinkedTree from nested tuples.

    Each node is written `(element, left, right)`, with None for a missing
    child. A leaf may be written as the bare element.

    # Arguments
    shape (Any): The nested shape, e.g. `(5, (3, 1, None), 8)`

    # Returns
    (LinkedTree): The tree with that shape
    """
    tree = LinkedTree()

    def _build(parent, side, sub):
        if sub is None:
            return
        if isinstance(sub, tuple):
            element, left, right = sub
        else:
            element, left, right = sub, None, None
        if parent is None:
            node = tree.set_root(element)
        else:
            node = tree.attach(parent, element, side)
        _build(node, LEFT, left)
        _build(node, RIGHT, right)

    _build(None, LEFT, shape)
    return tree


def build_perfect_tree(depth: int) -> LinkedTree:
    """Build a perfect tree of the given depth holding 1..2**depth - 1, with
    the elements in order when read inorder."""

    def _shape(low, high):
        if low > high:
            return None
        mid = (low + high) // 2
        return (mid, _shape(low, mid - 1), _shape(mid + 1, high))

    return build_tree(_shape(1, 2 ** depth - 1))
