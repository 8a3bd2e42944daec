"""Binary Tree
---

The binary tree here is the foundation that concrete trees (search trees,
balanced trees, and so on) build on. It tracks node linkage and the element
count, answers structural questions like height and completeness, and walks
the nodes in preorder, inorder, postorder, and level order.

The base never compares elements. Ordering questions like
#BinaryTree.predecessor are answered purely by the position of nodes.
"""
from typing import Any, Callable, Iterator, List, Optional

from .queue import WorkQueue

# ## Constants


class _Stop:
    def __repr__(self):
        return "STOP"


# Return this from a visit function to abort a tree visit. Visit results are
# compared by identity, so elements that equal "stop" never end a visit.
STOP = _Stop()
# The constant representing the left child side of a node.
LEFT = "left"
# The constant representing the right child side of a node.
RIGHT = "right"
# The traversal orders understood by #BinaryTree.to_list
TRAVERSAL_ORDERS = ("preorder", "inorder", "postorder", "level")

VisitFn = Callable[["Node", int, Any], Any]


class Node:
    """
    A node holds one element and links to its left child, right child, and
    parent. Children are owned by the node. The parent link is only used to
    walk back up the tree.
    """

    left: Optional["Node"]
    right: Optional["Node"]
    parent: Optional["Node"]

    def __init__(
        self,
        element: Any,
        parent: "Node" = None,
        left: "Node" = None,
        right: "Node" = None,
    ):
        self.element = element
        self.parent = parent
        self.left = None
        self.right = None
        self.set_left(left)
        self.set_right(right)

    def is_leaf(self) -> bool:
        """Is this node a leaf?  A node is a leaf if it has no children."""
        return self.left is None and self.right is None

    def is_left_child(self) -> bool:
        return self.parent is not None and self.parent.left is self

    def is_right_child(self) -> bool:
        return self.parent is not None and self.parent.right is self

    def get_sibling(self) -> Optional["Node"]:
        """Get the sibling node of this node.  If there is no parent, or the node
        has no sibling, the return value will be None."""
        if self.is_left_child():
            return self.parent.right

        if self.is_right_child():
            return self.parent.left

        return None

    def get_uncle(self) -> Optional["Node"]:
        """Get the sibling of this node's parent, or None"""
        if self.parent is None:
            return None
        return self.parent.get_sibling()

    def get_root(self) -> "Node":
        """Return the root element of this tree"""
        result = self
        while result.parent:
            result = result.parent

        return result

    def get_children(self) -> List["Node"]:
        """Get children as an array.  If there are two children, the first object will
        always represent the left child, and the second will represent the right."""
        result = []
        if self.left:
            result.append(self.left)

        if self.right:
            result.append(self.right)

        return result

    # **Child Management**
    #
    # Methods for setting the children on a node.  These take care of
    # making sure that the proper parent assignments also take place.

    def _check_child(self, child: Optional["Node"]) -> None:
        if child is None:
            return
        node: Optional[Node] = self
        while node is not None:
            if node is child:
                raise ValueError("nodes cannot be their own children or ancestors")
            node = node.parent

    def _take_child(self, child: Optional["Node"]) -> None:
        # A node has one parent. Moving it empties the slot it was linked from.
        if child is None or child.parent is None:
            return
        if child.parent.left is child:
            child.parent.left = None
        elif child.parent.right is child:
            child.parent.right = None

    def set_left(
        self, child: "Node" = None, clear_old_child_parent=False
    ) -> "Node":
        """Set the left node to the passed `child`. A `child` that is already
        linked under another node is moved here."""
        self._check_child(child)
        self._take_child(child)
        if self.left is not None and clear_old_child_parent:
            self.left.parent = None
        self.left = child
        if self.left:
            self.left.parent = self

        return self

    def set_right(
        self, child: "Node" = None, clear_old_child_parent=False
    ) -> "Node":
        """Set the right node to the passed `child`. A `child` that is already
        linked under another node is moved here."""
        self._check_child(child)
        self._take_child(child)
        if self.right is not None and clear_old_child_parent:
            self.right.parent = None
        self.right = child
        if self.right:
            self.right.parent = self

        return self

    def get_side(self, child: "Node") -> str:
        """Determine whether the given `child` is the left or right child of this
        node"""
        if child is self.left:
            return LEFT

        if child is self.right:
            return RIGHT

        raise ValueError("Node.get_side: not a child of this node")

    def set_side(self, child: Optional["Node"], side: str, **kwargs) -> "Node":
        """Set a new `child` on the given `side`"""
        if side == LEFT:
            return self.set_left(child, **kwargs)

        if side == RIGHT:
            return self.set_right(child, **kwargs)

        raise ValueError("Node.set_side: Invalid side")

    # **Visits**
    #
    # Each visit function is passed three arguments: the node being visited,
    # the current depth in the tree, and a user specified data parameter.
    # Returning `STOP` from the visit function cancels the rest of the visit.

    def visit_preorder(self, visit_fn: VisitFn, depth=0, data=None):
        """Visit the tree preorder, which visits the current node, then its left
        child, and then its right child.

        *Visit -> Left -> Right*
        """
        if visit_fn and visit_fn(self, depth, data) is STOP:
            return STOP

        if self.left and self.left.visit_preorder(visit_fn, depth + 1, data) is STOP:
            return STOP

        if self.right and self.right.visit_preorder(visit_fn, depth + 1, data) is STOP:
            return STOP

    def visit_inorder(self, visit_fn: VisitFn, depth=0, data=None):
        """Visit the tree inorder, which visits the left child, then the current node,
        and then its right child.

        *Left -> Visit -> Right*
        """
        if self.left and self.left.visit_inorder(visit_fn, depth + 1, data) is STOP:
            return STOP

        if visit_fn and visit_fn(self, depth, data) is STOP:
            return STOP

        if self.right and self.right.visit_inorder(visit_fn, depth + 1, data) is STOP:
            return STOP

    def visit_postorder(self, visit_fn: VisitFn, depth=0, data=None):
        """Visit the tree postorder, which visits its left child, then its right child,
        and finally the current node.

        *Left -> Right -> Visit*
        """
        if self.left and self.left.visit_postorder(visit_fn, depth + 1, data) is STOP:
            return STOP

        if self.right and self.right.visit_postorder(visit_fn, depth + 1, data) is STOP:
            return STOP

        if visit_fn and visit_fn(self, depth, data) is STOP:
            return STOP

    def visit_level_order(self, visit_fn: VisitFn, depth=0, data=None):
        """Visit the tree level by level, left to right within a level.

        Children are queued before their parent is visited, but no node is
        visited before every node of the level above it.
        """
        queue: WorkQueue = WorkQueue()
        queue.offer((self, depth))
        while not queue.is_empty():
            node, node_depth = queue.poll()
            if node.left:
                queue.offer((node.left, node_depth + 1))
            if node.right:
                queue.offer((node.right, node_depth + 1))
            if visit_fn and visit_fn(node, node_depth, data) is STOP:
                return STOP

    def __str__(self):
        return str(self.element)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.element!r})"


class BinaryTreeInfo:
    """Read-only view of a binary tree, for printers and other tools that only
    need to look at the structure.

    `get_root` returns an opaque node handle (or None), and the other methods
    accept the handles it gives out."""

    def get_root(self) -> Any:
        raise NotImplementedError("must be implemented in subclass")

    def get_left(self, node: Any) -> Any:
        raise NotImplementedError("must be implemented in subclass")

    def get_right(self, node: Any) -> Any:
        raise NotImplementedError("must be implemented in subclass")

    def get_label(self, node: Any) -> str:
        raise NotImplementedError("must be implemented in subclass")


class BinaryTree(BinaryTreeInfo):
    """Base class for binary trees.

    Holds the root node and element count. Subclasses decide where new
    elements go; this class supplies the queries and traversals they share.
    """

    # The class used by #BinaryTree.create_node
    node_class = Node

    root: Optional[Node]

    def __init__(self):
        self.root = None
        self._size = 0

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        """Discard every node in the tree"""
        self.root = None
        self._size = 0

    def create_node(self, element: Any, parent: Optional[Node] = None) -> Node:
        """Create a node for this tree. Subclasses that keep extra state on
        their nodes override `node_class` or this method."""
        return self.node_class(element, parent)

    def check_element_not_null(self, element: Any) -> None:
        """Raise a ValueError if `element` is None. Call this before mutating
        the tree with a new element."""
        if element is None:
            raise ValueError("element must not be None")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the elements inorder"""
        stack: List[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            node = node.right

    # **Structure**

    def height(self) -> int:
        """The number of nodes on the longest path from the root to a leaf. An
        empty tree has a height of 0."""
        return self._height(self.root)

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return max(self._height(node.left), self._height(node.right)) + 1

    def is_complete(self) -> bool:
        """Is this a complete binary tree?

        Every level must be full, except the last which is filled from the
        left with no gaps. An empty tree is not complete."""
        if self.root is None:
            return False

        queue: WorkQueue[Node] = WorkQueue()
        queue.offer(self.root)
        # Once a node is missing a child, every node after it must be a leaf
        only_leaf = False
        while not queue.is_empty():
            node = queue.poll()
            if only_leaf and not node.is_leaf():
                return False

            if node.left is not None:
                queue.offer(node.left)
            elif node.right is not None:
                return False

            if node.right is not None:
                queue.offer(node.right)
            else:
                only_leaf = True
        return True

    def predecessor(self, node: Optional[Node]) -> Optional[Node]:
        """Get the node that comes right before `node` inorder, or None"""
        if node is None:
            return None

        # rightmost node of the left subtree
        p = node.left
        if p is not None:
            while p.right is not None:
                p = p.right
            return p

        # first ancestor reached from its right side
        while node.is_left_child():
            node = node.parent
        return node.parent

    def successor(self, node: Optional[Node]) -> Optional[Node]:
        """Get the node that comes right after `node` inorder, or None"""
        if node is None:
            return None

        # leftmost node of the right subtree
        p = node.right
        if p is not None:
            while p.left is not None:
                p = p.left
            return p

        # first ancestor reached from its left side
        while node.is_right_child():
            node = node.parent
        return node.parent

    # **Traversals**
    #
    # The traversal entry points call `visitor(element)` once per element.
    # Returning `STOP` from the visitor ends the traversal early, and errors
    # raised by the visitor propagate to the caller.

    def _element_visit(self, visitor: Callable[[Any], Any]) -> VisitFn:
        if visitor is None:
            raise ValueError("visitor must not be None")

        def visit_fn(node, depth, data):
            return visitor(node.element)

        return visit_fn

    def preorder_traversal(self, visitor: Callable[[Any], Any]) -> None:
        visit_fn = self._element_visit(visitor)
        if self.root is not None:
            self.root.visit_preorder(visit_fn)

    def inorder_traversal(self, visitor: Callable[[Any], Any]) -> None:
        visit_fn = self._element_visit(visitor)
        if self.root is not None:
            self.root.visit_inorder(visit_fn)

    def postorder_traversal(self, visitor: Callable[[Any], Any]) -> None:
        visit_fn = self._element_visit(visitor)
        if self.root is not None:
            self.root.visit_postorder(visit_fn)

    def level_order_traversal(self, visitor: Callable[[Any], Any]) -> None:
        visit_fn = self._element_visit(visitor)
        if self.root is not None:
            self.root.visit_level_order(visit_fn)

    def to_list(self, order: str = "inorder") -> List[Any]:
        """Collect the elements of this tree into a list, in the given order."""
        results: List[Any] = []

        if order == "inorder":
            self.inorder_traversal(results.append)
        elif order == "preorder":
            self.preorder_traversal(results.append)
        elif order == "postorder":
            self.postorder_traversal(results.append)
        elif order == "level":
            self.level_order_traversal(results.append)
        else:
            raise ValueError(f"invalid traversal order: {order}")
        return results

    # **Introspection**

    def get_root(self) -> Optional[Node]:
        return self.root

    def get_left(self, node: Node) -> Optional[Node]:
        return node.left

    def get_right(self, node: Node) -> Optional[Node]:
        return node.right

    def get_label(self, node: Node) -> str:
        return str(node)
