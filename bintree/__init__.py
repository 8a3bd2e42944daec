from .about import __version__
from .config import PrinterConfig
from .core.layout import TreeLayout, TreeMeasurement, TreeRenderer, print_tree
from .core.queue import WorkQueue
from .core.search import BinarySearchTree
from .core.tree import (
    LEFT,
    RIGHT,
    STOP,
    TRAVERSAL_ORDERS,
    BinaryTree,
    BinaryTreeInfo,
    Node,
)
