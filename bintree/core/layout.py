"""Tree Layout
---

In order to help visualize, understand, and debug trees, bintree implements a
[Reingold-Tilford](https://reingold.co/tidier-drawings.pdf){target=_blank}
layout algorithm that works with anything implementing #BinaryTreeInfo. The
layout is computed on a private mirror of the tree, so the tree being drawn
is never modified.

#TreeRenderer turns a layout into text like:

```
    5
   / \\
  3   8
 /
1
```
"""
import math
import sys
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from colr import color

from ..config import PrinterConfig
from .tree import LEFT, RIGHT, BinaryTreeInfo


class LayoutNode:
    """Mirror of one node of a #BinaryTreeInfo, with layout state attached."""

    left: Optional["LayoutNode"]
    right: Optional["LayoutNode"]
    parent: Optional["LayoutNode"]
    thread: Optional["LayoutNode"]

    def __init__(
        self,
        source: Any,
        label: str,
        depth: int,
        parent: "LayoutNode" = None,
        side: Optional[str] = None,
    ):
        self.source = source
        self.label = label
        self.depth = depth
        self.parent = parent
        self.side = side
        self.left = None
        self.right = None
        self.x = 0.0
        self.y = 0.0
        # Horizontal distance from this node to each of its children
        self.offset = 0.0
        # Leaves at the bottom of a shallow subtree are threaded to the next
        # node on the contour of a deeper neighbor subtree
        self.thread = None
        self.thread_offset = 0.0

    def next_on_left_contour(self) -> Tuple[Optional["LayoutNode"], float]:
        """The next node down the left contour, and its offset from this one"""
        if self.left is not None:
            return self.left, -self.offset
        if self.right is not None:
            return self.right, self.offset
        if self.thread is not None:
            return self.thread, self.thread_offset
        return None, 0.0

    def next_on_right_contour(self) -> Tuple[Optional["LayoutNode"], float]:
        """The next node down the right contour, and its offset from this one"""
        if self.right is not None:
            return self.right, self.offset
        if self.left is not None:
            return self.left, -self.offset
        if self.thread is not None:
            return self.thread, self.thread_offset
        return None, 0.0

    def walk(self) -> Iterator["LayoutNode"]:
        """Yield this node and its descendants, preorder"""
        yield self
        if self.left is not None:
            yield from self.left.walk()
        if self.right is not None:
            yield from self.right.walk()

    def __repr__(self):
        return f"LayoutNode({self.label!r}, x={self.x}, y={self.y})"


class TreeLayout:
    """Calculate a visual layout for input trees."""

    min_separation = 1.0

    def layout(
        self,
        info: BinaryTreeInfo,
        unit_x_multiplier: float = 1.0,
        unit_y_multiplier: float = 1.0,
    ) -> "TreeMeasurement":
        """Assign x/y values to a mirror of every node in the tree, and return an
        object containing the measurements of the tree.

        The mirrored nodes are reachable from `TreeMeasurement.root`."""
        root = self.mirror(info)
        self.measure(root)
        measure = self.transform(root, 0, unit_x_multiplier, unit_y_multiplier)
        measure.root = root
        return measure

    def mirror(self, info: BinaryTreeInfo) -> Optional[LayoutNode]:
        """Copy the structure of `info` into #LayoutNode objects"""

        def _mirror(source, depth, parent, side):
            if source is None:
                return None
            node = LayoutNode(source, info.get_label(source), depth, parent, side)
            node.left = _mirror(info.get_left(source), depth + 1, node, LEFT)
            node.right = _mirror(info.get_right(source), depth + 1, node, RIGHT)
            return node

        return _mirror(info.get_root(), 0, None, None)

    def measure(
        self,
        node: LayoutNode = None,
        level=0,
        left_most: "TidierExtreme" = None,
        right_most: "TidierExtreme" = None,
    ) -> "TreeLayout":
        """Assign each node's offset to its children, bottom up, so that the
        subtrees below every node are at least `min_separation` apart."""
        if left_most is None:
            left_most = TidierExtreme()
        if right_most is None:
            right_most = TidierExtreme()

        # Avoid selecting as extreme
        if node is None:
            left_most.level = right_most.level = -1
            return self

        # Assign the `node.y`, note the left/right child nodes, and recurse
        node.y = level
        left = node.left
        right = node.right
        left_left, left_right = TidierExtreme(), TidierExtreme()
        right_left, right_right = TidierExtreme(), TidierExtreme()
        self.measure(left, level + 1, left_left, left_right)
        self.measure(right, level + 1, right_left, right_right)

        # A leaf is both the leftmost and rightmost node on the lowest level of the
        # subtree consisting of itself.
        if left is None and right is None:
            node.offset = 0.0
            left_most.set(node, level, 0.0)
            right_most.set(node, level, 0.0)
            return self

        # Separation between the subtrees at the current level, and the extra
        # separation needed at the root to keep every level apart.
        current_separation = self.min_separation
        root_separation = 0.0

        # The offset from left/right children to the contour nodes being compared
        left_offset_sum = 0.0
        right_offset_sum = 0.0

        # Traverse the subtrees until one of them is exhausted, pushing them apart
        # as needed.
        while left is not None and right is not None:
            if current_separation < self.min_separation:
                root_separation += self.min_separation - current_separation
                current_separation = self.min_separation

            left, step = left.next_on_right_contour()
            left_offset_sum += step
            current_separation -= step

            right, step = right.next_on_left_contour()
            right_offset_sum += step
            current_separation += step

        # Set the root offset, and make the accumulated offsets relative to it
        node.offset = (root_separation + self.min_separation) / 2
        left_offset_sum -= node.offset
        right_offset_sum += node.offset

        # Update right and left extremes
        if right_left.level > left_left.level or node.left is None:
            left_most.set(right_left.node, right_left.level, right_left.offset + node.offset)
        else:
            left_most.set(left_left.node, left_left.level, left_left.offset - node.offset)

        if left_right.level > right_right.level or node.right is None:
            right_most.set(left_right.node, left_right.level, left_right.offset - node.offset)
        else:
            right_most.set(right_right.node, right_right.level, right_right.offset + node.offset)

        # If the subtrees have uneven heights, thread the bottom extreme of the
        # shallow one to the next contour node of the deep one.
        if left is not None and left is not node.left:
            extreme = right_right.node
            extreme.thread = left
            extreme.thread_offset = left_offset_sum - (right_right.offset + node.offset)
        elif right is not None and right is not node.right:
            extreme = left_left.node
            extreme.thread = right
            extreme.thread_offset = right_offset_sum - (left_left.offset - node.offset)

        return self

    def transform(
        self,
        node: LayoutNode = None,
        x=0.0,
        unit_x_multiplier=1.0,
        unit_y_multiplier=1.0,
        measure=None,
    ) -> "TreeMeasurement":
        """Transform relative to absolute coordinates, and measure the bounds of the tree.

        Return a measurement of the tree in output units."""
        if measure is None:
            measure = TreeMeasurement()
        if node is None:
            return measure

        node.x = x * unit_x_multiplier
        node.y *= unit_y_multiplier
        self.transform(
            node.left, x - node.offset, unit_x_multiplier, unit_y_multiplier, measure
        )
        self.transform(
            node.right, x + node.offset, unit_x_multiplier, unit_y_multiplier, measure
        )
        measure.include(node.x, node.y)
        return measure


class TidierExtreme:
    """The deepest leftmost (or rightmost) node of a subtree, and its offset from
    the subtree root"""

    def __init__(self):
        self.node: Optional[LayoutNode] = None
        self.level = -1
        self.offset = 0.0

    def set(self, node: Optional[LayoutNode], level: int, offset: float) -> None:
        self.node = node
        self.level = level
        self.offset = offset


class TreeMeasurement:
    """Summary of the laid out tree"""

    root: Optional[LayoutNode]

    def __init__(self):
        self.root = None
        self.count = 0
        self.min_x = math.inf
        self.max_x = -math.inf
        self.min_y = math.inf
        self.max_y = -math.inf
        self.width = 0.0
        self.height = 0.0
        self.center_x = 0.0
        self.center_y = 0.0

    def include(self, x: float, y: float) -> None:
        self.count += 1
        self.min_x = min(self.min_x, x)
        self.max_x = max(self.max_x, x)
        self.min_y = min(self.min_y, y)
        self.max_y = max(self.max_y, y)
        self.width = abs(self.min_x - self.max_x)
        self.height = abs(self.min_y - self.max_y)
        self.center_x = self.min_x + self.width / 2
        self.center_y = self.min_y + self.height / 2


class TreeRenderer:
    """Draw a tree as lines of text, using the layout from #TreeLayout."""

    def __init__(self, config: PrinterConfig = None):
        self.config = config if config is not None else PrinterConfig()

    def format_label(self, label: str) -> str:
        limit = self.config.max_label_width
        if len(label) > limit:
            return label[: limit - 1] + "…"
        return label

    def paint(self, label: str) -> str:
        if self.config.color is None:
            return label
        return color(label, fore=self.config.color, style=self.config.style)

    def get_unit_x(self, widest: int) -> int:
        """Columns per layout unit. At least one blank column between the widest
        labels, rounded up to a multiple of 4 so common offsets land on whole
        columns. A configured width is used as long as neighbors spaced one
        unit apart still cannot overlap after rounding to whole columns."""
        if self.config.unit_x is not None:
            return max(self.config.unit_x, widest + 2)
        return max(4, int(math.ceil((widest + 1) / 4.0)) * 4)

    def render(self, info: BinaryTreeInfo) -> str:
        """Render the tree to a string. An empty tree renders as ""."""
        measure = TreeLayout().layout(info)
        if measure.root is None:
            return ""

        nodes = list(measure.root.walk())
        texts = {node: self.format_label(node.label) for node in nodes}
        unit_x = self.get_unit_x(max(len(text) for text in texts.values()))
        unit_y = self.config.unit_y

        # Label text keyed by (row, first column), and the cells the labels cover
        labels: Dict[Tuple[int, int], str] = {}
        spans: Dict[LayoutNode, Tuple[int, int]] = {}
        occupied: Set[Tuple[int, int]] = set()
        for node in nodes:
            text = texts[node]
            row = node.depth * unit_y
            start = int(round(node.x * unit_x)) - (len(text) - 1) // 2
            labels[(row, start)] = text
            spans[node] = (start, start + len(text))
            for col in range(start, start + len(text)):
                occupied.add((row, col))

        connectors: Dict[Tuple[int, int], str] = {}

        def put(row: int, col: int, char: str) -> None:
            if (row, col) not in occupied and (row, col) not in connectors:
                connectors[(row, col)] = char

        for node in nodes:
            if node.parent is None:
                continue
            row = node.depth * unit_y
            col = int(round(node.x * unit_x))
            parent_row = row - unit_y
            parent_col = int(round(node.parent.x * unit_x))
            parent_start, parent_end = spans[node.parent]
            if node.side == LEFT:
                for step in range(1, unit_y):
                    if col + step < parent_col:
                        put(row - step, col + step, "/")
                for run in range(col + unit_y, parent_start):
                    put(parent_row, run, "_")
            else:
                for step in range(1, unit_y):
                    if col - step > parent_col:
                        put(row - step, col - step, "\\")
                for run in range(parent_end, col - unit_y + 1):
                    put(parent_row, run, "_")

        columns = [col for _, col in labels] + [col for _, col in connectors]
        max_col = max(
            [col + len(text) for (_, col), text in labels.items()]
            + [col + 1 for _, col in connectors]
        )
        max_row = max(row for row, _ in labels)

        lines: List[str] = []
        for row in range(max_row + 1):
            line = ""
            col = min(columns)
            while col < max_col:
                text = labels.get((row, col))
                if text is not None:
                    line += self.paint(text)
                    col += len(text)
                    continue
                line += connectors.get((row, col), " ")
                col += 1
            lines.append(line.rstrip())
        return "\n".join(lines)


def print_tree(info: BinaryTreeInfo, config: PrinterConfig = None, file=None) -> None:
    """Render a tree and write it to `file` (stdout by default)."""
    print(TreeRenderer(config).render(info), file=file if file is not None else sys.stdout)
