"""
tree.py

Huffman tree nodes and the builder that merges them.

"""


import abc
import heapq
import itertools
from typing import Any, List, Optional, Tuple

from .logger import Logger, MergeLog, MergeProgressStep
from .models import FrequencyTable
from .validators import validate_type


class HuffmanNode(abc.ABC):
    """
    Abstract base class for the nodes of a Huffman tree.
    """

    @property
    @abc.abstractmethod
    def frequency(self) -> int:
        """Return the total frequency of the symbols below this node."""
        pass

    @property
    @abc.abstractmethod
    def is_leaf(self) -> bool:
        """Return True for a leaf, False for an internal node."""
        pass

    @property
    def symbol(self) -> Any:
        return None

    @property
    def left(self) -> Optional['HuffmanNode']:
        return None

    @property
    def right(self) -> Optional['HuffmanNode']:
        return None


class LeafNode(HuffmanNode):
    """
    A node holding one symbol and its frequency. Leaves have no children.
    """
    def __init__(self, symbol: Any, frequency: int) -> None:
        validate_type(frequency, "Frequency", int)
        if frequency <= 0:
            raise ValueError("Frequency must be positive")
        self._symbol = symbol
        self._frequency = frequency

    @property
    def symbol(self) -> Any:
        return self._symbol

    @property
    def frequency(self) -> int:
        return self._frequency

    @property
    def is_leaf(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"LeafNode({self._symbol!r}, {self._frequency})"


class InternalNode(HuffmanNode):
    """
    A node owning exactly two children; its frequency is their sum.
    """
    def __init__(self, left: HuffmanNode, right: HuffmanNode) -> None:
        validate_type(left, "Left child", HuffmanNode)
        validate_type(right, "Right child", HuffmanNode)
        self._left = left
        self._right = right
        self._frequency = left.frequency + right.frequency

    @property
    def frequency(self) -> int:
        return self._frequency

    @property
    def left(self) -> HuffmanNode:
        return self._left

    @property
    def right(self) -> HuffmanNode:
        return self._right

    @property
    def is_leaf(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"InternalNode({self._frequency}, {self._left!r}, {self._right!r})"


class HuffmanTreeBuilder:
    """
    Builds a Huffman tree by repeatedly merging the two lightest nodes.

    Heap entries carry an insertion sequence number after the frequency, so
    among equal frequencies the node inserted first is taken first, and a
    merged node ranks after every node already waiting.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger: Optional[Logger] = logger
        self.merge_count: int = 0

    def build(self, frequencies: FrequencyTable) -> Optional[HuffmanNode]:
        """
        Build the tree for a frequency table.

        Args:
            frequencies (FrequencyTable): Symbol counts, in first-occurrence order.

        Returns:
            Optional[HuffmanNode]: The root, None for an empty table, or a
            single LeafNode when only one symbol is present.
        """
        validate_type(frequencies, "Frequencies", FrequencyTable)
        self.merge_count = 0

        sequence = itertools.count()
        heap: List[Tuple[int, int, HuffmanNode]] = [
            (count, next(sequence), LeafNode(symbol, count)) for symbol, count in frequencies.items()
        ]
        heapq.heapify(heap)
        if not heap:
            return None

        total_merges = len(heap) - 1
        if self.logger is not None:
            self.logger.reset_merge_progress()
        while len(heap) > 1:
            _, _, left = heapq.heappop(heap)
            _, _, right = heapq.heappop(heap)
            merged = InternalNode(left, right)
            heapq.heappush(heap, (merged.frequency, next(sequence), merged))
            self.merge_count += 1
            if self.logger is not None:
                self.logger.log(MergeLog(left.frequency, right.frequency))
                self.logger.log(MergeProgressStep("Merging nodes", total_merges))

        return heap[0][2]


def iter_nodes(root: Optional[HuffmanNode]):
    """
    Yield every node of a tree in depth-first pre-order, left before right.
    """
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if not node.is_leaf:
            stack.append(node.right)
            stack.append(node.left)


def tree_depth(root: Optional[HuffmanNode]) -> int:
    """
    Get the number of edges on the longest root-to-leaf path.
    """
    if root is None:
        return 0
    deepest = 0
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.is_leaf:
            deepest = max(deepest, depth)
        else:
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
    return deepest
