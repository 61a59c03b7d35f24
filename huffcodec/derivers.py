"""
derivers.py

Derivation of the code table from a Huffman tree.

"""


from typing import Any, List, Optional

from .logger import Logger, CodeAssignedLog
from .models import CodeTable
from .settings import LEFT_BIT, RIGHT_BIT, SINGLE_SYMBOL_CODE
from .tree import HuffmanNode


class CodeTableDeriver:
    """
    Walks a Huffman tree depth-first and records the path to every leaf.
    """

    def __init__(self, single_symbol_code: str = SINGLE_SYMBOL_CODE, logger: Optional[Logger] = None) -> None:
        self.single_symbol_code: str = single_symbol_code
        self.logger: Optional[Logger] = logger

    def derive(self, root: Optional[HuffmanNode]) -> CodeTable:
        """
        Derive the code table of a tree.

        Args:
            root (Optional[HuffmanNode]): The tree root, or None for an empty input.

        Returns:
            CodeTable: One code per leaf, left edges read as '0' and right
            edges as '1'. A tree that is a single leaf gets the single symbol
            code instead of an empty one.
        """
        codes = CodeTable()
        if root is None:
            return codes
        if root.is_leaf:
            self._assign(codes, root.symbol, self.single_symbol_code)
            return codes

        path: List[str] = []
        # entries are (node, bit leading to it); None marks the end of a subtree
        stack = [(root, None)]
        while stack:
            node, bit = stack.pop()
            if node is None:
                path.pop()
                continue
            if bit is not None:
                path.append(bit)
                stack.append((None, None))
            if node.is_leaf:
                self._assign(codes, node.symbol, "".join(path))
            else:
                stack.append((node.right, RIGHT_BIT))
                stack.append((node.left, LEFT_BIT))
        return codes

    def _assign(self, codes: CodeTable, symbol: Any, code: str) -> None:
        codes.assign(symbol, code)
        if self.logger is not None:
            self.logger.log(CodeAssignedLog(symbol, code))
