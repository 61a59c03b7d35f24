"""
codecs.py

Orchestration of the Huffman pipeline: count, build, derive and encode.

"""


from typing import Any, Iterator, List, Optional, Union

import numpy as np

from .coders import HuffmanEncoder
from .counters import FrequencyCounter
from .derivers import CodeTableDeriver
from .logger import Logger, ErrorLog
from .models import CodeTable, FrequencyTable
from .preprocessors import BasePreprocessor, preprocessor_for
from .settings import HuffmanSettings
from .tree import HuffmanNode, HuffmanTreeBuilder


class BuildResult:
    """The tree, frequencies and codes built from one input."""

    def __init__(self, tree: Optional[HuffmanNode], frequencies: FrequencyTable, codes: CodeTable) -> None:
        self.tree: Optional[HuffmanNode] = tree
        self.frequencies: FrequencyTable = frequencies
        self.codes: CodeTable = codes

    def __iter__(self) -> Iterator[Any]:
        return iter((self.tree, self.frequencies, self.codes))

    def __repr__(self) -> str:
        return f"BuildResult(tree={self.tree!r}, frequencies={self.frequencies!r}, codes={self.codes!r})"


class CodingStatistics:
    """
    Size and efficiency figures of a Huffman code for its input.
    """

    def __init__(self, frequencies: FrequencyTable, codes: CodeTable, fixed_symbol_bits: int) -> None:
        symbols = frequencies.symbols()
        counts = np.array([frequencies[s] for s in symbols], dtype=np.int64)
        lengths = np.array([len(codes[s]) for s in symbols], dtype=np.int64)

        self.symbol_count: int = int(counts.sum())
        self.distinct_symbols: int = len(symbols)
        self.encoded_bits: int = int(np.dot(counts, lengths)) if symbols else 0
        self.fixed_length_bits: int = self.symbol_count * fixed_symbol_bits

        if self.symbol_count == 0:
            self.average_code_length: float = 0.0
            self.entropy: float = 0.0
        else:
            probs = counts / self.symbol_count
            self.average_code_length = self.encoded_bits / self.symbol_count
            self.entropy = float(-np.sum(probs * np.log2(probs)))

        if self.distinct_symbols >= 2:
            self.efficiency: float = self.entropy / self.average_code_length
        elif self.distinct_symbols == 1:
            self.efficiency = 1.0
        else:
            self.efficiency = 0.0

        if self.encoded_bits > 0:
            self.compression_ratio: float = self.fixed_length_bits / self.encoded_bits
        else:
            self.compression_ratio = 0.0

    def __repr__(self) -> str:
        return (f"CodingStatistics(symbols={self.symbol_count}, distinct={self.distinct_symbols}, "
                f"bits={self.encoded_bits}, avg={self.average_code_length:.4f}, "
                f"entropy={self.entropy:.4f}, ratio={self.compression_ratio:.4f})")


class HuffmanCodec:
    """
    Builds Huffman codes for text or bytes and encodes with them.

    The most recent build is kept, so encode() on the text that was just
    built reuses its codes.
    """

    def __init__(self, settings: Optional[HuffmanSettings] = None,
                 preprocessor: Optional[BasePreprocessor] = None,
                 logger: Optional[Logger] = None) -> None:
        self.settings: HuffmanSettings = settings if settings is not None else HuffmanSettings()
        self.preprocessor: Optional[BasePreprocessor] = preprocessor
        self.logger: Optional[Logger] = logger

        self.counter = FrequencyCounter(logger)
        self.builder = HuffmanTreeBuilder(logger)
        self.deriver = CodeTableDeriver(self.settings.single_symbol_code, logger)
        self.encoder = HuffmanEncoder(logger)

        self._last_text: Any = None
        self._last_result: Optional[BuildResult] = None

    @property
    def last_result(self) -> Optional[BuildResult]:
        return self._last_result

    def _to_symbols(self, text: Union[str, bytes]) -> List[Any]:
        try:
            preprocessor = self.preprocessor if self.preprocessor is not None else preprocessor_for(text)
            return preprocessor.convert_to_symbols(text)
        except ValueError as e:
            if self.logger is not None:
                self.logger.log(ErrorLog(str(e)))
            raise

    def build(self, text: Union[str, bytes]) -> BuildResult:
        """
        Build the tree, frequency table and code table of a text.

        Args:
            text (Union[str, bytes]): The input; characters or bytes are the symbols.

        Returns:
            BuildResult: The build, also unpackable as (tree, frequencies, codes).
        """
        symbols = self._to_symbols(text)
        frequencies = self.counter.count(symbols)
        tree = self.builder.build(frequencies)
        codes = self.deriver.derive(tree)

        result = BuildResult(tree, frequencies, codes)
        self._last_text = bytes(text) if isinstance(text, bytearray) else text
        self._last_result = result
        return result

    def encode(self, text: Union[str, bytes]) -> str:
        """
        Encode a text with the codes of its most recent build.

        The text is built first when it differs from the most recently built one.

        Returns:
            str: The encoded bits as '0' and '1' characters.
        """
        if self._last_result is None or type(text) is not type(self._last_text) or text != self._last_text:
            self.build(text)
        symbols = self._to_symbols(text)
        return self.encoder.encode(symbols, self._last_result.codes)

    def statistics(self) -> CodingStatistics:
        """
        Get the statistics of the most recent build.

        Raises:
            ValueError: If nothing has been built yet.
        """
        if self._last_result is None:
            raise ValueError("No build available; call build() first")
        return CodingStatistics(self._last_result.frequencies, self._last_result.codes,
                                self.settings.fixed_symbol_bits)
