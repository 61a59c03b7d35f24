"""
huffcodec: A Python library for building Huffman codes and encoding symbol sequences with them.
"""

from .codecs import (
    BuildResult,
    CodingStatistics,
    HuffmanCodec,
)

from .coders import (
    CoderBase,
    HuffmanEncoder,
    get_coder,
)

from .counters import FrequencyCounter

from .derivers import CodeTableDeriver

from .errors import UnknownSymbolError

from .models import (
    SymbolFrequency,
    SymbolCode,
    FrequencyTable,
    CodeTable,
)

from .tree import (
    HuffmanNode,
    LeafNode,
    InternalNode,
    HuffmanTreeBuilder,
    iter_nodes,
    tree_depth,
)

from .preprocessors import (
    BasePreprocessor,
    TextPreprocessor,
    BytePreprocessor,
    get_preprocessor,
    preprocessor_for,
)

from .settings import HuffmanSettings, VERSION

from .logger import (
    Logger,
    Log,
    LogLevel,
    FrequencyCountLog,
    MergeLog,
    CodeAssignedLog,
    CodingLog,
    ErrorLog,
    MergeProgressStep,
    CodingProgressStep,
)

from .validators import *

__all__ = [

    "BuildResult",
    "CodingStatistics",
    "HuffmanCodec",

    "CoderBase",
    "HuffmanEncoder",
    "get_coder",

    "FrequencyCounter",
    "CodeTableDeriver",
    "UnknownSymbolError",

    "SymbolFrequency",
    "SymbolCode",
    "FrequencyTable",
    "CodeTable",

    "HuffmanNode",
    "LeafNode",
    "InternalNode",
    "HuffmanTreeBuilder",
    "iter_nodes",
    "tree_depth",

    "BasePreprocessor",
    "TextPreprocessor",
    "BytePreprocessor",
    "get_preprocessor",
    "preprocessor_for",

    "HuffmanSettings",
    "VERSION",

    "Logger",
    "Log",
    "LogLevel",
    "FrequencyCountLog",
    "MergeLog",
    "CodeAssignedLog",
    "CodingLog",
    "ErrorLog",
    "MergeProgressStep",
    "CodingProgressStep",
]
