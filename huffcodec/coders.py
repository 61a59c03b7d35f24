"""
coders.py



"""


import abc
from typing import Any, Iterable, List, Optional

from .errors import UnknownSymbolError
from .logger import Logger, CodingLog, CodingProgressStep, ErrorLog
from .models import CodeTable
from .settings import HUFFMAN_CODER_CODE
from .validators import validate_type


class CoderBase(abc.ABC):
    """
    Abstract base class for coders.
    """

    def __init__(self) -> None:
        """Initialize the coder."""
        pass

    @abc.abstractmethod
    def encode(self, symbols: Iterable[Any], table: CodeTable) -> str:
        """
        Encode a sequence of symbols into a bit string.

        Args:
            symbols (Iterable[Any]): The symbols to be encoded, in input order.
            table (CodeTable): The codes derived from the same input.

        Returns:
            str: The encoded bits as '0' and '1' characters.
        """
        pass

    @abc.abstractmethod
    def get_coder_code(self) -> int:
        """
        Get the code for the coder.

        Returns:
            int: The coder code.
        """
        pass


class HuffmanEncoder(CoderBase):
    """
    Concatenates the code of every input symbol in order.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        super().__init__()
        self.logger: Optional[Logger] = logger

    def encode(self, symbols: Iterable[Any], table: CodeTable) -> str:
        validate_type(table, "Code table", CodeTable)
        if not isinstance(symbols, (list, tuple, str, bytes)):
            symbols = list(symbols)

        if self.logger is not None:
            self.logger.reset_coding_progress()
        parts: List[str] = []
        for symbol in symbols:
            code = table.get(symbol)
            if code is None:
                error = UnknownSymbolError(symbol)
                if self.logger is not None:
                    self.logger.log(ErrorLog(str(error)))
                raise error
            parts.append(code)
            if self.logger is not None:
                self.logger.log(CodingProgressStep("Encoding symbols", len(symbols)))

        encoded = "".join(parts)
        if self.logger is not None:
            self.logger.log(CodingLog(len(parts), len(encoded)))
        return encoded

    def get_coder_code(self) -> int:
        return HUFFMAN_CODER_CODE


def get_coder(code: int, logger: Optional[Logger] = None) -> CoderBase:
    """
    Retrieve a coder instance based on the given code.

    Args:
        code (int): The coder code.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        CoderBase: An instance of a coder.

    Raises:
        ValueError: If the coder code is not supported.
    """
    if code == HUFFMAN_CODER_CODE:
        return HuffmanEncoder(logger)
    else:
        raise ValueError("Coder code not supported")
