import abc
from typing import Any, List, Union

from .settings import TEXT_PREPROCESSOR_CODE, BYTE_PREPROCESSOR_CODE


class BasePreprocessor(abc.ABC):
    @property
    @abc.abstractmethod
    def code(self) -> int:
        """Return the unique identification code for the preprocessor."""
        pass

    @abc.abstractmethod
    def convert_to_symbols(self, data: Any) -> List[Any]:
        """
        Convert raw input to the list of symbols to be coded.

        Args:
            data (Any): The raw input.

        Returns:
            List[Any]: The symbols, in input order.
        """
        pass

    @abc.abstractmethod
    def convert_from_symbols(self, symbols: List[Any]) -> Any:
        """
        Convert a list of symbols back to the raw input form.

        Args:
            symbols (List[Any]): The list of symbols.

        Returns:
            Any: The reconstructed input.
        """
        pass


class TextPreprocessor(BasePreprocessor):
    """
    Text Preprocessor: Each character of a string is a symbol.
    """

    @property
    def code(self) -> int:
        return TEXT_PREPROCESSOR_CODE

    def convert_to_symbols(self, data: str) -> List[str]:
        if not isinstance(data, str):
            raise ValueError("Data should be in form of str")
        return list(data)

    def convert_from_symbols(self, symbols: List[str]) -> str:
        return "".join(symbols)


class BytePreprocessor(BasePreprocessor):
    """
    Byte Preprocessor: Each byte of data is a symbol, held as an int 0-255.
    """

    @property
    def code(self) -> int:
        return BYTE_PREPROCESSOR_CODE

    def convert_to_symbols(self, data: bytes) -> List[int]:
        if not isinstance(data, (bytes, bytearray)):
            raise ValueError("Data should be in form of bytes")
        return list(data)

    def convert_from_symbols(self, symbols: List[int]) -> bytes:
        return bytes(symbols)


def get_preprocessor(code: int) -> BasePreprocessor:
    """
    Retrieve a preprocessor instance based on the given code.

    Args:
        code (int): The preprocessor code.

    Returns:
        BasePreprocessor: An instance of a preprocessor.

    Raises:
        ValueError: If the preprocessor code is not supported.
    """
    if code == TEXT_PREPROCESSOR_CODE:
        return TextPreprocessor()
    elif code == BYTE_PREPROCESSOR_CODE:
        return BytePreprocessor()
    else:
        raise ValueError("Preprocessor code not supported")


def preprocessor_for(data: Union[str, bytes, bytearray]) -> BasePreprocessor:
    """
    Pick the preprocessor matching the type of the input.

    Raises:
        ValueError: If the input is neither text nor bytes.
    """
    if isinstance(data, str):
        return TextPreprocessor()
    if isinstance(data, (bytes, bytearray)):
        return BytePreprocessor()
    raise ValueError(f"Unsupported input type: {type(data).__name__}")
