#errors.py

from typing import Any


class UnknownSymbolError(ValueError):
    """Raised when a symbol to encode has no entry in the code table."""

    def __init__(self, symbol: Any) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown symbol: {symbol!r}")
