"""
models.py

The shared objects used in the huffcodec.

"""


from typing import Any, Dict, Iterator, List, Tuple

from .settings import LEFT_BIT, RIGHT_BIT
from .validators import validate_hashable, validate_type


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Any, frequency: int) -> None:
        self.symbol: Any = symbol
        self.frequency: int = frequency

    def __iter__(self) -> Iterator[Any]:
        return iter((self.symbol, self.frequency))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"


class SymbolCode:
    """
    Represents a symbol together with its bit code.
    """
    def __init__(self, symbol: Any, code: str) -> None:
        self.symbol: Any = symbol
        self.code: str = code

    def __iter__(self) -> Iterator[Any]:
        return iter((self.symbol, self.code))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolCode):
            return self.symbol == other.symbol and self.code == other.code
        return False

    def __str__(self) -> str:
        return f"[{self.symbol!r}, {self.code}]"

    def __repr__(self) -> str:
        return f"[{self.symbol!r}, {self.code}]"


class FrequencyTable:
    """
    Occurrence count of every distinct symbol of an input.

    Entries keep the order in which the symbols first appeared, which the tree
    builder relies on to break ties between equal frequencies.
    """
    def __init__(self) -> None:
        self._counts: Dict[Any, int] = {}

    def increment(self, symbol: Any, amount: int = 1) -> int:
        """
        Add to the count of a symbol, starting at 0 for unseen symbols.

        Returns:
            int: The updated count.
        """
        validate_hashable(symbol, "Symbol")
        if amount <= 0:
            raise ValueError("Frequency increment must be positive")
        count = self._counts.get(symbol, 0) + amount
        self._counts[symbol] = count
        return count

    def get(self, symbol: Any, default: int = 0) -> int:
        return self._counts.get(symbol, default)

    def items(self) -> List[Tuple[Any, int]]:
        return list(self._counts.items())

    def symbols(self) -> List[Any]:
        return list(self._counts)

    def total(self) -> int:
        """
        Get the number of symbols counted, repeats included.
        """
        return sum(self._counts.values())

    def sorted_by_count(self) -> List[SymbolFrequency]:
        """
        Get the entries ordered by count, most frequent first.

        Returns:
            List[SymbolFrequency]: Entries; equal counts keep first-occurrence order.
        """
        ordered = sorted(self._counts.items(), key=lambda item: item[1], reverse=True)
        return [SymbolFrequency(symbol, count) for symbol, count in ordered]

    def to_dict(self) -> Dict[Any, int]:
        return dict(self._counts)

    def __getitem__(self, symbol: Any) -> int:
        return self._counts[symbol]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._counts

    def __iter__(self) -> Iterator[Any]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrequencyTable):
            return False
        return self._counts == other._counts

    def __repr__(self) -> str:
        return f"FrequencyTable({self._counts!r})"


class CodeTable:
    """
    Bit code of every symbol, as the path from the root to its leaf.
    """
    def __init__(self) -> None:
        self._codes: Dict[Any, str] = {}

    def assign(self, symbol: Any, code: str) -> None:
        """
        Record the code of a symbol.

        Raises:
            ValueError: If the code is empty, contains characters other than
                '0' and '1', or the symbol already has a code.
        """
        validate_hashable(symbol, "Symbol")
        validate_type(code, "Code", str)
        if not code or set(code) - {LEFT_BIT, RIGHT_BIT}:
            raise ValueError(f"Code must be a non-empty bit string, got {code!r}")
        if symbol in self._codes:
            raise ValueError(f"Symbol {symbol!r} already has a code")
        self._codes[symbol] = code

    def get(self, symbol: Any, default: Any = None) -> Any:
        return self._codes.get(symbol, default)

    def items(self) -> List[Tuple[Any, str]]:
        return list(self._codes.items())

    def symbols(self) -> List[Any]:
        return list(self._codes)

    def sorted_by_length(self) -> List[SymbolCode]:
        """
        Get the entries ordered by code length, shortest first.

        Returns:
            List[SymbolCode]: Entries; equal lengths keep derivation order.
        """
        ordered = sorted(self._codes.items(), key=lambda item: len(item[1]))
        return [SymbolCode(symbol, code) for symbol, code in ordered]

    def is_prefix_free(self) -> bool:
        """
        Check that no code is a prefix of another code.
        """
        codes = sorted(self._codes.values())
        # in sorted order a prefix sorts directly before some extension of it
        for shorter, longer in zip(codes, codes[1:]):
            if longer.startswith(shorter):
                return False
        return True

    def to_dict(self) -> Dict[Any, str]:
        return dict(self._codes)

    def __getitem__(self, symbol: Any) -> str:
        return self._codes[symbol]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._codes

    def __iter__(self) -> Iterator[Any]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeTable):
            return False
        return self._codes == other._codes

    def __repr__(self) -> str:
        return f"CodeTable({self._codes!r})"
