#settings.py

VERSION = 1

LEFT_BIT = "0"
RIGHT_BIT = "1"

# code given to the only symbol of a one-leaf tree
SINGLE_SYMBOL_CODE = "0"

# bits per symbol of the uncompressed representation used for ratios
FIXED_SYMBOL_BITS = 8

TEXT_PREPROCESSOR_CODE = 1
BYTE_PREPROCESSOR_CODE = 2

HUFFMAN_CODER_CODE = 1


class HuffmanSettings:
    """
    Settings for the Huffman codec.
    """

    def __init__(self, single_symbol_code: str = SINGLE_SYMBOL_CODE, fixed_symbol_bits: int = FIXED_SYMBOL_BITS) -> None:
        if not single_symbol_code or set(single_symbol_code) - {LEFT_BIT, RIGHT_BIT}:
            raise ValueError("single_symbol_code must be a non-empty bit string")
        if fixed_symbol_bits <= 0:
            raise ValueError("fixed_symbol_bits must be positive")
        self.single_symbol_code: str = single_symbol_code
        self.fixed_symbol_bits: int = fixed_symbol_bits
