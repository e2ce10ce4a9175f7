"""
Alphabet and padding configuration shared by the Base32 and Base16 codecs

An AlphabetSpec is validated once, when it is built, and is immutable
afterwards. The byte lookup tables used by the decoders are computed at the
same time so decoding never initializes anything lazily.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

try:
    from .errors import ConfigurationError
except ImportError:
    # Handle direct script execution
    from errors import ConfigurationError


BASE32_ALPHABET_SIZE = 32
BASE16_ALPHABET_SIZE = 16

# Characters stripped from encoded input before decoding
RESERVED_WHITESPACE = b"\r\n\t "

# Marker for bytes that are not part of the alphabet in a lookup table
INVALID = 0xFF


def _build_table(pairs: List[Tuple[str, int]]) -> Tuple[int, ...]:
    table = [INVALID] * 256
    for char, value in pairs:
        table[ord(char)] = value
    return tuple(table)


@dataclass(frozen=True)
class AlphabetSpec:
    """
    A fixed-size symbol table plus an optional padding character

    Attributes:
        symbols: The alphabet, one ASCII character per symbol value
        padding: The padding character, or None for paddingless variants
        size: The alphabet size the codec requires (32 or 16)
    """
    symbols: str
    padding: Optional[str] = None
    size: int = BASE32_ALPHABET_SIZE

    # Symbol value by byte, exact case
    table: Tuple[int, ...] = field(init=False, repr=False, compare=False)
    # Symbol value by byte, keyed on upper-cased symbols
    folded_table: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        ErrorType = ConfigurationError.ErrorType

        if self.padding is not None:
            if not isinstance(self.padding, str) or len(self.padding.encode("utf-8")) != 1:
                raise ConfigurationError(ErrorType.BAD_PADDING_LENGTH,
                                         "The padding character must be a single byte")
            if self.padding.encode("ascii") in RESERVED_WHITESPACE:
                raise ConfigurationError(ErrorType.RESERVED_PADDING_CHARACTER,
                                         f"The padding character can not be {self.padding!r}")

        if self.size not in (BASE32_ALPHABET_SIZE, BASE16_ALPHABET_SIZE):
            raise ConfigurationError(ErrorType.WRONG_ALPHABET_LENGTH,
                                     f"Unsupported alphabet size {self.size}")
        # Symbols are single bytes, so the alphabet must be ASCII
        if (not isinstance(self.symbols, str) or not self.symbols.isascii()
                or len(self.symbols) != self.size):
            raise ConfigurationError(ErrorType.WRONG_ALPHABET_LENGTH,
                                     f"The alphabet must be a {self.size} bytes long string")

        for char in self.symbols:
            if char.encode("ascii") in RESERVED_WHITESPACE:
                raise ConfigurationError(ErrorType.RESERVED_ALPHABET_CHARACTER,
                                         f"The alphabet can not contain {char!r}")

        folded = self.symbols.upper()
        if self.padding is not None and self.padding.upper() in folded:
            raise ConfigurationError(ErrorType.PADDING_IN_ALPHABET,
                                     "The alphabet can not contain the padding character")
        if len(set(folded)) != self.size:
            raise ConfigurationError(ErrorType.DUPLICATE_SYMBOL,
                                     "The alphabet must contain unique characters")

        object.__setattr__(self, "table",
                           _build_table([(c, i) for i, c in enumerate(self.symbols)]))
        object.__setattr__(self, "folded_table",
                           _build_table([(c, i) for i, c in enumerate(folded)]))

    @classmethod
    def base32(cls, symbols: str, padding: Optional[str] = "=") -> 'AlphabetSpec':
        """Create a 32 symbol alphabet"""
        return cls(symbols, padding, BASE32_ALPHABET_SIZE)

    @classmethod
    def base16(cls, symbols: str) -> 'AlphabetSpec':
        """Create a 16 symbol alphabet (Base16 has no padding)"""
        return cls(symbols, None, BASE16_ALPHABET_SIZE)

    @property
    def bits_per_symbol(self) -> int:
        return self.size.bit_length() - 1

    def require_size(self, size: int) -> None:
        """Fail if this alphabet belongs to a codec of a different size"""
        if self.size != size:
            raise ConfigurationError(ConfigurationError.ErrorType.WRONG_ALPHABET_LENGTH,
                                     f"Expected a {size} symbol alphabet, got {self.size}")


def as_bytes(data: Union[str, bytes, bytearray, memoryview]) -> bytes:
    """
    Turn encoded input into bytes for table lookups

    Characters outside ASCII map to 0xFF, which no alphabet contains, so they
    are reported (or dropped) as unknown characters instead of failing here.
    """
    if isinstance(data, str):
        return bytes(ord(c) if ord(c) < 0x80 else INVALID for c in data)
    return bytes(data)


def strip_whitespace(data: bytes) -> bytes:
    """Remove every reserved whitespace byte"""
    return data.translate(None, RESERVED_WHITESPACE)
