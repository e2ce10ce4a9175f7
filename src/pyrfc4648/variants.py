"""
Named alphabet presets

Each member's value is a ready-built AlphabetSpec, resolved once at import
time.
"""

from enum import Enum
from typing import Union

try:
    from .alphabet import AlphabetSpec
except ImportError:
    # Handle direct script execution
    from alphabet import AlphabetSpec


class Base32Variant(Enum):
    """Base32 alphabets"""
    # RFC4648 section 6
    ASCII = AlphabetSpec.base32("ABCDEFGHIJKLMNOPQRSTUVWXYZ234567", "=")
    # RFC4648 section 7, "extended hex"
    HEX = AlphabetSpec.base32("0123456789ABCDEFGHIJKLMNOPQRSTUV", "=")
    CROCKFORD = AlphabetSpec.base32("0123456789ABCDEFGHJKMNPQRSTVWXYZ", None)
    Z = AlphabetSpec.base32("ybndrfg8ejkmcpqxot1uwisza345h769", None)

    @property
    def spec(self) -> AlphabetSpec:
        return self.value


class Base16Variant(Enum):
    """Base16 alphabets"""
    UPPER = AlphabetSpec.base16("0123456789ABCDEF")
    LOWER = AlphabetSpec.base16("0123456789abcdef")

    @property
    def spec(self) -> AlphabetSpec:
        return self.value


def resolve(variant: Union[Base32Variant, Base16Variant, AlphabetSpec]) -> AlphabetSpec:
    """Return the AlphabetSpec behind a preset, or the spec itself"""
    if isinstance(variant, AlphabetSpec):
        return variant
    if isinstance(variant, (Base32Variant, Base16Variant)):
        return variant.value
    raise TypeError(f"Expected a variant or an AlphabetSpec, got {type(variant).__name__}")
