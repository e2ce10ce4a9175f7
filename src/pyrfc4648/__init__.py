"""
pyrfc4648

Base32 and Base16 codecs following RFC4648, with configurable alphabets and
padding, strict and forgiving decoding, and a constant-time Base16 decoder.

Presets cover the standard Base32 alphabet, RFC4648 "extended hex",
Crockford, Z-base-32 and upper/lower-case hex. Custom alphabets are built with
AlphabetSpec.base32() and AlphabetSpec.base16().
"""

from .alphabet import (
    AlphabetSpec,
    RESERVED_WHITESPACE
)

from .errors import (
    ConfigurationError,
    DecodeError
)

from .modes import (
    DecodingMode,
    TimingMode,
    PaddingMode
)

from .variants import (
    Base32Variant,
    Base16Variant
)

from .functions import (
    base32_encode,
    base32_decode,
    base16_encode,
    base16_decode,
    try_base32_decode,
    try_base16_decode,
    is_base32,
    is_base16
)

from . import base16, base32

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "AlphabetSpec",
    "RESERVED_WHITESPACE",
    "Base32Variant",
    "Base16Variant",
    "DecodingMode",
    "TimingMode",
    "PaddingMode",

    # Errors
    "ConfigurationError",
    "DecodeError",

    # Codec modules
    "base32",
    "base16",

    # Functions
    "base32_encode",
    "base32_decode",
    "base16_encode",
    "base16_decode",
    "try_base32_decode",
    "try_base16_decode",
    "is_base32",
    "is_base16",
]
