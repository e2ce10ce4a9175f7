"""
Switches selecting how the codecs encode and decode
"""

from enum import Enum


class DecodingMode(Enum):
    """Decoding discipline"""
    # Reject anything that is not RFC4648-shaped
    STRICT = "strict"
    # Normalize case, drop unknown characters and repair padding
    FORGIVING = "forgiving"


class TimingMode(Enum):
    """Base16 decoding timing behaviour"""
    # Always scan the whole input before reporting a failure
    CONSTANT = "constant"
    # Stop at the first invalid symbol
    VARIABLE = "variable"


class PaddingMode(Enum):
    """Whether the Base32 encoder emits trailing padding"""
    VARIANT_CONTROLLED = "variant_controlled"
    STRIP_PADDING = "strip_padding"
    PRESERVE_PADDING = "preserve_padding"
