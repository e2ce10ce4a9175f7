"""
Convenience functions over the codecs

The ``base32_*`` and ``base16_*`` functions take a named variant (or any
AlphabetSpec) and forward to the codec modules, raising the same typed errors.
The ``try_*`` and ``is_*`` helpers are for callers that only want to know
whether decoding worked: they turn DecodeError into None or False.
"""

from typing import Optional, Union

try:
    from . import base16, base32
    from .alphabet import AlphabetSpec
    from .errors import DecodeError
    from .modes import DecodingMode, PaddingMode, TimingMode
    from .variants import Base16Variant, Base32Variant, resolve
except ImportError:
    # Handle direct script execution
    import base16
    import base32
    from alphabet import AlphabetSpec
    from errors import DecodeError
    from modes import DecodingMode, PaddingMode, TimingMode
    from variants import Base16Variant, Base32Variant, resolve

Base32Alphabet = Union[Base32Variant, AlphabetSpec]
Base16Alphabet = Union[Base16Variant, AlphabetSpec]


def base32_encode(data: bytes, variant: Base32Alphabet = Base32Variant.ASCII,
                  padding_mode: PaddingMode = PaddingMode.VARIANT_CONTROLLED) -> str:
    """Encode bytes with a Base32 variant"""
    return base32.encode(data, resolve(variant), padding_mode)


def base32_decode(data: Union[str, bytes], variant: Base32Alphabet = Base32Variant.ASCII,
                  decoding_mode: DecodingMode = DecodingMode.STRICT) -> bytes:
    """Decode Base32 data, raising DecodeError on malformed input in strict mode"""
    return base32.decode(data, resolve(variant), decoding_mode)


def base16_encode(data: bytes, variant: Base16Alphabet = Base16Variant.UPPER) -> str:
    """Encode bytes with a Base16 variant"""
    return base16.encode(data, resolve(variant))


def base16_decode(data: Union[str, bytes], variant: Base16Alphabet = Base16Variant.UPPER,
                  decoding_mode: DecodingMode = DecodingMode.STRICT,
                  timing_mode: TimingMode = TimingMode.CONSTANT) -> bytes:
    """Decode Base16 data, raising DecodeError on malformed input in strict mode"""
    return base16.decode(data, resolve(variant), decoding_mode, timing_mode)


def try_base32_decode(data: Union[str, bytes], variant: Base32Alphabet = Base32Variant.ASCII,
                      decoding_mode: DecodingMode = DecodingMode.STRICT) -> Optional[bytes]:
    """Like base32_decode, but returns None instead of raising DecodeError"""
    try:
        return base32_decode(data, variant, decoding_mode)
    except DecodeError:
        return None


def try_base16_decode(data: Union[str, bytes], variant: Base16Alphabet = Base16Variant.UPPER,
                      decoding_mode: DecodingMode = DecodingMode.STRICT,
                      timing_mode: TimingMode = TimingMode.CONSTANT) -> Optional[bytes]:
    """Like base16_decode, but returns None instead of raising DecodeError"""
    try:
        return base16_decode(data, variant, decoding_mode, timing_mode)
    except DecodeError:
        return None


def is_base32(data: Union[str, bytes], variant: Base32Alphabet = Base32Variant.ASCII) -> bool:
    """Whether data is valid Base32 for the variant under strict decoding"""
    return try_base32_decode(data, variant) is not None


def is_base16(data: Union[str, bytes], variant: Base16Alphabet = Base16Variant.UPPER) -> bool:
    """Whether data is valid Base16 for the variant under strict decoding"""
    return try_base16_decode(data, variant) is not None
