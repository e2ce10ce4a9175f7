"""
Base32 encoding and decoding as described in RFC4648

Works with any 32 symbol AlphabetSpec, so the standard, "extended hex",
Crockford and Z-base-32 alphabets all go through the same code. Decoding is
either strict (malformed input raises DecodeError) or forgiving (input is
normalized and repaired, never rejected).
"""

import logging
from typing import Union

try:
    from .alphabet import (
        AlphabetSpec, BASE32_ALPHABET_SIZE, INVALID, as_bytes, strip_whitespace
    )
    from .bits import legal_padding_lengths, legal_tail_lengths, pack, symbols_per_block, unpack
    from .errors import DecodeError
    from .modes import DecodingMode, PaddingMode
except ImportError:
    # Handle direct script execution
    from alphabet import AlphabetSpec, BASE32_ALPHABET_SIZE, INVALID, as_bytes, strip_whitespace
    from bits import legal_padding_lengths, legal_tail_lengths, pack, symbols_per_block, unpack
    from errors import DecodeError
    from modes import DecodingMode, PaddingMode

logger = logging.getLogger(__name__)

BITS_PER_SYMBOL = 5

# 8 symbols carry 40 bits, i.e. 5 whole bytes
BLOCK_SIZE = symbols_per_block(BITS_PER_SYMBOL)

# Trailing padding run lengths an encoder can produce: {0, 1, 3, 4, 6}
LEGAL_PADDING_LENGTHS = legal_padding_lengths(BITS_PER_SYMBOL)

# Symbols in the final block of unpadded data: {0, 2, 4, 5, 7}
LEGAL_TAIL_LENGTHS = legal_tail_lengths(BITS_PER_SYMBOL)


def encode(data: bytes, spec: AlphabetSpec,
           padding_mode: PaddingMode = PaddingMode.VARIANT_CONTROLLED) -> str:
    """
    Encode bytes into a base32 string

    Args:
        data: Bytes to encode
        spec: 32 symbol alphabet to encode with
        padding_mode: Whether to pad the output to a multiple of 8 symbols

    Returns:
        Base32 encoded string, empty for empty input

    Raises:
        ValueError: If padding is requested for an alphabet without padding
    """
    spec.require_size(BASE32_ALPHABET_SIZE)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes-like data, got {type(data).__name__}")

    if padding_mode is PaddingMode.PRESERVE_PADDING and spec.padding is None:
        raise ValueError("The alphabet does not allow padding usage")

    encoded = "".join(pack(bytes(data), spec.symbols, BITS_PER_SYMBOL))

    if spec.padding is None or padding_mode is PaddingMode.STRIP_PADDING:
        return encoded

    # Only positions past the last data symbol are padded, never zero-value symbols
    return encoded + spec.padding * (-len(encoded) % BLOCK_SIZE)


def decode(data: Union[str, bytes], spec: AlphabetSpec,
           mode: DecodingMode = DecodingMode.STRICT) -> bytes:
    """
    Decode a base32 string into bytes

    Reserved whitespace (CR, LF, TAB, space) is ignored in both modes.

    Args:
        data: Base32 string to decode
        spec: 32 symbol alphabet the data was encoded with
        mode: STRICT rejects malformed input, FORGIVING repairs it

    Returns:
        Decoded bytes

    Raises:
        DecodeError: In strict mode, if the string is not valid base32
    """
    spec.require_size(BASE32_ALPHABET_SIZE)

    if mode is DecodingMode.FORGIVING:
        normalized = _normalize(as_bytes(data), spec)
        if spec.padding is not None:
            normalized = normalized.rstrip(spec.padding.upper().encode("ascii"))
        return unpack((spec.folded_table[c] for c in normalized), BITS_PER_SYMBOL)

    payload = _validate_strict(strip_whitespace(as_bytes(data)), spec)
    return unpack((spec.table[c] for c in payload), BITS_PER_SYMBOL)


def normalize(data: Union[str, bytes], spec: AlphabetSpec) -> str:
    """
    Rewrite input into the canonical form the forgiving decoder works on

    The result is upper-cased, free of whitespace and unknown characters, and
    (for padded alphabets) padded only at the end to a multiple of 8 symbols.
    """
    spec.require_size(BASE32_ALPHABET_SIZE)
    return _normalize(as_bytes(data), spec).decode("ascii")


def _normalize(data: bytes, spec: AlphabetSpec) -> bytes:
    data = strip_whitespace(data).upper()
    if not data:
        return b""

    if spec.padding is None:
        kept = bytes(c for c in data if spec.folded_table[c] != INVALID)
        if len(kept) != len(data):
            logger.debug("Discarded %d characters unknown to the alphabet", len(data) - len(kept))
        return kept

    pad = ord(spec.padding.upper())
    pad_char = bytes([pad])

    remainder = len(data) % BLOCK_SIZE
    if remainder:
        data += pad_char * (BLOCK_SIZE - remainder)

    inside = data.rstrip(pad_char)
    if pad in inside:
        logger.debug("Moved padding found inside the encoded data")
        inside = inside.replace(pad_char, b"")

    kept = bytes(c for c in inside if spec.folded_table[c] != INVALID)
    if len(kept) != len(inside):
        logger.debug("Discarded %d characters unknown to the alphabet", len(inside) - len(kept))

    if not kept:
        return b""
    return kept + pad_char * (-len(kept) % BLOCK_SIZE)


def _validate_strict(data: bytes, spec: AlphabetSpec) -> bytes:
    """
    Check data against RFC4648 shape rules and return the unpadded payload

    Checks run in a fixed order (length, padding run length, misplaced
    padding, unknown characters) and the first failure is raised.
    """
    ErrorType = DecodeError.ErrorType

    if not data:
        return b""

    if spec.padding is None:
        if len(data) % BLOCK_SIZE not in LEGAL_TAIL_LENGTHS:
            raise DecodeError(ErrorType.INVALID_LENGTH, "The encoded data length is invalid")
        payload = data
    else:
        if len(data) % BLOCK_SIZE:
            raise DecodeError(ErrorType.INVALID_LENGTH, "The encoded data length is invalid")

        pad_char = spec.padding.encode("ascii")
        payload = data.rstrip(pad_char)
        if len(data) - len(payload) not in LEGAL_PADDING_LENGTHS:
            raise DecodeError(ErrorType.INVALID_PADDING_LENGTH,
                              "The encoded data ends with an invalid padding sequence length")
        if pad_char in payload:
            raise DecodeError(ErrorType.MISPLACED_PADDING,
                              "The padding character is used in the encoded data in an invalid place")

    for c in payload:
        if spec.table[c] == INVALID:
            raise DecodeError(ErrorType.UNKNOWN_CHARACTER,
                              f"Invalid base32 character: {chr(c)!r}")

    return payload
