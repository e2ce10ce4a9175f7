"""
Base16 (hex) encoding and decoding as described in RFC4648

Decoding defaults to a constant-time path: whitespace is compacted away and
every pair of symbols is looked up without branching on the result, so the
time taken does not reveal whether, or where, the input is invalid.
"""

import logging
from typing import Union

try:
    from .alphabet import (
        AlphabetSpec, BASE16_ALPHABET_SIZE, INVALID, RESERVED_WHITESPACE, as_bytes
    )
    from .errors import DecodeError
    from .modes import DecodingMode, TimingMode
except ImportError:
    # Handle direct script execution
    from alphabet import AlphabetSpec, BASE16_ALPHABET_SIZE, INVALID, RESERVED_WHITESPACE, as_bytes
    from errors import DecodeError
    from modes import DecodingMode, TimingMode

logger = logging.getLogger(__name__)

# 1 for bytes dropped before decoding, 0 otherwise
_SKIP_TABLE = tuple(int(b in RESERVED_WHITESPACE) for b in range(256))


def encode(data: bytes, spec: AlphabetSpec) -> str:
    """
    Encode bytes into a base16 string, two symbols per byte

    Args:
        data: Bytes to encode
        spec: 16 symbol alphabet to encode with

    Returns:
        Base16 encoded string, empty for empty input
    """
    spec.require_size(BASE16_ALPHABET_SIZE)
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes-like data, got {type(data).__name__}")

    symbols = spec.symbols
    return "".join(symbols[b >> 4] + symbols[b & 0x0F] for b in bytes(data))


def decode(data: Union[str, bytes], spec: AlphabetSpec,
           mode: DecodingMode = DecodingMode.STRICT,
           timing_mode: TimingMode = TimingMode.CONSTANT) -> bytes:
    """
    Decode a base16 string into bytes

    In strict mode the symbols must match the alphabet's case exactly. In
    forgiving mode either case is accepted, unknown characters are dropped and
    a dangling final nibble is ignored.

    Args:
        data: Base16 string to decode
        spec: 16 symbol alphabet the data was encoded with
        mode: STRICT or FORGIVING
        timing_mode: CONSTANT always scans the full input before failing,
            VARIABLE fails on the first invalid symbol

    Returns:
        Decoded bytes

    Raises:
        DecodeError: In strict mode, on odd length or unknown characters
    """
    spec.require_size(BASE16_ALPHABET_SIZE)
    raw = as_bytes(data)
    if not raw:
        return b""

    if mode is DecodingMode.FORGIVING:
        return _decode_forgiving(raw, spec)
    return _decode_strict(raw, spec, timing_mode is TimingMode.CONSTANT)


def _compact(raw: bytes, skip) -> bytearray:
    """Copy raw without skipped bytes; every byte is written, only the cursor moves"""
    compact = bytearray(len(raw))
    length = 0
    for ch in raw:
        compact[length] = ch
        length += 1 ^ skip[ch]
    del compact[length:]
    return compact


def _decode_strict(raw: bytes, spec: AlphabetSpec, constant_time: bool) -> bytes:
    ErrorType = DecodeError.ErrorType
    table = spec.table

    compact = _compact(raw, _SKIP_TABLE)
    odd = len(compact) & 1
    valid = odd ^ 1
    if not constant_time and not valid:
        raise DecodeError(ErrorType.INVALID_LENGTH, "The encoded data length is invalid")
    if odd:
        # Validity is already cleared; the extra byte only keeps the pair loop uniform
        compact.append(0)

    decoded = bytearray(len(compact) >> 1)
    for j in range(len(decoded)):
        v1 = table[compact[2 * j]]
        v2 = table[compact[2 * j + 1]]
        # INVALID is the only table value with bits above the low nibble
        valid &= 1 ^ (((v1 | v2) >> 4) & 1)
        if not constant_time and not valid:
            raise DecodeError(ErrorType.UNKNOWN_CHARACTER, "The data could not be decoded")
        decoded[j] = ((v1 << 4) | v2) & 0xFF

    if not valid:
        if odd:
            raise DecodeError(ErrorType.INVALID_LENGTH, "The encoded data length is invalid")
        raise DecodeError(ErrorType.UNKNOWN_CHARACTER, "The data could not be decoded")

    return bytes(decoded)


def _decode_forgiving(raw: bytes, spec: AlphabetSpec) -> bytes:
    table = spec.folded_table
    # Whitespace is not in the table, so it is dropped along with unknown bytes
    skip = tuple(int(v == INVALID) for v in table)

    folded = raw.upper()
    compact = _compact(folded, skip)
    if len(compact) != len(folded):
        logger.debug("Discarded %d characters unknown to the alphabet", len(folded) - len(compact))
    if len(compact) & 1:
        logger.debug("Ignored a trailing half byte")
        compact.pop()

    decoded = bytearray(len(compact) >> 1)
    for j in range(len(decoded)):
        decoded[j] = (table[compact[2 * j]] << 4) | table[compact[2 * j + 1]]

    return bytes(decoded)
