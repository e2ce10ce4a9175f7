"""
Bit packing shared by the codecs

Bytes are fed into an integer accumulator most significant bit first and
drained in fixed-width groups (5 bits for Base32, 4 bits for Base16). Decoding
runs the same accumulator in the other direction.
"""

from typing import FrozenSet, Iterable, List


def symbols_per_block(width: int) -> int:
    """
    Number of symbols in the smallest group that ends on a byte boundary

    For 5 bit symbols this is 8 (40 bits, 5 bytes); for 4 bit symbols it is 2.
    """
    symbols = 1
    while (symbols * width) % 8:
        symbols += 1
    return symbols


def data_symbols(byte_count: int, width: int) -> int:
    """Number of symbols needed to carry byte_count bytes"""
    return (byte_count * 8 + width - 1) // width


def legal_tail_lengths(width: int) -> FrozenSet[int]:
    """
    Symbol counts a final block can hold

    A final block carries between 0 and (block bytes - 1) whole bytes, so only
    the symbol counts those byte counts produce are possible. For Base32 this
    is {0, 2, 4, 5, 7}.
    """
    block = symbols_per_block(width)
    block_bytes = block * width // 8
    return frozenset(data_symbols(n, width) % block for n in range(block_bytes))


def legal_padding_lengths(width: int) -> FrozenSet[int]:
    """
    Padding run lengths a padded encoder can produce

    Derived from legal_tail_lengths; for Base32 this is {0, 1, 3, 4, 6}.
    """
    block = symbols_per_block(width)
    return frozenset((block - n) % block for n in legal_tail_lengths(width))


def pack(data: bytes, symbols: str, width: int) -> List[str]:
    """
    Split data into width-bit groups and map each group to a symbol

    A trailing partial group is left aligned and zero filled; it is the only
    symbol that carries fill bits. No padding is added here.
    """
    mask = (1 << width) - 1
    output = []
    buffer = 0
    n = 0

    for b in data:
        buffer = (buffer << 8) | b
        n += 8
        while n >= width:
            n -= width
            output.append(symbols[(buffer >> n) & mask])
        buffer &= (1 << n) - 1

    if n > 0:
        output.append(symbols[(buffer << (width - n)) & mask])

    return output


def unpack(values: Iterable[int], width: int) -> bytes:
    """
    Reassemble bytes from width-bit symbol values

    Bits left over once no further whole byte can be formed are fill bits and
    are dropped.
    """
    output = bytearray()
    buffer = 0
    n = 0

    for value in values:
        buffer = (buffer << width) | value
        n += width
        if n >= 8:
            n -= 8
            output.append((buffer >> n) & 0xFF)
        buffer &= (1 << n) - 1

    return bytes(output)
