from __future__ import annotations

from typing import List

from .bitio import BitReader

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE  # sentinel, never produced by real data


def _empty_table() -> List[int]:
    freq = [0] * (ALPH_SIZE + 1)
    freq[PSEUDO_EOF] = 1
    return freq


def count_frequencies(reader: BitReader) -> List[int]:
    """Read 8-bit symbols until end-of-stream -> table of 257 counts."""
    freq = _empty_table()
    while True:
        sym = reader.read_bits(BITS_PER_WORD)
        if sym is None:
            break
        freq[sym] += 1
    return freq


def count_bytes(data: bytes) -> List[int]:
    freq = _empty_table()
    for b in data:
        freq[b] += 1
    return freq
