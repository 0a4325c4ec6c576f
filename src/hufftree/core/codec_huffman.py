"""
Huffman codec with a self-describing tree header.

Stream layout (bit-packed, MSB-first):
  32-bit magic HUFF_TREE
  tree header (preorder, 1-bit discriminator, 9-bit leaf values)
  payload codes, terminated by the PSEUDO_EOF code (no length field)
"""

from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Dict

from hufftree.errors import BadMagic, TruncatedPayload, UnsupportedVersion

from .bitio import BitReader, BitWriter
from .codes import build_code_table
from .frequency import BITS_PER_WORD, PSEUDO_EOF, count_frequencies
from .header import read_tree, write_tree
from .tree import HuffmanNode, build_tree, count_leaves

BITS_PER_INT = 32
HUFF_NUMBER = 0xFACE8200  # counts-header variant, not decoded here
HUFF_TREE = HUFF_NUMBER | 1

DEBUG_LOW = 1
DEBUG_HIGH = 4


def _trace(debug: int, level: int, msg: str) -> None:
    if debug >= level:
        print(f"[hufftree] {msg}", file=sys.stderr)


def _sym_label(sym: int) -> str:
    if sym == PSEUDO_EOF:
        return "EOF"
    if 0x20 <= sym < 0x7F:
        return f"{sym:3d} {chr(sym)!r}"
    return f"{sym:3d}"


def write_compressed_bits(codes: Dict[int, str], inp: BitReader, out: BitWriter) -> None:
    """Second pass: one code per input byte, then the PSEUDO_EOF code once."""
    while True:
        sym = inp.read_bits(BITS_PER_WORD)
        if sym is None:
            break
        code = codes[sym]
        out.write_bits(len(code), int(code, 2))

    code = codes[PSEUDO_EOF]
    out.write_bits(len(code), int(code, 2))


def read_compressed_bits(root: HuffmanNode, inp: BitReader, out: BitWriter) -> int:
    """
    Walk the tree one payload bit at a time until the PSEUDO_EOF leaf.
    Returns the number of decoded bytes.
    """
    n = 0
    node = root
    while True:
        bit = inp.read_bits(1)
        if bit is None:
            raise TruncatedPayload("payload ended before PSEUDO_EOF")
        node = node.left if bit == 0 else node.right
        if node.is_leaf:
            if node.symbol == PSEUDO_EOF:
                return n
            out.write_bits(BITS_PER_WORD, node.symbol)
            n += 1
            node = root


def read_magic(inp: BitReader) -> int:
    magic = inp.read_bits(BITS_PER_INT)
    if magic == HUFF_TREE:
        return magic
    if magic == HUFF_NUMBER:
        raise UnsupportedVersion("counts-header Huffman variant is not supported")
    if magic is None:
        raise BadMagic("stream too short for magic number")
    raise BadMagic(f"bad magic number: 0x{magic:08x}")


def compress(inp: BitReader, out: BitWriter, *, debug: int = 0) -> None:
    """Compress `inp` into `out`. The source is read twice; `out` is always closed."""
    try:
        freq = count_frequencies(inp)
        root = build_tree(freq)
        codes = build_code_table(root)
        _trace(debug, DEBUG_LOW, f"read {inp.bits_read} bits, {count_leaves(root)} leaves")
        if debug >= DEBUG_HIGH:
            for sym in sorted(codes):
                _trace(debug, DEBUG_HIGH, f"  {_sym_label(sym)} x{freq[sym]} -> {codes[sym]}")

        out.write_bits(BITS_PER_INT, HUFF_TREE)
        write_tree(root, out)
        header_bits = out.bits_written - BITS_PER_INT
        _trace(debug, DEBUG_LOW, f"header: {header_bits} bits")

        inp.reset()
        write_compressed_bits(codes, inp, out)
        _trace(debug, DEBUG_LOW, f"wrote {out.bits_written} bits")
    finally:
        out.close()


def decompress(inp: BitReader, out: BitWriter, *, debug: int = 0) -> None:
    """Decompress `inp` into `out`; `out` is always closed, even on FormatError."""
    try:
        read_magic(inp)
        root = read_tree(inp)
        _trace(debug, DEBUG_LOW, f"header: {inp.bits_read - BITS_PER_INT} bits, "
               f"{count_leaves(root)} leaves")
        if debug >= DEBUG_HIGH:
            codes = build_code_table(root)
            for sym in sorted(codes):
                _trace(debug, DEBUG_HIGH, f"  {_sym_label(sym)} -> {codes[sym]}")

        n = read_compressed_bits(root, inp, out)
        _trace(debug, DEBUG_LOW, f"read {inp.bits_read} bits, wrote {n} bytes")
    finally:
        out.close()


# -------------------
# Convenience wrappers
# -------------------


def compress_bytes(data: bytes, *, debug: int = 0) -> bytes:
    buf = io.BytesIO()
    compress(BitReader.from_bytes(data), BitWriter(buf, closefd=False), debug=debug)
    return buf.getvalue()


def decompress_bytes(blob: bytes, *, debug: int = 0) -> bytes:
    buf = io.BytesIO()
    decompress(BitReader.from_bytes(blob), BitWriter(buf, closefd=False), debug=debug)
    return buf.getvalue()


def compress_file(input_path: str | Path, output_path: str | Path, *, debug: int = 0) -> None:
    with open(input_path, "rb") as fin:
        reader = BitReader(fin)
        compress(reader, BitWriter(open(output_path, "wb")), debug=debug)


def decompress_file(input_path: str | Path, output_path: str | Path, *, debug: int = 0) -> None:
    with open(input_path, "rb") as fin:
        reader = BitReader(fin)
        decompress(reader, BitWriter(open(output_path, "wb")), debug=debug)
