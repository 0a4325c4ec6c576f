"""Verification helpers.

verify_file() checks a compressed file without writing output:
  - magic number
  - tree header
  - payload walked up to the PSEUDO_EOF leaf

Policy: light by default, --full also decodes to memory and hashes the result.
"""

from __future__ import annotations

import hashlib
import io
from dataclasses import dataclass
from pathlib import Path

from hufftree.core.bitio import BitReader, BitWriter
from hufftree.core.codec_huffman import BITS_PER_INT, read_compressed_bits, read_magic
from hufftree.core.header import read_tree
from hufftree.core.tree import count_leaves
from hufftree.errors import UsageError


@dataclass(frozen=True)
class VerifyReport:
    path: str
    magic: int
    header_bits: int
    leaves: int
    payload_bits: int
    symbols: int
    sha256: str | None = None


class _DiscardSink:
    """Bit sink that only counts; duck-types BitWriter for the decoder."""

    def __init__(self) -> None:
        self.bits_written = 0

    def write_bits(self, width: int, value: int) -> None:
        self.bits_written += width

    def close(self) -> None:
        pass


def verify_file(path: str | Path, *, full: bool = False) -> VerifyReport:
    p = Path(path)
    if not p.is_file():
        raise UsageError(f"input file not found: {p}")

    with p.open("rb") as fp:
        inp = BitReader(fp)
        magic = read_magic(inp)
        root = read_tree(inp)
        header_bits = inp.bits_read - BITS_PER_INT

        sha = None
        if full:
            buf = io.BytesIO()
            out = BitWriter(buf, closefd=False)
            try:
                n = read_compressed_bits(root, inp, out)
            finally:
                out.close()
            sha = hashlib.sha256(buf.getvalue()).hexdigest()
        else:
            n = read_compressed_bits(root, inp, _DiscardSink())

        return VerifyReport(
            path=str(p),
            magic=magic,
            header_bits=header_bits,
            leaves=count_leaves(root),
            payload_bits=inp.bits_read - BITS_PER_INT - header_bits,
            symbols=n,
            sha256=sha,
        )


def load_header(path: str | Path):
    """Return the tree stored in a compressed file's header."""
    p = Path(path)
    if not p.is_file():
        raise UsageError(f"input file not found: {p}")
    with p.open("rb") as fp:
        inp = BitReader(fp)
        read_magic(inp)
        return read_tree(inp)
