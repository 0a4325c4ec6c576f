from __future__ import annotations

from hufftree.errors import FormatError, TruncatedHeader

from .bitio import BitReader, BitWriter
from .frequency import BITS_PER_WORD, PSEUDO_EOF
from .tree import HuffmanNode

LEAF_VALUE_BITS = BITS_PER_WORD + 1  # 0..256 needs 9 bits

# A tree with at most 257 leaves is at most 256 internal levels deep.
MAX_DEPTH = PSEUDO_EOF


def write_tree(node: HuffmanNode, out: BitWriter) -> None:
    """
    Preorder: internal node -> bit 0, then left, then right;
    leaf -> bit 1, then the symbol in 9 bits.
    """
    if node.is_leaf:
        out.write_bits(1, 1)
        out.write_bits(LEAF_VALUE_BITS, node.symbol)
    else:
        out.write_bits(1, 0)
        write_tree(node.left, out)
        write_tree(node.right, out)


def _read_node(inp: BitReader, depth: int) -> HuffmanNode:
    bit = inp.read_bits(1)
    if bit is None:
        raise TruncatedHeader("tree header truncated (expected node bit)")

    if bit == 0:
        if depth >= MAX_DEPTH:
            raise FormatError(f"tree header too deep (> {MAX_DEPTH} levels)")
        left = _read_node(inp, depth + 1)
        right = _read_node(inp, depth + 1)
        return HuffmanNode(weight=0, left=left, right=right)

    value = inp.read_bits(LEAF_VALUE_BITS)
    if value is None:
        raise TruncatedHeader("tree header truncated (expected 9-bit leaf value)")
    if value > PSEUDO_EOF:
        raise FormatError(f"tree header leaf value out of range: {value}")
    return HuffmanNode(weight=0, symbol=value)


def read_tree(inp: BitReader) -> HuffmanNode:
    """Inverse of write_tree. Decoded nodes carry weight 0."""
    root = _read_node(inp, 0)
    if root.is_leaf:
        raise FormatError("tree header is a single leaf")
    return root
