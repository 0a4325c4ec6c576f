from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import List, Optional


# -------------------
# Huffman tree
# -------------------
@dataclass(frozen=True)
class HuffmanNode:
    weight: int
    symbol: Optional[int] = None  # 0-256 for leaves, None for internal nodes
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(freq: List[int]) -> HuffmanNode:
    """
    Greedy minimum-weight merge over the symbols with count > 0.

    Ties are broken FIFO: the heap key is (weight, insertion seq), leaves are
    pushed in ascending symbol order and every merged node gets a fresh seq.
    The first node popped becomes the left child. This makes the tree, and so
    the compressed bytes, reproducible.
    """
    heap: List[tuple[int, int, HuffmanNode]] = []
    counter = itertools.count()

    for sym, f in enumerate(freq):
        if f > 0:
            heapq.heappush(heap, (f, next(counter), HuffmanNode(weight=f, symbol=sym)))

    if not heap:
        raise ValueError("build_tree: no symbol with count > 0")

    # Special case: a single symbol (only PSEUDO_EOF on empty input) => add a
    # zero-weight dummy leaf so every code is at least one bit long.
    if len(heap) == 1:
        _, _, only = heap[0]
        dummy = HuffmanNode(weight=0, symbol=(only.symbol + 1) % len(freq))
        heapq.heappush(heap, (0, next(counter), dummy))

    while len(heap) > 1:
        w1, _, n1 = heapq.heappop(heap)
        w2, _, n2 = heapq.heappop(heap)
        parent = HuffmanNode(weight=w1 + w2, left=n1, right=n2)
        heapq.heappush(heap, (parent.weight, next(counter), parent))

    return heap[0][2]


def count_leaves(node: HuffmanNode) -> int:
    if node.is_leaf:
        return 1
    return count_leaves(node.left) + count_leaves(node.right)
