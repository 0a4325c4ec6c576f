from __future__ import annotations

from typing import Dict

from .tree import HuffmanNode


def build_code_table(root: HuffmanNode) -> Dict[int, str]:
    """symbol -> code as a '0'/'1' string (0 = left, 1 = right)."""
    codes: Dict[int, str] = {}

    def dfs(node: HuffmanNode, path: str) -> None:
        if node.is_leaf:
            codes[node.symbol] = path
            return
        dfs(node.left, path + "0")
        dfs(node.right, path + "1")

    dfs(root, "")
    return codes
