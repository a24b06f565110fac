"""Prefix index (trie) from lowercase names to the ids stored under them."""
from __future__ import annotations
from typing import Dict, Set

__all__ = ["PrefixIndex"]


class _Node:
    __slots__ = ("children", "ids")

    def __init__(self):
        self.children: Dict[str, "_Node"] = {}
        # ids of words that end exactly at this node
        self.ids: Set[int] = set()


class PrefixIndex:
    def __init__(self):
        self._root = _Node()

    def insert(self, word: str, identifier: int) -> None:
        node = self._root
        for ch in word.lower():
            node = node.children.setdefault(ch, _Node())
        node.ids.add(identifier)

    def search_prefix(self, prefix: str) -> Set[int]:
        """Return every id whose word starts with prefix (case-insensitive)."""
        node = self._root
        for ch in prefix.lower():
            node = node.children.get(ch)
            if node is None:
                return set()
        found: Set[int] = set()
        self._collect(node, found)
        return found

    def _collect(self, node: _Node, out: Set[int]) -> None:
        out.update(node.ids)
        for child in node.children.values():
            self._collect(child, out)

    def __contains__(self, word: str) -> bool:
        node = self._root
        for ch in word.lower():
            node = node.children.get(ch)
            if node is None:
                return False
        return bool(node.ids)
