"""A prefix tree of words."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class _TrieNode:
    end: bool = False
    children: dict[str, _TrieNode] = field(default_factory=dict)


class Trie:
    """Stores words and answers whole-word and prefix queries."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word``; the empty word is not stored."""
        if not word:
            return
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.end = True

    def _find(self, text: str) -> Optional[_TrieNode]:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted; never true for the empty word."""
        if not word:
            return False
        node = self._find(word)
        return node is not None and node.end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some inserted word starts with ``prefix``; never true for ``""``."""
        return bool(prefix) and self._find(prefix) is not None