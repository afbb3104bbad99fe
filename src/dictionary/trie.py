from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol


class Dictionary(Protocol):
    """Word and prefix lookups used to guide the grid search."""

    def is_word(self, candidate: str) -> bool: ...

    def is_prefix(self, candidate: str) -> bool: ...


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    """Lower-cased word set supporting exact and prefix lookups."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def insert(self, word: str):
        node = self.root
        for ch in word.lower():
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def _find(self, candidate: str) -> TrieNode | None:
        node = self.root
        for ch in candidate.lower():
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def is_word(self, candidate: str) -> bool:
        node = self._find(candidate)
        return node is not None and node.is_word

    def is_prefix(self, candidate: str) -> bool:
        # Every stored word is a prefix of itself, so any node on a path counts
        return self._find(candidate) is not None

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return self._size


def load_dictionary(path: str | Path, min_length: int = 1) -> Trie:
    """Load a word list, one word per line, skipping short or non-alphabetic entries."""
    trie = Trie()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if len(word) >= min_length and word.isalpha():
                trie.insert(word)
    return trie
