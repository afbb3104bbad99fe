"""Word lookups for the grid search."""

from .trie import Dictionary, Trie, TrieNode, load_dictionary

__all__ = [
    "Dictionary",
    "Trie",
    "TrieNode",
    "load_dictionary",
]
