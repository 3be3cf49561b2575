"""Radix trie -- compressed prefix tree mapping strings to values."""

from radixtrie.errors import InvalidKeyError
from radixtrie.loader import load_file
from radixtrie.node import NO_VALUE, RadixTrieNode
from radixtrie.traversal import TrieEntry
from radixtrie.trie import RadixTrie, common_prefix_length

__all__ = [
    "NO_VALUE",
    "InvalidKeyError",
    "RadixTrie",
    "RadixTrieNode",
    "TrieEntry",
    "common_prefix_length",
    "load_file",
]
