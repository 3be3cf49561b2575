"""Radix trie mapping string keys to arbitrary values.

Keys share common prefixes: each edge carries a (possibly multi-character)
label and no two sibling labels start with the same character.  Siblings
are kept sorted by first character, so a scan over them can stop early.

Not thread safe.  Callers must not mutate the trie from several threads,
or while another thread is reading it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Iterator

from radixtrie.errors import InvalidKeyError
from radixtrie.node import NO_VALUE, RadixTrieNode
from radixtrie.traversal import (
    EntryAccumulator,
    KeyAccumulator,
    PairAccumulator,
    TrieEntry,
    ValueAccumulator,
    walk_trie,
)

log = logging.getLogger("radixtrie")


def common_prefix_length(label: str, key: str, offset: int = 0) -> int:
    """Number of leading characters ``label`` shares with ``key[offset:]``."""
    limit = min(len(label), len(key) - offset)
    n = 0
    while n < limit and label[n] == key[offset + n]:
        n += 1
    return n


class RadixTrie(Mapping):
    """Compressed prefix tree with a dict-like interface.

    >>> t = RadixTrie()
    >>> t.put("com.google.mail", 1)
    >>> t.put("com.google.plus", 2)
    >>> t.get("com.google.plus")
    2
    >>> t.get("com.google.") is None
    True

    ``remove`` is accepted but never deletes anything.
    """

    def __init__(self, other: Mapping | Iterable[tuple[str, Any]] | None = None):
        self.root = RadixTrieNode()
        self._size = 0
        if other is not None:
            self.put_all(other)

    # insertion

    def put(self, key: str, value: Any) -> Any:
        """Map ``key`` to ``value``; return the replaced value or None."""
        if key is None:
            raise InvalidKeyError("Supplied key is None: cannot map values based on None keys")
        if not isinstance(key, str):
            raise InvalidKeyError(f"Supplied key is not a string: {type(key).__name__}")
        if not key:
            raise InvalidKeyError("Supplied key is an empty string: cannot map values based on empty strings")
        return self._put_at_node(self.root, key, 0, value)

    def _put_at_node(self, node: RadixTrieNode, key: str, offset: int, value: Any) -> Any:
        while True:
            if offset == len(key):
                # key ends exactly on this node
                old = node.value
                node.value = value
                if old is NO_VALUE:
                    self._size += 1
                    return None
                return old

            children = node.children
            if not children:
                node.children = [RadixTrieNode(key[offset:], value)]
                self._size += 1
                return None

            for i, child in enumerate(children):
                common = common_prefix_length(child.label, key, offset)
                if common == 0:
                    if key[offset] < child.first_char:
                        children.insert(i, RadixTrieNode(key[offset:], value))
                        self._size += 1
                        return None
                    continue
                if common < len(child.label):
                    self._split(child, common)
                node = child
                offset += common
                break
            else:
                children.append(RadixTrieNode(key[offset:], value))
                self._size += 1
                return None

    @staticmethod
    def _split(node: RadixTrieNode, at: int) -> None:
        """Cut ``node.label`` at ``at``; the tail keeps the value and children."""
        tail = RadixTrieNode(node.label[at:], node.value)
        tail.children = node.children
        log.debug("Splitting %r into %r + %r", node.label, node.label[:at], tail.label)
        node.label = node.label[:at]
        node.value = NO_VALUE
        node.children = [tail]

    def put_all(self, other: Mapping | Iterable[tuple[str, Any]]) -> None:
        """``put`` every entry of ``other`` in its iteration order.

        Entries inserted before a failing key stay in the trie.
        """
        if isinstance(other, Mapping):
            for key in other:
                self.put(key, other[key])
        elif hasattr(other, "keys"):
            for key in other.keys():
                self.put(key, other[key])
        else:
            for key, value in other:
                self.put(key, value)

    update = put_all

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    # lookup

    def _find_node(self, key: str) -> RadixTrieNode | None:
        node = self.root
        offset = 0
        length = len(key)
        while offset < length:
            ch = key[offset]
            nxt = None
            for child in node.children or ():
                first = child.first_char
                if first == ch:
                    if key.startswith(child.label, offset):
                        nxt = child
                    break
                if first > ch:
                    break
            if nxt is None:
                return None
            offset += len(nxt.label)
            node = nxt
        return node

    def get(self, key: Any, default: Any = None) -> Any:
        """Value for ``key``, or ``default``.  Never raises."""
        if not isinstance(key, str) or not key:
            return default
        node = self._find_node(key)
        if node is None or not node.has_value:
            return default
        return node.value

    def __getitem__(self, key: str) -> Any:
        value = self.get(key, NO_VALUE)
        if value is NO_VALUE:
            raise KeyError(key)
        return value

    def contains_key(self, key: Any) -> bool:
        return self.get(key, NO_VALUE) is not NO_VALUE

    __contains__ = contains_key

    def contains_value(self, value: Any) -> bool:
        return value in self.values()

    # removal

    def remove(self, key: Any) -> None:
        """Deletion is not supported: nothing is ever removed."""
        return None

    def __delitem__(self, key: Any) -> None:
        self.remove(key)

    def clear(self) -> None:
        self.root = RadixTrieNode()
        self._size = 0

    # size

    def __len__(self) -> int:
        return self._size

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size < 1

    def node_count(self) -> int:
        """Nodes below the root, value-bearing or not."""
        count = 0
        stack = list(self.root.children or ())
        while stack:
            node = stack.pop()
            count += 1
            if node.children:
                stack.extend(node.children)
        return count

    # traversal snapshots

    def keys(self) -> set[str]:
        acc = KeyAccumulator()
        walk_trie(self.root, acc)
        return acc.keys

    def values(self) -> list[Any]:
        acc = ValueAccumulator()
        walk_trie(self.root, acc)
        return acc.values

    def items(self) -> set[TrieEntry]:
        acc = EntryAccumulator()
        walk_trie(self.root, acc)
        return acc.entries

    def walk(self) -> list[tuple[str, Any]]:
        """(key, value) pairs in structural order."""
        acc = PairAccumulator()
        walk_trie(self.root, acc)
        return acc.pairs

    def __iter__(self) -> Iterator[str]:
        return iter([key for key, _ in self.walk()])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.walk())!r})"
