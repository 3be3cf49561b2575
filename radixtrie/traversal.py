"""Depth-first walk over the trie and the accumulators built on it.

The walk visits nodes in pre-order, children in their stored (ascending
first character) order, and rebuilds each node's key from the labels on
the path.  An explicit stack drives the walk, and one list of labels is
cut back to the current depth at each step, so a key string is only
materialised for nodes that hold a value.

Accumulators collect into plain containers, so every result is a snapshot:
later trie mutation does not show up in it.  The one exception is
``TrieEntry.set_value``, which writes through to the node it came from.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol

from radixtrie.node import RadixTrieNode


class NodeVisitor(Protocol):
    def visit(self, key: str, node: RadixTrieNode) -> None: ...


def walk_trie(root: RadixTrieNode, visitor: NodeVisitor) -> None:
    """Call ``visitor.visit(key, node)`` for every value-bearing node."""
    path: list[str] = []
    # (node, number of ancestor labels on the path, root excluded)
    stack: list[tuple[RadixTrieNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        del path[depth:]
        if node is not root:
            path.append(node.label)
        if node.has_value:
            visitor.visit("".join(path), node)
        if node.children:
            child_depth = len(path)
            stack.extend((child, child_depth) for child in reversed(node.children))


class TrieEntry:
    """A (key, value) pair bound to the node that stores it."""

    __slots__ = ("key", "_node")

    def __init__(self, key: str, node: RadixTrieNode):
        self.key = key
        self._node = node

    @property
    def value(self) -> Any:
        return self._node.value

    def set_value(self, value: Any) -> Any:
        """Replace the stored value in place and return the old one."""
        old = self._node.value
        self._node.value = value
        return old

    def __iter__(self) -> Iterator[Any]:
        yield self.key
        yield self._node.value

    def __hash__(self) -> int:
        return hash(self.key)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TrieEntry):
            return self.key == other.key and self.value == other.value
        return NotImplemented

    def __repr__(self) -> str:
        return f"{self.key!r}={self.value!r}"


class KeyAccumulator:
    def __init__(self):
        self.keys: set[str] = set()

    def visit(self, key: str, node: RadixTrieNode) -> None:
        self.keys.add(key)


class ValueAccumulator:
    def __init__(self):
        self.values: list[Any] = []

    def visit(self, key: str, node: RadixTrieNode) -> None:
        self.values.append(node.value)


class EntryAccumulator:
    def __init__(self):
        self.entries: set[TrieEntry] = set()

    def visit(self, key: str, node: RadixTrieNode) -> None:
        self.entries.add(TrieEntry(key, node))


class PairAccumulator:
    """Ordered (key, value) tuples in walk order."""

    def __init__(self):
        self.pairs: list[tuple[str, Any]] = []

    def visit(self, key: str, node: RadixTrieNode) -> None:
        self.pairs.append((key, node.value))
