"""Single vertex of the radix trie."""

from __future__ import annotations

from typing import Any


class _NoValue:
    """Marker for nodes that are branch points rather than stored keys."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_VALUE"


NO_VALUE: Any = _NoValue()


class RadixTrieNode:
    """Edge label, optional value and children sorted by first character."""

    __slots__ = ("label", "value", "children")

    def __init__(self, label: str = "", value: Any = NO_VALUE):
        self.label = label
        self.value = value
        self.children: list[RadixTrieNode] | None = None

    @property
    def has_value(self) -> bool:
        return self.value is not NO_VALUE

    @property
    def first_char(self) -> str:
        return self.label[0]

    def __repr__(self) -> str:
        return f"RadixTrieNode({self.label!r}, {self.value!r})"
