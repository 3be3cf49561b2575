"""Exceptions raised by the radix trie."""


class InvalidKeyError(ValueError):
    """Key is None, not a string, or empty."""
